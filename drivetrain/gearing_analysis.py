"""
Gear ratio sweep
"""

import logging
from typing import Any, Dict, List

from drivetrain.analysis import TrajectoryAnalyzer
from drivetrain.kitbot import KitbotGearing, KitbotMotor, KitbotWheelSize, create_kitbot_sim

logger = logging.getLogger(__name__)


def run_gearing_analysis(
    gear_ratios: List[float],
    left_voltage: float = 12.0,
    right_voltage: float = 12.0,
    duration: float = 5.0,
    dt: float = 0.02,
    motor: KitbotMotor = KitbotMotor.DUAL_CIM_PER_SIDE,
    wheel_size: KitbotWheelSize = KitbotWheelSize.SIX_INCH,
) -> Dict[float, Dict[str, Any]]:
    """
    Run an open-loop simulation for each gear ratio

    Each run starts from rest on a kitbot identified at the default Toughbox
    reduction, then shifted to the requested ratio.

    Args:
        gear_ratios: Ratios to compare, as output over input
        left_voltage: Left side voltage (V)
        right_voltage: Right side voltage (V)
        duration: Simulation duration (s)
        dt: Time step (s)
        motor: Motors installed on each side
        wheel_size: Wheel diameter

    Returns:
        Dictionary with results for each gear ratio
    """
    analyzer = TrajectoryAnalyzer()
    results: Dict[float, Dict[str, Any]] = {}

    for ratio in gear_ratios:
        simulator = create_kitbot_sim(motor, KitbotGearing.RATIO_10_71, wheel_size)
        simulator.set_current_gearing(ratio)

        t, state, currents = simulator.simulate(left_voltage, right_voltage, duration=duration, dt=dt)
        analysis = analyzer.analyze(t, state, currents)
        logger.info(
            f"Gearing {ratio:.2f}:1 -> max speed {analysis['max_speed']:.2f} m/s, "
            f"peak current {analysis['peak_current']:.1f} A"
        )

        results[ratio] = {
            "time": t,
            "state": state,
            "current": currents,
            "analysis": analysis,
            "simulator": simulator,
        }

    return results
