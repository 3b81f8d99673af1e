"""
Preset drivetrains for the standard FRC kitbot chassis
"""

import logging
from enum import Enum
from typing import Optional

from drivetrain.motor import DCMotor
from drivetrain.simulator import DrivetrainSimulator
from drivetrain.units import inches_to_meters

logger = logging.getLogger(__name__)

KITBOT_MASS = 25 / 2.2  # kg
KITBOT_TRACK_WIDTH = inches_to_meters(26.0)  # m


class KitbotGearing(Enum):
    """
    Toughbox Mini reductions, as output over input

    12.75:1 -- 14:50 and 14:50
    10.71:1 -- 14:50 and 16:48
    8.45:1 -- 14:50 and 19:45
    7.31:1 -- 14:50 and 21:43
    5.95:1 -- 14:50 and 24:40
    """

    RATIO_12_75 = 12.75
    RATIO_10_71 = 10.71
    RATIO_8_45 = 8.45
    RATIO_7_31 = 7.31
    RATIO_5_95 = 5.95


class KitbotMotor(Enum):
    """Motors installed on each side, as (motor type, motors per side)"""

    SINGLE_CIM_PER_SIDE = ("cim", 1)
    DUAL_CIM_PER_SIDE = ("cim", 2)
    SINGLE_MINI_CIM_PER_SIDE = ("mini_cim", 1)
    DUAL_MINI_CIM_PER_SIDE = ("mini_cim", 2)

    @property
    def motor(self) -> DCMotor:
        """Fresh motor model for one side"""
        kind, count = self.value
        if kind == "cim":
            return DCMotor.cim(count)
        return DCMotor.mini_cim(count)


class KitbotWheelSize(Enum):
    """Wheel diameters (m)"""

    SIX_INCH = inches_to_meters(6.0)
    EIGHT_INCH = inches_to_meters(8.0)
    TEN_INCH = inches_to_meters(10.0)


def estimate_kitbot_moment_of_inertia() -> float:
    """
    Moment of inertia of the kitbot drivebase (kg·m²)

    Treats the battery and both gearboxes as point masses, I = m r².
    """
    battery_moi = 12.5 / 2.2 * inches_to_meters(10.0) ** 2
    # Two CIMs plus a Toughbox Mini on each side
    gearbox_moi = (2.8 * 2 / 2.2 + 2.0) * inches_to_meters(26.0 / 2.0) ** 2
    return battery_moi + gearbox_moi


def create_kitbot_sim(
    motor: KitbotMotor,
    gearing: KitbotGearing,
    wheel_size: KitbotWheelSize,
    moment_of_inertia: Optional[float] = None,
) -> DrivetrainSimulator:
    """
    Create a simulator for the standard FRC kitbot

    Args:
        motor: Motors installed on each side
        gearing: Gearbox reduction
        wheel_size: Wheel diameter
        moment_of_inertia: Drivebase moment of inertia (kg·m²); estimated from
            battery and gearbox masses when omitted

    Returns:
        DrivetrainSimulator with the kitbot's mass and track width
    """
    if moment_of_inertia is None:
        moment_of_inertia = estimate_kitbot_moment_of_inertia()

    logger.info(
        f"Creating kitbot sim: {motor.name}, {gearing.value:.2f}:1, "
        f"{wheel_size.value:.3f} m wheels, J={moment_of_inertia:.3f} kg·m²"
    )

    return DrivetrainSimulator.from_physical(
        motor.motor,
        gearing.value,
        moment_of_inertia,
        KITBOT_MASS,
        wheel_size.value / 2.0,
        KITBOT_TRACK_WIDTH,
    )
