"""
Run analysis functions
"""

from typing import Any, Dict

import numpy as np
from scipy.integrate import trapezoid

from drivetrain.state import DrivetrainState, State

SECONDS_PER_HOUR = 3600.0

RESULT_KEYS = (
    "final_x",
    "final_y",
    "final_heading",
    "heading_change",
    "path_length",
    "left_distance",
    "right_distance",
    "max_speed",
    "final_speed",
    "peak_current",
    "mean_current",
    "charge_amp_hours",
)


class TrajectoryAnalyzer:
    """Summarizes the state and current history of a simulation run"""

    def analyze(self, t: np.ndarray, state: np.ndarray, currents: np.ndarray) -> Dict[str, Any]:
        """
        Analyze a simulation run

        Args:
            t: Time array
            state: State history [N x 7]
            currents: Total current draw history [N]

        Returns:
            Dictionary with analysis results; all zeros for an empty history
        """
        if len(t) == 0:
            return dict.fromkeys(RESULT_KEYS, 0.0)

        initial = DrivetrainState.from_array(state[0])
        final = DrivetrainState.from_array(state[-1])

        left_velocity = state[:, State.LEFT_VELOCITY]
        right_velocity = state[:, State.RIGHT_VELOCITY]
        linear_speed = np.abs((left_velocity + right_velocity) / 2.0)

        # Straight-line distance covered by the chassis center
        path = np.hypot(np.diff(state[:, State.X]), np.diff(state[:, State.Y]))

        abs_current = np.abs(currents)
        charge_amp_hours = float(trapezoid(abs_current, t)) / SECONDS_PER_HOUR if len(t) > 1 else 0.0

        return {
            "final_x": final.x,
            "final_y": final.y,
            "final_heading": final.heading,
            "heading_change": final.heading - initial.heading,
            "path_length": float(np.sum(path)),
            "left_distance": final.left_position - initial.left_position,
            "right_distance": final.right_position - initial.right_position,
            "max_speed": float(np.max(linear_speed)),
            "final_speed": float(linear_speed[-1]),
            "peak_current": float(np.max(abs_current)),
            "mean_current": float(np.mean(abs_current)),
            "charge_amp_hours": charge_amp_hours,
        }
