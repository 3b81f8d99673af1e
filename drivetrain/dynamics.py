"""
Drivetrain dynamics equations
"""

from typing import TYPE_CHECKING, Tuple

import numpy as np

from drivetrain.state import NUM_STATES, State

if TYPE_CHECKING:
    from drivetrain.plant import LinearSystem


class Dynamics:
    """Drivetrain dynamics calculations"""

    def __init__(
        self,
        plant: "LinearSystem",
        original_gearing: float,
        half_track_width: float,
    ) -> None:
        """
        Initialize dynamics calculator

        Args:
            plant: Velocity subsystem identified at original_gearing
            original_gearing: Gearing the plant was derived for, as output over input
            half_track_width: Half the distance between left and right wheels (m)
        """
        self.plant = plant
        self.original_gearing = original_gearing
        self.current_gearing = original_gearing
        self.half_track_width = half_track_width

    def scaled_matrices(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Build the wheel subsystem matrices for the current gearing

        Gearing can be factored out of the plant as G² in A (motor torque and
        back-EMF both pass through the gearbox) and as G in B, so dividing by the
        original ratio and multiplying by the current one re-derives the plant.

        Returns:
            Tuple of (A, B): 4x4 over [v_l, v_r, d_l, d_r] and 4x2 over [V_l, V_r]
        """
        ratio = self.current_gearing / self.original_gearing

        a = np.zeros((4, 4))
        a[0:2, 0:2] = self.plant.a * ratio**2
        # Wheel distances integrate wheel velocities
        a[2:4, 0:2] = np.eye(2)

        b = np.zeros((4, 2))
        b[0:2, 0:2] = self.plant.b * ratio

        return a, b

    def calculate_dynamics(self, state: np.ndarray, inputs: np.ndarray) -> np.ndarray:
        """
        System dynamics: d(state)/dt = f(state, inputs)

        Args:
            state: [x, y, heading, v_l, v_r, d_l, d_r]
            inputs: [V_l, V_r]

        Returns:
            Derivative of state vector
        """
        a, b = self.scaled_matrices()

        heading = state[State.HEADING]
        left_velocity = state[State.LEFT_VELOCITY]
        right_velocity = state[State.RIGHT_VELOCITY]
        v = (left_velocity + right_velocity) / 2.0

        xdot = np.empty(NUM_STATES)
        xdot[State.X] = v * np.cos(heading)
        xdot[State.Y] = v * np.sin(heading)
        xdot[State.HEADING] = (right_velocity - left_velocity) / (2.0 * self.half_track_width)
        xdot[State.LEFT_VELOCITY:] = a @ state[State.LEFT_VELOCITY:] + b @ inputs
        return xdot
