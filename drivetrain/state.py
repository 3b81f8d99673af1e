"""
Simulation state representation
"""

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

NUM_STATES = 7
NUM_INPUTS = 2


class State(IntEnum):
    """Index of each component in the drivetrain state vector"""

    X = 0
    Y = 1
    HEADING = 2
    LEFT_VELOCITY = 3
    RIGHT_VELOCITY = 4
    LEFT_POSITION = 5
    RIGHT_POSITION = 6


@dataclass
class DrivetrainState:
    """Named view of one state vector"""

    x: float  # Field x position (m)
    y: float  # Field y position (m)
    heading: float  # Orientation, counter-clockwise positive (rad)
    left_velocity: float  # Left wheel speed (m/s)
    right_velocity: float  # Right wheel speed (m/s)
    left_position: float  # Left wheel travel (m)
    right_position: float  # Right wheel travel (m)

    @classmethod
    def from_array(cls, vector: np.ndarray) -> "DrivetrainState":
        return cls(*(float(value) for value in as_state_vector(vector)))


def as_state_vector(vector) -> np.ndarray:
    """
    Copy a sequence into a 7-element float state vector

    Raises:
        ValueError: If the vector does not have exactly 7 components
    """
    array = np.array(vector, dtype=float).reshape(-1)
    if array.shape != (NUM_STATES,):
        raise ValueError(f"State vector must have {NUM_STATES} components, got {array.size}")
    return array
