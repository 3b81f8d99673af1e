"""
State-space plants for the drivetrain velocity subsystem

The velocity subsystem has state [left_velocity, right_velocity] (m/s),
input [left_voltage, right_voltage] (V) and output equal to the state.
"""

from dataclasses import dataclass

import numpy as np

from drivetrain.motor import DCMotor


@dataclass
class LinearSystem:
    """Continuous-time linear system xdot = A x + B u, y = C x + D u"""

    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    d: np.ndarray

    def __post_init__(self) -> None:
        """Coerce matrices to float arrays and check their dimensions"""
        self.a = np.asarray(self.a, dtype=float)
        self.b = np.asarray(self.b, dtype=float)
        self.c = np.asarray(self.c, dtype=float)
        self.d = np.asarray(self.d, dtype=float)

        states = self.a.shape[0]
        if self.a.shape != (states, states):
            raise ValueError(f"A must be square, got shape {self.a.shape}")
        if self.b.shape[0] != states:
            raise ValueError(f"B must have {states} rows, got shape {self.b.shape}")
        if self.c.shape[1] != states:
            raise ValueError(f"C must have {states} columns, got shape {self.c.shape}")
        if self.d.shape != (self.c.shape[0], self.b.shape[1]):
            raise ValueError(f"D has shape {self.d.shape}, expected {(self.c.shape[0], self.b.shape[1])}")

    @property
    def num_states(self) -> int:
        return self.a.shape[0]

    @property
    def num_inputs(self) -> int:
        return self.b.shape[1]

    @property
    def num_outputs(self) -> int:
        return self.c.shape[0]


def _symmetric(diagonal: float, off_diagonal: float) -> np.ndarray:
    return np.array([[diagonal, off_diagonal], [off_diagonal, diagonal]])


def create_drivetrain_velocity_system(
    motor: DCMotor,
    mass: float,
    wheel_radius: float,
    half_track_width: float,
    moment_of_inertia: float,
    gearing: float,
) -> LinearSystem:
    """
    Derive the drivetrain velocity plant from physical parameters

    Args:
        motor: Motor model for one side of the drivetrain
        mass: Mass of the drivebase (kg)
        wheel_radius: Wheel radius (m)
        half_track_width: Half the distance between left and right wheels (m)
        moment_of_inertia: Moment of inertia about the vertical axis (kg·m²)
        gearing: Reduction between motor and wheel, as output over input

    Returns:
        LinearSystem with 2 states, 2 inputs and 2 outputs

    Raises:
        ValueError: If any physical parameter is not positive
    """
    for name, value in (
        ("mass", mass),
        ("wheel_radius", wheel_radius),
        ("half_track_width", half_track_width),
        ("moment_of_inertia", moment_of_inertia),
        ("gearing", gearing),
    ):
        if value <= 0.0:
            raise ValueError(f"{name} must be greater than zero, got {value}")

    # Back-EMF and torque both pass through the gearbox, hence G² in C1
    c1 = -(gearing**2) * motor.kt / (motor.kv * motor.resistance * wheel_radius**2)
    c2 = gearing * motor.kt / (motor.resistance * wheel_radius)

    linear = 1.0 / mass
    angular = half_track_width**2 / moment_of_inertia

    return LinearSystem(
        a=_symmetric((linear + angular) * c1, (linear - angular) * c1),
        b=_symmetric((linear + angular) * c2, (linear - angular) * c2),
        c=np.eye(2),
        d=np.zeros((2, 2)),
    )


def identify_drivetrain_system(
    kv_linear: float,
    ka_linear: float,
    kv_angular: float,
    ka_angular: float,
) -> LinearSystem:
    """
    Build the drivetrain velocity plant from characterization gains

    Args:
        kv_linear: Linear velocity gain (V per m/s)
        ka_linear: Linear acceleration gain (V per m/s²)
        kv_angular: Angular velocity gain (V per m/s of wheel speed)
        ka_angular: Angular acceleration gain (V per m/s² of wheel acceleration)

    Returns:
        LinearSystem with 2 states, 2 inputs and 2 outputs

    Raises:
        ValueError: If any gain is not positive
    """
    for name, value in (
        ("kv_linear", kv_linear),
        ("ka_linear", ka_linear),
        ("kv_angular", kv_angular),
        ("ka_angular", ka_angular),
    ):
        if value <= 0.0:
            raise ValueError(f"{name} must be greater than zero, got {value}")

    a1 = 0.5 * -(kv_linear / ka_linear + kv_angular / ka_angular)
    a2 = 0.5 * -(kv_linear / ka_linear - kv_angular / ka_angular)
    b1 = 0.5 * (1.0 / ka_linear + 1.0 / ka_angular)
    b2 = 0.5 * (1.0 / ka_linear - 1.0 / ka_angular)

    return LinearSystem(
        a=_symmetric(a1, a2),
        b=_symmetric(b1, b2),
        c=np.eye(2),
        d=np.zeros((2, 2)),
    )
