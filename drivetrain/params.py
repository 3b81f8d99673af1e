"""
Drivetrain physical parameters
"""

from dataclasses import dataclass

from drivetrain.kitbot import KITBOT_MASS, KITBOT_TRACK_WIDTH, estimate_kitbot_moment_of_inertia
from drivetrain.motor import MOTOR_PRESETS, DCMotor
from drivetrain.simulator import DrivetrainSimulator
from drivetrain.units import inches_to_meters


@dataclass
class DrivetrainParams:
    """Physical parameters of the drivetrain (defaults: dual-CIM kitbot)"""

    motor_type: str = "cim"  # Key into MOTOR_PRESETS
    motors_per_side: int = 2
    gearing: float = 10.71  # Output over input
    mass: float = KITBOT_MASS  # kg
    moment_of_inertia: float = 0.0  # kg·m², estimated when left at 0
    wheel_radius: float = inches_to_meters(3.0)  # m (6 inch wheels)
    track_width: float = KITBOT_TRACK_WIDTH  # m (26 inches)
    half_track_width: float = 0.0  # Will be calculated

    def __post_init__(self) -> None:
        """Calculate derived parameters"""
        if self.motor_type not in MOTOR_PRESETS:
            raise KeyError(f"Unknown motor type {self.motor_type!r}, expected one of {sorted(MOTOR_PRESETS)}")
        if self.moment_of_inertia <= 0.0:
            self.moment_of_inertia = estimate_kitbot_moment_of_inertia()
        self.half_track_width = self.track_width / 2

    def build_motor(self) -> DCMotor:
        """Motor model for one side"""
        return MOTOR_PRESETS[self.motor_type](self.motors_per_side)

    def create_simulator(self) -> DrivetrainSimulator:
        """Simulator with the plant derived from these parameters"""
        return DrivetrainSimulator.from_physical(
            self.build_motor(),
            self.gearing,
            self.moment_of_inertia,
            self.mass,
            self.wheel_radius,
            self.track_width,
        )
