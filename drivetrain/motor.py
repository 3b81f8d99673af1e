"""
DC motor electrical model
"""

from dataclasses import dataclass, field

from drivetrain.units import rotations_per_minute_to_radians_per_second


@dataclass
class DCMotor:
    """
    Brushed DC motor (or a gang of identical motors driving one shaft).

    Built from per-motor datasheet values; the gang totals, resistance,
    velocity constant and torque constant are derived in __post_init__.
    """

    nominal_voltage: float  # V
    stall_torque: float  # N·m (per motor)
    stall_current: float  # A (per motor)
    free_current: float  # A (per motor)
    free_speed: float  # rad/s
    num_motors: int = 1
    total_stall_torque: float = field(init=False)  # N·m (whole gang)
    total_stall_current: float = field(init=False)  # A (whole gang)
    total_free_current: float = field(init=False)  # A (whole gang)
    resistance: float = field(init=False)  # Ω
    kv: float = field(init=False)  # rad/s per V
    kt: float = field(init=False)  # N·m per A

    def __post_init__(self) -> None:
        """Calculate derived parameters"""
        self.total_stall_torque = self.stall_torque * self.num_motors
        self.total_stall_current = self.stall_current * self.num_motors
        self.total_free_current = self.free_current * self.num_motors
        self.resistance = self.nominal_voltage / self.total_stall_current
        self.kv = self.free_speed / (self.nominal_voltage - self.resistance * self.total_free_current)
        self.kt = self.total_stall_torque / self.total_stall_current

    def current(self, speed: float, voltage: float) -> float:
        """
        Current drawn by the motor at a given speed and applied voltage

        Args:
            speed: Angular speed of the motor shaft (rad/s)
            voltage: Applied voltage (V)

        Returns:
            Current draw (A)
        """
        return -1.0 / self.kv / self.resistance * speed + 1.0 / self.resistance * voltage

    def torque(self, current: float) -> float:
        """Torque (N·m) produced at a given current draw (A)"""
        return current * self.kt

    def voltage(self, torque: float, speed: float) -> float:
        """Voltage (V) needed to produce a torque (N·m) at a speed (rad/s)"""
        return 1.0 / self.kv * speed + 1.0 / self.kt * self.resistance * torque

    def speed(self, torque: float, voltage: float) -> float:
        """Speed (rad/s) reached when producing a torque (N·m) at a voltage (V)"""
        return voltage * self.kv - 1.0 / self.kt * torque * self.resistance * self.kv

    @classmethod
    def _from_datasheet(
        cls,
        stall_torque: float,
        stall_current: float,
        free_current: float,
        free_speed_rpm: float,
        num_motors: int,
    ) -> "DCMotor":
        return cls(
            nominal_voltage=12.0,
            stall_torque=stall_torque,
            stall_current=stall_current,
            free_current=free_current,
            free_speed=rotations_per_minute_to_radians_per_second(free_speed_rpm),
            num_motors=num_motors,
        )

    @classmethod
    def cim(cls, num_motors: int = 1) -> "DCMotor":
        """CIM motor(s)"""
        return cls._from_datasheet(2.42, 133.0, 2.7, 5310.0, num_motors)

    @classmethod
    def mini_cim(cls, num_motors: int = 1) -> "DCMotor":
        """MiniCIM motor(s)"""
        return cls._from_datasheet(1.41, 89.0, 3.0, 5840.0, num_motors)

    @classmethod
    def bag(cls, num_motors: int = 1) -> "DCMotor":
        """Bag motor(s)"""
        return cls._from_datasheet(0.43, 53.0, 1.8, 13180.0, num_motors)

    @classmethod
    def vex_775_pro(cls, num_motors: int = 1) -> "DCMotor":
        """775Pro motor(s)"""
        return cls._from_datasheet(0.71, 134.0, 0.7, 18730.0, num_motors)

    @classmethod
    def neo(cls, num_motors: int = 1) -> "DCMotor":
        """NEO brushless motor(s)"""
        return cls._from_datasheet(2.6, 105.0, 1.8, 5676.0, num_motors)

    @classmethod
    def falcon_500(cls, num_motors: int = 1) -> "DCMotor":
        """Falcon 500 brushless motor(s)"""
        return cls._from_datasheet(4.69, 257.0, 1.5, 6380.0, num_motors)


MOTOR_PRESETS = {
    "cim": DCMotor.cim,
    "mini_cim": DCMotor.mini_cim,
    "bag": DCMotor.bag,
    "775pro": DCMotor.vex_775_pro,
    "neo": DCMotor.neo,
    "falcon500": DCMotor.falcon_500,
}
