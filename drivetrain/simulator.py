"""
Main drivetrain simulator class
"""

import logging
from typing import Optional, Tuple, Union

import numpy as np

from drivetrain.dynamics import Dynamics
from drivetrain.geometry import Pose2d, Rotation2d
from drivetrain.integration import runge_kutta
from drivetrain.motor import DCMotor
from drivetrain.plant import LinearSystem, create_drivetrain_velocity_system
from drivetrain.state import NUM_INPUTS, NUM_STATES, State, as_state_vector

logger = logging.getLogger(__name__)


class DrivetrainSimulator:
    """
    Simulates a differential drivetrain driven by left and right voltages

    Each tick, call set_inputs() with the commanded voltages and then
    update() with the elapsed time. The state vector is
    [x, y, heading, v_l, v_r, d_l, d_r] in the field frame.

    Nothing is validated on the tick path: a non-positive dt, non-finite
    voltages or a zero/negative gearing are integrated as-is and leave
    NaN/Inf in the state for every later tick. Voltages are not clamped to the
    supply voltage.
    """

    def __init__(
        self,
        plant: LinearSystem,
        motor: DCMotor,
        gearing: float,
        track_width: float,
        wheel_radius: float,
    ) -> None:
        """
        Initialize simulator

        Args:
            plant: Velocity subsystem, e.g. from create_drivetrain_velocity_system
                or identify_drivetrain_system
            motor: Motor model for one side of the drivetrain
            gearing: Reduction between motor and wheel, as output over input.
                Must be the ratio the plant was derived for.
            track_width: Distance between left and right wheels (m)
            wheel_radius: Wheel radius (m)
        """
        self.plant = plant
        self.motor = motor
        self.original_gearing = gearing
        self.track_width = track_width
        self.wheel_radius = wheel_radius
        self.dynamics_obj = Dynamics(plant, gearing, track_width / 2.0)

        self._x = np.zeros(NUM_STATES)
        self._u = np.zeros(NUM_INPUTS)

        logger.debug(
            f"Drivetrain simulator created: gearing={gearing:.3f}, "
            f"track_width={track_width:.3f} m, wheel_radius={wheel_radius:.4f} m"
        )

    @classmethod
    def from_physical(
        cls,
        motor: DCMotor,
        gearing: float,
        moment_of_inertia: float,
        mass: float,
        wheel_radius: float,
        track_width: float,
    ) -> "DrivetrainSimulator":
        """
        Create a simulator from physical parameters

        Args:
            motor: Motor model for one side of the drivetrain
            gearing: Reduction between motor and wheel, as output over input
            moment_of_inertia: Moment of inertia about the vertical axis (kg·m²)
            mass: Mass of the drivebase (kg)
            wheel_radius: Wheel radius (m)
            track_width: Distance between left and right wheels (m)
        """
        plant = create_drivetrain_velocity_system(
            motor, mass, wheel_radius, track_width / 2.0, moment_of_inertia, gearing
        )
        return cls(plant, motor, gearing, track_width, wheel_radius)

    @property
    def half_track_width(self) -> float:
        return self.dynamics_obj.half_track_width

    @property
    def current_gearing(self) -> float:
        """Active gearing, as output over input"""
        return self.dynamics_obj.current_gearing

    @current_gearing.setter
    def current_gearing(self, ratio: float) -> None:
        if ratio <= 0.0:
            logger.warning(f"Gearing set to non-positive ratio {ratio}; state will diverge")
        else:
            logger.info(f"Gearing changed from {self.dynamics_obj.current_gearing:.3f} to {ratio:.3f}")
        self.dynamics_obj.current_gearing = ratio

    def get_current_gearing(self) -> float:
        return self.current_gearing

    def set_current_gearing(self, ratio: float) -> None:
        """
        Set the gearing reduction, e.g. after shifting a transmission

        Args:
            ratio: New gear ratio, as output over input
        """
        self.current_gearing = ratio

    @property
    def inputs(self) -> np.ndarray:
        """Held input vector [V_l, V_r] (copy)"""
        return self._u.copy()

    def set_inputs(self, left_voltage: float, right_voltage: float) -> None:
        """
        Set the voltage applied to each side

        Positive voltage must drive that side forward (+x). Values are not
        clamped.
        """
        self._u = np.array([left_voltage, right_voltage], dtype=float)

    def dynamics(self, state: np.ndarray, inputs: np.ndarray) -> np.ndarray:
        """
        System dynamics at the current gearing

        Args:
            state: [x, y, heading, v_l, v_r, d_l, d_r]
            inputs: [V_l, V_r]

        Returns:
            Derivative of state vector
        """
        return self.dynamics_obj.calculate_dynamics(state, inputs)

    def update(self, dt: float) -> None:
        """
        Advance the state by dt seconds with RK4, holding the current inputs

        Args:
            dt: Time step (s), expected to be positive
        """
        self._x = runge_kutta(self.dynamics_obj.calculate_dynamics, self._x, self._u, dt)

    def get_state(self, component: Optional[State] = None) -> Union[np.ndarray, float]:
        """
        Full state vector (copy), or one component of it

        Args:
            component: State index to read, or None for the whole vector
        """
        if component is None:
            return self._x.copy()
        return float(self._x[component])

    def set_state(self, state) -> None:
        """
        Overwrite the whole state, e.g. with a vision-corrected estimate

        Raises:
            ValueError: If the state does not have exactly 7 components
        """
        self._x = as_state_vector(state)

    def get_pose(self) -> Pose2d:
        return Pose2d(
            float(self._x[State.X]),
            float(self._x[State.Y]),
            Rotation2d(float(self._x[State.HEADING])),
        )

    def set_pose(self, pose: Pose2d) -> None:
        """
        Overwrite x, y and heading only

        Wheel velocities and wheel distances keep their values.
        """
        self._x[State.X] = pose.x
        self._x[State.Y] = pose.y
        self._x[State.HEADING] = pose.rotation.radians

    def get_heading(self) -> Rotation2d:
        """
        Direction the drivetrain is facing

        Counter-clockwise positive, while most gyros are clockwise positive:
        negate gyro readings before comparing them with this value.
        """
        return Rotation2d(float(self._x[State.HEADING]))

    def get_current_draw_amps(self) -> float:
        """
        Total current drawn by both sides (A)

        Each side's current is signed by its applied voltage, so a side with
        zero voltage contributes nothing.
        """
        total = 0.0
        for velocity, voltage in (
            (self._x[State.LEFT_VELOCITY], self._u[0]),
            (self._x[State.RIGHT_VELOCITY], self._u[1]),
        ):
            motor_speed = velocity * self.current_gearing / self.wheel_radius
            total += self.motor.current(motor_speed, voltage) * np.sign(voltage)
        return float(total)

    def simulate(
        self,
        left_voltage: float,
        right_voltage: float,
        duration: float = 5.0,
        dt: float = 0.02,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Run open-loop from the current state with constant voltages

        Args:
            left_voltage: Left side voltage held for the whole run (V)
            right_voltage: Right side voltage held for the whole run (V)
            duration: Run duration (s)
            dt: Time step (s)

        Returns:
            Tuple of (time_array, state_history, current_history); row i holds
            the state and current draw at time_array[i], before that step
        """
        t = np.arange(0, duration, dt)
        states = np.zeros((len(t), NUM_STATES))
        currents = np.zeros(len(t))

        self.set_inputs(left_voltage, right_voltage)
        for i in range(len(t)):
            states[i] = self._x
            currents[i] = self.get_current_draw_amps()
            self.update(dt)

        return t, states, currents
