"""
Unit tests for drivetrain dynamics calculations.

Tests the Dynamics.calculate_dynamics method which maps a state vector and
voltage inputs to the time derivative of the state.
"""

import numpy as np
import pytest

from drivetrain import Dynamics, LinearSystem, State


@pytest.fixture
def plant() -> LinearSystem:
    """Symmetric velocity plant with hand-picked coefficients"""
    return LinearSystem(
        a=[[-2.0, 0.5], [0.5, -2.0]],
        b=[[1.5, -0.3], [-0.3, 1.5]],
        c=np.eye(2),
        d=np.zeros((2, 2)),
    )


class TestDynamics:
    """Test suite for dynamics calculations"""

    @pytest.fixture
    def dynamics(self, plant: LinearSystem) -> Dynamics:
        """Dynamics at the original gearing with a 0.3 m half track width"""
        return Dynamics(plant, original_gearing=10.0, half_track_width=0.3)

    def test_state_vector_size(self, dynamics: Dynamics) -> None:
        """Test that the derivative has 7 elements"""
        derivative = dynamics.calculate_dynamics(np.zeros(7), np.zeros(2))

        assert derivative.shape == (7,)

    def test_equilibrium_at_rest(self, dynamics: Dynamics) -> None:
        """Test that zero state and zero input give an exactly zero derivative"""
        derivative = dynamics.calculate_dynamics(np.zeros(7), np.zeros(2))

        assert np.array_equal(derivative, np.zeros(7))

    def test_position_derivative_follows_heading(self, dynamics: Dynamics) -> None:
        """Test that dx/dt, dy/dt are the average speed along the heading"""
        heading = np.pi / 6
        state = np.array([0.0, 0.0, heading, 1.0, 3.0, 0.0, 0.0])

        derivative = dynamics.calculate_dynamics(state, np.zeros(2))

        assert derivative[State.X] == pytest.approx(2.0 * np.cos(heading))
        assert derivative[State.Y] == pytest.approx(2.0 * np.sin(heading))

    def test_heading_rate(self, dynamics: Dynamics) -> None:
        """Test that dheading/dt = (v_r - v_l) / track width"""
        state = np.array([0.0, 0.0, 0.0, 1.0, 3.0, 0.0, 0.0])

        derivative = dynamics.calculate_dynamics(state, np.zeros(2))

        assert derivative[State.HEADING] == pytest.approx((3.0 - 1.0) / 0.6)

    def test_equal_wheel_speeds_do_not_turn(self, dynamics: Dynamics) -> None:
        """Test that equal wheel speeds give no heading rate"""
        state = np.array([0.0, 0.0, 0.0, 2.0, 2.0, 0.0, 0.0])

        derivative = dynamics.calculate_dynamics(state, np.array([6.0, 6.0]))

        assert derivative[State.HEADING] == 0.0
        assert derivative[State.Y] == 0.0

    def test_opposite_wheel_speeds_do_not_translate(self, dynamics: Dynamics) -> None:
        """Test that opposite wheel speeds rotate in place"""
        state = np.array([0.0, 0.0, 0.4, -1.5, 1.5, 0.0, 0.0])

        derivative = dynamics.calculate_dynamics(state, np.zeros(2))

        assert derivative[State.X] == pytest.approx(0.0, abs=1e-12)
        assert derivative[State.Y] == pytest.approx(0.0, abs=1e-12)
        assert derivative[State.HEADING] == pytest.approx(3.0 / 0.6)

    def test_wheel_distance_derivative_is_velocity(self, dynamics: Dynamics) -> None:
        """Test that the wheel distances integrate the wheel velocities"""
        state = np.array([0.0, 0.0, 0.0, 0.7, -1.2, 4.0, 5.0])

        derivative = dynamics.calculate_dynamics(state, np.array([3.0, -2.0]))

        assert derivative[State.LEFT_POSITION] == pytest.approx(0.7)
        assert derivative[State.RIGHT_POSITION] == pytest.approx(-1.2)

    def test_velocity_derivative_uses_plant(self, dynamics: Dynamics, plant: LinearSystem) -> None:
        """Test that dv/dt = A v + B u at the original gearing"""
        velocities = np.array([0.7, -1.2])
        inputs = np.array([3.0, -2.0])
        state = np.array([0.0, 0.0, 0.0, *velocities, 0.0, 0.0])

        derivative = dynamics.calculate_dynamics(state, inputs)

        expected = plant.a @ velocities + plant.b @ inputs
        assert np.allclose(derivative[State.LEFT_VELOCITY:State.LEFT_POSITION], expected)

    def test_wheel_distances_do_not_feed_back(self, dynamics: Dynamics) -> None:
        """Test that wheel distances have no effect on the derivative"""
        base = np.array([0.0, 0.0, 0.0, 0.7, -1.2, 0.0, 0.0])
        moved = base.copy()
        moved[State.LEFT_POSITION] = 12.0
        moved[State.RIGHT_POSITION] = -8.0

        inputs = np.array([3.0, -2.0])
        assert np.allclose(
            dynamics.calculate_dynamics(base, inputs),
            dynamics.calculate_dynamics(moved, inputs),
        )


class TestGearingRescaling:
    """Test suite for the gear-ratio rescaling of the velocity subsystem"""

    @pytest.fixture
    def dynamics(self, plant: LinearSystem) -> Dynamics:
        return Dynamics(plant, original_gearing=10.0, half_track_width=0.3)

    def test_original_gearing_reproduces_plant(self, dynamics: Dynamics, plant: LinearSystem) -> None:
        """Test the block structure of the rescaled matrices at r = 1"""
        a, b = dynamics.scaled_matrices()

        assert a.shape == (4, 4)
        assert b.shape == (4, 2)
        assert np.array_equal(a[0:2, 0:2], plant.a)
        assert np.array_equal(a[2:4, 0:2], np.eye(2))
        assert np.array_equal(a[:, 2:4], np.zeros((4, 2)))
        assert np.array_equal(b[0:2], plant.b)
        assert np.array_equal(b[2:4], np.zeros((2, 2)))

    def test_state_matrix_scales_with_ratio_squared(self, dynamics: Dynamics, plant: LinearSystem) -> None:
        """Test that A scales by (current / original)²"""
        dynamics.current_gearing = 5.0
        a, _ = dynamics.scaled_matrices()

        assert np.allclose(a[0:2, 0:2], plant.a * 0.25)
        assert np.array_equal(a[2:4, 0:2], np.eye(2))

    def test_input_matrix_scales_with_ratio(self, dynamics: Dynamics, plant: LinearSystem) -> None:
        """Test that B scales by current / original"""
        dynamics.current_gearing = 5.0
        _, b = dynamics.scaled_matrices()

        assert np.allclose(b[0:2], plant.b * 0.5)

    def test_velocity_response_scaling_law(self, plant: LinearSystem) -> None:
        """Test two gearings: coasting response scales by r², driven response by r"""
        low = Dynamics(plant, original_gearing=10.0, half_track_width=0.3)
        high = Dynamics(plant, original_gearing=10.0, half_track_width=0.3)
        low.current_gearing = 6.0
        high.current_gearing = 15.0
        ratio = 15.0 / 6.0

        coasting = np.array([0.0, 0.0, 0.0, 1.3, 0.4, 0.0, 0.0])
        coast_low = low.calculate_dynamics(coasting, np.zeros(2))[State.LEFT_VELOCITY:State.LEFT_POSITION]
        coast_high = high.calculate_dynamics(coasting, np.zeros(2))[State.LEFT_VELOCITY:State.LEFT_POSITION]
        assert np.allclose(coast_high, coast_low * ratio**2, rtol=1e-12)

        inputs = np.array([6.0, -4.0])
        drive_low = low.calculate_dynamics(np.zeros(7), inputs)[State.LEFT_VELOCITY:State.LEFT_POSITION]
        drive_high = high.calculate_dynamics(np.zeros(7), inputs)[State.LEFT_VELOCITY:State.LEFT_POSITION]
        assert np.allclose(drive_high, drive_low * ratio, rtol=1e-12)

    def test_gearing_read_on_every_call(self, dynamics: Dynamics) -> None:
        """Test that a gearing change takes effect on the next evaluation"""
        inputs = np.array([6.0, 6.0])
        before = dynamics.calculate_dynamics(np.zeros(7), inputs)
        dynamics.current_gearing = 20.0
        after = dynamics.calculate_dynamics(np.zeros(7), inputs)

        assert np.allclose(after[State.LEFT_VELOCITY], before[State.LEFT_VELOCITY] * 2.0)

    def test_zero_gearing_freezes_velocities(self, dynamics: Dynamics) -> None:
        """Test that a zero ratio is accepted and decouples the motors"""
        dynamics.current_gearing = 0.0
        state = np.array([0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0])

        derivative = dynamics.calculate_dynamics(state, np.array([12.0, 12.0]))

        assert derivative[State.LEFT_VELOCITY] == 0.0
        assert derivative[State.RIGHT_VELOCITY] == 0.0
