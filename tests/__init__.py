"""
Test suite for the Differential Drivetrain Simulation.

This package contains unit tests organized by component:
- test_runge_kutta.py: Tests for the RK4 integrator
- test_dynamics.py: Tests for drivetrain dynamics and gearing rescaling
- test_simulation.py: Tests for the DrivetrainSimulator
- test_motor_and_plant.py: Tests for the motor model and plant factories
- test_kitbot.py: Tests for the kitbot presets
- test_drivetrain_params.py: Tests for DrivetrainParams and YAML config
- test_trajectory_analysis.py: Tests for run analysis
- test_units.py: Tests for unit conversions
- test_app.py: Tests for the dashboard callback
- test_integration.py: Integration tests for the gearing sweep workflow
"""
