"""
Differential Drivetrain Simulation

This package simulates a two-sided (differential) drivetrain driven by left
and right motor voltages, so drive code can be exercised without hardware.
"""

from drivetrain.analysis import TrajectoryAnalyzer
from drivetrain.config import load_params
from drivetrain.dynamics import Dynamics
from drivetrain.gearing_analysis import run_gearing_analysis
from drivetrain.geometry import Pose2d, Rotation2d
from drivetrain.integration import runge_kutta
from drivetrain.kitbot import KitbotGearing, KitbotMotor, KitbotWheelSize, create_kitbot_sim
from drivetrain.motor import DCMotor
from drivetrain.params import DrivetrainParams
from drivetrain.plant import LinearSystem, create_drivetrain_velocity_system, identify_drivetrain_system
from drivetrain.simulator import DrivetrainSimulator
from drivetrain.state import DrivetrainState, State

__all__ = [
    "DCMotor",
    "DrivetrainParams",
    "DrivetrainSimulator",
    "DrivetrainState",
    "Dynamics",
    "KitbotGearing",
    "KitbotMotor",
    "KitbotWheelSize",
    "LinearSystem",
    "Pose2d",
    "Rotation2d",
    "State",
    "TrajectoryAnalyzer",
    "create_drivetrain_velocity_system",
    "create_kitbot_sim",
    "identify_drivetrain_system",
    "load_params",
    "run_gearing_analysis",
    "runge_kutta",
]
