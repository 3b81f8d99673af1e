"""
Unit conversion helpers
"""

import math

METERS_PER_INCH = 0.0254
KILOGRAMS_PER_POUND = 0.453592


def inches_to_meters(inches: float) -> float:
    """Convert inches to meters"""
    return inches * METERS_PER_INCH


def meters_to_inches(meters: float) -> float:
    """Convert meters to inches"""
    return meters / METERS_PER_INCH


def feet_to_meters(feet: float) -> float:
    """Convert feet to meters"""
    return inches_to_meters(feet * 12.0)


def pounds_to_kilograms(pounds: float) -> float:
    """Convert pounds (mass) to kilograms"""
    return pounds * KILOGRAMS_PER_POUND


def rotations_per_minute_to_radians_per_second(rpm: float) -> float:
    """Convert rotations per minute to radians per second"""
    return rpm * math.pi / 30.0


def radians_per_second_to_rotations_per_minute(radians_per_second: float) -> float:
    """Convert radians per second to rotations per minute"""
    return radians_per_second * 30.0 / math.pi
