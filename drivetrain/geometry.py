"""
Planar pose and rotation types
"""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rotation2d:
    """Orientation in the plane, counter-clockwise positive"""

    radians: float = 0.0

    @classmethod
    def from_degrees(cls, degrees: float) -> "Rotation2d":
        return cls(math.radians(degrees))

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)


@dataclass(frozen=True)
class Pose2d:
    """Position (m) and heading on the field"""

    x: float = 0.0
    y: float = 0.0
    rotation: Rotation2d = field(default_factory=Rotation2d)
