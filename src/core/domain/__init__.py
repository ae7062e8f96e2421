"""
Domain models and value objects.

Contains Angle — immutable angle value object over the fixed-scale decimal core.
"""

from src.core.domain.angle import Angle, AngleUnit

__all__ = [
    "Angle",
    "AngleUnit",
]
