"""
Utilitaires partagés pour s1geom.
"""

from s1geom.utils.angle_utils import (
    M_PI,
    ieee_remainder,
    normalize_angle_pi,
    positive_distance,
)

__all__ = [
    'M_PI',
    'ieee_remainder',
    'normalize_angle_pi',
    'positive_distance',
]
