"""
s1geom - Intervalles fermés sur le cercle unité pour la géométrie sphérique.

Usage:
    from s1geom import S1Interval

    lon = S1Interval.from_point_pair(3.0, -3.0)
    lon.union(S1Interval(-1.0, 1.0))
"""

from s1geom.exceptions import ConfigError, PreconditionError, S1GeomError
from s1geom.geometry.s1_interval import S1Interval

__version__ = "1.0.0"

__all__ = [
    'S1Interval',
    'S1GeomError',
    'PreconditionError',
    'ConfigError',
]
