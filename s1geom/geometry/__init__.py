"""Types géométriques sur le cercle unité."""

from s1geom.geometry.s1_interval import S1Interval

__all__ = ['S1Interval']
