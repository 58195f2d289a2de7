"""Configuration et logging de s1geom."""

from s1geom.config.config_loader import (
    S1GeomConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)

__all__ = [
    'S1GeomConfig',
    'get_config',
    'load_config',
    'reset_config',
    'set_config',
]
