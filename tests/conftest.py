"""
Fixtures partagées pour les tests s1geom.

Ce fichier contient les fixtures pytest utilisées par plusieurs fichiers de test.
"""

import json
import math
from pathlib import Path
from typing import Dict, Any

import pytest

from s1geom.config.config_loader import CONFIG_ENV_VAR, reset_config
from s1geom.geometry.s1_interval import S1Interval


# =============================================================================
# FIXTURES CONFIGURATION
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Chaque test part de la configuration par défaut."""
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.json"))
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Configuration de test complète."""
    return {
        "tolerances": {
            "approx_max_error": 1e-6
        },
        "contracts": {
            "check_preconditions": False
        },
        "logging": {
            "log_dir": "journaux",
            "log_level": "debug"
        }
    }


@pytest.fixture
def temp_config_file(sample_config, tmp_path) -> Path:
    """Crée un fichier config.json temporaire."""
    config_file = tmp_path / "config.json"
    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(sample_config, f)
    return config_file


# =============================================================================
# FIXTURES INTERVALLES
# =============================================================================

@pytest.fixture
def quadrants() -> Dict[str, S1Interval]:
    """Intervalles de référence construits sur les quadrants du cercle."""
    pi, pi2 = math.pi, math.pi / 2
    return {
        "empty": S1Interval.empty(),
        "full": S1Interval.full(),
        "zero": S1Interval(0.0, 0.0),
        "pi2": S1Interval(pi2, pi2),
        "pi": S1Interval(pi, pi),
        "mipi": S1Interval(-pi, -pi),   # normalisé en [pi, pi]
        "mipi2": S1Interval(-pi2, -pi2),
        "quad1": S1Interval(0.0, pi2),
        "quad2": S1Interval(pi2, -pi),  # normalisé en [pi/2, pi]
        "quad3": S1Interval(pi, -pi2),
        "quad4": S1Interval(-pi2, 0.0),
        "quad12": S1Interval(0.0, -pi),
        "quad23": S1Interval(pi2, -pi2),
        "quad34": S1Interval(-pi, 0.0),
        "quad41": S1Interval(-pi2, pi2),
        "quad123": S1Interval(0.0, -pi2),
        "quad234": S1Interval(pi2, 0.0),
        "quad341": S1Interval(pi, pi2),
        "quad412": S1Interval(-pi2, -pi),
        "mid12": S1Interval(pi2 - 0.01, pi2 + 0.02),
        "mid23": S1Interval(pi - 0.01, -pi + 0.02),
        "mid34": S1Interval(-pi2 - 0.01, -pi2 + 0.02),
        "mid41": S1Interval(-0.01, 0.02),
    }

