"""
Vérification des préconditions d'appel.

Les préconditions (angle dans [-pi, pi], rayon positif ou nul) sont des
contrats de l'appelant, pas des erreurs récupérables. Elles ne sont
vérifiées que si __debug__ est vrai (désactivées par `python -O`) et que
la configuration active contracts.check_preconditions.
"""

import logging
import math

from s1geom.config.config_loader import get_config
from s1geom.exceptions import PreconditionError
from s1geom.utils.angle_utils import M_PI

logger = logging.getLogger(__name__)


def contracts_enabled() -> bool:
    """True si les préconditions doivent être vérifiées."""
    return __debug__ and get_config().contracts.check_preconditions


def _fail(message: str, operation: str, value: float):
    logger.error(f"Précondition violée dans {operation}: {message}")
    raise PreconditionError(message, operation=operation, value=value)


def check_angle(value: float, operation: str) -> None:
    """
    Vérifie qu'un angle est dans [-pi, pi].

    Raises:
        PreconditionError: Si |value| > pi ou value est NaN
    """
    if not contracts_enabled():
        return
    if math.isnan(value) or abs(value) > M_PI:
        _fail(f"angle {value!r} hors de [-pi, pi]", operation, value)


def check_radius(radius: float, operation: str) -> None:
    """
    Vérifie qu'un rayon d'élargissement est positif ou nul.

    Raises:
        PreconditionError: Si radius < 0 ou radius est NaN
    """
    if not contracts_enabled():
        return
    if math.isnan(radius) or radius < 0:
        _fail(f"rayon {radius!r} négatif", operation, radius)
