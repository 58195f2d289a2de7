"""
Exceptions personnalisees pour s1geom.

Ce module definit la hierarchie d'exceptions de la bibliotheque. Toutes les
exceptions heritent de S1GeomError pour permettre un catch global si
necessaire.

Les operations sur les intervalles sont totales pour des entrees valides :
les seules erreurs possibles sont une violation de contrat par l'appelant
(PreconditionError) ou une configuration invalide (ConfigError).
"""

from typing import Optional


class S1GeomError(Exception):
    """
    Exception de base pour toutes les erreurs s1geom.

    Example:
        try:
            interval = S1Interval.from_point_pair(p1, p2)
        except S1GeomError as e:
            logger.error(f"Erreur s1geom: {e}")
    """
    pass


class PreconditionError(S1GeomError, AssertionError):
    """
    Violation d'un contrat d'appel (erreur de programmation de l'appelant).

    Herite aussi de AssertionError : une precondition violee se comporte
    comme une assertion echouee.

    Attributes:
        operation: Operation appelee (optionnel)
        value: Valeur fautive (optionnel)

    Example:
        raise PreconditionError(
            "Angle hors de [-pi, pi]",
            operation="from_point_pair",
            value=4.0
        )
    """

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        value: Optional[float] = None
    ):
        super().__init__(message)
        self.operation = operation
        self.value = value


class ConfigError(S1GeomError):
    """
    Exception pour les erreurs de chargement de configuration.

    Levee lorsque le fichier de configuration ne peut pas etre lu
    ou qu'une valeur est invalide.

    Attributes:
        config_path: Chemin vers le fichier de configuration (optionnel)
        key: Cle de configuration invalide (optionnel)

    Example:
        raise ConfigError(
            "Valeur non numerique",
            config_path="data/config.json",
            key="tolerances.approx_max_error"
        )
    """

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        key: Optional[str] = None
    ):
        super().__init__(message)
        self.config_path = config_path
        self.key = key
