"""
Utilitaires pour les calculs d'angles en radians.

Centralise la constante pi et le reste symétrique utilisés par les
intervalles sur le cercle. Toutes les fonctions sont pures.

Usage:
    from s1geom.utils.angle_utils import M_PI, ieee_remainder, positive_distance

    d = positive_distance(3.0, -3.0)   # -> 2*pi - 6, environ 0.283
    a = normalize_angle_pi(-M_PI)      # -> pi
"""

import math

M_PI = math.pi


def ieee_remainder(x: float, y: float) -> float:
    """
    Reste IEEE 754 de x par y : x - n*y avec n l'entier le plus proche
    de x/y (arrondi au pair en cas d'égalité).

    Le résultat est dans [-|y|/2, |y|/2], contrairement à l'opérateur %
    qui prend le signe de y.

    Examples:
        >>> ieee_remainder(5.0, 4.0)
        1.0
        >>> ieee_remainder(7.0, 4.0)
        -1.0
    """
    return math.remainder(x, y)


def normalize_angle_pi(angle: float) -> float:
    """
    Normalise un angle en radians dans l'intervalle ]-pi, pi].

    Args:
        angle: Angle en radians (quelconque)

    Returns:
        Angle équivalent dans ]-pi, pi]

    Examples:
        >>> normalize_angle_pi(-M_PI) == M_PI
        True
        >>> round(normalize_angle_pi(0.5 + 4 * M_PI), 9)
        0.5
    """
    angle = math.remainder(angle, 2 * M_PI)
    if angle == -M_PI:
        angle = M_PI
    return angle


def positive_distance(a: float, b: float) -> float:
    """
    Distance de a à b dans le sens trigonométrique, dans [0, 2*pi[.

    Équivalent à ieee_remainder(b - a - pi, 2*pi) + pi, mais sans perte
    de précision pour les très petites distances positives.

    Args:
        a: Angle de départ dans [-pi, pi]
        b: Angle d'arrivée dans [-pi, pi]

    Examples:
        >>> positive_distance(0.0, 1.0)
        1.0
        >>> round(positive_distance(1.0, 0.0), 6)
        5.283185
    """
    d = b - a
    if d >= 0:
        return d
    # Si b == pi et a == -pi + eps, le résultat doit valoir environ 2*pi
    # et non zéro.
    return (b + M_PI) - (a - M_PI)
