"""
Intervalle fermé sur le cercle unité (groupe ℝ/2πℤ).

Un S1Interval représente un arc [lo, hi] parcouru dans le sens
trigonométrique, avec des extrémités en radians dans [-pi, pi]. Il sert de
primitive d'encadrement pour la géométrie sphérique (plages de longitudes,
boîtes englobantes).

Représentation:
- Vide : lo = pi, hi = -pi
- Plein : lo = -pi, hi = pi
- Inversé : lo > hi, l'arc passe par le point de coupure ±pi

Le point ±pi a deux représentations ; -pi est réécrit en pi sauf pour les
intervalles vide et plein.

Usage:
    from s1geom.geometry.s1_interval import S1Interval

    lon = S1Interval.from_point_pair(3.0, -3.0)   # arc court passant par pi
    lon.contains(math.pi)                        # -> True
    lon.expanded(0.1).get_length()               # -> ~0.483
"""

from s1geom.config.config_loader import get_config
from s1geom.contracts import check_angle, check_radius
from s1geom.utils import angle_utils
from s1geom.utils.angle_utils import M_PI, ieee_remainder

# Erreur d'arrondi admise (1 bit par extrémité) avant de déclarer plein
# un intervalle élargi.
FULL_EXPANSION_EPSILON = 1e-15


class S1Interval:
    """
    Intervalle fermé immuable sur le cercle unité.

    L'égalité est exacte (comparaison bit à bit des extrémités) ; utiliser
    approx_equals() pour une comparaison géométrique avec tolérance.
    """

    __slots__ = ("_lo", "_hi")

    def __init__(self, lo, hi: float = None, checked: bool = False):
        """
        Construit l'intervalle [lo, hi].

        Args:
            lo: Extrémité basse dans [-pi, pi], ou un S1Interval à copier
            hi: Extrémité haute dans [-pi, pi]
            checked: Si True, les extrémités sont prises telles quelles
                (usage interne : vide, plein, résultats déjà normalisés)
        """
        if isinstance(lo, S1Interval):
            object.__setattr__(self, "_lo", lo._lo)
            object.__setattr__(self, "_hi", lo._hi)
            return
        if hi is None:
            raise TypeError("S1Interval() attend deux bornes ou un S1Interval")

        if not checked:
            check_angle(lo, "S1Interval")
            check_angle(hi, "S1Interval")
            new_lo, new_hi = lo, hi
            if lo == -M_PI and hi != M_PI:
                new_lo = M_PI
            if hi == -M_PI and lo != M_PI:
                new_hi = M_PI
            lo, hi = new_lo, new_hi
        object.__setattr__(self, "_lo", float(lo))
        object.__setattr__(self, "_hi", float(hi))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} est immuable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} est immuable")

    def __reduce__(self):
        return (S1Interval, (self._lo, self._hi, True))

    # =========================================================================
    # CONSTRUCTEURS NOMMÉS
    # =========================================================================

    @classmethod
    def empty(cls) -> "S1Interval":
        """Intervalle vide canonique [pi, -pi]."""
        return cls(M_PI, -M_PI, checked=True)

    @classmethod
    def full(cls) -> "S1Interval":
        """Intervalle plein canonique [-pi, pi]."""
        return cls(-M_PI, M_PI, checked=True)

    @classmethod
    def from_point(cls, p: float) -> "S1Interval":
        """Intervalle réduit au point p (-pi est réécrit en pi)."""
        check_angle(p, "from_point")
        if p == -M_PI:
            p = M_PI
        return cls(p, p, checked=True)

    @classmethod
    def from_point_pair(cls, p1: float, p2: float) -> "S1Interval":
        """
        Plus petit intervalle contenant les deux points.

        Équivaut à partir de l'intervalle vide et appeler add_point() deux
        fois, en plus rapide : on garde le plus court des deux arcs qui
        joignent p1 et p2.
        """
        check_angle(p1, "from_point_pair")
        check_angle(p2, "from_point_pair")
        if p1 == -M_PI:
            p1 = M_PI
        if p2 == -M_PI:
            p2 = M_PI
        if cls.positive_distance(p1, p2) <= M_PI:
            return cls(p1, p2, checked=True)
        return cls(p2, p1, checked=True)

    @staticmethod
    def positive_distance(a: float, b: float) -> float:
        """Distance de a à b dans le sens trigonométrique, dans [0, 2*pi[."""
        return angle_utils.positive_distance(a, b)

    # =========================================================================
    # ACCESSEURS ET PRÉDICATS
    # =========================================================================

    @property
    def lo(self) -> float:
        return self._lo

    @property
    def hi(self) -> float:
        return self._hi

    def is_empty(self) -> bool:
        """True si l'intervalle ne contient aucun point."""
        return self._lo - self._hi == 2 * M_PI

    def is_full(self) -> bool:
        """True si l'intervalle contient tout le cercle."""
        return self._hi - self._lo == 2 * M_PI

    def is_inverted(self) -> bool:
        """True si lo > hi (c'est le cas de l'intervalle vide)."""
        return self._lo > self._hi

    def get_center(self) -> float:
        """
        Milieu de l'intervalle, dans ]-pi, pi].

        Le résultat est arbitraire pour les intervalles vide et plein.
        """
        center = 0.5 * (self._lo + self._hi)
        if not self.is_inverted():
            return center
        return center + M_PI if center <= 0 else center - M_PI

    def get_length(self) -> float:
        """
        Longueur de l'arc. Vaut exactement -1 pour l'intervalle vide.
        """
        length = self._hi - self._lo
        if length >= 0:
            return length
        length += 2 * M_PI
        return length if length > 0 else -1

    # =========================================================================
    # CONTENANCE
    # =========================================================================

    def contains(self, other) -> bool:
        """
        Teste si l'intervalle (fermé) contient un point ou un intervalle.

        Args:
            other: Angle dans [-pi, pi] ou S1Interval
        """
        if isinstance(other, S1Interval):
            return self._contains_interval(other)
        if other == -M_PI:
            other = M_PI
        return self.fast_contains(other)

    def fast_contains(self, p: float) -> bool:
        """
        Comme contains(p) mais sans réécrire -pi en pi : l'appelant garantit
        que p est déjà sous forme canonique.
        """
        if self.is_inverted():
            return (p >= self._lo or p <= self._hi) and not self.is_empty()
        return self._lo <= p <= self._hi

    def _contains_interval(self, y: "S1Interval") -> bool:
        if self.is_inverted():
            if y.is_inverted():
                return y._lo >= self._lo and y._hi <= self._hi
            return (y._lo >= self._lo or y._hi <= self._hi) and not self.is_empty()
        if y.is_inverted():
            return self.is_full() or y.is_empty()
        return y._lo >= self._lo and y._hi <= self._hi

    def interior_contains(self, other) -> bool:
        """
        Teste si l'intérieur de l'intervalle contient un point ou un
        intervalle.

        x.interior_contains(x) n'est vrai que pour les intervalles vide et
        plein, et x.interior_contains(S1Interval.from_point(p)) équivaut à
        x.interior_contains(p).
        """
        if isinstance(other, S1Interval):
            return self._interior_contains_interval(other)
        p = other
        if p == -M_PI:
            p = M_PI
        if self.is_inverted():
            return p > self._lo or p < self._hi
        return (self._lo < p < self._hi) or self.is_full()

    def _interior_contains_interval(self, y: "S1Interval") -> bool:
        if self.is_inverted():
            if not y.is_inverted():
                return y._lo > self._lo or y._hi < self._hi
            return (y._lo > self._lo and y._hi < self._hi) or y.is_empty()
        if y.is_inverted():
            return self.is_full() or y.is_empty()
        return (y._lo > self._lo and y._hi < self._hi) or self.is_full()

    def intersects(self, y: "S1Interval") -> bool:
        """
        True si les deux intervalles ont au moins un point commun.

        Le point ±pi ayant deux représentations, [-pi, -3] et [2, pi]
        s'intersectent.
        """
        if self.is_empty() or y.is_empty():
            return False
        if self.is_inverted():
            # Tout intervalle inversé non vide contient pi
            return y.is_inverted() or y._lo <= self._hi or y._hi >= self._lo
        if y.is_inverted():
            return y._lo <= self._hi or y._hi >= self._lo
        return y._lo <= self._hi and y._hi >= self._lo

    def interior_intersects(self, y: "S1Interval") -> bool:
        """True si l'intérieur de l'intervalle a un point commun avec y."""
        if self.is_empty() or y.is_empty() or self._lo == self._hi:
            return False
        if self.is_inverted():
            return y.is_inverted() or y._lo < self._hi or y._hi > self._lo
        if y.is_inverted():
            return y._lo < self._hi or y._hi > self._lo
        return (y._lo < self._hi and y._hi > self._lo) or self.is_full()

    # =========================================================================
    # OPÉRATIONS
    # =========================================================================

    def add_point(self, p: float) -> "S1Interval":
        """
        Plus petit élargissement de l'intervalle qui contient le point p.
        """
        check_angle(p, "add_point")
        if p == -M_PI:
            p = M_PI
        if self.fast_contains(p):
            return self
        if self.is_empty():
            return S1Interval.from_point(p)

        # Distance de p à chacune des extrémités
        dlo = self.positive_distance(p, self._lo)
        dhi = self.positive_distance(self._hi, p)
        if dlo < dhi:
            return S1Interval(p, self._hi)
        # Ajouter un point ne rend jamais plein un intervalle non plein
        return S1Interval(self._lo, p)

    def expanded(self, radius: float) -> "S1Interval":
        """
        Intervalle contenant tous les points à distance <= radius d'un point
        de cet intervalle. L'élargi d'un intervalle vide est vide.
        """
        check_radius(radius, "expanded")
        if self.is_empty():
            return self

        if self.get_length() + 2 * radius >= 2 * M_PI - FULL_EXPANSION_EPSILON:
            return S1Interval.full()

        lo = ieee_remainder(self._lo - radius, 2 * M_PI)
        hi = ieee_remainder(self._hi + radius, 2 * M_PI)
        if lo == -M_PI:
            lo = M_PI
        return S1Interval(lo, hi)

    def union(self, y: "S1Interval") -> "S1Interval":
        """
        Plus petit intervalle contenant les deux intervalles.

        Si les arcs sont disjoints, on referme le plus étroit des deux
        écarts qui les séparent.
        """
        if y.is_empty():
            return self
        if self.fast_contains(y._lo):
            if self.fast_contains(y._hi):
                # Soit y est contenu, soit les deux recouvrent le cercle
                if self.contains(y):
                    return self
                return S1Interval.full()
            return S1Interval(self._lo, y._hi, checked=True)
        if self.fast_contains(y._hi):
            return S1Interval(y._lo, self._hi, checked=True)

        # Ni y.lo ni y.hi dans cet intervalle : y le contient ou ils sont
        # disjoints
        if self.is_empty() or y.fast_contains(self._lo):
            return y

        # dlo : écart de y.hi à lo, comblé par [y.lo, hi]
        # dhi : écart de hi à y.lo, comblé par [lo, y.hi]
        dlo = self.positive_distance(y._hi, self._lo)
        dhi = self.positive_distance(self._hi, y._lo)
        if dlo < dhi:
            return S1Interval(y._lo, self._hi, checked=True)
        return S1Interval(self._lo, y._hi, checked=True)

    def intersection(self, y: "S1Interval") -> "S1Interval":
        """
        Plus petit intervalle contenant l'intersection avec y.

        L'intersection peut être formée de deux arcs disjoints ; on renvoie
        alors le plus court des deux intervalles d'origine.
        """
        if y.is_empty():
            return S1Interval.empty()
        if self.fast_contains(y._lo):
            if self.fast_contains(y._hi):
                if y.get_length() < self.get_length():
                    return y
                return self
            return S1Interval(y._lo, self._hi, checked=True)
        if self.fast_contains(y._hi):
            return S1Interval(self._lo, y._hi, checked=True)

        # Cet intervalle ne contient aucune extrémité de y : y le contient
        # ou ils sont disjoints
        if y.fast_contains(self._lo):
            return self
        return S1Interval.empty()

    def complement(self) -> "S1Interval":
        """
        Complémentaire de l'intérieur de l'intervalle.

        Un intervalle et son complémentaire ont la même frontière mais aucun
        point intérieur commun. Le complémentaire d'un singleton est plein,
        comme celui de l'intervalle vide.
        """
        if self._lo == self._hi:
            return S1Interval.full()
        return S1Interval(self._hi, self._lo, checked=True)

    def approx_equals(self, y: "S1Interval", max_error: float = None) -> bool:
        """
        True si les deux intervalles sont égaux à max_error près.

        Args:
            y: Intervalle à comparer
            max_error: Tolérance en radians (défaut: tolerances.approx_max_error)
        """
        if max_error is None:
            max_error = get_config().tolerances.approx_max_error
        if self.is_empty():
            return y.get_length() <= max_error
        if y.is_empty():
            return self.get_length() <= max_error
        return (abs(ieee_remainder(y._lo - self._lo, 2 * M_PI))
                + abs(ieee_remainder(y._hi - self._hi, 2 * M_PI))) <= max_error

    # =========================================================================
    # ÉGALITÉ ET REPRÉSENTATION
    # =========================================================================

    def __eq__(self, other):
        if not isinstance(other, S1Interval):
            return NotImplemented
        return self._lo == other._lo and self._hi == other._hi

    def __hash__(self):
        return hash((self._lo, self._hi))

    def __repr__(self) -> str:
        return f"S1Interval({self._lo!r}, {self._hi!r})"

    def __str__(self) -> str:
        return f"[{self._lo}, {self._hi}]"
