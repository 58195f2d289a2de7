"""
Tests pour les exceptions personnalisees s1geom.

Verifie la hierarchie d'exceptions, les attributs contextuels,
et le chainage d'exceptions.
"""

import pytest

from s1geom.exceptions import (
    S1GeomError,
    PreconditionError,
    ConfigError,
)


class TestExceptionHierarchy:
    """Tests pour la hierarchie d'exceptions."""

    def test_s1geom_error_inherits_from_exception(self):
        assert issubclass(S1GeomError, Exception)

    def test_precondition_error_est_une_assertion(self):
        """PreconditionError herite de S1GeomError et de AssertionError."""
        assert issubclass(PreconditionError, S1GeomError)
        assert issubclass(PreconditionError, AssertionError)

    def test_config_error_inherits_from_s1geom(self):
        assert issubclass(ConfigError, S1GeomError)
        assert not issubclass(ConfigError, AssertionError)


class TestExceptionAttributes:
    """Tests pour les attributs contextuels."""

    def test_precondition_error_attributs(self):
        error = PreconditionError("Angle invalide", operation="from_point", value=4.0)
        assert str(error) == "Angle invalide"
        assert error.operation == "from_point"
        assert error.value == 4.0

    def test_precondition_error_attributs_par_defaut(self):
        error = PreconditionError("Angle invalide")
        assert error.operation is None
        assert error.value is None

    def test_config_error_attributs(self):
        error = ConfigError(
            "Valeur invalide",
            config_path="data/config.json",
            key="tolerances.approx_max_error"
        )
        assert str(error) == "Valeur invalide"
        assert error.config_path == "data/config.json"
        assert error.key == "tolerances.approx_max_error"

    def test_attributs_keyword_only(self):
        """Les attributs contextuels sont keyword-only."""
        with pytest.raises(TypeError):
            ConfigError("Valeur invalide", "data/config.json")


class TestExceptionCatching:
    """Tests pour la capture et le chainage."""

    def test_catch_global(self):
        for error in (PreconditionError("a"), ConfigError("b")):
            with pytest.raises(S1GeomError):
                raise error

    def test_precondition_capturee_comme_assertion(self):
        with pytest.raises(AssertionError):
            raise PreconditionError("contrat viole")

    def test_chainage(self):
        try:
            try:
                raise ValueError("cause")
            except ValueError as e:
                raise ConfigError("Lecture impossible") from e
        except ConfigError as error:
            assert isinstance(error.__cause__, ValueError)
