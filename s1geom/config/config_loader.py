"""
Configuration de s1geom.

Dataclasses chargées depuis un fichier JSON, avec des valeurs par défaut
pour chaque section. La bibliothèque ne lit jamais de fichier d'elle-même :
tant que l'application n'a rien installé, get_config() retourne les valeurs
par défaut. Le chargement est une étape explicite de l'application.

Usage:
    from s1geom.config.config_loader import load_config, set_config

    set_config(load_config("data/config.json"))

Format du fichier (toutes les clés sont optionnelles):
    {
        "tolerances": {"approx_max_error": 1e-9},
        "contracts": {"check_preconditions": true},
        "logging": {"log_dir": "logs", "log_level": "INFO"}
    }
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from s1geom.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path("data/config.json")
CONFIG_ENV_VAR = "S1GEOM_CONFIG"


# ============================================================================
# DATACLASSES POUR LA CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class ToleranceConfig:
    """Tolérances numériques."""
    # Tolérance par défaut de S1Interval.approx_equals()
    approx_max_error: float = 1e-9


@dataclass(frozen=True)
class ContractConfig:
    """Vérification des préconditions d'appel."""
    check_preconditions: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    """Paramètres passés à setup_logging()."""
    log_dir: str = "logs"
    log_level: str = "INFO"


@dataclass(frozen=True)
class S1GeomConfig:
    """
    Configuration complète de s1geom.

    Les instances sont immuables : la configuration chargée est partagée
    en lecture seule par tous les appelants.
    """
    tolerances: ToleranceConfig = field(default_factory=ToleranceConfig)
    contracts: ContractConfig = field(default_factory=ContractConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source: Optional[Path] = None

    def __str__(self) -> str:
        return (
            f"S1GeomConfig(\n"
            f"  Source: {self.source or 'defaults'}\n"
            f"  approx_max_error: {self.tolerances.approx_max_error:g}\n"
            f"  Préconditions: {'ON' if self.contracts.check_preconditions else 'OFF'}\n"
            f")"
        )


# ============================================================================
# CHARGEMENT DE LA CONFIGURATION
# ============================================================================

class ConfigLoader:
    """Chargeur de configuration par sections."""

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH):
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path)
        self.cfg: dict = {}

    def load(self) -> S1GeomConfig:
        """Charge et retourne la configuration complète."""
        found = self._load_json()
        config = self._build_config(found)
        self._log_summary(config)
        return config

    def _load_json(self) -> bool:
        """Charge le fichier JSON. Retourne False si le fichier est absent."""
        if not self.config_path.exists():
            self.logger.debug(
                f"Pas de fichier {self.config_path}, valeurs par défaut utilisées"
            )
            self.cfg = {}
            return False
        self.logger.info(f"Chargement configuration depuis {self.config_path}")
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                self.cfg = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"JSON invalide dans {self.config_path}: {e}",
                config_path=str(self.config_path)
            ) from e
        if not isinstance(self.cfg, dict):
            raise ConfigError(
                "La racine de la configuration doit être un objet JSON",
                config_path=str(self.config_path)
            )
        return True

    def _build_config(self, found: bool) -> S1GeomConfig:
        """Construit l'objet de configuration."""
        return S1GeomConfig(
            tolerances=self._parse_tolerances(),
            contracts=self._parse_contracts(),
            logging=self._parse_logging(),
            source=self.config_path if found else None
        )

    # =========================================================================
    # PARSERS DE SECTIONS
    # =========================================================================

    def _section(self, name: str) -> dict:
        c = self.cfg.get(name, {})
        if not isinstance(c, dict):
            raise ConfigError(
                f"La section '{name}' doit être un objet JSON",
                config_path=str(self.config_path),
                key=name
            )
        return c

    def _float(self, section: str, key: str, default: float) -> float:
        """Lit une valeur numérique positive ou nulle."""
        raw = self._section(section).get(key, default)
        try:
            value = float(raw)
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"Valeur non numérique pour {section}.{key}: {raw!r}",
                config_path=str(self.config_path),
                key=f"{section}.{key}"
            ) from e
        if value < 0:
            raise ConfigError(
                f"{section}.{key} doit être positif ou nul (reçu {value})",
                config_path=str(self.config_path),
                key=f"{section}.{key}"
            )
        return value

    def _parse_tolerances(self) -> ToleranceConfig:
        """Parse la section tolerances."""
        return ToleranceConfig(
            approx_max_error=self._float("tolerances", "approx_max_error", 1e-9)
        )

    def _parse_contracts(self) -> ContractConfig:
        """Parse la section contracts."""
        c = self._section("contracts")
        return ContractConfig(
            check_preconditions=bool(c.get("check_preconditions", True))
        )

    def _parse_logging(self) -> LoggingConfig:
        """Parse la section logging."""
        c = self._section("logging")
        return LoggingConfig(
            log_dir=str(c.get("log_dir", "logs")),
            log_level=str(c.get("log_level", "INFO")).upper()
        )

    def _log_summary(self, config: S1GeomConfig):
        """Log le résumé de la configuration."""
        self.logger.info("Configuration chargée")
        self.logger.info(f"  Source: {config.source or 'valeurs par défaut'}")
        self.logger.info(f"  approx_max_error: {config.tolerances.approx_max_error:g}")
        self.logger.info(
            f"  Préconditions: {'ON' if config.contracts.check_preconditions else 'OFF'}"
        )


def load_config(config_path: Optional[Path] = None) -> S1GeomConfig:
    """
    Charge la configuration depuis un fichier JSON.

    Args:
        config_path: Chemin du fichier. Par défaut, la variable
            d'environnement S1GEOM_CONFIG, sinon data/config.json.

    Returns:
        S1GeomConfig: configuration complète

    Raises:
        ConfigError: Si le JSON est invalide ou une valeur incorrecte
    """
    if config_path is None:
        config_path = Path(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))
    return ConfigLoader(Path(config_path)).load()


# ============================================================================
# INSTANCE PARTAGÉE
# ============================================================================

DEFAULT_CONFIG = S1GeomConfig()

_config: Optional[S1GeomConfig] = None


def get_config() -> S1GeomConfig:
    """
    Retourne la configuration partagée.

    Sans set_config() préalable, retourne DEFAULT_CONFIG sans lire de fichier.
    """
    if _config is None:
        return DEFAULT_CONFIG
    return _config


def set_config(config: S1GeomConfig) -> None:
    """Installe la configuration partagée (ex: set_config(load_config()))."""
    global _config
    _config = config


def reset_config() -> None:
    """Revient aux valeurs par défaut."""
    global _config
    _config = None
