"""
Configuration centralisée du logging pour les applications utilisant s1geom.

La bibliothèque n'installe aucun handler par elle-même : chaque module
utilise logging.getLogger(__name__) (ex: "s1geom.config.config_loader") et
c'est l'application qui appelle setup_logging() au démarrage.

Usage:
    from s1geom.config.logging_config import setup_logging, close_logging

    log_file = setup_logging()
    ...
    close_logging()
"""

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from s1geom.config.config_loader import get_config

LOG_FILE_PREFIX = "s1geom_"
LOG_FORMAT = '%(asctime)s | %(name)-35s | %(levelname)-8s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _cleanup_old_logs(log_path: Path, max_files: int) -> List[str]:
    """
    Supprime les fichiers de log les plus anciens.

    Garde uniquement les `max_files` fichiers les plus récents (rotations
    .log.1, .log.2 comprises).

    Returns:
        Noms des fichiers supprimés
    """
    log_files = sorted(
        log_path.glob(f"{LOG_FILE_PREFIX}*.log*"),
        key=lambda f: f.stat().st_mtime,
        reverse=True
    )

    deleted = []
    for old_file in log_files[max_files:]:
        try:
            old_file.unlink()
            deleted.append(old_file.name)
        except OSError:
            pass  # Fichier verrouillé : il sera supprimé à la prochaine session
    return deleted


def setup_logging(
    log_dir: Optional[str] = None,
    log_level: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
    max_log_files: int = 10
) -> Path:
    """
    Configure le logger racine avec un fichier horodaté par session.

    Args:
        log_dir: Répertoire des logs (défaut: section logging de la config)
        log_level: Niveau ("DEBUG", "INFO", ...) (défaut: config)
        max_bytes: Taille max d'un fichier avant rotation
        backup_count: Nombre de fichiers de backup par rotation
        max_log_files: Nombre max de sessions de log conservées

    Returns:
        Path: Chemin du fichier de log créé
    """
    settings = get_config().logging
    log_dir = log_dir if log_dir is not None else settings.log_dir
    log_level = log_level if log_level is not None else settings.log_level

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    # La session courante compte dans la limite
    deleted = _cleanup_old_logs(log_path, max(max_log_files - 1, 0))

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_path / f"{LOG_FILE_PREFIX}{timestamp}.log"

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Éviter les doublons si setup_logging() est rappelé
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if isinstance(handler, RotatingFileHandler):
            handler.close()

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(file_handler)

    root_logger.info("=" * 70)
    root_logger.info(f"Logging configure - Fichier : {log_file}")
    root_logger.info(f"Niveau : {log_level.upper()}")
    root_logger.info(f"Rotation : {max_bytes / (1024*1024):.0f} MB, {backup_count} backups")
    for name in deleted:
        root_logger.info(f"Log ancien supprimé : {name}")
    root_logger.info("=" * 70)

    return log_file


def get_log_file_path() -> Optional[Path]:
    """
    Retourne le chemin du fichier de log actuel.

    Returns:
        Path du fichier de log ou None si non configuré
    """
    for handler in logging.getLogger().handlers:
        if isinstance(handler, RotatingFileHandler):
            return Path(handler.baseFilename)
    return None


def close_logging():
    """Ferme proprement tous les handlers du logger racine."""
    root_logger = logging.getLogger()
    root_logger.info("Fermeture du logging")

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
