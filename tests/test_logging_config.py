"""
Tests pour le module s1geom/config/logging_config.py

Ce module teste l'installation du handler fichier, la rotation des
sessions et la fermeture du logging.
"""

import logging
import os
import time
from logging.handlers import RotatingFileHandler

import pytest

from s1geom.config.config_loader import LoggingConfig, S1GeomConfig, set_config
from s1geom.config.logging_config import (
    LOG_FILE_PREFIX,
    _cleanup_old_logs,
    close_logging,
    get_log_file_path,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Restaure les handlers et le niveau du logger racine après le test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    close_logging()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestSetupLogging:
    """Tests pour setup_logging."""

    def test_cree_le_fichier(self, tmp_path, restore_root_logger):
        log_file = setup_logging(log_dir=str(tmp_path / "logs"))
        assert log_file.exists()
        assert log_file.name.startswith(LOG_FILE_PREFIX)
        assert get_log_file_path() == log_file

    def test_niveau(self, tmp_path, restore_root_logger):
        setup_logging(log_dir=str(tmp_path), log_level="debug")
        assert restore_root_logger.level == logging.DEBUG

    def test_niveau_inconnu(self, tmp_path, restore_root_logger):
        setup_logging(log_dir=str(tmp_path), log_level="bavard")
        assert restore_root_logger.level == logging.INFO

    def test_valeurs_de_la_config(self, tmp_path, restore_root_logger):
        log_dir = tmp_path / "depuis_config"
        set_config(S1GeomConfig(logging=LoggingConfig(log_dir=str(log_dir), log_level="WARNING")))
        log_file = setup_logging()
        assert log_file.parent == log_dir
        assert restore_root_logger.level == logging.WARNING

    def test_pas_de_handler_en_double(self, tmp_path, restore_root_logger):
        setup_logging(log_dir=str(tmp_path))
        setup_logging(log_dir=str(tmp_path))
        handlers = [h for h in restore_root_logger.handlers
                    if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1

    def test_messages_ecrits(self, tmp_path, restore_root_logger):
        log_file = setup_logging(log_dir=str(tmp_path))
        logging.getLogger("s1geom.geometry").warning("message de test")
        close_logging()
        content = log_file.read_text(encoding="utf-8")
        assert "s1geom.geometry" in content
        assert "message de test" in content


class TestCleanupOldLogs:
    """Tests pour la suppression des anciennes sessions."""

    def _create_logs(self, directory, count):
        now = time.time()
        files = []
        for i in range(count):
            path = directory / f"{LOG_FILE_PREFIX}2020010{i}_000000.log"
            path.write_text("ancien", encoding="utf-8")
            os.utime(path, (now - 1000 + i, now - 1000 + i))
            files.append(path)
        return files

    def test_garde_les_plus_recents(self, tmp_path):
        files = self._create_logs(tmp_path, 5)
        deleted = _cleanup_old_logs(tmp_path, 2)
        assert sorted(deleted) == sorted(f.name for f in files[:3])
        assert [f.exists() for f in files] == [False, False, False, True, True]

    def test_ignore_les_autres_fichiers(self, tmp_path):
        other = tmp_path / "autre.log"
        other.write_text("x", encoding="utf-8")
        self._create_logs(tmp_path, 3)
        _cleanup_old_logs(tmp_path, 0)
        assert other.exists()

    def test_limite_sessions_dans_setup(self, tmp_path, restore_root_logger):
        self._create_logs(tmp_path, 5)
        setup_logging(log_dir=str(tmp_path), max_log_files=3)
        remaining = list(tmp_path.glob(f"{LOG_FILE_PREFIX}*.log*"))
        assert len(remaining) == 3


class TestCloseLogging:
    """Tests pour close_logging et get_log_file_path."""

    def test_sans_configuration(self, restore_root_logger):
        close_logging()
        assert get_log_file_path() is None

    def test_ferme_les_handlers(self, tmp_path, restore_root_logger):
        setup_logging(log_dir=str(tmp_path))
        close_logging()
        assert get_log_file_path() is None
        assert restore_root_logger.handlers == []
