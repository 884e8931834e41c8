"""
Configuration du logging pour glossary-compliance.

Chaque module obtient son logger via get_logger(__name__) :
- console (stderr) via tqdm.write(), sans casser la barre de progression
  du parcours du corpus
- fichier logs/run_YYYYMMDD_HHMMSS/compliance.log, créé seulement au premier
  message (un run sans avertissement ne laisse rien sur disque)

Les avertissements récupérables (lignes de glossaire invalides, documents
cibles manquants...) sont aussi écrits dans le rapport ; le fichier de log
garde en plus le détail DEBUG de chaque paire.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from .config import Logger_Level

DEFAULT_LOG_FILENAME = "compliance.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogSession:
    """
    Singleton qui fixe le répertoire de logs du run : logs/run_YYYYMMDD_HHMMSS/

    Le répertoire n'est créé que par le premier message écrit.
    """

    _instance: Optional["LogSession"] = None
    _session_dir: Optional[Path] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if LogSession._session_dir is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            LogSession._session_dir = Path("logs") / f"run_{timestamp}"

    @classmethod
    def get_session_dir(cls) -> Path:
        if cls._session_dir is None:
            cls()
        assert cls._session_dir is not None
        return cls._session_dir

    @classmethod
    def reset(cls):
        """Reset la session (utile pour les tests)."""
        cls._instance = None
        cls._session_dir = None


class TqdmLoggingHandler(logging.Handler):
    """Écrit les logs console avec tqdm.write() pour préserver la barre de progression."""

    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
        except Exception:
            self.handleError(record)


class LazyFileHandler(logging.Handler):
    """FileHandler créé au premier message seulement."""

    def __init__(self, filename: Path, level: int = logging.NOTSET):
        super().__init__(level)
        self.filename = filename
        self._handler: Optional[logging.FileHandler] = None

    def emit(self, record):
        try:
            if self._handler is None:
                self.filename.parent.mkdir(parents=True, exist_ok=True)
                self._handler = logging.FileHandler(self.filename, encoding="utf-8")
                self._handler.setFormatter(self.formatter)
            self._handler.emit(record)
        except Exception:
            self.handleError(record)

    def close(self):
        if self._handler:
            self._handler.close()
        super().close()


def setup_logger(name: str, log_filename: str = DEFAULT_LOG_FILENAME) -> logging.Logger:
    """
    Configure un logger avec sortie console et fichier de session.

    Les niveaux viennent de config.Logger_Level (console WARNING, fichier DEBUG).

    Args:
        name: Nom du logger (généralement __name__ du module)
        log_filename: Nom du fichier dans le répertoire de session

    Returns:
        Logger configuré (inchangé s'il l'était déjà)

    Example:
        >>> logger = setup_logger(__name__)
        >>> logger.warning("Duplicate glossary entry: shelter - albergue")
    """
    logger = logging.getLogger(name)
    logger.setLevel(Logger_Level.level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(Logger_Level.console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    file_handler = LazyFileHandler(LogSession.get_session_dir() / log_filename)
    file_handler.setLevel(Logger_Level.file_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Récupère le logger du module, en le configurant au premier appel."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logger(name)
    return logger
