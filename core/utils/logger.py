# core/utils/logger.py
# Logger PadelCoach - v1.1
# Format enrichi, sortie console, niveau DEBUG via DEBUG_MODE.

import os
import logging
import sys

# Niveau par défaut : DEBUG si DEBUG_MODE actif
DEBUG_MODE = os.getenv("DEBUG_MODE", "0") in ("1", "true", "True")
DEFAULT_LEVEL = logging.DEBUG if DEBUG_MODE else logging.INFO

# Loggers créés par get_logger (pour set_level)
_PROJECT_LOGGERS = {}


# =====================================================
# Logger factory compatible avec toute l’architecture
# =====================================================

def get_logger(name: str):
    """
    Retourne un logger configuré avec :
    - format uniforme
    - niveau INFO par défaut (DEBUG si DEBUG_MODE)
    - sortie standard (console)
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(DEFAULT_LEVEL)

        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s ┊ %(name)s ┊ %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _PROJECT_LOGGERS[name] = logger
    return logger


def set_level(level: int):
    """Change le niveau de tous les loggers PadelCoach (ex: --debug en CLI)."""
    for logger in _PROJECT_LOGGERS.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


# =====================================================
# Raccourcis
# =====================================================

root_logger = get_logger("PADELCOACH")


def log_debug(message: str, module: str = "APP"):
    root_logger.debug(f"{module} → {message}")


def log_info(message: str, module: str = "APP"):
    root_logger.info(f"{module} → {message}")


def log_warning(message: str, module: str = "APP"):
    root_logger.warning(f"{module} → {message}")


def log_error(message: str, module: str = "APP"):
    root_logger.error(f"{module} → {message}")
