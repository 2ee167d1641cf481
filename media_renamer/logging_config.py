"""
Journalisation loguru de media-renamer.

Deux destinations :
- la console (stderr), en couleur, au niveau choisi par -v / -q
- log.txt dans le répertoire de configuration, une ligne JSON par message,
  avec rotation et compression des anciens fichiers
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from media_renamer.config import get_config_dir

LOG_FILE_NAME = "log.txt"


def default_log_file() -> Path:
    return get_config_dir() / LOG_FILE_NAME


def level_for(verbose: int = 0, quiet: bool = False) -> str:
    """Niveau console selon les options -v / -q (quiet prioritaire)."""
    if quiet:
        return "ERROR"
    if verbose > 0:
        return "DEBUG"
    return "INFO"


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log (défaut : <config_dir>/log.txt)
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver

    Si le fichier de log ne peut pas être créé, seule la sortie console est active.
    """
    # Supprime le handler par défaut
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON pour l'analyse
    log_file = log_file or default_log_file()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
        )
    except OSError as e:
        logger.error(f"Could not open log file {log_file}: {e}")
        return

    logger.debug(f"Logging configuré ({log_file})")
