"""
Configuration du logging de Vido via loguru.

Deux sorties :
- stderr : messages courts et colorés, au niveau log_level
- fichier : JSON avec rotation, au niveau log_file_level

La cascade de matching journalise chaque étape en DEBUG. Ces traces sont
volumineuses (une ligne par fichier résolu) : elles ne vont dans le fichier
que si log_matching est activé (VIDO_LOG_MATCHING=1), quel que soit
log_file_level.
"""

import sys
from typing import Callable

from loguru import logger

from vido.config import Settings

# Modules dont les traces DEBUG décrivent la cascade de matching
MATCHING_LOGGER_PREFIX = "vido.services.learning"


def file_filter(min_level: str, trace_matching: bool) -> Callable[[dict], bool]:
    """
    Construit le filtre du handler fichier.

    Args:
        min_level: Niveau minimum des enregistrements conservés
        trace_matching: Conserve aussi les traces DEBUG de la cascade

    Returns:
        Fonction loguru record -> bool
    """
    min_no = logger.level(min_level).no

    def keep(record: dict) -> bool:
        if record["level"].no >= min_no:
            return True
        return trace_matching and (record["name"] or "").startswith(MATCHING_LOGGER_PREFIX)

    return keep


def configure_logging(settings: Settings) -> None:
    """Installe les handlers stderr et fichier décrits par les paramètres."""
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",  # Le tri est fait par file_filter
        filter=file_filter(settings.log_file_level, settings.log_matching),
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configuré",
        log_file=str(settings.log_file),
        log_matching=settings.log_matching,
    )
