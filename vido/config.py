"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe VIDO_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vido.utils.constants import DEFAULT_DUPLICATE_THRESHOLD, DEFAULT_FUZZY_THRESHOLD

# Trouver le fichier .env à la racine du projet (parent de vido/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe VIDO_.
    Exemple : VIDO_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="VIDO_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///vido.db")

    # Matching des motifs appris
    fuzzy_match_threshold: float = Field(default=DEFAULT_FUZZY_THRESHOLD, ge=0.0, le=1.0)
    duplicate_match_threshold: float = Field(
        default=DEFAULT_DUPLICATE_THRESHOLD, ge=0.0, le=1.0
    )

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file_level: str = Field(default="INFO")
    log_matching: bool = Field(default=False)
    log_file: Path = Field(default=Path("logs/vido.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_level", "log_file_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accepte les niveaux loguru standards, quelle que soit la casse."""
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Niveau de log inconnu: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()
