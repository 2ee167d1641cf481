"""
Configuration de l'application via pydantic-settings.

La configuration est lue depuis un fichier TOML (par defaut
~/.media-renamer/config.toml, ou le chemin passe avec --config). Si le
fichier n'existe pas, un fichier commente contenant les valeurs par defaut
est cree. Un fichier illisible ou invalide n'interrompt pas l'execution :
l'erreur est journalisee et les valeurs par defaut sont utilisees.

Chaque parametre peut aussi etre fourni par une variable d'environnement
avec le prefixe MEDIARENAMER_ (les valeurs du fichier sont prioritaires).
"""

import os
import tomllib
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Repertoire de configuration (surchargeable pour les tests et les conteneurs)
CONFIG_DIR_ENV = "MEDIARENAMER_CONFIG_DIR"
DEFAULT_CONFIG_DIR = Path("~/.media-renamer")
CONFIG_FILE_NAME = "config.toml"

# Valeur de la cle API dans le fichier genere, a remplacer par l'utilisateur
API_KEY_PLACEHOLDER = "<ENTER HERE THE TVDB API KEY>"

DEFAULT_CONFIG_TEMPLATE = f"""\
# Configuration de media-renamer

# Cle API TVDB (https://thetvdb.com/api-information)
tvdb_api_key = "{API_KEY_PLACEHOLDER}"

# Extensions des fichiers a traiter (sans le point)
extensions = ["mkv", "srr"]

# Expressions regulieres des series, essayees dans l'ordre
# Groupes nommes obligatoires : name, season, episode
tv_regex = [
    '(?<name>.*) [Ss](?<season>[0-9]+)[Ee](?<episode>[0-9]+)',  # Series Name S01E01
]

# Expressions regulieres des films, essayees apres celles des series
# Groupes nommes obligatoires : name, year
movie_regex = [
    '(?<name>.*) (?<year>[0-9]+) ',  # Movie Name 2025
]

# Remplacements litteraux appliques avant les expressions, dans l'ordre
replacements = [
    [".", " "],
]

# Les repertoires portant ces noms ne sont pas parcourus
ignored_dirs = ["Sample", "sample", "Samples", "samples"]
"""


def get_config_dir() -> Path:
    """Repertoire de configuration : $MEDIARENAMER_CONFIG_DIR ou ~/.media-renamer."""
    return Path(os.environ.get(CONFIG_DIR_ENV) or DEFAULT_CONFIG_DIR).expanduser()


def default_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


class Settings(BaseSettings):
    """Paramètres de l'application.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIARENAMER_.
    Exemple : MEDIARENAMER_TVDB_API_KEY=xxxx

    Les listes se passent en JSON dans l'environnement.
    Exemple : MEDIARENAMER_EXTENSIONS='["mkv", "mp4"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIARENAMER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Clé API TVDB (obligatoire pour traiter des fichiers)
    tvdb_api_key: Optional[str] = Field(default=None)

    # Filtrage et parsing
    extensions: list[str] = Field(default_factory=lambda: ["mkv", "srr"])
    tv_regex: list[str] = Field(
        default_factory=lambda: [
            "(?<name>.*) [Ss](?<season>[0-9]+)[Ee](?<episode>[0-9]+)",
        ]
    )
    movie_regex: list[str] = Field(
        default_factory=lambda: [
            "(?<name>.*) (?<year>[0-9]+) ",
        ]
    )
    replacements: list[tuple[str, str]] = Field(default_factory=lambda: [(".", " ")])
    ignored_dirs: list[str] = Field(
        default_factory=lambda: ["Sample", "sample", "Samples", "samples"]
    )

    # Cache des recherches TVDB (defaut: <config_dir>/cache)
    cache_dir: Optional[Path] = Field(default=None)

    @field_validator("tvdb_api_key", mode="before")
    @classmethod
    def blank_api_key(cls, v: Optional[str]) -> Optional[str]:
        """Une clé vide ou laissée au placeholder équivaut à une clé absente."""
        if v is None:
            return None
        v = str(v).strip()
        if not v or v == API_KEY_PLACEHOLDER:
            return None
        return v

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Retire le point initial et met en minuscules (".MKV" -> "mkv")."""
        return [ext.strip().lstrip(".").lower() for ext in v if ext.strip().lstrip(".")]

    @field_validator("cache_dir", mode="before")
    @classmethod
    def expand_path(cls, v: Union[str, Path, None]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @property
    def tvdb_enabled(self) -> bool:
        """Vérifie si l'API TVDB est configurée."""
        return self.tvdb_api_key is not None

    @property
    def search_cache_dir(self) -> Path:
        return self.cache_dir or get_config_dir() / "cache"

    def extension_matches(self, extension: Optional[str]) -> bool:
        """Vérifie si une extension (sans le point) fait partie des extensions traitées."""
        return extension is not None and extension.lower() in self.extensions


def write_default_config(path: Path) -> bool:
    """
    Ecrit le fichier de configuration par defaut.

    Les repertoires parents sont crees si necessaire.

    Returns:
        True si le fichier a ete ecrit, False en cas d'erreur (journalisee)
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not write default configuration to {path}: {e}")
        logger.warning("Continuing with defaults")
        return False
    logger.info(f"Default configuration written to {path}")
    return True


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Charge la configuration depuis un fichier TOML.

    Args:
        config_path: Chemin du fichier (defaut: <config_dir>/config.toml)

    Returns:
        Settings lus depuis le fichier, ou les valeurs par defaut si le
        fichier est illisible ou invalide.
    """
    path = Path(config_path).expanduser() if config_path else default_config_path()

    if not path.exists():
        write_default_config(path)

    logger.info(f"Reading configuration from {path}")
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
        # Une cle laissee au placeholder ne masque pas MEDIARENAMER_TVDB_API_KEY
        if data.get("tvdb_api_key") == API_KEY_PLACEHOLDER:
            del data["tvdb_api_key"]
        return Settings(**data)
    except OSError as e:
        logger.error(f"Could not read config {path}: {e}")
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Could not parse config {path}: {e}")
    except ValidationError as e:
        logger.error(f"Invalid config {path}: {e}")

    logger.warning("Continuing with defaults")
    return Settings()
