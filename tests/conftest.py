"""
Fixtures pytest partagees pour les tests media-renamer.

Ce module contient les fixtures communes utilisees dans les tests:
- Repertoire de configuration isole (MEDIARENAMER_CONFIG_DIR)
- Capture des messages loguru
- Mocks des interfaces (IFileSystem, IFilenameParser, ILookupClient)
- Settings et parser de test avec la configuration par defaut
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from loguru import logger

from media_renamer.config import CONFIG_DIR_ENV, Settings
from media_renamer.adapters.parsing.regex_parser import RegexFilenameParser
from media_renamer.core.ports.file_system import IFileSystem
from media_renamer.core.ports.lookup import ILookupClient
from media_renamer.core.ports.parser import IFilenameParser


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirige le repertoire de configuration vers un dossier temporaire."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    return config_dir


@pytest.fixture
def log_records() -> Iterator[list[dict]]:
    """
    Capture les enregistrements loguru emis pendant le test.

    Chaque element est le record loguru (cles "level", "message", ...).
    """
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings par defaut, avec une cle API et un cache temporaire."""
    return Settings(tvdb_api_key="test-api-key", cache_dir=tmp_path / "cache")


@pytest.fixture
def default_parser(settings: Settings) -> RegexFilenameParser:
    """Parser configure avec les motifs et remplacements par defaut."""
    return RegexFilenameParser(
        tv_patterns=settings.tv_regex,
        movie_patterns=settings.movie_regex,
        replacements=settings.replacements,
    )


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut aucune destination n'existe et toutes les operations reussissent.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    return mock


@pytest.fixture
def mock_filename_parser() -> MagicMock:
    """Mock de IFilenameParser, a configurer dans chaque test."""
    return MagicMock(spec=IFilenameParser)


@pytest.fixture
def mock_lookup_client() -> MagicMock:
    """
    Mock de ILookupClient.

    authenticate() reussit et search() ne retourne aucun candidat par defaut.
    """
    mock = MagicMock(spec=ILookupClient)
    mock.source = "tvdb"
    mock.authenticate = AsyncMock()
    mock.search = AsyncMock(return_value=[])
    return mock
