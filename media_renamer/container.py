"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI. La
configuration est chargee par la commande (fichier --config) puis
injectee avec container.config.override(...).
"""

from dependency_injector import containers, providers

from .adapters.api.cache import LookupCache
from .adapters.api.tvdb_client import TVDBClient
from .adapters.directory_walker import DirectoryWalker
from .adapters.file_system import FileSystemAdapter
from .adapters.parsing.regex_parser import RegexFilenameParser
from .config import Settings
from .services.organizer import OrganizerService
from .services.transferer import TransfererService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.config.override(providers.Object(load_settings(path)))
        organizer = container.organizer_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    filename_parser = providers.Singleton(
        RegexFilenameParser,
        tv_patterns=config.provided.tv_regex,
        movie_patterns=config.provided.movie_regex,
        replacements=config.provided.replacements,
    )
    walker_factory = providers.Object(DirectoryWalker)

    # Cache et client API - Singletons partages pendant une execution
    lookup_cache = providers.Singleton(
        LookupCache,
        cache_dir=config.provided.search_cache_dir,
    )
    tvdb_client = providers.Singleton(
        TVDBClient,
        api_key=config.provided.tvdb_api_key,
        cache=lookup_cache,
    )

    # Services
    transferer_service = providers.Factory(
        TransfererService,
        file_system=file_system,
    )
    organizer_service = providers.Factory(
        OrganizerService,
        filename_parser=filename_parser,
        lookup_client=tvdb_client,
        transferer=transferer_service,
        settings=config,
        walker_factory=walker_factory,
    )
