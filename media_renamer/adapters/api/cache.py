"""
Cache persistant des resultats de recherche.

Le cache utilise diskcache pour la persistence sur disque : une serie
deja recherchee lors d'une execution precedente ne declenche pas de
nouvelle requete pendant SEARCH_TTL.
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Optional, Union

from diskcache import Cache

from media_renamer.core.ports.lookup import Candidate
from media_renamer.core.value_objects.media_identity import MediaKind


class LookupCache:
    """
    Cache asynchrone des candidats par (source, type, titre).

    Les operations diskcache sont executees dans l'executor par defaut
    pour ne pas bloquer la boucle asyncio.

    Attributes:
        SEARCH_TTL: Duree de vie des resultats de recherche (24h)

    Example:
        cache = LookupCache(cache_dir="~/.media-renamer/cache")
        await cache.set_candidates("tvdb", MediaKind.SERIES, "Paradise", results)
        cached = await cache.get_candidates("tvdb", MediaKind.SERIES, "Paradise")
    """

    SEARCH_TTL = 24 * 60 * 60  # 24 heures en secondes

    def __init__(self, cache_dir: Union[str, Path], ttl: int = SEARCH_TTL) -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Repertoire du cache (cree si inexistant)
            ttl: Duree de vie des entrees en secondes
        """
        self._cache = Cache(str(Path(cache_dir).expanduser()))
        self._ttl = ttl

    @staticmethod
    def make_key(source: str, kind: MediaKind, title: str) -> str:
        """Construit la cle de cache (ex: "tvdb:search:series:Paradise")."""
        return f"{source}:search:{kind.value}:{title}"

    async def get_candidates(
        self, source: str, kind: MediaKind, title: str
    ) -> Optional[list[Candidate]]:
        """
        Recupere les candidats d'une recherche deja faite.

        Returns:
            La liste stockee (eventuellement vide), ou None si absente ou expiree
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, self._cache.get, self.make_key(source, kind, title)
        )

    async def set_candidates(
        self, source: str, kind: MediaKind, title: str, candidates: list[Candidate]
    ) -> None:
        """Stocke les candidats d'une recherche avec le TTL du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None,
            partial(
                self._cache.set,
                self.make_key(source, kind, title),
                list(candidates),
                expire=self._ttl,
            ),
        )

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()
