"""
Client TVDB API v4 pour la recherche de series et de films.

Implemente ILookupClient : authentification explicite par cle API (token
JWT), puis recherche par titre et par type. Les resultats sont caches et
les erreurs 429 relancees automatiquement.

Reference API: https://thetvdb.github.io/v4-api/
"""

from typing import Any, Optional

import httpx
from loguru import logger

from media_renamer.adapters.api.cache import LookupCache
from media_renamer.adapters.api.retry import RateLimitError, request_with_retry
from media_renamer.core.ports.lookup import (
    Candidate,
    ILookupClient,
    LookupAuthenticationError,
    LookupRequestError,
)
from media_renamer.core.value_objects.media_identity import MediaKind


class TVDBClient(ILookupClient):
    """
    Client TVDB pour la recherche de titres.

    authenticate() doit etre appele avant search(). Si le token expire en
    cours d'execution (401), une seule re-authentification est tentee.

    Attributes:
        BASE_URL: URL de base de l'API TVDB v4

    Example:
        client = TVDBClient(api_key="your-api-key", cache=LookupCache(".cache"))
        await client.authenticate()
        candidates = await client.search("Paradise 2025", MediaKind.SERIES)
        await client.close()
    """

    BASE_URL = "https://api4.thetvdb.com/v4"

    def __init__(
        self,
        api_key: Optional[str],
        cache: Optional[LookupCache] = None,
        max_attempts: int = 5,
    ) -> None:
        """
        Initialise le client TVDB.

        Args:
            api_key: Cle API TVDB (Project API Key depuis le compte TVDB)
            cache: Cache des recherches (optionnel)
            max_attempts: Nombre maximum de tentatives par requete
        """
        self._api_key = api_key
        self._cache = cache
        self._max_attempts = max_attempts
        self._token: Optional[str] = None
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, cree s'il n'existe pas."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                timeout=httpx.Timeout(30.0, connect=10.0),
            )
        return self._client

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    async def authenticate(self) -> None:
        """
        Obtient un token JWT aupres de /login.

        Raises:
            LookupAuthenticationError: cle absente, refus du serveur,
                erreur reseau ou reponse illisible
        """
        if not self._api_key:
            raise LookupAuthenticationError("TVDB API key is not configured")

        try:
            response = await request_with_retry(
                self._get_client(),
                "POST",
                "/login",
                max_attempts=self._max_attempts,
                json={"apikey": self._api_key},
            )
            self._token = response.json()["data"]["token"]
        except httpx.HTTPStatusError as e:
            raise LookupAuthenticationError(
                f"HTTP error: {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, RateLimitError) as e:
            raise LookupAuthenticationError(f"Request error: {e}") from e
        except (ValueError, KeyError, TypeError) as e:
            raise LookupAuthenticationError(f"Parse error: {e!r}") from e

        logger.debug("TVDB token obtained")

    def _get_auth_headers(self) -> dict[str, str]:
        if self._token is None:
            raise LookupAuthenticationError("Unauthenticated")
        return {"Authorization": f"Bearer {self._token}"}

    async def search(self, title: str, kind: MediaKind) -> list[Candidate]:
        """
        Recherche un titre sur TVDB.

        Verifie le cache avant d'appeler l'API.

        Args:
            title: Titre a rechercher
            kind: SERIES ou MOVIE (parametre type de l'API)

        Returns:
            Candidats dans l'ordre retourne par l'API

        Raises:
            LookupAuthenticationError: si authenticate() n'a pas reussi
            LookupRequestError: erreur HTTP, reseau ou reponse illisible
        """
        if self._token is None:
            raise LookupAuthenticationError("Unauthenticated")

        if self._cache is not None:
            cached = await self._cache.get_candidates(self.source, kind, title)
            if cached is not None:
                logger.debug(f"Cache hit for {kind.value} '{title}'")
                return cached

        params = {"q": title, "type": kind.value}
        try:
            response = await self._authorized_get("/search", params)
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise LookupRequestError(f"HTTP error: {e.response.status_code}") from e
        except (httpx.HTTPError, RateLimitError) as e:
            raise LookupRequestError(f"Request error: {e}") from e
        except ValueError as e:
            raise LookupRequestError(f"Parse error: {e}") from e

        candidates = self._parse_search(payload)

        if self._cache is not None:
            await self._cache.set_candidates(self.source, kind, title, candidates)
        return candidates

    async def _authorized_get(self, url: str, params: dict[str, str]) -> httpx.Response:
        """GET authentifie, avec une re-authentification si le token a expire."""
        try:
            return await request_with_retry(
                self._get_client(),
                "GET",
                url,
                max_attempts=self._max_attempts,
                params=params,
                headers=self._get_auth_headers(),
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code != 401:
                raise
            logger.info("TVDB token rejected, authenticating again")

        await self.authenticate()
        return await request_with_retry(
            self._get_client(),
            "GET",
            url,
            max_attempts=self._max_attempts,
            params=params,
            headers=self._get_auth_headers(),
        )

    @staticmethod
    def _parse_search(payload: Any) -> list[Candidate]:
        """
        Convertit la reponse de /search en candidats.

        Les entrees sans nom sont ignorees.

        Raises:
            LookupRequestError: si la reponse n'a pas la forme attendue
        """
        if not isinstance(payload, dict) or not isinstance(payload.get("data", []), list):
            raise LookupRequestError("Parse error: unexpected search reply")

        candidates: list[Candidate] = []
        for item in payload.get("data") or []:
            if not isinstance(item, dict):
                continue
            name = item.get("name")
            if not name:
                continue

            raw_id = item.get("tvdb_id") or item.get("id")
            raw_year = str(item.get("year") or "")
            candidates.append(
                Candidate(
                    name=str(name),
                    id=str(raw_id) if raw_id is not None else None,
                    year=int(raw_year) if raw_year.isdigit() else None,
                )
            )
        return candidates

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tvdb"

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
