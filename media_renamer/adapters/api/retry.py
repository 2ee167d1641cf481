"""
Relance des requetes TVDB sur erreur passagere.

Une requete est rejouee, avec un delai exponentiel aleatoire, quand :
- TVDB repond 429 (quota depasse), converti en RateLimitError ;
- la connexion echoue (erreur de transport httpx, timeout).

Toute autre reponse d'erreur (401, 404, 5xx...) remonte sans nouvel essai :
c'est au client TVDB de decider quoi en faire.

Usage:
    response = await request_with_retry(client, "GET", "/search", params=params)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Quota TVDB depasse (HTTP 429).

    Attributes:
        retry_after: Delai demande par le serveur (header Retry-After), en
                     secondes, ou None s'il est absent ou donne sous forme de date.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


# Exceptions considerees comme passageres
RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (RateLimitError, httpx.TransportError)


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Le header Retry-After peut aussi etre une date HTTP : on l'ignore alors."""
    if value is None or not value.strip().isdigit():
        return None
    return int(value.strip())


def _log_retry(state: RetryCallState) -> None:
    error = state.outcome.exception() if state.outcome else None
    logger.debug(f"Nouvelle tentative ({state.attempt_number}) apres erreur: {error}")


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur de coroutine rejouee sur RETRYABLE_EXCEPTIONS.

    Le delai entre deux essais croit exponentiellement (avec jitter) entre
    1 seconde et max_wait. Apres max_attempts essais, la derniere exception
    est relancee telle quelle.
    """
    return retry(
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: int = 60,
    **kwargs,
) -> httpx.Response:
    """
    Envoie une requete et la rejoue tant que l'erreur est passagere.

    Args:
        client: Client httpx (base_url deja configuree)
        method: "GET" ou "POST"
        url: Chemin relatif, ex: "/login"
        max_attempts: Nombre d'essais au total
        max_wait: Plafond du delai entre deux essais, en secondes
        **kwargs: Transmis tels quels a client.request() (json, params, headers)

    Returns:
        La reponse, de statut 2xx

    Raises:
        RateLimitError: 429 persistant
        httpx.TransportError: reseau toujours indisponible
        httpx.HTTPStatusError: tout autre statut d'erreur, sans nouvel essai
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _send() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _send()
