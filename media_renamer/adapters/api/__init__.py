"""
Client API externe pour la confirmation des titres.

Ce module fournit l'adaptateur TheTVDB (API v4) et son infrastructure :
- TVDBClient: Authentification et recherche de series/films
- LookupCache: Cache persistant des recherches (24h)
- RateLimitError / request_with_retry: Retry avec backoff exponentiel

Le client implemente ILookupClient defini dans core/ports/lookup.py.
"""

from media_renamer.adapters.api.cache import LookupCache
from media_renamer.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from media_renamer.adapters.api.tvdb_client import TVDBClient

__all__ = [
    "LookupCache",
    "RateLimitError",
    "TVDBClient",
    "request_with_retry",
    "with_retry",
]
