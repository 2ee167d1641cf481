"""
Tests unitaires pour LookupCache (diskcache reel dans tmp_path).
"""

from pathlib import Path
from typing import Iterator

import pytest

from media_renamer.adapters.api.cache import LookupCache
from media_renamer.core.ports.lookup import Candidate
from media_renamer.core.value_objects import MediaKind


@pytest.fixture
def cache(tmp_path: Path) -> Iterator[LookupCache]:
    cache = LookupCache(tmp_path / "cache")
    yield cache
    cache.close()


class TestLookupCache:
    """Tests du stockage des candidats."""

    def test_make_key(self) -> None:
        assert LookupCache.make_key("tvdb", MediaKind.SERIES, "Paradise") == (
            "tvdb:search:series:Paradise"
        )

    @pytest.mark.asyncio
    async def test_miss_returns_none(self, cache: LookupCache) -> None:
        assert await cache.get_candidates("tvdb", MediaKind.MOVIE, "Conclave") is None

    @pytest.mark.asyncio
    async def test_roundtrip(self, cache: LookupCache) -> None:
        candidates = [Candidate(name="Conclave", id="349383", year=2024)]

        await cache.set_candidates("tvdb", MediaKind.MOVIE, "Conclave", candidates)

        assert await cache.get_candidates("tvdb", MediaKind.MOVIE, "Conclave") == candidates

    @pytest.mark.asyncio
    async def test_empty_result_is_cached(self, cache: LookupCache) -> None:
        await cache.set_candidates("tvdb", MediaKind.SERIES, "Nothing", [])

        assert await cache.get_candidates("tvdb", MediaKind.SERIES, "Nothing") == []

    @pytest.mark.asyncio
    async def test_kind_is_part_of_the_key(self, cache: LookupCache) -> None:
        await cache.set_candidates("tvdb", MediaKind.SERIES, "Paradise", [Candidate("Paradise")])

        assert await cache.get_candidates("tvdb", MediaKind.MOVIE, "Paradise") is None

    @pytest.mark.asyncio
    async def test_clear(self, cache: LookupCache) -> None:
        await cache.set_candidates("tvdb", MediaKind.MOVIE, "Conclave", [Candidate("Conclave")])

        await cache.clear()

        assert await cache.get_candidates("tvdb", MediaKind.MOVIE, "Conclave") is None

    @pytest.mark.asyncio
    async def test_persists_across_instances(self, tmp_path: Path) -> None:
        first = LookupCache(tmp_path / "shared")
        await first.set_candidates("tvdb", MediaKind.MOVIE, "Anora", [Candidate("Anora")])
        first.close()

        second = LookupCache(tmp_path / "shared")
        try:
            assert await second.get_candidates("tvdb", MediaKind.MOVIE, "Anora") == [
                Candidate("Anora")
            ]
        finally:
            second.close()
