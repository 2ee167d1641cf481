"""
Tests unitaires pour le calcul des chemins de destination.
"""

from pathlib import Path, PurePath

import pytest

from media_renamer.core.value_objects import Movie, ParsedFile, TvEpisode
from media_renamer.services.path_resolver import (
    FALLBACK_TITLE,
    resolve,
    resolve_parsed,
    sanitize_title,
)


class TestResolveEpisode:
    """Format TV/<Titre>/Season N/<Titre> - sSSeEE.ext"""

    def test_episode_path(self) -> None:
        path = resolve(TvEpisode("Paradise (2025)", 1, 4), "mkv")

        assert path == PurePath(
            "TV", "Paradise (2025)", "Season 1", "Paradise (2025) - s01e04.mkv"
        )

    def test_season_folder_is_not_padded(self) -> None:
        path = resolve(TvEpisode("Doctor Who", 12, 3), "mkv")
        assert path.parent.name == "Season 12"

    def test_numbers_of_three_digits_are_not_truncated(self) -> None:
        path = resolve(TvEpisode("One Piece", 1, 1071), "mkv")
        assert path.name == "One Piece - s01e1071.mkv"

    def test_season_zero(self) -> None:
        path = resolve(TvEpisode("Andor", 0, 1), "srr")
        assert path == PurePath("TV", "Andor", "Season 0", "Andor - s00e01.srr")


class TestResolveMovie:
    """Format Movies/<Titre> (<Annee>)/<Titre> (<Annee>).ext"""

    def test_movie_path(self) -> None:
        path = resolve(Movie("Conclave", 2024), "mkv")

        assert path == PurePath("Movies", "Conclave (2024)", "Conclave (2024).mkv")

    def test_is_relative(self) -> None:
        assert not resolve(Movie("Conclave", 2024), "mkv").is_absolute()


class TestResolveProperties:
    """Proprietes generales du calcul de chemin."""

    def test_deterministic(self) -> None:
        identity = TvEpisode("Paradise", 1, 4)
        assert resolve(identity, "mkv") == resolve(identity, "mkv")

    def test_series_and_movies_never_share_a_root(self) -> None:
        tv = resolve(TvEpisode("Same", 2024, 1), "mkv")
        movie = resolve(Movie("Same", 2024), "mkv")

        assert tv.parts[0] == "TV"
        assert movie.parts[0] == "Movies"
        assert tv != movie

    def test_distinct_episodes_give_distinct_paths(self) -> None:
        paths = {
            resolve(TvEpisode("Show", season, episode), "mkv")
            for season in (1, 2, 10)
            for episode in (1, 2, 10, 100)
        }
        assert len(paths) == 12

    def test_resolve_parsed(self) -> None:
        parsed = ParsedFile(Movie("Conclave", 2024), "mkv")
        assert resolve_parsed(parsed) == resolve(parsed.identity, "mkv")

    def test_rejects_unknown_identity(self) -> None:
        with pytest.raises(TypeError):
            resolve("Conclave", "mkv")  # type: ignore[arg-type]


class TestSanitizeTitle:
    """Nettoyage des titres utilises comme composants de chemin."""

    def test_plain_title_unchanged(self) -> None:
        assert sanitize_title("Star Wars Skeleton Crew") == "Star Wars Skeleton Crew"

    @pytest.mark.parametrize(
        "title, expected",
        [
            ("Mission: Impossible", "Mission- Impossible"),
            ("AC/DC Live", "AC-DC Live"),
            ("What?", "What"),
        ],
    )
    def test_special_characters(self, title: str, expected: str) -> None:
        assert sanitize_title(title) == expected

    def test_empty_title_falls_back(self) -> None:
        assert sanitize_title("   ") == FALLBACK_TITLE

    def test_title_cannot_add_path_components(self) -> None:
        path = resolve(Movie("../../etc/passwd", 2024), "mkv")

        assert len(path.parts) == 3
        assert ".." not in path.parts

    def test_separator_in_series_title(self) -> None:
        path = resolve(TvEpisode("Love/Death/Robots", 1, 1), "mkv")
        assert path.parts[1] == "Love-Death-Robots"

    @pytest.mark.parametrize("title", [".", "..", " .. ", "..."])
    def test_dot_titles_fall_back(self, title: str) -> None:
        assert sanitize_title(title) == FALLBACK_TITLE

    @pytest.mark.parametrize("title", [".", "..", " .. "])
    def test_dot_titles_stay_inside_series_root(self, title: str) -> None:
        path = resolve(TvEpisode(title, 1, 4), "mkv")

        assert path == PurePath("TV", "Unknown", "Season 1", "Unknown - s01e04.mkv")
        assert ".." not in path.parts

    @pytest.mark.parametrize("title", [".", ".."])
    def test_dot_titles_stay_inside_movies_root(self, title: str) -> None:
        path = resolve(Movie(title, 2024), "mkv")

        assert path == PurePath("Movies", "Unknown (2024)", "Unknown (2024).mkv")

    def test_title_keeps_inner_dots(self) -> None:
        assert sanitize_title("Mr. Robot") == "Mr. Robot"


class TestNameLength:
    """Chaque composant du chemin tient dans 255 octets."""

    @pytest.mark.parametrize("title", ["a" * 300, "é" * 200, "剧" * 120])
    def test_episode_components(self, title: str) -> None:
        path = resolve(TvEpisode(title, 12, 1071), "mkv")

        assert all(len(part.encode("utf-8")) <= 255 for part in path.parts)
        assert path.name.endswith(" - s12e1071.mkv")

    @pytest.mark.parametrize("title", ["a" * 300, "é" * 200])
    def test_movie_components(self, title: str) -> None:
        path = resolve(Movie(title, 2024), "mkv")

        assert all(len(part.encode("utf-8")) <= 255 for part in path.parts)
        assert path.name.endswith(" (2024).mkv")

    def test_short_title_is_not_truncated(self) -> None:
        path = resolve(TvEpisode("Andor", 1, 1), "mkv")
        assert path.name == "Andor - s01e01.mkv"


class TestEndToEnd:
    """Du nom de fichier au chemin final, configuration par defaut."""

    def test_paradise(self, default_parser) -> None:
        parsed = default_parser.parse(Path("Paradise.2025.S01E04.480p.x264-RUBiK.mkv"))

        assert resolve_parsed(parsed) == PurePath(
            "TV", "Paradise 2025", "Season 1", "Paradise 2025 - s01e04.mkv"
        )

    def test_conclave(self, default_parser) -> None:
        parsed = default_parser.parse(Path("Conclave.2024.2160p.UHD.BluRay.x265-SURCODE.mkv"))

        assert resolve_parsed(parsed) == PurePath(
            "Movies", "Conclave (2024)", "Conclave (2024).mkv"
        )
