"""
Implementation du parser de noms de fichiers par expressions regulieres.

Ce module fournit RegexFilenameParser qui implemente IFilenameParser.
Le nom du fichier (sans extension) est d'abord normalise par une liste
ordonnee de remplacements litteraux, puis confronte aux motifs "TV" puis
aux motifs "film", dans l'ordre de la configuration. Le premier motif qui
fournit tous ses groupes nommes l'emporte.
"""

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, Optional, Sequence

from loguru import logger

from media_renamer.core.ports.parser import IFilenameParser
from media_renamer.core.value_objects.media_identity import (
    MediaIdentity,
    Movie,
    ParsedFile,
    TvEpisode,
)
from media_renamer.utils.path_utils import extension, stem

# Groupes nommes requis par type de motif
TV_GROUPS: tuple[str, ...] = ("name", "season", "episode")
MOVIE_GROUPS: tuple[str, ...] = ("name", "year")

# Syntaxe (?<name>...) -> (?P<name>...), sans toucher aux lookbehind (?<= et (?<!
# ni a une parenthese echappee (\(?<), precedee d'un nombre impair de backslashes
_NAMED_GROUP_SYNTAX = re.compile(r"(?<!\\)((?:\\\\)*)\(\?<(?![=!])")


@dataclass(frozen=True)
class CompiledPattern:
    """
    Motif compile et son texte d'origine (pour les logs).

    Attributs:
        source: Expression telle qu'ecrite dans la configuration
        regex: Expression compilee
    """

    source: str
    regex: re.Pattern[str]

    def match_groups(self, text: str, groups: Sequence[str]) -> Optional[dict[str, str]]:
        """
        Applique le motif et retourne les groupes requis.

        Retourne None si le motif ne correspond pas ou si un des groupes
        requis est absent de la correspondance.
        """
        match = self.regex.search(text)
        if match is None:
            return None

        captured = match.groupdict()
        values: dict[str, str] = {}
        for group in groups:
            value = captured.get(group)
            if value is None:
                return None
            values[group] = value
        return values


def compile_pattern(source: str) -> Optional[CompiledPattern]:
    """
    Compile un motif de la configuration.

    Accepte les groupes nommes ecrits (?<name>...) ou (?P<name>...).

    Args:
        source: Expression reguliere telle qu'ecrite dans la configuration

    Returns:
        CompiledPattern, ou None si l'expression est invalide
    """
    try:
        regex = re.compile(_NAMED_GROUP_SYNTAX.sub(r"\1(?P<", source))
    except re.error as e:
        logger.warning(f"Invalid regex {source} consider fixing in the config file ({e})")
        return None
    return CompiledPattern(source=source, regex=regex)


def _parse_unsigned(value: str) -> Optional[int]:
    """Convertit une capture en entier positif (chiffres ASCII uniquement)."""
    if not value or not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def _valid_title(value: str) -> bool:
    return bool(value.strip())


class RegexFilenameParser(IFilenameParser):
    """
    Parser de noms de fichiers pilote par la configuration.

    Les motifs sont essayes strictement dans l'ordre declare, les motifs TV
    avant les motifs film. Un motif invalide est ignore (avertissement a la
    construction). Un motif qui correspond mais dont une capture manque ou
    n'est pas un entier est traite comme une non-correspondance : on passe
    au motif suivant.

    Example:
        parser = RegexFilenameParser(
            tv_patterns=["(?<name>.*) [Ss](?<season>[0-9]+)[Ee](?<episode>[0-9]+)"],
            movie_patterns=["(?<name>.*) (?<year>[0-9]+) "],
            replacements=[(".", " ")],
        )
        parsed = parser.parse(Path("Paradise.2025.S01E04.480p.x264-RUBiK.mkv"))
        # ParsedFile(identity=TvEpisode("Paradise 2025", 1, 4), extension="mkv")
    """

    def __init__(
        self,
        tv_patterns: Iterable[str] = (),
        movie_patterns: Iterable[str] = (),
        replacements: Iterable[Sequence[str]] = (),
    ) -> None:
        """
        Initialise le parser et compile les motifs.

        Args:
            tv_patterns: Motifs avec les groupes name, season, episode
            movie_patterns: Motifs avec les groupes name, year
            replacements: Paires (recherche, remplacement) appliquees dans l'ordre
        """
        self._replacements: list[tuple[str, str]] = [
            (str(old), str(new)) for old, new in replacements
        ]
        self._tv_patterns = self._compile_all(tv_patterns)
        self._movie_patterns = self._compile_all(movie_patterns)

    @staticmethod
    def _compile_all(sources: Iterable[str]) -> list[CompiledPattern]:
        compiled = (compile_pattern(source) for source in sources)
        return [pattern for pattern in compiled if pattern is not None]

    @property
    def tv_patterns(self) -> list[CompiledPattern]:
        return list(self._tv_patterns)

    @property
    def movie_patterns(self) -> list[CompiledPattern]:
        return list(self._movie_patterns)

    def parse(self, path: PurePath) -> Optional[ParsedFile]:
        """
        Parse le nom d'un fichier et extrait son identite.

        Args:
            path: Chemin du fichier

        Returns:
            ParsedFile, ou None si le nom n'a pas de radical, si aucun motif
            ne correspond, ou si le fichier n'a pas d'extension.
        """
        file_stem = stem(path)
        if file_stem is None:
            return None

        normalized = self.normalize(file_stem)
        logger.debug(f"Applying regex to stem: {normalized}")

        identity = self.parse_stem(normalized)
        if identity is None:
            return None

        file_extension = extension(path)
        if file_extension is None:
            logger.debug(f"No extension for {path}")
            return None

        return ParsedFile(identity=identity, extension=file_extension)

    def normalize(self, text: str) -> str:
        """Applique les remplacements litteraux, chacun sur le resultat du precedent."""
        for old, new in self._replacements:
            logger.debug(f"Applying replacement {old!r} -> {new!r}")
            text = text.replace(old, new)
        return text

    def parse_stem(self, text: str) -> Optional[MediaIdentity]:
        """
        Confronte un radical deja normalise aux motifs TV puis film.

        Returns:
            TvEpisode ou Movie du premier motif complet, sinon None
        """
        for pattern in self._tv_patterns:
            logger.debug(f"Trying TV regex {pattern.source}")
            episode = self._match_episode(pattern, text)
            if episode is not None:
                return episode

        for pattern in self._movie_patterns:
            logger.debug(f"Trying movie regex {pattern.source}")
            movie = self._match_movie(pattern, text)
            if movie is not None:
                return movie

        return None

    def _match_episode(self, pattern: CompiledPattern, text: str) -> Optional[TvEpisode]:
        groups = pattern.match_groups(text, TV_GROUPS)
        if groups is None or not _valid_title(groups["name"]):
            return None

        season = _parse_unsigned(groups["season"])
        episode = _parse_unsigned(groups["episode"])
        if season is None or episode is None:
            return None

        logger.debug(f"Found name: {groups['name']}, season: {season}, episode: {episode}")
        return TvEpisode(title=groups["name"], season=season, episode=episode)

    def _match_movie(self, pattern: CompiledPattern, text: str) -> Optional[Movie]:
        groups = pattern.match_groups(text, MOVIE_GROUPS)
        if groups is None or not _valid_title(groups["name"]):
            return None

        year = _parse_unsigned(groups["year"])
        if year is None:
            return None

        logger.debug(f"Found name: {groups['name']}, year: {year}")
        return Movie(title=groups["name"], year=year)
