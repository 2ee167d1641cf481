"""
Calcul du chemin de destination d'un media.

Ce module construit le chemin relatif normalise d'un episode ou d'un film :

Format series : TV/<Titre>/Season <N>/<Titre> - s<SS>e<EE>.ext
Format films  : Movies/<Titre> (<Annee>)/<Titre> (<Annee>).ext

Les titres sont nettoyes avant d'etre utilises comme composants de chemin :
un titre ne peut jamais introduire de separateur de repertoire.
"""

import unicodedata
from pathlib import PurePath

from pathvalidate import sanitize_filename

from media_renamer.core.value_objects.media_identity import (
    MediaIdentity,
    Movie,
    ParsedFile,
    TvEpisode,
)

TV_ROOT = "TV"
MOVIES_ROOT = "Movies"

# Titre de repli quand le nettoyage ne laisse rien
FALLBACK_TITLE = "Unknown"

# Caractères remplacés par un tiret (pathvalidate les supprimerait)
SPECIAL_CHARS_TO_DASH = frozenset({":", "/", "\\", "*", '"', "<", ">", "|"})

# Longueur maximale d'un nom de fichier ou de repertoire, en octets
NAME_MAX_BYTES = 255


def sanitize_title(title: str, max_len: int = NAME_MAX_BYTES) -> str:
    """
    Nettoie un titre pour l'utiliser comme nom de fichier ou de repertoire.

    Transformations appliquees :
    - Normalisation Unicode NFC
    - Caracteres speciaux (: / \\ * " < > |) -> tiret
    - Nettoyage pathvalidate multi-plateforme (caracteres de controle, noms reserves)
    - Troncature a max_len octets
    - Titre vide ou compose uniquement de points ("." , "..") -> "Unknown"

    Args:
        title: Titre issu du parsing ou du service de recherche.
        max_len: Longueur maximale du resultat, en octets UTF-8

    Returns:
        Titre utilisable comme composant de chemin.
    """
    text = unicodedata.normalize("NFC", title)
    for char in SPECIAL_CHARS_TO_DASH:
        text = text.replace(char, "-")
    text = sanitize_filename(
        text, platform="universal", replacement_text="", max_len=max(max_len, 1)
    ).strip()
    if not text.strip("."):
        return FALLBACK_TITLE
    return text


def _title_budget(suffix: str) -> int:
    """Octets laisses au titre dans un nom qui se termine par suffix."""
    return NAME_MAX_BYTES - len(suffix.encode("utf-8"))


def _episode_path(episode: TvEpisode, extension: str) -> PurePath:
    suffix = f" - s{episode.season:02d}e{episode.episode:02d}.{extension}"
    title = sanitize_title(episode.title, max_len=_title_budget(suffix))
    return PurePath(TV_ROOT, title, f"Season {episode.season}", f"{title}{suffix}")


def _movie_path(movie: Movie, extension: str) -> PurePath:
    title = sanitize_title(movie.title, max_len=_title_budget(f" ({movie.year}).{extension}"))
    folder = f"{title} ({movie.year})"
    return PurePath(MOVIES_ROOT, folder, f"{folder}.{extension}")


def resolve(identity: MediaIdentity, extension: str) -> PurePath:
    """
    Construit le chemin relatif de destination.

    Args:
        identity: Episode ou film (titre deja remplace par le candidat retenu)
        extension: Extension du fichier d'origine, sans le point

    Returns:
        Chemin relatif a la racine de sortie.

    Raises:
        TypeError: si identity n'est ni un TvEpisode ni un Movie
    """
    if isinstance(identity, TvEpisode):
        return _episode_path(identity, extension)
    if isinstance(identity, Movie):
        return _movie_path(identity, extension)
    raise TypeError(f"Type de media non supporte: {type(identity).__name__}")


def resolve_parsed(parsed: ParsedFile) -> PurePath:
    """Raccourci : chemin de destination d'un ParsedFile."""
    return resolve(parsed.identity, parsed.extension)
