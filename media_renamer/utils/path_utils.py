"""
Fonctions utilitaires d'extraction des composants d'un nom de fichier.

Ces fonctions ne levent jamais d'exception : l'absence d'un composant
(pas de nom, pas d'extension, nom non representable en texte) est un
resultat normal signale par None, que l'appelant doit traiter.
"""

from pathlib import PurePath
from typing import Optional, Union

PathLike = Union[str, PurePath]


def _as_text(value: str) -> Optional[str]:
    """
    Retourne la valeur si elle est representable en texte, sinon None.

    Sous POSIX, les octets non decodables d'un nom de fichier sont conserves
    sous forme de surrogates (PEP 383) : ils ne sont pas du texte valide.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


def filename(path: PathLike) -> Optional[str]:
    """Retourne le dernier composant du chemin, ou None s'il est absent."""
    name = PurePath(path).name
    if not name or name == "..":
        return None
    return _as_text(name)


def stem(path: PathLike) -> Optional[str]:
    """Retourne le nom du fichier sans sa derniere extension, ou None."""
    if filename(path) is None:
        return None
    return _as_text(PurePath(path).stem)


def extension(path: PathLike) -> Optional[str]:
    """Retourne l'extension sans le point initial, ou None si absente."""
    if filename(path) is None:
        return None
    suffix = PurePath(path).suffix
    if len(suffix) <= 1:
        return None
    return _as_text(suffix[1:])
