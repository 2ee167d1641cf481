"""
Utilitaires pour media-renamer.

Ce module contient les fonctions utilitaires partagees sur les chemins.
"""

from media_renamer.utils.path_utils import extension, filename, stem

__all__ = [
    "extension",
    "filename",
    "stem",
]
