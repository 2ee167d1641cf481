"""
Objets valeur produits par le parcours d'une arborescence.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class WalkEntry:
    """
    Entree du systeme de fichiers decouverte pendant le parcours.

    Attributs:
        path: Chemin complet de l'entree
        is_dir: True si l'entree est un repertoire (liens symboliques suivis)
    """

    path: Path
    is_dir: bool

    @property
    def is_file(self) -> bool:
        return not self.is_dir


@dataclass(frozen=True)
class WalkError:
    """
    Erreur rencontree pendant le parcours (repertoire illisible, racine invalide).

    Attributs:
        path: Repertoire concerne
        error: Exception OSError d'origine
    """

    path: Path
    error: OSError

    def __str__(self) -> str:
        return f"{self.path}: {self.error}"


WalkItem = Union[WalkEntry, WalkError]
