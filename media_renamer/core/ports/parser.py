"""
Interface port pour le parsing de noms de fichiers.

Interface abstraite (port) definissant le contrat pour extraire l'identite
d'un media (episode ou film) depuis le chemin d'un fichier.
"""

from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Optional

from media_renamer.core.value_objects.media_identity import ParsedFile


class IFilenameParser(ABC):
    """
    Interface pour le parsing de noms de fichiers video.

    Definit le contrat pour classer un fichier en episode de serie ou en film
    et en extraire titre, saison/episode ou annee.
    """

    @abstractmethod
    def parse(self, path: PurePath) -> Optional[ParsedFile]:
        """
        Parse le nom d'un fichier et extrait son identite.

        Args:
            path: Chemin du fichier (seul le nom est examine)

        Retourne:
            ParsedFile avec l'identite et l'extension, ou None si le fichier
            n'est pas classable (l'appelant l'ignore avec un avertissement).
        """
        ...
