"""
Interfaces ports pour le système de fichiers.

Interface abstraite (port) définissant les opérations fichiers nécessaires au
transfert d'un média vers sa destination : déplacement, copie, lien symbolique.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IFileSystem(ABC):
    """
    Interface pour les opérations sur les fichiers.

    Les opérations de transfert lèvent OSError en cas d'échec : c'est au
    service appelant de journaliser l'erreur et de passer au fichier suivant.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe (un lien symbolique cassé compte comme existant)."""
        ...

    @abstractmethod
    def ensure_parent(self, path: Path) -> None:
        """
        Crée récursivement le répertoire parent d'un chemin.

        Raises :
            OSError : si la création échoue
        """
        ...

    @abstractmethod
    def move(self, source: Path, destination: Path) -> None:
        """
        Déplace un fichier, y compris d'un système de fichiers à un autre.

        Raises :
            OSError : si le déplacement échoue
        """
        ...

    @abstractmethod
    def copy(self, source: Path, destination: Path) -> None:
        """
        Copie un fichier en conservant la source.

        Raises :
            OSError : si la copie échoue
        """
        ...

    @abstractmethod
    def symlink(self, source: Path, link: Path) -> None:
        """
        Crée un lien symbolique vers le chemin absolu de la source.

        Args :
            source : Fichier réel (résolu en chemin absolu avant la création)
            link : Chemin où le lien symbolique sera créé

        Raises :
            OSError : si la résolution ou la création échoue
        """
        ...
