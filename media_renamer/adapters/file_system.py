"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles.
Les erreurs sont propagees (OSError) : le service de transfert les journalise.
"""

import shutil
from pathlib import Path

from media_renamer.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Fournit les operations de transfert (move, copy, symlink) et la creation
    des repertoires parents de la destination.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe, lien symbolique casse compris."""
        return path.exists() or path.is_symlink()

    def ensure_parent(self, path: Path) -> None:
        """Cree les repertoires parents si necessaire."""
        path.parent.mkdir(parents=True, exist_ok=True)

    def move(self, source: Path, destination: Path) -> None:
        """
        Deplace un fichier de la source vers la destination.

        shutil.move renomme sur le meme systeme de fichiers et bascule sur
        copie + suppression entre deux systemes de fichiers.
        """
        shutil.move(str(source), str(destination))

    def copy(self, source: Path, destination: Path) -> None:
        """Copie un fichier en preservant ses metadonnees."""
        shutil.copy2(str(source), str(destination))

    def symlink(self, source: Path, link: Path) -> None:
        """
        Cree un lien symbolique absolu vers la source.

        Args:
            source: Fichier reel (doit exister, resolu en chemin absolu)
            link: Chemin ou le lien symbolique sera cree
        """
        target = source.resolve(strict=True)
        link.symlink_to(target)
