"""
Service de transfert des fichiers vers leur destination finale.

Ce module applique l'action demandee par l'utilisateur :
- test : journalise l'operation prevue, aucune ecriture
- move : deplace le fichier
- copy : copie le fichier, la source est conservee
- symlink : cree un lien symbolique vers le chemin absolu de la source

Une destination deja existante n'est jamais ecrasee : le fichier est ignore.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger

from media_renamer.core.ports.file_system import IFileSystem


class Action(str, Enum):
    """Action a effectuer sur les fichiers."""

    TEST = "test"
    MOVE = "move"
    COPY = "copy"
    SYMLINK = "symlink"


class TransferStatus(Enum):
    """
    Issue d'une operation de transfert.

    TRANSFERRED: Fichier deplace, copie ou lie
    SIMULATED: Mode test, rien n'a ete ecrit
    SKIPPED_EXISTS: La destination existe deja
    FAILED: Erreur d'entree/sortie
    """

    TRANSFERRED = "transferred"
    SIMULATED = "simulated"
    SKIPPED_EXISTS = "skipped_exists"
    FAILED = "failed"


@dataclass
class TransferResult:
    """
    Resultat d'une operation de transfert.

    Attributs:
        status: Issue de l'operation
        source: Chemin du fichier source
        destination: Chemin de destination calcule
        error: Message d'erreur (si FAILED)
    """

    status: TransferStatus
    source: Path
    destination: Path
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status in (TransferStatus.TRANSFERRED, TransferStatus.SIMULATED)


class TransfererService:
    """
    Service de transfert de fichiers.

    Utilisation:
        transferer = TransfererService(file_system)
        result = transferer.transfer(source, destination, Action.COPY)
        if not result.success:
            print(f"Echec: {result.status.value} {result.error or ''}")
    """

    def __init__(self, file_system: IFileSystem) -> None:
        """
        Initialise le service de transfert.

        Args:
            file_system: Adaptateur systeme de fichiers
        """
        self._fs = file_system

    def transfer(self, source: Path, destination: Path, action: Action) -> TransferResult:
        """
        Transfere un fichier vers sa destination.

        Operations effectuees:
        1. Verification de l'existence de la destination
        2. Creation des repertoires parents (sauf en mode test)
        3. Deplacement, copie ou lien selon l'action

        Les erreurs d'entree/sortie sont journalisees et retournees, jamais levees.

        Args:
            source: Chemin du fichier source
            destination: Chemin de destination complet
            action: Action a effectuer

        Returns:
            TransferResult avec l'issue de l'operation.
        """
        source = Path(source)
        destination = Path(destination)

        if self._fs.exists(destination):
            logger.warning(f"File {destination} already exists: ignoring")
            return TransferResult(TransferStatus.SKIPPED_EXISTS, source, destination)

        if action is Action.TEST:
            logger.info(f"TEST: would move from {source} to {destination}")
            return TransferResult(TransferStatus.SIMULATED, source, destination)

        try:
            self._fs.ensure_parent(destination)
        except OSError as e:
            logger.error(f"Could not create directory {destination.parent}: {e}")
            return TransferResult(TransferStatus.FAILED, source, destination, error=str(e))

        try:
            self._apply(action, source, destination)
        except OSError as e:
            logger.error(f"Could not {action.value} {source} to {destination}: {e}")
            return TransferResult(TransferStatus.FAILED, source, destination, error=str(e))

        logger.info(f"{action.value.capitalize()}: {source} -> {destination}")
        return TransferResult(TransferStatus.TRANSFERRED, source, destination)

    def _apply(self, action: Action, source: Path, destination: Path) -> None:
        if action is Action.MOVE:
            self._fs.move(source, destination)
        elif action is Action.COPY:
            self._fs.copy(source, destination)
        elif action is Action.SYMLINK:
            self._fs.symlink(source, destination)
        else:
            raise ValueError(f"Action non supportee: {action}")
