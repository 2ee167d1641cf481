"""
Service d'organisation des medias telecharges.

Orchestre, fichier par fichier et sequentiellement, la chaine complete :
parcours -> filtre d'extension -> parsing -> recherche TVDB -> chemin de
destination -> transfert.

Aucune erreur propre a un fichier n'interrompt le traitement : chaque
fichier ignore est journalise (WARNING ou ERROR) et compte dans le rapport.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from media_renamer.config import Settings
from media_renamer.core.ports.lookup import ILookupClient, MediaLookupError
from media_renamer.core.ports.parser import IFilenameParser
from media_renamer.core.value_objects import WalkError, WalkItem
from media_renamer.services.path_resolver import resolve_parsed
from media_renamer.services.transferer import Action, TransfererService, TransferStatus
from media_renamer.utils.path_utils import extension

# Fabrique de parcours : (racine, profondeur max, repertoires exclus) -> elements
WalkerFactory = Callable[[Path, Optional[int], Iterable[str]], Iterable[WalkItem]]


class FileStatus(str, Enum):
    """Issue du traitement d'un fichier."""

    TRANSFERRED = "transferred"
    SIMULATED = "simulated"
    UNPARSED = "unparsed"
    NOT_FOUND = "not_found"
    LOOKUP_ERROR = "lookup_error"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"


_TRANSFER_TO_FILE_STATUS = {
    TransferStatus.TRANSFERRED: FileStatus.TRANSFERRED,
    TransferStatus.SIMULATED: FileStatus.SIMULATED,
    TransferStatus.SKIPPED_EXISTS: FileStatus.ALREADY_EXISTS,
    TransferStatus.FAILED: FileStatus.FAILED,
}


@dataclass
class FileOutcome:
    """
    Resultat du traitement d'un fichier.

    Attributs:
        source: Fichier traite
        status: Issue du traitement
        destination: Chemin de destination calcule (si le titre a ete confirme)
        message: Detail de l'erreur eventuelle
    """

    source: Path
    status: FileStatus
    destination: Optional[Path] = None
    message: Optional[str] = None


@dataclass
class ProcessReport:
    """Bilan d'une execution : un FileOutcome par fichier, erreurs de parcours."""

    outcomes: list[FileOutcome] = field(default_factory=list)
    traversal_errors: list[WalkError] = field(default_factory=list)
    ignored_extension: int = 0

    def add(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)

    def count(self, status: FileStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def processed(self) -> int:
        return len(self.outcomes)

    @property
    def skipped(self) -> int:
        return sum(
            1
            for outcome in self.outcomes
            if outcome.status not in (FileStatus.TRANSFERRED, FileStatus.SIMULATED)
        )


class OrganizerService:
    """
    Service orchestrant le traitement des fichiers.

    Coordonne:
    - Le parcours disque (walker_factory)
    - Le parser de noms (IFilenameParser)
    - Le service de recherche (ILookupClient)
    - Le transfert (TransfererService)

    Utilisation:
        organizer = OrganizerService(parser, tvdb, transferer, settings, DirectoryWalker)
        await organizer.connect()
        report = await organizer.run(Path("~/Downloads"), Path("/media"), Action.TEST)
    """

    def __init__(
        self,
        filename_parser: IFilenameParser,
        lookup_client: ILookupClient,
        transferer: TransfererService,
        settings: Settings,
        walker_factory: WalkerFactory,
    ) -> None:
        """
        Initialise le service.

        Args:
            filename_parser: Implementation de IFilenameParser
            lookup_client: Implementation de ILookupClient (authentifie via connect())
            transferer: Service de transfert
            settings: Configuration (extensions, repertoires exclus)
            walker_factory: Fabrique du parcours d'arborescence
        """
        self._parser = filename_parser
        self._lookup = lookup_client
        self._transferer = transferer
        self._settings = settings
        self._walker_factory = walker_factory

    async def connect(self) -> None:
        """
        Authentifie le client de recherche.

        Raises:
            LookupAuthenticationError: echec fatal pour toute l'execution
        """
        logger.info(f"Connecting {self._lookup.source.upper()} client")
        await self._lookup.authenticate()
        logger.info("Client connected")

    async def run(
        self,
        input_path: Path,
        output_dir: Path,
        action: Action,
        max_depth: Optional[int] = None,
    ) -> ProcessReport:
        """
        Traite un fichier isole ou toute une arborescence.

        Args:
            input_path: Fichier ou repertoire d'entree
            output_dir: Racine de sortie (TV/ et Movies/ y sont crees)
            action: Action de transfert
            max_depth: Budget de profondeur du parcours (None = illimite)

        Returns:
            ProcessReport de l'execution
        """
        if input_path.is_file():
            report = ProcessReport()
            if self._settings.extension_matches(extension(input_path)):
                report.add(await self.process_file(input_path, output_dir, action))
            else:
                logger.warning("Input filename extension is not filtered in config, ignoring")
                report.ignored_extension += 1
            return report

        return await self.process_tree(input_path, output_dir, action, max_depth)

    async def process_tree(
        self,
        root: Path,
        output_dir: Path,
        action: Action,
        max_depth: Optional[int] = None,
    ) -> ProcessReport:
        """
        Parcourt une arborescence et traite chaque fichier dont l'extension est configuree.

        Les erreurs de parcours sont journalisees et le parcours continue.
        """
        report = ProcessReport()
        walker = self._walker_factory(root, max_depth, self._settings.ignored_dirs)

        for item in walker:
            if isinstance(item, WalkError):
                logger.error(f"Could not read directory {item.path}: {item.error}")
                report.traversal_errors.append(item)
                continue
            if item.is_dir:
                continue
            if not self._settings.extension_matches(extension(item.path)):
                report.ignored_extension += 1
                continue
            report.add(await self.process_file(item.path, output_dir, action))

        return report

    async def process_file(self, path: Path, output_dir: Path, action: Action) -> FileOutcome:
        """
        Traite un fichier : parsing, recherche, chemin de destination, transfert.

        Le titre extrait du nom de fichier est remplace par le premier candidat
        retourne par la recherche. Sans candidat, le fichier est ignore et
        aucun transfert n'est tente.
        """
        logger.info(f"Processing file {path}")

        parsed = self._parser.parse(path)
        if parsed is None:
            logger.warning(f"Could not parse filename {path}")
            return FileOutcome(path, FileStatus.UNPARSED)

        try:
            candidates = await self._lookup.search(parsed.title, parsed.kind)
        except MediaLookupError as e:
            logger.error(
                f"{self._lookup.source.upper()} error while searching for {parsed.title}: {e}"
            )
            return FileOutcome(path, FileStatus.LOOKUP_ERROR, message=str(e))

        if not candidates:
            logger.warning(
                f"Could not find {parsed.title} on {self._lookup.source.upper()}. Ignoring"
            )
            return FileOutcome(path, FileStatus.NOT_FOUND)

        refined = parsed.with_title(candidates[0].name)
        logger.debug(f"{refined}")

        destination = output_dir / resolve_parsed(refined)
        logger.info(f"Final path: {destination}")

        result = self._transferer.transfer(path, destination, action)
        return FileOutcome(
            path,
            _TRANSFER_TO_FILE_STATUS[result.status],
            destination=destination,
            message=result.error,
        )
