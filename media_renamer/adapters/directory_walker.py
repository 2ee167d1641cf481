"""
Parcours paresseux d'une arborescence de telechargements.

DirectoryWalker produit les entrees (fichiers et repertoires) une par une,
sans recursion : la frontiere du parcours est une file de curseurs de listing,
un par repertoire decouvert. Le curseur en tete de file est lu jusqu'a
epuisement, les sous-repertoires rencontres sont ajoutes en fin de file.

Limitation de profondeur : le budget est decremente a chaque epuisement d'un
curseur (et non par niveau de profondeur depuis la racine) et le parcours
s'arrete des que le budget atteint zero, avant de lire le curseur suivant.
Avec max_depth=1 seul le contenu de la racine est produit ; avec
max_depth=2 s'y ajoute le contenu du premier sous-repertoire de la file.
"""

import os
from collections import deque
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from loguru import logger

from media_renamer.core.value_objects import WalkEntry, WalkError, WalkItem
from media_renamer.utils.path_utils import filename


class _ListingCursor:
    """
    Curseur sur le listing d'un repertoire.

    Le repertoire n'est ouvert qu'a la premiere lecture, ce qui limite le
    nombre de descripteurs ouverts aux repertoires deja atteints.
    """

    def __init__(self, path: Path, error: Optional[OSError] = None) -> None:
        self.path = path
        self._error = error
        self._entries: Optional[Iterator[os.DirEntry]] = None

    def open(self) -> None:
        """
        Ouvre le listing s'il ne l'est pas deja.

        Raises:
            OSError: si le repertoire ne peut pas etre ouvert
        """
        if self._error is not None:
            raise self._error
        if self._entries is None:
            self._entries = os.scandir(self.path)

    def next_entry(self) -> Optional[os.DirEntry]:
        """
        Lit l'entree suivante, ou None si le listing est epuise.

        Raises:
            OSError: si la lecture d'une entree echoue
        """
        self.open()
        return next(self._entries, None)

    def close(self) -> None:
        if self._entries is not None:
            self._entries.close()  # type: ignore[attr-defined]
            self._entries = None


def _entry_is_dir(entry: os.DirEntry) -> bool:
    """Un lien symbolique vers un repertoire compte comme un repertoire."""
    try:
        return entry.is_dir()
    except OSError:
        return False


class DirectoryWalker:
    """
    Iterateur a usage unique sur les entrees d'une arborescence.

    Chaque element est soit un WalkEntry, soit un WalkError :
    - racine qui n'est pas un repertoire : un seul WalkError puis fin ;
    - racine illisible : un seul WalkError puis fin ;
    - sous-repertoire illisible : un WalkError, le parcours continue ;
    - entree illisible en cours de listing : un WalkError, la suite du meme
      listing est lue ensuite.

    Les repertoires dont le nom figure dans excluded_dirs ne sont ni produits
    ni parcourus.

    Utilisation:
        for item in DirectoryWalker(Path("~/Downloads"), max_depth=None,
                                    excluded_dirs={"Sample"}):
            if isinstance(item, WalkError):
                logger.error(f"Erreur de parcours: {item}")
            elif item.is_file:
                ...
    """

    def __init__(
        self,
        root: Union[str, Path],
        max_depth: Optional[int] = None,
        excluded_dirs: Iterable[str] = (),
    ) -> None:
        """
        Initialise le parcours.

        Args:
            root: Repertoire racine a parcourir
            max_depth: Budget de profondeur (None = illimite)
            excluded_dirs: Noms exacts de repertoires a ignorer
        """
        root = Path(root)
        self._remaining_depth = max_depth
        self._excluded_dirs = frozenset(excluded_dirs)
        self._frontier: deque[_ListingCursor] = deque()

        if root.is_dir():
            self._frontier.append(_ListingCursor(root))
        else:
            error = NotADirectoryError(f"The file at {root} is not a directory")
            self._frontier.append(_ListingCursor(root, error=error))

    def __iter__(self) -> "DirectoryWalker":
        return self

    def __next__(self) -> WalkItem:
        while self._frontier:
            if self._remaining_depth is not None and self._remaining_depth <= 0:
                break

            cursor = self._frontier.popleft()
            try:
                cursor.open()
            except OSError as error:
                cursor.close()
                return WalkError(cursor.path, error)

            try:
                entry = cursor.next_entry()
            except OSError as error:
                # Erreur sur une entree : le reste du listing sera lu ensuite
                self._frontier.appendleft(cursor)
                return WalkError(cursor.path, error)

            if entry is None:
                # Listing epuise : passer au curseur suivant
                cursor.close()
                if self._remaining_depth is not None:
                    self._remaining_depth -= 1
                continue

            # Le curseur courant peut encore avoir des entrees
            self._frontier.appendleft(cursor)

            path = Path(entry.path)
            is_dir = _entry_is_dir(entry)
            if is_dir:
                if filename(path) in self._excluded_dirs:
                    logger.debug(f"Ignoring directory {path} because excluded")
                    continue
                logger.debug(f"Adding directory to iteration queue {path}")
                self._frontier.append(_ListingCursor(path))

            return WalkEntry(path=path, is_dir=is_dir)

        self.close()
        raise StopIteration

    def close(self) -> None:
        """Ferme les listings encore ouverts et vide la frontiere."""
        while self._frontier:
            self._frontier.popleft().close()
