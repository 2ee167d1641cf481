"""
Interface port pour le service de recherche de metadonnees.

Interface abstraite (port) definissant le contrat du service externe qui
confirme le titre d'une serie ou d'un film. L'implementation concrete
(adaptateur) est le client TheTVDB.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from media_renamer.core.value_objects.media_identity import MediaKind


@dataclass(frozen=True)
class Candidate:
    """
    Proposition de titre retournee par le service de recherche.

    Attributs :
        name : Titre canonique propose
        id : Identifiant spécifique à l'API (optionnel)
        year : Année de sortie/diffusion (optionnelle)
    """

    name: str
    id: Optional[str] = None
    year: Optional[int] = None


class MediaLookupError(Exception):
    """Erreur de base du service de recherche (reseau, HTTP, reponse invalide)."""


class LookupAuthenticationError(MediaLookupError):
    """L'authentification aupres du service a echoue ou n'a pas ete faite."""


class LookupRequestError(MediaLookupError):
    """Une requete de recherche a echoue."""


class ILookupClient(ABC):
    """
    Interface du service de recherche de titres.

    authenticate() doit etre appele une fois avant le premier search().
    Un echec d'authentification est fatal pour toute l'execution.
    """

    @abstractmethod
    async def authenticate(self) -> None:
        """
        S'authentifie aupres du service.

        Raises :
            LookupAuthenticationError : si l'authentification echoue
        """
        ...

    @abstractmethod
    async def search(self, title: str, kind: MediaKind) -> list[Candidate]:
        """
        Recherche un titre.

        Args :
            title : Titre extrait du nom de fichier
            kind : Type de media recherche (serie ou film)

        Retourne :
            Candidats dans l'ordre de pertinence du service (liste vide si aucun)

        Raises :
            MediaLookupError : en cas d'echec de la requete
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tvdb')."""
        ...
