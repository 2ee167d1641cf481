"""
Objets valeur pour l'identite d'un media extraite d'un nom de fichier.

Une identite est soit un episode de serie TV, soit un film. Les deux variantes
forment une union fermee (MediaIdentity) : tout code qui les distingue doit
traiter les deux cas explicitement.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union


class MediaKind(Enum):
    """Type de media, tel qu'attendu par le service de recherche.

    Valeurs:
        SERIES: Serie TV (avec saison/episode)
        MOVIE: Film (avec annee)
    """

    SERIES = "series"
    MOVIE = "movie"


@dataclass(frozen=True)
class TvEpisode:
    """
    Episode d'une serie TV.

    Attributs:
        title: Titre de la serie (non vide)
        season: Numero de saison
        episode: Numero d'episode dans la saison
    """

    title: str
    season: int
    episode: int

    @property
    def kind(self) -> MediaKind:
        return MediaKind.SERIES

    def with_title(self, title: str) -> "TvEpisode":
        """Retourne une copie avec un nouveau titre, saison et episode inchanges."""
        return replace(self, title=title)


@dataclass(frozen=True)
class Movie:
    """
    Film.

    Attributs:
        title: Titre du film (non vide)
        year: Annee de sortie
    """

    title: str
    year: int

    @property
    def kind(self) -> MediaKind:
        return MediaKind.MOVIE

    def with_title(self, title: str) -> "Movie":
        """Retourne une copie avec un nouveau titre, annee inchangee."""
        return replace(self, title=title)


MediaIdentity = Union[TvEpisode, Movie]


@dataclass(frozen=True)
class ParsedFile:
    """
    Resultat du parsing d'un fichier : identite du media et extension.

    Attributs:
        identity: Episode ou film identifie
        extension: Extension du fichier d'origine, sans le point initial
    """

    identity: MediaIdentity
    extension: str

    @property
    def title(self) -> str:
        return self.identity.title

    @property
    def kind(self) -> MediaKind:
        return self.identity.kind

    def with_title(self, title: str) -> "ParsedFile":
        """Remplace le titre de l'identite en conservant la variante."""
        return replace(self, identity=self.identity.with_title(title))
