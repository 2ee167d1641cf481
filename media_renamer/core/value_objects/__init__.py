"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- MediaKind : Type de media (SERIES, MOVIE)
- TvEpisode / Movie : Variantes de MediaIdentity
- MediaIdentity : Union fermee TvEpisode | Movie
- ParsedFile : Identite et extension d'un fichier parse
- WalkEntry / WalkError / WalkItem : Elements produits par le parcours disque
"""

from media_renamer.core.value_objects.media_identity import (
    MediaIdentity,
    MediaKind,
    Movie,
    ParsedFile,
    TvEpisode,
)
from media_renamer.core.value_objects.walk_entry import (
    WalkEntry,
    WalkError,
    WalkItem,
)

__all__ = [
    "MediaIdentity",
    "MediaKind",
    "Movie",
    "ParsedFile",
    "TvEpisode",
    "WalkEntry",
    "WalkError",
    "WalkItem",
]
