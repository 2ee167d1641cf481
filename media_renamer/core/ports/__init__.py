"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Port parser :
- IFilenameParser : Classification d'un nom de fichier en épisode ou film

Port recherche : Contrat pour le service externe
- ILookupClient : Recherche de titres (TVDB)
- Candidate : Proposition de titre
- MediaLookupError, LookupAuthenticationError, LookupRequestError : Erreurs

Port système de fichiers :
- IFileSystem : Déplacement, copie, lien symbolique
"""

from media_renamer.core.ports.file_system import IFileSystem
from media_renamer.core.ports.lookup import (
    Candidate,
    ILookupClient,
    LookupAuthenticationError,
    LookupRequestError,
    MediaLookupError,
)
from media_renamer.core.ports.parser import IFilenameParser

__all__ = [
    # Parser
    "IFilenameParser",
    # Recherche
    "Candidate",
    "ILookupClient",
    "LookupAuthenticationError",
    "LookupRequestError",
    "MediaLookupError",
    # Système de fichiers
    "IFileSystem",
]
