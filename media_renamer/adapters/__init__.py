"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- api/ : Client API externe (TVDB)
- parsing/ : Parsing des noms de fichiers par expressions regulieres

Modules :
- directory_walker : Parcours paresseux de l'arborescence
- file_system : Opérations sur le système de fichiers

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from media_renamer.adapters.directory_walker import DirectoryWalker
from media_renamer.adapters.file_system import FileSystemAdapter
from media_renamer.adapters.parsing.regex_parser import RegexFilenameParser

__all__ = [
    "DirectoryWalker",
    "FileSystemAdapter",
    "RegexFilenameParser",
]
