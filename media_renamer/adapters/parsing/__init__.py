"""
Adaptateurs de parsing pour media-renamer.

Ce package contient l'implementation concrete de IFilenameParser:
- RegexFilenameParser: Parse les noms de fichiers avec une chaine ordonnee d'expressions regulieres
"""

from media_renamer.adapters.parsing.regex_parser import RegexFilenameParser

__all__ = ["RegexFilenameParser"]
