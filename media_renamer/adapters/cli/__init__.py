"""Sous-package CLI - re-exporte les commandes publiques."""

from media_renamer.adapters.cli.commands import info, process

__all__ = [
    "info",
    "process",
]
