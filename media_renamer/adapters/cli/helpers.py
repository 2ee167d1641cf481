"""
Utilitaires partages pour les commandes CLI de media-renamer.

Ce module fournit :
- console : instance Rich Console partagee
- build_container : container initialise avec la configuration chargee
- render_report : tableau Rich du bilan d'une execution
"""

from pathlib import Path
from typing import Optional

from dependency_injector import providers
from rich.console import Console
from rich.table import Table

from media_renamer.config import load_settings
from media_renamer.container import Container
from media_renamer.services.organizer import FileStatus, ProcessReport

console = Console()

_STATUS_LABELS = {
    FileStatus.TRANSFERRED: ("Transferes", "green"),
    FileStatus.SIMULATED: ("Simules (test)", "cyan"),
    FileStatus.ALREADY_EXISTS: ("Destination existante", "yellow"),
    FileStatus.UNPARSED: ("Nom non reconnu", "yellow"),
    FileStatus.NOT_FOUND: ("Absents de TVDB", "yellow"),
    FileStatus.LOOKUP_ERROR: ("Erreurs TVDB", "red"),
    FileStatus.FAILED: ("Echecs de transfert", "red"),
}


def build_container(config_path: Optional[Path] = None) -> Container:
    """
    Cree un container dont la configuration est lue depuis config_path.

    Args:
        config_path: Fichier TOML (defaut: ~/.media-renamer/config.toml)
    """
    container = Container()
    container.config.override(providers.Object(load_settings(config_path)))
    return container


def render_report(report: ProcessReport) -> Table:
    """Cree un tableau Rich resumant une execution."""
    table = Table(title="Bilan", show_header=True, header_style="bold")
    table.add_column("Resultat")
    table.add_column("Fichiers", justify="right")

    for status, (label, style) in _STATUS_LABELS.items():
        count = report.count(status)
        if count:
            table.add_row(f"[{style}]{label}[/{style}]", str(count))

    if report.traversal_errors:
        table.add_row("[red]Erreurs de parcours[/red]", str(len(report.traversal_errors)))
    if report.ignored_extension:
        table.add_row("[dim]Extensions ignorees[/dim]", str(report.ignored_extension))

    table.add_row("[bold]Total traites[/bold]", f"[bold]{report.processed}[/bold]")
    return table
