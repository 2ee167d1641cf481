"""
Point d'entrée CLI de media-renamer.

Configure le logging selon les options globales et fournit les commandes CLI.
"""

from typing import Annotated

import typer

from . import __version__
from .adapters.cli.commands import info, process
from .logging_config import configure_logging, level_for

app = typer.Typer(
    name="media-renamer",
    help="Renomme les medias telecharges et cree l'arborescence Plex",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Sortie detaillee (utile pour mettre au point la configuration)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """media-renamer - Rangement des series et films telecharges."""
    configure_logging(log_level=level_for(verbose, quiet))


# Monter les commandes depuis commands.py
app.command()(process)
app.command()(info)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"media-renamer v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
