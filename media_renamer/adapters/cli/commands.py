"""
Commandes CLI (process, info).
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from media_renamer.adapters.cli.helpers import build_container, console, render_report
from media_renamer.config import default_config_path
from media_renamer.core.ports.lookup import LookupAuthenticationError
from media_renamer.services.organizer import ProcessReport
from media_renamer.services.transferer import Action


def process(
    input_path: Annotated[
        Path,
        typer.Option("--input", "-i", help="Fichier ou repertoire a traiter"),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Repertoire de sortie (TV/ et Movies/)"),
    ],
    action: Annotated[
        Action,
        typer.Option("--action", "-a", help="Action a effectuer sur les fichiers"),
    ] = Action.TEST,
    max_depth: Annotated[
        Optional[int],
        typer.Option(
            "--max-depth",
            "-m",
            min=0,
            help="Profondeur maximale du parcours (illimitee si absente)",
        ),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Chemin du fichier de configuration"),
    ] = None,
) -> None:
    """Renomme les medias et cree l'arborescence TV / Movies."""
    report = asyncio.run(_process_async(input_path, output, action, max_depth, config))
    console.print(render_report(report))


async def _process_async(
    input_path: Path,
    output: Path,
    action: Action,
    max_depth: Optional[int],
    config_path: Optional[Path],
) -> ProcessReport:
    """Implementation async de la commande process."""
    container = build_container(config_path)

    organizer = container.organizer_service()
    tvdb = container.tvdb_client()
    try:
        try:
            await organizer.connect()
        except LookupAuthenticationError as e:
            logger.error(f"Error in logging in to API: ({e})")
            raise typer.Exit(1)

        return await organizer.run(
            input_path.expanduser(), output.expanduser(), action, max_depth
        )
    finally:
        await tvdb.close()
        container.lookup_cache().close()


def info(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Chemin du fichier de configuration"),
    ] = None,
) -> None:
    """Affiche la configuration effective."""
    container = build_container(config)
    settings = container.config()
    typer.echo(f"Configuration : {config or default_config_path()}")
    typer.echo(f"API TVDB : {'activée' if settings.tvdb_enabled else 'désactivée'}")
    typer.echo(f"Extensions : {', '.join(settings.extensions)}")
    typer.echo(f"Répertoires ignorés : {', '.join(settings.ignored_dirs)}")
    typer.echo(f"Cache : {settings.search_cache_dir}")
    for pattern in settings.tv_regex:
        typer.echo(f"Motif TV : {pattern}")
    for pattern in settings.movie_regex:
        typer.echo(f"Motif film : {pattern}")
    for old, new in settings.replacements:
        typer.echo(f"Remplacement : {old!r} -> {new!r}")
