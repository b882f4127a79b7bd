"""
Commandes CLI d'apprentissage des motifs (extract, learn, match).
"""

from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from vido.adapters.cli.helpers import (
    console,
    exit_on_errors,
    format_confidence,
    suppress_loguru,
    with_container,
)
from vido.core.entities.learned_pattern import MetadataType


def extract(
    filename: Annotated[str, typer.Argument(help="Nom de fichier a analyser")],
) -> None:
    """
    Affiche le motif extrait d'un nom de fichier, sans rien sauvegarder.

    Exemples:
      vido extract "[Leopard-Raws] Kimetsu no Yaiba - 26 (BD 1920x1080 x264 FLAC).mkv"
      vido extract Breaking.Bad.S01E01.720p.BluRay.x264-DEMAND.mkv
    """
    _extract(filename)


@with_container(requires_db=False)
def _extract(container, filename: str) -> None:
    """Implementation de la commande extract."""
    extracted = container.pattern_extractor().extract(filename)

    table = Table(title=escape(filename), show_header=False)
    table.add_column("Champ", style="cyan")
    table.add_column("Valeur")
    table.add_row("Type", extracted.pattern_type.value)
    table.add_row("Groupe", escape(extracted.fansub_group) or "-")
    table.add_row("Titre", escape(extracted.title_pattern) or "-")
    table.add_row("Regex", escape(extracted.regex) or "-")
    console.print(table)


def learn(
    filename: Annotated[str, typer.Argument(help="Nom du fichier corrige")],
    metadata_id: Annotated[
        str,
        typer.Option("--metadata-id", "-m", help="ID interne des metadonnees choisies"),
    ],
    metadata_type: Annotated[
        MetadataType,
        typer.Option("--metadata-type", "-t", help="Type de metadonnees"),
    ] = MetadataType.SERIES,
    tmdb_id: Annotated[
        Optional[int],
        typer.Option("--tmdb-id", help="ID TMDB des metadonnees"),
    ] = None,
) -> None:
    """
    Apprend un motif a partir d'une correction manuelle.

    Exemples:
      vido learn "[SubsPlease] Frieren - 01 [1080p].mkv" -m series-42 --tmdb-id 209867
      vido learn Inception.2010.1080p.BluRay.mkv -m movie-7 -t movie
    """
    _learn(filename, metadata_id, metadata_type, tmdb_id)


@with_container()
def _learn(
    container,
    filename: str,
    metadata_id: str,
    metadata_type: MetadataType,
    tmdb_id: Optional[int],
) -> None:
    """Implementation de la commande learn."""
    service = container.learning_service()
    with exit_on_errors():
        pattern = service.learn_from_correction(
            filename, metadata_id, metadata_type, tmdb_id=tmdb_id
        )

    console.print(
        f"[green]Motif appris:[/green] {escape(pattern.pattern)} "
        f"[dim]({pattern.pattern_type.value}, id={pattern.id})[/dim]"
    )


def match(
    filename: Annotated[str, typer.Argument(help="Nom de fichier a resoudre")],
    apply: Annotated[
        bool,
        typer.Option("--apply", help="Incremente le compteur du motif trouve"),
    ] = False,
) -> None:
    """
    Cherche le motif appris correspondant a un nom de fichier.

    Exemples:
      vido match "[Leopard-Raws] Kimetsu no Yaiba - 27 [1080p].mkv"
      vido match Braking.Bad.S01E01.mkv --apply
    """
    _match(filename, apply)


@with_container()
def _match(container, filename: str, apply: bool) -> None:
    """Implementation de la commande match."""
    service = container.learning_service()
    with exit_on_errors(), suppress_loguru():
        result = service.find_matching_pattern(filename)

    if result is None:
        console.print("[yellow]Aucun motif appris ne correspond.[/yellow]")
        return

    pattern = result.pattern
    console.print(
        f"[bold]{escape(pattern.pattern)}[/bold] -> {pattern.metadata_type.value} "
        f"{escape(pattern.metadata_id)}"
        + (f" (TMDB {pattern.tmdb_id})" if pattern.tmdb_id else "")
    )
    console.print(
        f"  Type: {result.match_type.value}  Confiance: {format_confidence(result.confidence)}"
    )

    if apply:
        with exit_on_errors():
            service.apply_pattern(pattern.id)
        console.print(f"  [green]Applique[/green] ({pattern.use_count + 1} utilisation(s))")
