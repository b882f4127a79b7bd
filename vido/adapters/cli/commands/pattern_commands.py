"""
Commandes CLI de gestion des motifs appris (patterns list/show/stats/delete).
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

from vido.adapters.cli.helpers import console, exit_on_errors, with_container

# Application Typer pour les commandes patterns
patterns_app = typer.Typer(
    name="patterns",
    help="Gestion des motifs de noms de fichiers appris",
    rich_markup_mode="rich",
)


@patterns_app.command("list")
def patterns_list() -> None:
    """Liste les motifs appris, les plus utilises en premier."""
    _patterns_list()


@with_container()
def _patterns_list(container) -> None:
    """Implementation de la commande patterns list."""
    with exit_on_errors():
        patterns = container.learning_service().list_patterns()

    if not patterns:
        console.print("[yellow]Aucun motif appris.[/yellow]")
        return

    table = Table(title=f"{len(patterns)} motif(s) appris")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Motif", style="bold")
    table.add_column("Type")
    table.add_column("Metadonnees")
    table.add_column("Utilisations", justify="right")

    for pattern in patterns:
        table.add_row(
            pattern.id[:8],
            escape(pattern.pattern),
            pattern.pattern_type.value,
            f"{pattern.metadata_type.value} {escape(pattern.metadata_id)}",
            str(pattern.use_count),
        )
    console.print(table)


@patterns_app.command("show")
def patterns_show(
    pattern_id: Annotated[str, typer.Argument(help="ID du motif")],
) -> None:
    """Affiche le detail d'un motif appris."""
    _patterns_show(pattern_id)


@with_container()
def _patterns_show(container, pattern_id: str) -> None:
    """Implementation de la commande patterns show."""
    with exit_on_errors():
        pattern = container.learning_service().get_pattern(pattern_id)
    if pattern is None:
        console.print(f"[red]Motif introuvable:[/red] {escape(pattern_id)}")
        raise typer.Exit(code=1)

    table = Table(title=escape(pattern.pattern), show_header=False)
    table.add_column("Champ", style="cyan")
    table.add_column("Valeur")
    table.add_row("ID", pattern.id)
    table.add_row("Type", pattern.pattern_type.value)
    table.add_row("Groupe", escape(pattern.fansub_group) or "-")
    table.add_row("Titre", escape(pattern.title_pattern))
    table.add_row("Regex", escape(pattern.pattern_regex) or "-")
    table.add_row("Metadonnees", f"{pattern.metadata_type.value} {escape(pattern.metadata_id)}")
    table.add_row("TMDB", str(pattern.tmdb_id) if pattern.tmdb_id else "-")
    table.add_row("Utilisations", str(pattern.use_count))
    if pattern.last_used_at:
        table.add_row("Derniere utilisation", pattern.last_used_at.strftime("%Y-%m-%d %H:%M"))
    console.print(table)


@patterns_app.command("stats")
def patterns_stats() -> None:
    """Affiche les statistiques des motifs appris."""
    _patterns_stats()


@with_container()
def _patterns_stats(container) -> None:
    """Implementation de la commande patterns stats."""
    with exit_on_errors():
        stats = container.learning_service().get_pattern_stats()

    console.print(f"Motifs appris : [bold]{stats.total_patterns}[/bold]")
    console.print(f"Fichiers resolus : [bold]{stats.total_applied}[/bold]")
    if stats.most_used_pattern:
        console.print(
            f"Plus utilise : [bold]{escape(stats.most_used_pattern)}[/bold] "
            f"({stats.most_used_count} fois)"
        )


@patterns_app.command("delete")
def patterns_delete(
    pattern_id: Annotated[str, typer.Argument(help="ID du motif a supprimer")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Supprime sans confirmation"),
    ] = False,
) -> None:
    """Supprime un motif appris."""
    _patterns_delete(pattern_id, yes)


@with_container()
def _patterns_delete(container, pattern_id: str, yes: bool) -> None:
    """Implementation de la commande patterns delete."""
    service = container.learning_service()
    if not yes and not Confirm.ask(f"Supprimer le motif {escape(pattern_id)} ?"):
        console.print("[yellow]Suppression annulee.[/yellow]")
        return

    with exit_on_errors():
        deleted = service.delete_pattern(pattern_id)
    if not deleted:
        console.print(f"[red]Motif introuvable:[/red] {escape(pattern_id)}")
        raise typer.Exit(code=1)

    console.print(f"[green]Motif supprime:[/green] {escape(pattern_id)}")
