"""
Point d'entrée CLI de Vido.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from .adapters.cli.commands import extract, learn, match, patterns_app
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="vido",
    help="Apprentissage des motifs de noms de fichiers de la videotheque",
)
container = Container()

app.command()(extract)
app.command()(learn)
app.command()(match)

# Monter patterns_app comme sous-commande
app.add_typer(patterns_app, name="patterns")


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Vido")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Seuil de similarité : {config.fuzzy_match_threshold}")
    typer.echo(f"Seuil de doublon : {config.duplicate_match_threshold}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Trace du matching : {'oui' if config.log_matching else 'non'}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Vido v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(settings)

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de Vido", version=__version__)

    app()


if __name__ == "__main__":
    main()
