"""
Utilitaires partages pour les commandes CLI de Vido.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- exit_on_errors : context manager affichant une erreur et sortant en code 1
- format_confidence : affichage colore d'une confiance de matching
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape

from vido.container import Container
from vido.core.ports.repositories import PatternStoreError

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("vido")
    try:
        yield
    finally:
        loguru_logger.enable("vido")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        def my_command(container, ...):
            service = container.learning_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


@contextmanager
def exit_on_errors():
    """
    Context manager convertissant les erreurs attendues en sortie propre.

    Le message est affiche en rouge puis la commande sort en code 1, sans
    trace Python. Erreurs attendues : saisie invalide et echec du stockage.

    Usage:
        with exit_on_errors():
            service.delete_pattern(pattern_id)
    """
    try:
        yield
    except (ValueError, PatternStoreError) as e:
        console.print(f"[red]Erreur:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def format_confidence(confidence: float) -> str:
    """Confiance en pourcentage, verte au-dessus de 95%, jaune au-dessus de 85%."""
    if confidence >= 0.95:
        color = "green"
    elif confidence >= 0.85:
        color = "yellow"
    else:
        color = "red"
    return f"[{color}]{confidence:.0%}[/{color}]"
