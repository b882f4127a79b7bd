"""Sous-package CLI commands - re-exporte les commandes publiques."""

from vido.adapters.cli.commands.learning_commands import (
    extract,
    learn,
    match,
)
from vido.adapters.cli.commands.pattern_commands import (
    patterns_app,
    patterns_delete,
    patterns_list,
    patterns_show,
    patterns_stats,
)

__all__ = [
    "extract",
    "learn",
    "match",
    "patterns_app",
    "patterns_delete",
    "patterns_list",
    "patterns_show",
    "patterns_stats",
]
