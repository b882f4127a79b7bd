"""
Adaptateurs d'entree de l'application.

- cli/ : Interface en ligne de commande (Typer + Rich)
"""
