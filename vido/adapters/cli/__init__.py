"""Interface en ligne de commande de Vido (Typer + Rich)."""
