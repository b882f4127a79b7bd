"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IPatternRepository : Stockage des motifs de noms de fichiers appris
- PatternStoreError : Echec du stockage remonte par un adaptateur
"""

from vido.core.ports.repositories import IPatternRepository, PatternStoreError

__all__ = [
    "IPatternRepository",
    "PatternStoreError",
]
