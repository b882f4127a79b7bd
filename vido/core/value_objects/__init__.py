"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- ExtractedPattern : Motif extrait d'un nom de fichier (transitoire)
- MatchResult : Resultat du matching d'un nom de fichier contre les motifs appris
- MatchType : Etape de la cascade ayant produit la correspondance
"""

from vido.core.value_objects.extracted_pattern import ExtractedPattern
from vido.core.value_objects.match_result import MatchResult, MatchType

__all__ = [
    "ExtractedPattern",
    "MatchResult",
    "MatchType",
]
