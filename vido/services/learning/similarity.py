"""
Similarite normalisee entre deux titres, basee sur la distance d'edition.

Utilisee par l'etape floue de la cascade de matching pour rapprocher un titre
extrait ("Braking Bad") d'un titre appris ("Breaking Bad").
"""

from rapidfuzz.distance import Levenshtein


def similarity(a: str, b: str) -> float:
    """
    Calcule la similarite entre deux chaines (0.0 a 1.0).

    La distance de Levenshtein est calculee sur les chaines en minuscules,
    mais normalisee par la longueur maximale des chaines d'origine, comptee
    en octets UTF-8. Un caractere CJK pese donc trois fois plus qu'une lettre
    ASCII dans le denominateur.

    Args:
        a: Premiere chaine
        b: Deuxieme chaine

    Returns:
        1.0 si identiques sans tenir compte de la casse, sinon 1 - distance/longueur
        maximale en octets, jamais negatif
    """
    a_lower = a.lower()
    b_lower = b.lower()

    if a_lower == b_lower:
        return 1.0

    max_len = max(len(a.encode("utf-8")), len(b.encode("utf-8")))
    distance = Levenshtein.distance(a_lower, b_lower)
    return max(0.0, 1.0 - distance / max_len)
