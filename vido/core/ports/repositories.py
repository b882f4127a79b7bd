"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional

from vido.core.entities.learned_pattern import LearnedPattern


class PatternStoreError(Exception):
    """Echec d'acces au stockage des motifs (disque, reseau, base de donnees)."""


class IPatternRepository(ABC):
    """
    Interface de stockage des motifs appris.

    Les methodes de recherche sont utilisees par la cascade de matching ;
    save, increment_use_count, delete et count servent aux cas d'utilisation
    de gestion des motifs.

    Toute implementation signale ses echecs de stockage via PatternStoreError.
    """

    @abstractmethod
    def get_by_id(self, pattern_id: str) -> Optional[LearnedPattern]:
        """Récupère un motif par son ID."""
        ...

    @abstractmethod
    def find_by_exact_pattern(self, pattern: str) -> Optional[LearnedPattern]:
        """Récupère le motif dont la chaîne d'affichage est exactement `pattern`."""
        ...

    @abstractmethod
    def find_by_fansub_and_title(
        self, fansub_group: str, title_pattern: str
    ) -> list[LearnedPattern]:
        """Liste les motifs ayant exactement ce groupe de fansub et ce titre."""
        ...

    @abstractmethod
    def list_with_regex(self) -> list[LearnedPattern]:
        """Liste les motifs portant une expression régulière non vide."""
        ...

    @abstractmethod
    def list_all(self) -> list[LearnedPattern]:
        """Liste tous les motifs, les plus utilisés puis les plus récents en premier."""
        ...

    @abstractmethod
    def save(self, pattern: LearnedPattern) -> LearnedPattern:
        """Sauvegarde un motif (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def increment_use_count(self, pattern_id: str) -> bool:
        """
        Incrémente le compteur d'utilisation et horodate last_used_at.

        Retourne :
            True si le motif existe, False sinon
        """
        ...

    @abstractmethod
    def delete(self, pattern_id: str) -> bool:
        """Supprime un motif par ID. Retourne True si supprimé."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre total de motifs appris."""
        ...
