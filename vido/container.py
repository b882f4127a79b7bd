"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour l'interface CLI.
Inclut le repository SQLModel des motifs appris et les services d'apprentissage.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import SQLModelLearnedPatternRepository
from .services.learning import LearningService, PatternExtractor


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        service = container.learning_service()
        repo = container.learned_pattern_repository()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repository - Factory pour nouvelle instance avec session fraiche
    learned_pattern_repository = providers.Factory(
        SQLModelLearnedPatternRepository,
        session=session,
    )

    # Extracteur sans etat - Singleton
    pattern_extractor = providers.Singleton(PatternExtractor)

    # Service d'apprentissage - Factory car depend du repository (session fraiche)
    learning_service = providers.Factory(
        LearningService,
        repository=learned_pattern_repository,
        extractor=pattern_extractor,
        fuzzy_threshold=config.provided.fuzzy_match_threshold,
        duplicate_threshold=config.provided.duplicate_match_threshold,
    )
