"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject mock services for testing.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If provided, config is ignored.
    """

    def __init__(self, config: Config, db_manager=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from services.categories import CategoryService
        from services.category_references import CategoryReferenceService
        from services.category_uniqueness import CategoryUniquenessEnforcer
        from services.category_usage import CategoryUsageAuditor
        from services.ledgers import LedgerService

        self.category_uniqueness = CategoryUniquenessEnforcer(self.db_manager)
        self.category_usage = CategoryUsageAuditor(self.db_manager)
        self.categories = CategoryService(
            self.db_manager, self.category_uniqueness, self.category_usage
        )
        self.category_references = CategoryReferenceService(self.categories)
        self.ledgers = LedgerService(self.db_manager, self.category_references)
