"""Create database tables without running migrations (development only)."""

import logging

from investor_portal.config import settings
from investor_portal.database import Database

logger = logging.getLogger(__name__)


def create_tables(database: Database | None = None) -> None:
    """Create all tables registered on the model metadata."""
    if database is None:
        database = Database(settings.database_url)
    database.create_all()
    logger.info("Database tables created")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()
