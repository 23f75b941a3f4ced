"""Database handle and session management."""

from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


# Base class for ORM models
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


class Database:
    """Engine and session factory for one process.

    Built once at startup (see ``create_app``) and handed to request handlers
    through ``get_db``. Nothing connects on import.
    """

    def __init__(self, url: str, **engine_options: Any) -> None:
        options: dict[str, Any] = {
            "pool_pre_ping": True,  # Enable connection health checks
            "echo": False,  # Set to True for SQL query logging in development
        }
        if url.startswith("postgresql"):
            options.update(
                pool_size=10,
                max_overflow=20,
                pool_recycle=3600,  # Recycle connections after 1 hour
                isolation_level="READ COMMITTED",
                connect_args={"options": "-c lock_timeout=5000"},  # 5s lock timeout
            )
        elif url.startswith("sqlite"):
            options["connect_args"] = {"check_same_thread": False}
        options.update(engine_options)

        self.url = url
        self.engine = create_engine(url, **options)
        self.session_factory = sessionmaker(
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,  # Prevent lazy loading errors after commit
        )

    def session(self) -> Generator[Session, None, None]:
        """Yield a session and close it afterwards."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def create_all(self) -> None:
        """Create every table registered on ``Base``."""
        # Register models on the metadata before creating tables
        import investor_portal.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()


# Dependency for FastAPI routes
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Yields:
        Session: SQLAlchemy session bound to the application's database handle

    Example:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    database: Database = request.app.state.database
    yield from database.session()
