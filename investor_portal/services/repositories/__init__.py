"""Repository layer - data access abstraction.

Services use repositories for lookups and inserts instead of querying
SQLAlchemy models directly.

Dependency direction: Services -> Repositories -> Models
"""

from .admin_user_repository import AdminUserRepository
from .exceptions import DuplicateError, NotFoundError, RepositoryError
from .user_repository import UserRepository

__all__ = [
    "AdminUserRepository",
    "DuplicateError",
    "NotFoundError",
    "RepositoryError",
    "UserRepository",
]
