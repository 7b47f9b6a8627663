"""PostgreSQL repository implementations."""

from pinbook.persistence.repository.post import PostgresPostRepository
from pinbook.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
]
