"""Repository interfaces for the Pinbook domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from pinbook.domain.repository.post import PostRepository
from pinbook.domain.repository.user import UserRepository

__all__ = [
    "PostRepository",
    "UserRepository",
]
