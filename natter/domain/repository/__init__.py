"""Repository interfaces for the Natter domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from natter.domain.repository.comment import CommentRepository

__all__ = [
    "CommentRepository",
]
