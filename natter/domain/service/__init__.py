"""Domain services."""

from .base import Service
from .comment_service import CommentService, CommentThread, build_threads
from .identity_service import IdentityProvider, IdentityVerifier, extract_bearer_token
from .rate_limiter import RateLimiter, hash_ip
from .sanitizer import CommentSubmission, SanitizedComment, sanitize_submission

__all__ = [
    "CommentService",
    "CommentSubmission",
    "CommentThread",
    "IdentityProvider",
    "IdentityVerifier",
    "RateLimiter",
    "SanitizedComment",
    "Service",
    "build_threads",
    "extract_bearer_token",
    "hash_ip",
    "sanitize_submission",
]
