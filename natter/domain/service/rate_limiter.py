"""Per-source comment rate limiting."""

from datetime import datetime, timedelta, timezone

import logfire

from natter.domain.error import RateLimitedError
from natter.domain.repository import CommentRepository
from natter.domain.value import IpHash

from .base import Service


def hash_ip(address: str) -> IpHash:
    """Anonymise a client address into a fixed-width token.

    Rolling hash over the UTF-8 bytes (h = h * 31 + byte, kept to 32 bits),
    rendered as 8 hex digits. Not a cryptographic hash: it only keeps raw
    addresses out of the store.

    Args:
        address: Client network address (any string)

    Returns:
        8-character lowercase hex token
    """
    value = 0
    for byte in address.encode("utf-8"):
        value = ((value << 5) - value + byte) & 0xFFFFFFFF
    return IpHash(f"{value:08x}")


class RateLimiter(Service):
    """Bounds how many comments one source may create per window.

    The count is read from the store on every check, so the limiter holds no
    state. Concurrent submissions from one source can slip past the check
    before either insert lands; the limit is soft.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_comments: int = 3,
        window_seconds: int = 60,
    ) -> None:
        """Initialize rate limiter.

        Args:
            comment_repository: Comment repository
            max_comments: Comments allowed per window
            window_seconds: Window length in seconds
        """
        self.comment_repository = comment_repository
        self.max_comments = max_comments
        self.window_seconds = window_seconds

    async def check(self, ip_hash: IpHash, now: datetime | None = None) -> None:
        """Reject the write if the source already hit the limit.

        Args:
            ip_hash: Anonymised source token
            now: Moment of the new attempt (defaults to current UTC time)

        Raises:
            RateLimitedError: If max_comments or more comments were stored
                within the window ending at now
        """
        now = now or datetime.now(timezone.utc)
        since = now - timedelta(seconds=self.window_seconds)

        with logfire.span("rate_limiter.check", ip_hash=ip_hash.root):
            recent = await self.comment_repository.count_by_ip_hash_since(
                ip_hash, since
            )
            if recent >= self.max_comments:
                logfire.warn(
                    "Comment rate limit hit",
                    ip_hash=ip_hash.root,
                    recent=recent,
                    max_comments=self.max_comments,
                )
                raise RateLimitedError(retry_after_seconds=self.window_seconds)
