"""Unit tests for source hashing and the rate limiter."""

from datetime import datetime, timedelta, timezone

import pytest

from natter.domain.error import RateLimitedError
from natter.domain.repository import CommentRepository
from natter.domain.service import RateLimiter, hash_ip
from natter.domain.value import IpHash
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestHashIp:
    """Tests for hash_ip."""

    def test_empty_string(self):
        assert hash_ip("") == IpHash("00000000")

    def test_known_values(self):
        assert hash_ip("a").root == "00000061"
        # 97 * 31 + 98
        assert hash_ip("ab").root == "00000c21"

    def test_is_deterministic(self):
        assert hash_ip("203.0.113.7") == hash_ip("203.0.113.7")

    def test_different_addresses_differ(self):
        assert hash_ip("203.0.113.7") != hash_ip("203.0.113.8")

    def test_always_eight_hex_digits(self):
        """Long inputs wrap to 32 bits instead of growing."""
        for address in ["unknown", "2001:db8::1", "x" * 1000, "ünïcødé"]:
            token = hash_ip(address).root
            assert len(token) == 8
            assert int(token, 16) < 2**32


class TestRateLimiter:
    """Tests for RateLimiter.check."""

    async def _seed(self, repo, count: int, ip_hash: str, age: timedelta):
        for i in range(count):
            await repo.save(
                make_comment(
                    comment_id=100 + i, ip_hash=ip_hash, created_at=NOW - age
                )
            )

    @pytest.mark.asyncio
    async def test_allows_below_limit(self, unit_env):
        # Arrange
        repo = await unit_env.get(CommentRepository)
        limiter = RateLimiter(repo, max_comments=3, window_seconds=60)
        await self._seed(repo, 2, "aaaaaaaa", timedelta(seconds=10))

        # Act / Assert - no exception
        await limiter.check(IpHash("aaaaaaaa"), now=NOW)

    @pytest.mark.asyncio
    async def test_rejects_at_limit(self, unit_env):
        # Arrange
        repo = await unit_env.get(CommentRepository)
        limiter = RateLimiter(repo, max_comments=3, window_seconds=60)
        await self._seed(repo, 3, "aaaaaaaa", timedelta(seconds=10))

        # Act / Assert
        with pytest.raises(RateLimitedError) as exc_info:
            await limiter.check(IpHash("aaaaaaaa"), now=NOW)

        assert exc_info.value.retry_after_seconds == 60

    @pytest.mark.asyncio
    async def test_comments_at_window_start_count(self, unit_env):
        """The window is inclusive: now - window_seconds still counts."""
        # Arrange
        repo = await unit_env.get(CommentRepository)
        limiter = RateLimiter(repo, max_comments=3, window_seconds=60)
        await self._seed(repo, 3, "aaaaaaaa", timedelta(seconds=60))

        # Act / Assert
        with pytest.raises(RateLimitedError):
            await limiter.check(IpHash("aaaaaaaa"), now=NOW)

    @pytest.mark.asyncio
    async def test_ignores_comments_outside_window(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        limiter = RateLimiter(repo, max_comments=3, window_seconds=60)
        await self._seed(repo, 5, "aaaaaaaa", timedelta(seconds=61))

        await limiter.check(IpHash("aaaaaaaa"), now=NOW)

    @pytest.mark.asyncio
    async def test_counts_other_sources_separately(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        limiter = RateLimiter(repo, max_comments=3, window_seconds=60)
        await self._seed(repo, 3, "bbbbbbbb", timedelta(seconds=1))

        await limiter.check(IpHash("aaaaaaaa"), now=NOW)

    @pytest.mark.asyncio
    async def test_uses_configured_limits(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        limiter = RateLimiter(repo, max_comments=1, window_seconds=600)
        await self._seed(repo, 1, "aaaaaaaa", timedelta(seconds=300))

        with pytest.raises(RateLimitedError) as exc_info:
            await limiter.check(IpHash("aaaaaaaa"), now=NOW)

        assert exc_info.value.retry_after_seconds == 600

    @pytest.mark.asyncio
    async def test_rate_limiter_from_container_uses_defaults(self, unit_env):
        limiter = await unit_env.get(RateLimiter)

        assert limiter.max_comments == 3
        assert limiter.window_seconds == 60
