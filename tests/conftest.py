"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire
import pytest

from natter.domain.model import Comment
from natter.domain.value import CommentId, IpHash

# Local only: no console noise, nothing sent
logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    comment_id: int,
    post_slug: str = "hello-world",
    parent_id: int | None = None,
    approved: bool = True,
    created_at: datetime | None = None,
    name: str = "Ann",
    content: str = "Nice post",
    email: str | None = None,
    ip_hash: str = "0000abcd",
) -> Comment:
    """Helper to build stored comments for seeding repositories."""
    return Comment(
        id=CommentId(comment_id),
        post_slug=post_slug,
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        name=name,
        email=email,
        content=content,
        created_at=created_at or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc),
        approved=approved,
        ip_hash=IpHash(ip_hash),
    )


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep host environment from leaking into Settings."""
    for name in (
        "DATABASE__URL",
        "ADMIN__ALLOWED_USERS",
        "MODERATION__AUTO_APPROVE",
        "RATE_LIMIT__MAX_COMMENTS",
        "RATE_LIMIT__WINDOW_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
