"""Comment submission validation and sanitisation.

Pure functions: no storage or network access. Validation runs on the trimmed
raw input and stops at the first failed rule; escaping happens once,
afterwards.
"""

import html
import re
from typing import Optional

from pydantic import BaseModel

from natter.domain.error import FieldTooLongError, InvalidEmailError, MissingFieldError
from natter.domain.model.comment import CONTENT_MAX_LENGTH, NAME_MAX_LENGTH
from natter.domain.value import CommentId
from natter.domain.value.common import ValueObject

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class CommentSubmission(BaseModel):
    """Raw comment fields as received from a reader."""

    post: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    content: Optional[str] = None
    parent_id: Optional[int] = None


class SanitizedComment(ValueObject):
    """Validated submission with every rendered string HTML-escaped."""

    post_slug: str
    name: str
    email: Optional[str] = None
    content: str
    parent_id: Optional[CommentId] = None


def escape_markup(value: str) -> str:
    """Escape & < > " ' to their HTML entity forms.

    Single pass: an already escaped string is escaped again.
    """
    return html.escape(value, quote=True)


def is_valid_email(email: str) -> bool:
    """Check for a basic local@domain.tld shape."""
    return EMAIL_PATTERN.match(email) is not None


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


def sanitize_submission(submission: CommentSubmission) -> SanitizedComment:
    """Validate and escape a comment submission.

    Rules, in order:
    1. post, name and content present and non-blank
    2. name at most 100 characters
    3. content at most 5000 characters
    4. email, if given, shaped like local@domain.tld
    5. escape post, name, content and email

    Args:
        submission: Raw reader input

    Returns:
        Sanitised comment

    Raises:
        MissingFieldError: If a required field is missing or blank
        FieldTooLongError: If name or content is too long
        InvalidEmailError: If the email is malformed
    """
    post = _clean(submission.post)
    name = _clean(submission.name)
    content = _clean(submission.content)
    email = _clean(submission.email)

    missing = [
        field
        for field, value in (("post", post), ("name", name), ("content", content))
        if not value
    ]
    if missing:
        raise MissingFieldError(missing)

    if len(name) > NAME_MAX_LENGTH:
        raise FieldTooLongError("name", NAME_MAX_LENGTH)

    if len(content) > CONTENT_MAX_LENGTH:
        raise FieldTooLongError("content", CONTENT_MAX_LENGTH)

    if email and not is_valid_email(email):
        raise InvalidEmailError()

    return SanitizedComment(
        post_slug=escape_markup(post),
        name=escape_markup(name),
        email=escape_markup(email) if email else None,
        content=escape_markup(content),
        parent_id=(
            CommentId(submission.parent_id)
            if submission.parent_id is not None
            else None
        ),
    )
