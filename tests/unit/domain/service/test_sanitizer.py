"""Unit tests for comment submission sanitising."""

import pytest

from natter.domain.error import FieldTooLongError, InvalidEmailError, MissingFieldError
from natter.domain.service import CommentSubmission, sanitize_submission
from natter.domain.service.sanitizer import escape_markup, is_valid_email


class TestEscapeMarkup:
    """Tests for escape_markup."""

    def test_escapes_tags(self):
        assert escape_markup("<b>hi</b>") == "&lt;b&gt;hi&lt;/b&gt;"

    def test_escapes_quotes_and_ampersand(self):
        assert escape_markup("a & \"b\" 'c'") == "a &amp; &quot;b&quot; &#x27;c&#x27;"

    def test_escaping_twice_escapes_the_entities(self):
        """Escaping is not idempotent; it must run exactly once."""
        assert escape_markup(escape_markup("<")) == "&amp;lt;"


class TestIsValidEmail:
    """Tests for the email shape check."""

    @pytest.mark.parametrize("email", ["ann@example.com", "a.b+c@mail.example.org"])
    def test_accepts_plain_addresses(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email", ["ann", "ann@example", "@example.com", "ann @example.com", "a@b@c.d"]
    )
    def test_rejects_malformed_addresses(self, email):
        assert not is_valid_email(email)


class TestSanitizeSubmission:
    """Tests for sanitize_submission."""

    def test_escapes_content(self):
        """Markup in content is stored as entities."""
        # Arrange
        submission = CommentSubmission(
            post="hello-world", name="Ann", content="<b>hi</b>"
        )

        # Act
        result = sanitize_submission(submission)

        # Assert
        assert result.post_slug == "hello-world"
        assert result.name == "Ann"
        assert result.content == "&lt;b&gt;hi&lt;/b&gt;"
        assert result.email is None
        assert result.parent_id is None

    def test_trims_whitespace(self):
        result = sanitize_submission(
            CommentSubmission(post="  p  ", name="  Ann ", content="\n text \n")
        )

        assert result.post_slug == "p"
        assert result.name == "Ann"
        assert result.content == "text"

    def test_escapes_name_and_email(self):
        result = sanitize_submission(
            CommentSubmission(
                post="p", name="<Ann>", email="ann&co@example.com", content="x"
            )
        )

        assert result.name == "&lt;Ann&gt;"
        assert result.email == "ann&amp;co@example.com"

    def test_keeps_parent_id(self):
        result = sanitize_submission(
            CommentSubmission(post="p", name="Ann", content="x", parent_id=7)
        )

        assert result.parent_id == 7

    @pytest.mark.parametrize(
        "fields,missing",
        [
            ({"name": "Ann", "content": "x"}, ["post"]),
            ({"post": "p", "content": "x"}, ["name"]),
            ({"post": "p", "name": "Ann"}, ["content"]),
            ({"post": "p", "name": "   ", "content": "\t"}, ["name", "content"]),
            ({}, ["post", "name", "content"]),
        ],
    )
    def test_missing_required_fields(self, fields, missing):
        with pytest.raises(MissingFieldError) as exc_info:
            sanitize_submission(CommentSubmission(**fields))

        assert exc_info.value.fields == missing

    def test_name_at_limit_is_accepted(self):
        result = sanitize_submission(
            CommentSubmission(post="p", name="a" * 100, content="x")
        )

        assert len(result.name) == 100

    def test_name_too_long(self):
        with pytest.raises(FieldTooLongError) as exc_info:
            sanitize_submission(CommentSubmission(post="p", name="a" * 101, content="x"))

        assert exc_info.value.field == "name"
        assert str(exc_info.value) == "Name too long (max 100 characters)"

    def test_content_too_long(self):
        with pytest.raises(FieldTooLongError) as exc_info:
            sanitize_submission(
                CommentSubmission(post="p", name="Ann", content="a" * 5001)
            )

        assert exc_info.value.field == "content"

    def test_length_is_measured_before_escaping(self):
        """5000 '<' characters pass even though the escaped form is longer."""
        result = sanitize_submission(
            CommentSubmission(post="p", name="Ann", content="<" * 5000)
        )

        assert result.content == "&lt;" * 5000

    def test_length_is_measured_after_trimming(self):
        result = sanitize_submission(
            CommentSubmission(post="p", name=" " + "a" * 100 + " ", content="x")
        )

        assert result.name == "a" * 100

    def test_invalid_email(self):
        with pytest.raises(InvalidEmailError):
            sanitize_submission(
                CommentSubmission(post="p", name="Ann", email="nope", content="x")
            )

    def test_blank_email_counts_as_absent(self):
        result = sanitize_submission(
            CommentSubmission(post="p", name="Ann", email="   ", content="x")
        )

        assert result.email is None

    def test_missing_fields_reported_before_length(self):
        """Rules apply in order; the first failure wins."""
        with pytest.raises(MissingFieldError):
            sanitize_submission(CommentSubmission(name="a" * 101, content="x"))
