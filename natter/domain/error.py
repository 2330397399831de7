"""Domain layer errors.

Every failure a request can hit is one of these kinds; the interface layer
maps each kind to an HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


# ============================================================================
# Validation (client-caused, 400)
# ============================================================================
class ValidationError(DomainError):
    """Domain validation error."""

    pass


class MissingFieldError(ValidationError):
    """A required field is absent or blank."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(
            f"Missing required fields: {', '.join(fields)} "
            "(post, name, and content are required)"
        )


class FieldTooLongError(ValidationError):
    """A field exceeds its maximum length."""

    def __init__(self, field: str, max_length: int):
        self.field = field
        self.max_length = max_length
        super().__init__(f"{field.capitalize()} too long (max {max_length} characters)")


class InvalidEmailError(ValidationError):
    """Email address does not have a local@domain.tld shape."""

    def __init__(self) -> None:
        super().__init__("Invalid email format")


class InvalidCommentIdError(ValidationError):
    """Comment ID in a path is not a positive integer."""

    def __init__(self, raw: str | None):
        self.raw = raw
        super().__init__("Invalid comment ID")


class ParentNotFoundError(DomainError):
    """Reply target does not exist or belongs to another post."""

    def __init__(self, parent_id: int, post_slug: str):
        self.parent_id = parent_id
        self.post_slug = post_slug
        super().__init__("Parent comment not found")


# ============================================================================
# Throttling (429)
# ============================================================================
class RateLimitedError(DomainError):
    """Too many comments from one source inside the rate-limit window."""

    def __init__(self, retry_after_seconds: int):
        self.retry_after_seconds = retry_after_seconds
        super().__init__(
            "Too many comments. Please wait a moment before posting again."
        )


# ============================================================================
# Lookup (404)
# ============================================================================
class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


# ============================================================================
# Authentication / authorization (401, 403)
# ============================================================================
class AuthError(DomainError):
    """Base moderator authentication error."""

    pass


class MissingCredentialError(AuthError):
    """No bearer credential, or a malformed Authorization header."""

    def __init__(self) -> None:
        super().__init__("Authentication required")


class InvalidCredentialError(AuthError):
    """The identity provider rejected the credential."""

    def __init__(self, reason: str = "Invalid or expired credential"):
        super().__init__(reason)


class NotAuthorizedError(AuthError):
    """Verified identity is not on the moderator allow-list."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Access denied for @{username}. You are not authorized.")


# ============================================================================
# Unavailable collaborators (503)
# ============================================================================
class ProviderUnavailableError(DomainError):
    """Identity provider could not be reached or failed (network / 5xx)."""

    def __init__(self, reason: str = "Identity provider unavailable"):
        super().__init__(reason)


class StoreUnavailableError(DomainError):
    """Comment storage is not provisioned or not reachable."""

    def __init__(
        self,
        reason: str = "The comment system is not yet set up. Please configure the database.",
    ):
        super().__init__(reason)
