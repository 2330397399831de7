"""Shared pieces of moderation use cases."""

from pydantic import BaseModel

from natter.application.usecase.base import BaseUseCase
from natter.domain.service import IdentityVerifier
from natter.domain.value import Username


class ModerationRequest(BaseModel):
    """Base moderation request carrying the raw Authorization header."""

    authorization: str | None = None


class ModerationResultResponse(BaseModel):
    """Outcome of a moderator action."""

    success: bool = True
    message: str


class ModerationUseCase(BaseUseCase):
    """Base for use cases that require a verified moderator."""

    def __init__(self, identity_verifier: IdentityVerifier) -> None:
        self.identity_verifier = identity_verifier

    async def authorize(self, request: ModerationRequest) -> Username:
        """Verify the caller before touching the store."""
        return await self.identity_verifier.verify(request.authorization)
