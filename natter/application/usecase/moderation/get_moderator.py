"""Get current moderator use case."""

from pydantic import BaseModel

from .base import ModerationRequest, ModerationUseCase


class GetModeratorResponse(BaseModel):
    """Current moderator response."""

    success: bool = True
    username: str


class GetModeratorUseCase(ModerationUseCase):
    """Use case for the admin UI to check who is signed in."""

    async def execute(self, request: ModerationRequest) -> GetModeratorResponse:
        """Verify the credential and echo the moderator username.

        Raises:
            AuthError: If the caller is not an allowed moderator
            ProviderUnavailableError: If the identity provider is down
        """
        moderator = await self.authorize(request)
        return GetModeratorResponse(username=moderator.root)
