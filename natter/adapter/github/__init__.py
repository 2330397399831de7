"""GitHub identity adapter."""

from .client import (
    GitHubIdentityClient,
    MockGitHubIdentityClient,
    RealGitHubIdentityClient,
)

__all__ = [
    "GitHubIdentityClient",
    "MockGitHubIdentityClient",
    "RealGitHubIdentityClient",
]
