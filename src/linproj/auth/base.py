"""Auth resolver interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

from linproj.contracts.config import ApiKeyAuth, OAuthAuth


class TokenResolver(ABC):
    @abstractmethod
    async def resolve(self) -> ApiKeyAuth | OAuthAuth:
        """Resolve and return the credentials to send with API requests."""
