"""Environment token resolver."""

from __future__ import annotations

import os

from linproj.auth.base import TokenResolver
from linproj.contracts.config import ApiKeyAuth
from linproj.contracts.exceptions import AuthenticationError

LINEAR_API_KEY_ENV = "LINEAR_API_KEY"


class EnvTokenResolver(TokenResolver):
    async def resolve(self) -> ApiKeyAuth:
        api_key = (os.getenv(LINEAR_API_KEY_ENV) or "").strip()
        if not api_key:
            raise AuthenticationError(f"{LINEAR_API_KEY_ENV} is not set or empty")
        return ApiKeyAuth(api_key=api_key)
