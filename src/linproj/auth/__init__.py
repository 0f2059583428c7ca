"""Auth exports."""

from linproj.auth.base import TokenResolver
from linproj.auth.factory import create_token_resolver, using_env_auth

__all__ = ["TokenResolver", "create_token_resolver", "using_env_auth"]
