"""Provider implementations."""

from linproj.providers.linear import LINEAR_API_URL, LinearProvider

__all__ = ["LINEAR_API_URL", "LinearProvider"]
