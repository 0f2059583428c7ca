"""Linear GraphQL provider."""

from linproj.providers.linear.provider import LINEAR_API_URL, LinearProvider

__all__ = ["LINEAR_API_URL", "LinearProvider"]
