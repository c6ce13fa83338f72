"""API middleware."""

from roster.api.middleware.context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
