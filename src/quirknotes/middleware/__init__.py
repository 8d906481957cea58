"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, bearer_scheme, get_auth_service, get_current_username

__all__ = ["get_current_username", "get_auth_service", "bearer_scheme", "JWTBearer"]
