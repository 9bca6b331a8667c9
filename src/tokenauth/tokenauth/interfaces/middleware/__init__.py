# ABOUTME: Middleware interfaces package exports
# ABOUTME: Exports the abstract request middleware

from .middleware import AbstractRequestMiddleware

__all__ = ["AbstractRequestMiddleware"]
