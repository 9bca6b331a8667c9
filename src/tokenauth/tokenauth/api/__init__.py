# ABOUTME: FastAPI adapter package exports
# ABOUTME: Exposes the application factory and the service container

from tokenauth.api.app import AuthServices, build_services, create_app

__all__ = ["AuthServices", "build_services", "create_app"]
