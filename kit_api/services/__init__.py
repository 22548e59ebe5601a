"""
Backend services built by the service registry.
"""
from .auth import AuthConfigurationError, AuthService
from .store import DatabaseProvider

__all__ = [
    "AuthConfigurationError",
    "AuthService",
    "DatabaseProvider",
]
