# kit_api/core/__init__.py
"""
Core module: service container, service registry and health checking.
"""

from .container import (
    DependencyInjectionError,
    ServiceContainer,
    UnregisteredServiceError,
)
from .health_checker import FatalStartupError, HealthChecker, HealthStatus
from .service_registry import ServiceNamespace, ServiceRegistry

__all__ = [
    "DependencyInjectionError",
    "FatalStartupError",
    "HealthChecker",
    "HealthStatus",
    "ServiceContainer",
    "ServiceNamespace",
    "ServiceRegistry",
    "UnregisteredServiceError",
]
