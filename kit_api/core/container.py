# kit_api/core/container.py
"""
Service container: lazy, cached, thread-safe service construction.
Knows nothing about the services it holds, only how to build them once.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

_MISSING = object()


class IServiceContainer(ABC):
    """Interface for the service container"""

    @abstractmethod
    def register(self, key: str, factory: Callable[[], Any]) -> None:
        """Register a factory under a key"""
        pass

    @abstractmethod
    def get(self, key: str) -> Any:
        """Resolve the instance for a key"""
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check if a factory is registered for a key"""
        pass


class DependencyInjectionError(Exception):
    """Error in dependency injection"""

    pass


class UnregisteredServiceError(DependencyInjectionError):
    """A service key was resolved before any factory was registered for it"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f'Service "{key}" is not registered. '
            f"Did you forget to register it in register_all()?"
        )


class ServiceContainer(IServiceContainer):
    """
    Key -> factory -> instance map.

    Factories run lazily on the first get() and their result is cached until
    reset(), clear() or a re-registration of the same key. Construction is
    serialized per key, so concurrent first access runs the factory once.
    """

    def __init__(self):
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._instances: Dict[str, Any] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def register(self, key: str, factory: Callable[[], Any]) -> None:
        """Register a factory, discarding any cached instance for the key"""
        if not callable(factory):
            raise DependencyInjectionError(f"Factory for '{key}' must be callable")

        with self._guard:
            self._factories[key] = factory
            self._instances.pop(key, None)
        logger.debug(f"Registered factory for {key}")

    def get(self, key: str) -> Any:
        """Return the cached instance, building it on first access"""
        # Fast path, dict reads are atomic
        instance = self._instances.get(key, _MISSING)
        if instance is not _MISSING:
            return instance

        with self._guard:
            if key not in self._factories:
                raise UnregisteredServiceError(key)
            lock = self._locks.setdefault(key, threading.Lock())

        with lock:
            instance = self._instances.get(key, _MISSING)
            if instance is not _MISSING:
                return instance

            with self._guard:
                factory = self._factories.get(key)
            if factory is None:
                # cleared while we waited for the lock
                raise UnregisteredServiceError(key)

            instance = factory()

            with self._guard:
                # A register() that raced with construction wins
                if self._factories.get(key) is factory:
                    self._instances[key] = instance
            logger.debug(f"Instantiated service {key}")
            return instance

    def try_get(self, key: str) -> Optional[Any]:
        """Resolve without raising for unregistered keys"""
        try:
            return self.get(key)
        except UnregisteredServiceError:
            return None

    def has(self, key: str) -> bool:
        """Check if a factory is registered, regardless of instantiation"""
        return key in self._factories

    def is_instantiated(self, key: str) -> bool:
        """Check if the factory for a key has already produced an instance"""
        return key in self._instances

    def list_registered(self) -> List[str]:
        """Get all registered keys"""
        with self._guard:
            return list(self._factories.keys())

    def reset(self) -> None:
        """Drop cached instances, keep factories"""
        with self._guard:
            self._instances.clear()
        logger.debug("Cleared all service instances")

    def clear(self) -> None:
        """Drop factories and instances (complete teardown)"""
        with self._guard:
            # Per-key locks survive, a builder may still hold one
            self._factories.clear()
            self._instances.clear()
        logger.debug("Cleared all registrations")
