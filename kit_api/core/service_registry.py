# kit_api/core/service_registry.py
"""
Service registry: the application's composition root.

Knows which services exist and how to build each one from configuration.
Services are exposed through ``registry.services``; the first read of any
service triggers registration, so call sites never need an explicit setup
step. Tests swap in doubles with ``configure_overrides`` and restore the real
wiring with ``reset_all``.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional

from .container import ServiceContainer
from .interfaces import IConfigProvider

logger = logging.getLogger(__name__)

EMAIL = "email"

SERVICE_KEYS = (EMAIL,)


class ServiceNamespace:
    """One read-only property per service; every read goes through the registry"""

    def __init__(self, registry: "ServiceRegistry"):
        self._registry = registry

    @property
    def email(self):
        """Email delivery service (kit_api.services.email.EmailService)"""
        return self._registry.resolve(EMAIL)

    def get(self, key: str) -> Any:
        """Resolve a service by key"""
        return self._registry.resolve(key)


class ServiceRegistry:
    """Wraps one ServiceContainer with the application's service wiring"""

    def __init__(self, config: IConfigProvider, container: Optional[ServiceContainer] = None):
        self.config = config
        self.container = container or ServiceContainer()
        self.services = ServiceNamespace(self)
        self._registered = False
        self._lock = threading.Lock()

    @property
    def is_registered(self) -> bool:
        return self._registered

    def register_all(self) -> None:
        """Register every service factory; no-op once registered"""
        with self._lock:
            if self._registered:
                return

            for key, factory in self._factories().items():
                self.container.register(key, factory)

            # Future services registered in _factories()

            self._registered = True
        logger.info("✅ Services registered: %s", ", ".join(self.container.list_registered()))

    def resolve(self, key: str) -> Any:
        """Resolve a service, registering the real wiring on first use"""
        if not self._registered:
            self.register_all()
        return self.container.get(key)

    def configure_overrides(self, **overrides: Any) -> None:
        """Replace services with ready-made instances (test doubles)"""
        with self._lock:
            for key, value in overrides.items():
                if key not in SERVICE_KEYS:
                    logger.warning(f"Overriding unknown service '{key}'")
                self.container.register(key, _constant(value))
            self._registered = True
        logger.debug(f"Overrides configured for {', '.join(overrides)}")

    def reset_all(self) -> None:
        """Drop cached instances and force re-registration on next access"""
        with self._lock:
            self.container.reset()
            self._registered = False
        logger.debug("Service registry reset")

    def _factories(self) -> Dict[str, Callable[[], Any]]:
        # Configuration is read here, once per registration
        provider_type = self.config.get("EMAIL_PROVIDER", "console")
        default_from = self.config.get("EMAIL_FROM")
        resend_api_key = (
            self.config.get("RESEND_API_KEY") if provider_type == "resend" else None
        )

        def create_email_service():
            from kit_api.services.email import EmailService

            return EmailService(
                default_from=default_from,
                provider_type=provider_type,
                resend_api_key=resend_api_key,
            )

        return {EMAIL: create_email_service}


def _constant(value: Any) -> Callable[[], Any]:
    return lambda: value
