# kit_api/__init__.py
"""
Flask application factory.
The app is the composition root: it owns the service registry and the health checker.
"""

from typing import Optional

from flask import Flask

from .config import Config
from .core.health_checker import HealthChecker
from .core.interfaces import IHealthChecker
from .core.service_registry import ServiceRegistry
from .routes import health_bp
from .services import AuthService, DatabaseProvider


class FlaskAppFactory:
    """Creates Flask apps wired to one registry and one health checker"""

    def __init__(
        self,
        config: Config,
        registry: Optional[ServiceRegistry] = None,
        health_checker: Optional[IHealthChecker] = None,
    ):
        self.config = config
        self.registry = registry or ServiceRegistry(config)
        self.health_checker: IHealthChecker = (
            health_checker or self._create_health_checker()
        )

    def create_app(self) -> Flask:
        """Create and configure Flask application"""
        app = Flask(__name__)

        self._configure_flask(app)
        self._register_extensions(app)
        self._register_blueprints(app)

        return app

    def _create_health_checker(self) -> HealthChecker:
        store = DatabaseProvider(self.config.database_path())
        auth = AuthService(
            secret=self.config.get("AUTH_SECRET"),
            base_url=self.config.get("AUTH_URL"),
            store=store,
            services=self.registry.services,
        )
        return HealthChecker(store, auth, version=self.config.get("APP_VERSION"))

    def _configure_flask(self, app: Flask) -> None:
        app.config["DEBUG"] = self.config.is_development()

    def _register_extensions(self, app: Flask) -> None:
        app.extensions["config"] = self.config
        app.extensions["services"] = self.registry
        app.extensions["health_checker"] = self.health_checker

    def _register_blueprints(self, app: Flask) -> None:
        app.register_blueprint(health_bp)


def create_app(
    config: Optional[Config] = None,
    registry: Optional[ServiceRegistry] = None,
    health_checker: Optional[IHealthChecker] = None,
) -> Flask:
    """Main application factory function"""
    factory = FlaskAppFactory(config or Config(), registry, health_checker)
    return factory.create_app()
