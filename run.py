# run.py
"""
Main application entry point.
"""

import logging
import os
import sys

from flask import Flask

from kit_api import FlaskAppFactory
from kit_api.config import Config, ConfigurationError
from kit_api.core.health_checker import FatalStartupError
from kit_api.core.logging_service import configure_logging
from kit_api.services import DatabaseProvider

logger = logging.getLogger(__name__)


class ApplicationBootstrapper:
    """
    Application bootstrapper.
    Only responsible for startup ordering: config, logging, schema, health gate.
    """

    def __init__(self, config: Config = None):
        self.config = config or Config()

    def bootstrap(self, skip_startup_checks: bool = False) -> Flask:
        """Build the app; raises FatalStartupError when it must not serve"""

        # 1. Configuration
        self.config.validate()

        # 2. Logging
        configure_logging(self.config)
        logger.info("✅ Configuration validation successful")

        # 3. Database schema (a down database only degrades the app)
        self._initialize_database()

        # 4. Flask app + composition root
        factory = FlaskAppFactory(self.config)
        app = factory.create_app()

        # 5. Startup health gate
        if skip_startup_checks:
            logger.warning("⚠️ Startup health checks skipped")
        else:
            factory.health_checker.run_startup_checks()

        return app

    def _initialize_database(self) -> None:
        try:
            DatabaseProvider(self.config.database_path()).init_schema()
        except Exception as e:
            logger.error(f"❌ Database initialization failed: {e}")


def serve(app: Flask, config: Config) -> None:
    """Start the HTTP server"""
    if config.is_production():
        logger.info("🚀 Starting server in production mode")
        from waitress import serve as waitress_serve

        waitress_serve(app, host="0.0.0.0", port=config.PORT)
    else:
        logger.info("🚀 Starting server in development mode")
        logger.info(f"📚 Health endpoint available at http://localhost:{config.PORT}/health")
        app.run(host="0.0.0.0", port=config.PORT, debug=True, use_reloader=False)


def main() -> None:
    """Main entry point"""
    skip_checks = os.getenv("SKIP_STARTUP_CHECKS", "").lower() in ("1", "true", "yes")

    try:
        config = Config()
        app = ApplicationBootstrapper(config).bootstrap(skip_startup_checks=skip_checks)
    except (FatalStartupError, ConfigurationError) as e:
        logger.critical(f"💥 Application startup failed: {e}")
        sys.exit(1)

    serve(app, config)


if __name__ == "__main__":
    main()
