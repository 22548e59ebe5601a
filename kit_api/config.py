# kit_api/config.py
"""
Application configuration.
Read once from the environment; validates shape only, never opens connections.
"""

import os
from typing import Any, List, Mapping, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from .core.interfaces import IConfigProvider

# Load environment variables
load_dotenv()

ENVIRONMENTS = ("development", "staging", "production")
EMAIL_PROVIDERS = ("console", "resend")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MIN_AUTH_SECRET_LENGTH = 32


class ConfigurationError(EnvironmentError):
    """Raised when the configuration is malformed"""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__(f"Invalid configuration: {'; '.join(problems)}")


def _is_url(value: str) -> bool:
    parsed = urlparse(value or "")
    return bool(parsed.scheme and parsed.netloc)


def _parse_port(value: str) -> Optional[int]:
    """None when the value is not an integer; validate() reports it"""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class Config(IConfigProvider):
    """
    Configuration provider.
    Only handles configuration loading and validation.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        env = os.environ if environ is None else environ

        # Environment
        self.ENV: str = env.get("FLASK_ENV", "development").lower()
        self.APP_VERSION: str = env.get("APP_VERSION", "1.0.0")

        # Directories
        self.PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.LOG_DIR: str = env.get("LOG_DIR", os.path.join(self.PROJECT_ROOT, "logs"))
        self.LOG_LEVEL: str = env.get("LOG_LEVEL", "INFO").upper()

        # App
        port = env.get("PORT", "3001")
        self.PORT: Optional[int] = _parse_port(port)
        self.API_URL: str = env.get("API_URL", f"http://localhost:{port}")
        self.FRONTEND_URL: str = env.get("FRONTEND_URL", "http://localhost:3000")

        # Database
        self.DATABASE_URL: str = env.get(
            "DATABASE_URL",
            "sqlite:///"
            + os.path.join(self.PROJECT_ROOT, "kit_api", "database", "app.db"),
        )

        # Auth
        self.AUTH_SECRET: str = env.get("AUTH_SECRET", "")
        self.AUTH_URL: str = env.get("AUTH_URL", self.API_URL)

        # Email
        self.EMAIL_FROM: str = env.get("EMAIL_FROM", "noreply@localhost.com")
        self.EMAIL_PROVIDER: str = env.get("EMAIL_PROVIDER", "console").lower()
        self.RESEND_API_KEY: str = env.get("RESEND_API_KEY", "")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Config":
        """Build a config from a plain dict instead of the process environment"""
        return cls({key: str(value) for key, value in values.items()})

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return getattr(self, key, default)

    def get_required(self, key: str) -> Any:
        """Get required configuration value"""
        value = self.get(key)
        if value is None or value == "":
            raise ConfigurationError([f"Required configuration '{key}' not found"])
        return value

    def has(self, key: str) -> bool:
        """Check if configuration key exists"""
        return hasattr(self, key) and getattr(self, key) is not None

    def validate(self) -> None:
        """Validate configuration values, reporting every problem at once"""
        problems = []

        if self.ENV not in ENVIRONMENTS:
            problems.append(f"FLASK_ENV must be one of {', '.join(ENVIRONMENTS)}")
        if self.PORT is None:
            problems.append("PORT must be an integer")
        elif not 1 <= self.PORT <= 65535:
            problems.append("PORT must be between 1 and 65535")
        for key in ("API_URL", "AUTH_URL", "FRONTEND_URL"):
            if not _is_url(self.get(key)):
                problems.append(f"{key} must be a valid URL")
        if not self.DATABASE_URL:
            problems.append("DATABASE_URL is required")
        if len(self.AUTH_SECRET) < MIN_AUTH_SECRET_LENGTH:
            problems.append(
                f"AUTH_SECRET must be at least {MIN_AUTH_SECRET_LENGTH} characters"
            )
        if "@" not in self.EMAIL_FROM:
            problems.append("EMAIL_FROM must be a valid email address")
        if self.EMAIL_PROVIDER not in EMAIL_PROVIDERS:
            problems.append(
                f"EMAIL_PROVIDER must be one of {', '.join(EMAIL_PROVIDERS)}"
            )
        elif self.EMAIL_PROVIDER == "resend" and not self.RESEND_API_KEY:
            problems.append("RESEND_API_KEY is required when EMAIL_PROVIDER=resend")
        if self.LOG_LEVEL not in LOG_LEVELS:
            problems.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        if problems:
            raise ConfigurationError(problems)

    def database_path(self) -> str:
        """Filesystem path of the sqlite database named by DATABASE_URL"""
        url = self.DATABASE_URL
        if url.startswith("sqlite:///"):
            return url[len("sqlite:///"):]
        return url

    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.ENV == "development"

    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.ENV == "production"
