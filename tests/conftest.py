"""
Shared fixtures and test doubles.
"""
import pytest

from kit_api.config import Config
from kit_api.core.service_registry import ServiceRegistry
from kit_api.services.store import DatabaseProvider

AUTH_SECRET = "test-secret-with-at-least-32-characters!"


class FakeStore:
    """Store probe target that succeeds or raises a fixed error"""

    def __init__(self, error: Exception = None):
        self.error = error
        self.queries = []

    def execute(self, query, params=None):
        self.queries.append(query)
        if self.error:
            raise self.error
        return [(1,)]


class FakeAuth:
    """Auth probe target that succeeds or raises a fixed error"""

    def __init__(self, error: Exception = None):
        self.error = error
        self.calls = 0

    def describe_capabilities(self):
        self.calls += 1
        if self.error:
            raise self.error
        return {"algorithms": ["RS256"]}


class RecordingEmailProvider:
    def __init__(self):
        self.sent = []

    def send(self, to, from_, subject, html, text=None, reply_to=None):
        self.sent.append(
            {
                "to": to,
                "from": from_,
                "subject": subject,
                "html": html,
                "text": text,
                "reply_to": reply_to,
            }
        )


def make_config(tmp_path, **overrides) -> Config:
    values = {
        "FLASK_ENV": "development",
        "DATABASE_URL": f"sqlite:///{tmp_path / 'app.db'}",
        "AUTH_SECRET": AUTH_SECRET,
        "LOG_DIR": str(tmp_path / "logs"),
        "EMAIL_FROM": "noreply@example.com",
    }
    values.update(overrides)
    return Config.from_mapping(values)


@pytest.fixture
def config(tmp_path) -> Config:
    return make_config(tmp_path)


@pytest.fixture
def registry(config) -> ServiceRegistry:
    return ServiceRegistry(config)


@pytest.fixture
def store(config) -> DatabaseProvider:
    provider = DatabaseProvider(config.database_path())
    provider.init_schema()
    return provider
