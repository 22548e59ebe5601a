import pytest

from kit_api import create_app
from kit_api.core.health_checker import FatalStartupError, HealthChecker

from .conftest import FakeAuth, FakeStore, make_config


def client_for(config, checker):
    app = create_app(config, health_checker=checker)
    app.testing = True
    return app.test_client()


def test_healthy_returns_200(config):
    checker = HealthChecker(FakeStore(), FakeAuth(), version="1.2.3")
    checker.run_startup_checks()

    response = client_for(config, checker).get("/health")

    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "healthy"
    assert body["version"] == "1.2.3"
    assert set(body["checks"]) == {"database", "auth"}
    assert "timestamp" in body


def test_degraded_returns_200(config):
    checker = HealthChecker(FakeStore(RuntimeError("down")), FakeAuth())
    checker.run_startup_checks()

    response = client_for(config, checker).get("/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "degraded"


def test_unhealthy_returns_503(config):
    checker = HealthChecker(FakeStore(), FakeAuth(RuntimeError("bad")))
    checker.run_startup_checks()

    response = client_for(config, checker).get("/health")

    assert response.status_code == 503
    assert response.get_json()["status"] == "unhealthy"


def test_fatal_auth_reports_503(config):
    checker = HealthChecker(
        FakeStore(), FakeAuth(RuntimeError("Failed to decrypt private key"))
    )
    with pytest.raises(FatalStartupError):
        checker.run_startup_checks()

    response = client_for(config, checker).get("/health")

    assert response.status_code == 503


def test_unchecked_reports_503(config):
    checker = HealthChecker(FakeStore(), FakeAuth())

    response = client_for(config, checker).get("/health")

    assert response.status_code == 503


def test_app_exposes_composition_root(config):
    app = create_app(config)

    assert app.extensions["services"].config is config
    assert isinstance(app.extensions["health_checker"], HealthChecker)


class StaticHealthChecker:
    """Any object with run_startup_checks() and get_health() can back the route"""

    def __init__(self, report):
        self.report = report

    def run_startup_checks(self):
        pass

    def get_health(self):
        return self.report


def test_route_serves_any_health_checker(config):
    report = {"status": "unhealthy", "version": "0.0.0", "checks": {}}

    response = client_for(config, StaticHealthChecker(report)).get("/health")

    assert response.status_code == 503
    assert response.get_json() == report


def test_debug_follows_environment(tmp_path):
    development = create_app(make_config(tmp_path))
    production = create_app(make_config(tmp_path, FLASK_ENV="production"))

    assert development.config["DEBUG"] is True
    assert production.config["DEBUG"] is False
    assert "ENV" not in production.config
