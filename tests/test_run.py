import pytest

import run
from kit_api.core.health_checker import FatalStartupError
from kit_api.services.auth import AuthService

from .conftest import make_config


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(run, "configure_logging", lambda config: None)
    monkeypatch.delenv("SKIP_STARTUP_CHECKS", raising=False)


def test_bootstrap_runs_startup_checks(config):
    app = run.ApplicationBootstrapper(config).bootstrap()

    health = app.extensions["health_checker"].get_health()
    assert health["status"] == "healthy"


def test_bootstrap_can_skip_checks(config):
    app = run.ApplicationBootstrapper(config).bootstrap(skip_startup_checks=True)

    health = app.extensions["health_checker"].get_health()
    assert health["checks"]["database"]["message"] == "Not checked"


def test_bootstrap_blocks_on_secret_mismatch(tmp_path, config):
    run.ApplicationBootstrapper(config).bootstrap()
    rotated = make_config(tmp_path, AUTH_SECRET="rotated-secret-that-is-long-enough-123")

    with pytest.raises(FatalStartupError):
        run.ApplicationBootstrapper(rotated).bootstrap()


def test_main_exits_on_fatal_startup(tmp_path, monkeypatch):
    store_config = make_config(tmp_path)
    run.ApplicationBootstrapper(store_config).bootstrap()
    rotated = make_config(tmp_path, AUTH_SECRET="rotated-secret-that-is-long-enough-123")

    monkeypatch.setattr(run, "Config", lambda: rotated)
    monkeypatch.setattr(run, "serve", lambda app, config: pytest.fail("served"))

    with pytest.raises(SystemExit) as exc_info:
        run.main()

    assert exc_info.value.code == 1


def test_main_exits_on_invalid_config(tmp_path, monkeypatch):
    invalid = make_config(tmp_path, AUTH_SECRET="short")
    monkeypatch.setattr(run, "Config", lambda: invalid)

    with pytest.raises(SystemExit) as exc_info:
        run.main()

    assert exc_info.value.code == 1


def test_main_serves_when_healthy(config, monkeypatch):
    served = []
    monkeypatch.setattr(run, "Config", lambda: config)
    monkeypatch.setattr(run, "serve", lambda app, cfg: served.append(app))

    run.main()

    assert len(served) == 1
    assert isinstance(
        served[0].extensions["health_checker"].auth, AuthService
    )


def test_main_exits_on_non_numeric_port(tmp_path, monkeypatch):
    monkeypatch.setattr(run, "Config", lambda: make_config(tmp_path, PORT="abc"))
    monkeypatch.setattr(run, "serve", lambda app, config: pytest.fail("served"))

    with pytest.raises(SystemExit) as exc_info:
        run.main()

    assert exc_info.value.code == 1
