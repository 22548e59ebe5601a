# kit_api/core/health_checker.py
"""
Health checker: decides whether the application may serve traffic.

Startup runs the database probe, then the auth probe. A database failure only
degrades the application. An auth failure makes it unhealthy, and a stored
key that no longer decrypts blocks startup altogether.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from .interfaces import IAuthProbe, IStoreProbe

logger = logging.getLogger(__name__)

FATAL_AUTH_SIGNATURE = "Failed to decrypt private key"
AUTH_SECRET_MISMATCH_MESSAGE = (
    "AUTH_SECRET mismatch - cannot decrypt JWKS. "
    "Clear database JWKS table or use correct secret."
)


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class FatalStartupError(RuntimeError):
    """A dependency is broken in a way that must keep the process from serving"""

    pass


@dataclass(frozen=True)
class CheckResult:
    """Last observation of one dependency"""

    status: HealthStatus
    message: str
    observed_at: Optional[datetime] = None

    @classmethod
    def unchecked(cls) -> "CheckResult":
        return cls(HealthStatus.UNHEALTHY, "Not checked")

    def to_dict(self, timestamp_field: str) -> Dict[str, Any]:
        result = {"status": self.status.value, "message": self.message}
        if self.observed_at is not None:
            result[timestamp_field] = _isoformat(self.observed_at)
        return result


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _isoformat(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def aggregate_status(database: HealthStatus, auth: HealthStatus) -> HealthStatus:
    """Auth is load-bearing; the database can be down (degraded mode)"""
    if auth == HealthStatus.UNHEALTHY:
        return HealthStatus.UNHEALTHY
    if database == HealthStatus.UNHEALTHY:
        return HealthStatus.DEGRADED
    return HealthStatus.HEALTHY


class HealthChecker:
    """
    Records the health of the database and of the credential subsystem.

    Probes run only through run_startup_checks(), check_database() and
    check_auth(); get_health() reports the last recorded results.
    """

    def __init__(self, store: IStoreProbe, auth: IAuthProbe, version: str = "1.0.0"):
        self.store = store
        self.auth = auth
        self.version = version
        self._database = CheckResult.unchecked()
        self._auth = CheckResult.unchecked()
        self._lock = threading.Lock()

    def run_startup_checks(self) -> None:
        """
        Probe the database, then the credential subsystem.

        Raises FatalStartupError when the stored signing keys cannot be
        decrypted; every other failure is recorded and startup continues.
        """
        logger.info("🔍 Running startup health checks")

        self.check_database()
        self.check_auth()

        status = self.get_status()
        if status == HealthStatus.HEALTHY:
            logger.info("✅ All systems healthy")
        elif status == HealthStatus.DEGRADED:
            logger.warning("System degraded - some features may be unavailable")
        else:
            logger.error("❌ System unhealthy - critical features unavailable")

    def check_database(self) -> CheckResult:
        """Run a trivial query against the store"""
        try:
            self.store.execute("SELECT 1")
        except Exception as e:
            result = CheckResult(HealthStatus.UNHEALTHY, str(e) or "Connection failed")
            logger.error(
                f"Database connection failed - application will start in degraded mode: "
                f"{result.message}"
            )
            logger.warning("Features requiring database will be unavailable")
        else:
            result = CheckResult(HealthStatus.HEALTHY, "Connected", _now())
            logger.info("✅ Database connected")

        with self._lock:
            self._database = result
        return result

    def check_auth(self) -> CheckResult:
        """Exercise the credential subsystem's self-check"""
        try:
            self.auth.describe_capabilities()
        except Exception as e:
            error_message = str(e) or "Unknown error"
            if FATAL_AUTH_SIGNATURE in error_message:
                self._record_auth(CheckResult(HealthStatus.UNHEALTHY, AUTH_SECRET_MISMATCH_MESSAGE))
                logger.critical("AUTH_SECRET mismatch - APPLICATION STARTUP BLOCKED")
                logger.error(
                    "The current AUTH_SECRET does not match the one used to encrypt JWKS"
                )
                logger.info(
                    "To fix: 1) Use the original AUTH_SECRET, OR "
                    "2) Clear the JWKS table in the database"
                )
                raise FatalStartupError(
                    "Critical auth configuration error - startup blocked"
                ) from e

            result = CheckResult(
                HealthStatus.UNHEALTHY, f"Configuration error: {error_message}"
            )
            logger.error(f"Auth configuration error: {result.message}")
        else:
            result = CheckResult(HealthStatus.HEALTHY, "Configuration valid", _now())
            logger.info("✅ Auth configuration valid")

        self._record_auth(result)
        return result

    def _record_auth(self, result: CheckResult) -> None:
        with self._lock:
            self._auth = result

    def get_status(self) -> HealthStatus:
        with self._lock:
            return aggregate_status(self._database.status, self._auth.status)

    def get_health(self) -> Dict[str, Any]:
        """Current health, computed from the last recorded probe results"""
        with self._lock:
            database, auth = self._database, self._auth

        return {
            "status": aggregate_status(database.status, auth.status).value,
            "timestamp": _isoformat(_now()),
            "checks": {
                "database": database.to_dict("connected_at"),
                "auth": auth.to_dict("validated_at"),
            },
            "version": self.version,
        }

    def is_database_available(self) -> bool:
        """Check if database is available"""
        with self._lock:
            return self._database.status == HealthStatus.HEALTHY

    def is_auth_available(self) -> bool:
        """Check if auth is available"""
        with self._lock:
            return self._auth.status == HealthStatus.HEALTHY
