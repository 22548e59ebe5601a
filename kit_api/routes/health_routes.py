# kit_api/routes/health_routes.py
"""Health endpoint."""

from flask import Blueprint, current_app, jsonify

from kit_api.core.health_checker import HealthStatus
from kit_api.core.interfaces import IHealthChecker

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"], strict_slashes=False)
def health_check():
    """Last recorded health; 503 only when the application is unhealthy"""
    checker: IHealthChecker = current_app.extensions["health_checker"]
    health = checker.get_health()
    status_code = 503 if health["status"] == HealthStatus.UNHEALTHY.value else 200
    return jsonify(health), status_code
