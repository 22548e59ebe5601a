"""
Application blueprints.
"""
from .health_routes import health_bp

__all__ = [
    "health_bp",
]
