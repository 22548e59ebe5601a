"""
Email delivery service and its transports.
"""
from .email_service import EmailService
from .errors import EmailDeliveryError, EmailProviderError
from .provider_factory import create_email_provider

__all__ = [
    "EmailService",
    "EmailDeliveryError",
    "EmailProviderError",
    "create_email_provider",
]
