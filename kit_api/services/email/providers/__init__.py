"""
Email transports.
"""
from .console_provider import ConsoleEmailProvider
from .resend_provider import ResendEmailProvider

__all__ = [
    "ConsoleEmailProvider",
    "ResendEmailProvider",
]
