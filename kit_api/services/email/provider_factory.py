# kit_api/services/email/provider_factory.py
"""
Factory for email providers.
"""

from typing import Optional

from kit_api.core.interfaces import IEmailProvider

from .errors import EmailProviderError
from .providers import ConsoleEmailProvider, ResendEmailProvider


def create_email_provider(
    provider_type: str, resend_api_key: Optional[str] = None
) -> IEmailProvider:
    """Create email provider based on configuration"""
    if provider_type == "console":
        return ConsoleEmailProvider()

    if provider_type == "resend":
        if not resend_api_key:
            raise EmailProviderError("Resend API key is required for resend provider")
        return ResendEmailProvider(resend_api_key)

    raise EmailProviderError(f"Unknown email provider type: {provider_type}")
