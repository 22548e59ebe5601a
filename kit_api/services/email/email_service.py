# kit_api/services/email/email_service.py
"""
Email service: high-level email sending with templates.
"""

import logging
from typing import List, Optional, Union

from kit_api.core.interfaces import IEmailProvider

from .provider_factory import create_email_provider
from .templates import render_email_verification, render_password_reset

logger = logging.getLogger(__name__)


class EmailService:
    """Sends templated emails through the configured provider"""

    def __init__(
        self,
        default_from: str,
        provider_type: str = "console",
        resend_api_key: Optional[str] = None,
        provider: Optional[IEmailProvider] = None,
    ):
        self.default_from = default_from
        self.provider_type = provider_type
        self.provider = provider or create_email_provider(provider_type, resend_api_key)
        logger.debug(f"Email service ready ({provider_type}, from {default_from})")

    def send_email_verification(
        self, to: str, user_name: str, verification_url: str
    ) -> None:
        """Send email verification email"""
        rendered = render_email_verification(user_name, verification_url)
        self.provider.send(
            to=to,
            from_=self.default_from,
            subject="Verify your email address",
            html=rendered.html,
            text=rendered.text,
        )

    def send_password_reset(self, to: str, user_name: str, reset_url: str) -> None:
        """Send password reset email"""
        rendered = render_password_reset(user_name, reset_url)
        self.provider.send(
            to=to,
            from_=self.default_from,
            subject="Reset your password",
            html=rendered.html,
            text=rendered.text,
        )

    def send_raw(
        self,
        to: Union[str, List[str]],
        subject: str,
        html: str,
        text: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> None:
        """Send a raw email"""
        self.provider.send(
            to=to,
            from_=self.default_from,
            subject=subject,
            html=html,
            text=text,
            reply_to=reply_to,
        )
