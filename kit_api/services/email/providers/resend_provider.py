# kit_api/services/email/providers/resend_provider.py
"""
Resend email provider: sends emails through the Resend HTTP API.
See https://resend.com/docs/api-reference/emails/send-email
"""

import logging
from typing import Any, Dict, List, Optional, Union

import requests

from ..errors import EmailDeliveryError

logger = logging.getLogger(__name__)


class ResendEmailProvider:
    """Email transport backed by Resend"""

    BASE_URL = "https://api.resend.com"

    def __init__(self, api_key: str, base_url: str = BASE_URL, timeout: int = 30):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def send(
        self,
        to: Union[str, List[str]],
        from_: str,
        subject: str,
        html: str,
        text: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> None:
        """Send email via Resend"""
        payload: Dict[str, Any] = {
            "from": from_,
            "to": to if isinstance(to, list) else [to],
            "subject": subject,
            "html": html,
        }
        if text:
            payload["text"] = text
        if reply_to:
            payload["reply_to"] = reply_to

        try:
            response = requests.post(
                f"{self.base_url}/emails",
                headers=self._headers(),
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Failed to send email via Resend: %s", e)
            raise EmailDeliveryError("Failed to send email") from e

        logger.info("Email sent successfully to %s: %s", payload["to"], subject)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
