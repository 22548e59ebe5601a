# kit_api/services/email/providers/console_provider.py
"""
Console email provider: logs emails instead of sending them.
Used in development and tests.
"""

import logging
from typing import List, Optional, Union

logger = logging.getLogger(__name__)


class ConsoleEmailProvider:
    """Writes every message to the log"""

    def send(
        self,
        to: Union[str, List[str]],
        from_: str,
        subject: str,
        html: str,
        text: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> None:
        recipients = ", ".join(to) if isinstance(to, list) else to
        lines = [
            "=" * 80,
            "📧 EMAIL SENT (Console Provider)",
            "=" * 80,
            f"To: {recipients}",
            f"From: {from_}",
            f"Subject: {subject}",
        ]
        if reply_to:
            lines.append(f"Reply-To: {reply_to}")
        lines += [
            "-" * 80,
            "TEXT VERSION:",
            "-" * 80,
            text or "(no text version)",
            "-" * 80,
            "HTML VERSION:",
            "-" * 80,
            html,
            "=" * 80,
        ]
        logger.info("\n".join(lines))
