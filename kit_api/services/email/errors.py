# kit_api/services/email/errors.py
"""Email errors."""


class EmailProviderError(Exception):
    """Email provider could not be built from the given configuration"""

    pass


class EmailDeliveryError(Exception):
    """The transport failed to deliver a message"""

    pass
