"""Mail transport abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MailDeliveryError(Exception):
    """Raised when the mail transport could not hand off a message."""


class AbstractMailer(ABC):
    """Interface for outbound mail backends."""

    @abstractmethod
    def send_otp(self, recipient: str, code: str, ttl_minutes: int) -> None:
        """Deliver an OTP code to ``recipient`` or raise MailDeliveryError."""
