"""Flask-Mail backed SMTP implementation."""

from __future__ import annotations

import smtplib

from flask import render_template_string
from flask_mail import Mail, Message

from .abstract_mailer import AbstractMailer, MailDeliveryError

OTP_SUBJECT = "Kode OTP Anda - Aplikasi Tukang PUPR Jogja"

OTP_TEMPLATE = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #1976D2;">Aplikasi Tukang PUPR Jogja</h2>
  <p>Berikut adalah kode OTP Anda:</p>
  <div style="background-color: #f5f5f5; padding: 20px; text-align: center; border-radius: 8px;">
    <h1 style="font-size: 36px; letter-spacing: 8px; color: #333; margin: 0;">{{ otp }}</h1>
  </div>
  <p style="color: #666; margin-top: 20px;">
    Kode ini berlaku selama <strong>{{ ttl_minutes }} menit</strong>.<br>
    Jangan bagikan kode ini kepada siapapun.
  </p>
  <hr style="border: none; border-top: 1px solid #eee; margin: 20px 0;">
  <p style="color: #999; font-size: 12px;">
    Jika Anda tidak meminta kode ini, abaikan email ini.
  </p>
</div>
"""


class FlaskMailMailer(AbstractMailer):
    """Send mail through the app's Flask-Mail extension."""

    def __init__(self, mail: Mail, sender_name: str, sender_address: str | None):
        self.mail = mail
        self.sender_name = sender_name
        self.sender_address = sender_address

    @property
    def sender(self) -> tuple[str, str] | None:
        if not self.sender_address:
            return None
        return (self.sender_name, self.sender_address)

    def send_otp(self, recipient: str, code: str, ttl_minutes: int) -> None:
        """Render the OTP template and hand it to the SMTP relay."""

        if self.sender is None:
            raise MailDeliveryError("No sender address configured (GMAIL_USER).")

        message = Message(
            OTP_SUBJECT,
            sender=self.sender,
            recipients=[recipient],
            html=render_template_string(OTP_TEMPLATE, otp=code, ttl_minutes=ttl_minutes),
        )
        try:
            self.mail.send(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(str(exc)) from exc
