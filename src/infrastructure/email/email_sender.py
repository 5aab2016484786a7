# -*- coding: utf-8 -*-
"""
Отправка писем подтверждения email.

Без настроенного SMTP_HOST письмо не отправляется, а ссылка пишется в лог
(удобно для локальной разработки).
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from src.infrastructure.config.settings import Settings, get_settings
from src.shared.exceptions.infrastructure_exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


VERIFICATION_SUBJECT = "Gmail manzilingizni tasdiqlang - inno-fair.uz"

VERIFICATION_HTML = """\
<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif; color: #333;">
    <h1>inno-fair.uz</h1>
    <p>Salom, <strong>{full_name}</strong>!</p>
    <p>inno-fair.uz platformasiga ro'yxatdan o'tganingiz uchun rahmat!</p>
    <p>Gmail manzilingizni tasdiqlash uchun havolani oching:</p>
    <p><a href="{url}">{url}</a></p>
    <p><strong>Eslatma:</strong> Bu havola {ttl_hours} soat davomida amal qiladi.</p>
    <p>inno-fair.uz - Innovatsion ishlanmalar portali</p>
  </body>
</html>
"""


class EmailSender:
    """SMTP-отправитель. Блокирующий smtplib выполняется в отдельном потоке."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def verification_url(self, token: str) -> str:
        return f"{self.settings.app_url.rstrip('/')}/auth/verify-email?token={token}"

    async def send_verification_email(self, email: str, full_name: str, token: str) -> None:
        """
        Отправить письмо со ссылкой подтверждения.

        Raises:
            ExternalServiceError: SMTP недоступен или отклонил письмо
        """
        url = self.verification_url(token)

        if not self.settings.smtp_enabled():
            logger.info(f"SMTP is not configured, verification link for {email}: {url}")
            return

        message = EmailMessage()
        message["Subject"] = VERIFICATION_SUBJECT
        message["From"] = self.settings.smtp_sender
        message["To"] = email
        message.set_content(f"Gmail manzilingizni tasdiqlash uchun havola: {url}")
        message.add_alternative(
            VERIFICATION_HTML.format(
                full_name=full_name,
                url=url,
                ttl_hours=self.settings.verification_token_ttl_hours,
            ),
            subtype="html",
        )

        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            raise ExternalServiceError(f"SMTP delivery failed: {e}") from e

        logger.info(f"Verification email sent to {email}")

    def _deliver(self, message: EmailMessage) -> None:
        settings = self.settings
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=30) as smtp:
            if settings.smtp_use_tls:
                smtp.starttls()
            if settings.smtp_user:
                smtp.login(settings.smtp_user, settings.smtp_password or "")
            smtp.send_message(message)
