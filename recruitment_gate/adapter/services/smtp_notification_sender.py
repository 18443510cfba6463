"""
SMTP Notification Sender

Delivers transactional email through an SMTP relay. Sending never raises:
every failure is logged and reported as False so callers can treat
notifications as best-effort.
"""

import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from recruitment_gate.app.services.notification_sender import INotificationSender

logger = logging.getLogger(__name__)


class SmtpNotificationSender(INotificationSender):
    """INotificationSender backed by smtplib, bounded by a timeout"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        from_name: str,
        use_ssl: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.from_name = from_name
        self.use_ssl = use_ssl
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "SmtpNotificationSender":
        return cls(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            from_email=config.SMTP_FROM_EMAIL,
            from_name=config.SMTP_FROM_NAME,
            use_ssl=config.SMTP_USE_SSL,
            timeout=config.NOTIFICATION_TIMEOUT_SECONDS,
        )

    async def send(
        self, to: str, subject: str, text_body: str, html_body: Optional[str] = None
    ) -> bool:
        if not self.host or not self.username or not self.password:
            logger.error("SMTP configuration is missing. Cannot send email.")
            return False

        message = self._build_message(to, subject, text_body, html_body)
        try:
            await asyncio.wait_for(
                asyncio.to_thread(self._deliver, message), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            logger.error(f"Timed out sending email to {to} after {self.timeout}s")
            return False
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {to}: {str(e)}", exc_info=True)
            return False

        logger.info(f"Email sent successfully to {to}")
        return True

    def _build_message(
        self, to: str, subject: str, text_body: str, html_body: Optional[str]
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self.from_name} <{self.from_email}>"
        msg["To"] = to

        msg.attach(MIMEText(text_body, "plain", "utf-8"))
        msg.attach(MIMEText(html_body or text_body, "html", "utf-8"))
        return msg

    def _deliver(self, msg: MIMEMultipart) -> None:
        if self.use_ssl:
            server = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            server.starttls()
        try:
            server.login(self.username, self.password)
            server.send_message(msg)
        finally:
            server.quit()
