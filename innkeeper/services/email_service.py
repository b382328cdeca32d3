"""
Email Service

Sends staff emails over SMTP with aiosmtplib and renders Jinja2 templates
from ``EMAIL_TEMPLATE_DIR`` (defaults to the bundled ``templates/email``).
"""

import os
import re
import asyncio
import logging
from pathlib import Path
from typing import Optional, Dict, Any, List
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart

import aiosmtplib
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from innkeeper.utils.urls import build_staff_login_link

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"

TEMPLATE_EMPLOYEE_CREDENTIALS = "employee_credentials"


class EmailServiceConfig:
    """Configuration for email service from environment variables."""

    def __init__(self):
        self.smtp_host = os.getenv('SMTP_HOST', '')
        self.smtp_port = int(os.getenv('SMTP_PORT', '587'))
        self.smtp_username = os.getenv('SMTP_USERNAME', '')
        self.smtp_password = os.getenv('SMTP_PASSWORD', '')
        self.smtp_use_tls = os.getenv('SMTP_USE_TLS', 'false').lower() == 'true'
        self.smtp_start_tls = os.getenv('SMTP_START_TLS', 'true').lower() == 'true'
        self.from_email = os.getenv('FROM_EMAIL', '')
        self.from_name = os.getenv('FROM_NAME', 'Hotel Staff Portal')
        self.template_dir = os.getenv('EMAIL_TEMPLATE_DIR', str(_DEFAULT_TEMPLATE_DIR))

    def is_configured(self) -> bool:
        return bool(self.smtp_host and self.smtp_port and self.from_email)

    def validate(self) -> List[str]:
        """Return a list of configuration problems (empty when usable)."""
        errors = []
        if not self.smtp_host:
            errors.append("SMTP_HOST is required")
        if not self.smtp_port or self.smtp_port <= 0:
            errors.append("SMTP_PORT must be a positive integer")
        if not self.from_email:
            errors.append("FROM_EMAIL is required")
        if self.smtp_use_tls and self.smtp_start_tls:
            errors.append("Cannot use both implicit TLS and STARTTLS")
        return errors


class EmailService:
    """Service for sending emails via SMTP."""

    def __init__(self, config: Optional[EmailServiceConfig] = None):
        self.config = config or EmailServiceConfig()
        template_path = Path(self.config.template_dir)
        if not template_path.exists():
            logger.warning(f"Email template directory not found: {template_path}")
        self.template_env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(['html']),
        )

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send one email; returns a dict with ``success`` and ``error``."""
        errors = self.config.validate()
        if errors:
            return {'success': False, 'error': f"Email service not configured: {', '.join(errors)}"}

        message = MIMEMultipart('alternative')
        message['From'] = f"{self.config.from_name} <{self.config.from_email}>"
        message['To'] = to_email
        message['Subject'] = subject
        if text_content:
            message.attach(MIMEText(text_content, 'plain', 'utf-8'))
        message.attach(MIMEText(html_content, 'html', 'utf-8'))

        try:
            async with aiosmtplib.SMTP(
                hostname=self.config.smtp_host,
                port=self.config.smtp_port,
                use_tls=self.config.smtp_use_tls,
                start_tls=self.config.smtp_start_tls,
            ) as smtp:
                if self.config.smtp_username and self.config.smtp_password:
                    await smtp.login(self.config.smtp_username, self.config.smtp_password)
                await smtp.send_message(message)
        except (aiosmtplib.SMTPException, OSError) as e:
            error_msg = f"Failed to send email to {to_email}: {e}"
            logger.error(error_msg, exc_info=True)
            return {'success': False, 'error': error_msg}

        logger.info(f"Email sent to {to_email}: {subject}")
        return {'success': True, 'error': None}

    def render_template(self, template_name: str, context: Dict[str, Any]) -> tuple[str, str]:
        """Render ``<name>.html`` and ``<name>.txt``; returns (html, text)."""
        html_content = self.template_env.get_template(f"{template_name}.html").render(**context)
        try:
            text_content = self.template_env.get_template(f"{template_name}.txt").render(**context)
        except TemplateNotFound:
            text_content = self._html_to_text(html_content)
        return html_content, text_content

    @staticmethod
    def _html_to_text(html_content: str) -> str:
        text = re.sub(r'<[^>]+>', '', html_content)
        text = text.replace('&amp;', '&').replace('&lt;', '<').replace('&gt;', '>')
        text = text.replace('&quot;', '"').replace('&#39;', "'")
        return re.sub(r'\s+', ' ', text).strip()

    async def send_employee_credentials(
        self,
        *,
        email: str,
        name: str,
        username: str,
        password: Optional[str],
        employee_id: str,
    ) -> Dict[str, Any]:
        """Email a new employee their login credentials."""
        if not email or not name:
            return {'success': False, 'error': 'Email and name are required'}
        context = {
            'name': name,
            'username': username,
            'password': password or '',
            'employee_id': employee_id,
            'login_url': build_staff_login_link(),
        }
        html_content, text_content = self.render_template(TEMPLATE_EMPLOYEE_CREDENTIALS, context)
        return await self.send_email(
            to_email=email,
            subject='Your Employee Account Credentials',
            html_content=html_content,
            text_content=text_content,
        )


_email_service = None


def get_email_service() -> EmailService:
    """Get singleton email service instance."""
    global _email_service
    if _email_service is None:
        _email_service = EmailService()
    return _email_service


def send_employee_credentials_sync(**kwargs) -> Dict[str, Any]:
    """Blocking wrapper used from sync route handlers."""
    return asyncio.run(get_email_service().send_employee_credentials(**kwargs))
