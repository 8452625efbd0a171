"""ZeptoMail implementation of EmailProvider.

Sends transactional mail through the ZeptoMail HTTP API using the shared
async HttpClient. HTML bodies are Jinja2 templates under templates/emails;
every message also carries a plain-text part.
"""

import os
from datetime import datetime
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import EmailSettings
from infrastructure.http_client import HttpClient
from shared.logging import get_logger, hash_email

log = get_logger(__name__)

_ZEPTO_API_URL = "https://api.zeptomail.in/v1.1/email"
_DEFAULT_TEMPLATE_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
    "templates",
    "emails",
)


class ZeptoMailProvider:
    def __init__(
        self,
        settings: EmailSettings,
        http_client: HttpClient,
        app_name: str = "Bapuji Real Estate",
        app_url: str = "https://bapujirealestate.com",
        code_ttl_minutes: int = 10,
        template_dir: str = _DEFAULT_TEMPLATE_DIR,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._app_name = app_name
        self._app_url = app_url
        self._ttl_minutes = code_ttl_minutes
        self._jinja = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
        )

    async def _send(
        self,
        to_email: str,
        to_name: Optional[str],
        subject: str,
        html_body: str,
        text_body: Optional[str] = None,
    ) -> bool:
        if not self._settings.zepto_api_token:
            log.error("zepto_mail_send_failed", reason="token_not_configured")
            return False

        payload: dict = {
            "from": {
                "address": self._settings.zepto_from_email,
                "name": self._settings.zepto_from_name,
            },
            "to": [
                {
                    "email_address": {
                        "address": to_email,
                        "name": to_name or to_email,
                    }
                }
            ],
            "subject": subject,
            "htmlbody": html_body,
        }
        if text_body:
            payload["textbody"] = text_body

        token = self._settings.zepto_api_token
        if not token.startswith("Zoho-enczapikey "):
            token = f"Zoho-enczapikey {token}"

        headers = {"Authorization": token, "Content-Type": "application/json"}

        try:
            response = await self._http.post(
                _ZEPTO_API_URL, json=payload, headers=headers
            )
        except Exception as e:
            log.error(
                "email_send_error",
                to_email=hash_email(to_email),
                subject=subject,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        if response.status_code in (200, 201, 202):
            log.info("email_sent_success", to_email=hash_email(to_email), subject=subject)
            return True
        log.error(
            "email_sent_failed",
            to_email=hash_email(to_email),
            subject=subject,
            status_code=response.status_code,
            response=response.text[:200],
        )
        return False

    async def send_brochure_code(
        self, email: str, property_id: str, otp_code: str, expires_at: datetime
    ) -> bool:
        subject = f"Your {self._app_name} Brochure OTP"
        template = self._jinja.get_template("brochure_otp.html")
        html_body = template.render(
            otp_code=otp_code,
            ttl_minutes=self._ttl_minutes,
            app_name=self._app_name,
            app_url=self._app_url,
        )
        text_body = (
            f"Your OTP to download the brochure is {otp_code}.\n\n"
            f"It expires in {self._ttl_minutes} minutes.\n\n"
            f"{self._app_name}"
        )
        return await self._send(email, None, subject, html_body, text_body)

    async def send_password_reset_code(
        self, email: str, otp_code: str, expires_at: datetime
    ) -> bool:
        subject = f"Password Reset Code - {self._app_name}"
        template = self._jinja.get_template("password_reset.html")
        html_body = template.render(
            otp_code=otp_code,
            ttl_minutes=self._ttl_minutes,
            app_name=self._app_name,
            app_url=self._app_url,
        )
        text_body = (
            f"Your password reset code is {otp_code}.\n\n"
            f"It will expire in {self._ttl_minutes} minutes.\n\n"
            f"If you did not ask to reset your password you can ignore this email.\n\n"
            f"{self._app_name}"
        )
        return await self._send(email, None, subject, html_body, text_body)
