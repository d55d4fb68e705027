from __future__ import annotations

import json
import logging
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage as MimeMessage
from email.utils import parseaddr
from typing import Protocol
from urllib import request as urlrequest

from twilio.http.http_client import TwilioHttpClient
from twilio.rest import Client as TwilioClient

from community.core.config import Settings
from community.core.security import mask_email, mask_phone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutboundEmail:
    to: str
    subject: str
    text: str
    html: str | None = None


class EmailChannel(Protocol):
    provider_code: str

    def send(self, message: OutboundEmail) -> None:
        ...


class SmsChannel(Protocol):
    provider_code: str

    def send(self, to: str, body: str) -> None:
        ...


def _http_json_post(url: str, payload: dict, *, headers: dict[str, str] | None = None, timeout: int = 10) -> dict:
    req_headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if headers:
        req_headers.update(headers)
    body = json.dumps(payload).encode("utf-8")
    req = urlrequest.Request(url=url, method="POST", data=body, headers=req_headers)
    with urlrequest.urlopen(req, timeout=timeout) as resp:
        raw = resp.read().decode("utf-8")
    return json.loads(raw) if raw else {}


class ConsoleEmailChannel:
    provider_code = "console"

    def send(self, message: OutboundEmail) -> None:
        logger.info("[console email] to=%s subject=%s\n%s", message.to, message.subject, message.text)


class BrevoEmailChannel:
    provider_code = "brevo"

    def __init__(self, cfg: Settings):
        if not cfg.BREVO_API_KEY:
            raise ValueError("BREVO_API_KEY is required for EMAIL_PROVIDER=brevo")
        self.api_key = cfg.BREVO_API_KEY
        self.url = cfg.BREVO_API_URL
        self.sender_name, self.sender_email = parseaddr(cfg.EMAIL_FROM)
        self.timeout = cfg.NOTIFY_TIMEOUT_SECONDS

    def send(self, message: OutboundEmail) -> None:
        payload = {
            "sender": {"name": self.sender_name or self.sender_email, "email": self.sender_email},
            "to": [{"email": message.to}],
            "subject": message.subject,
            "textContent": message.text,
        }
        if message.html:
            payload["htmlContent"] = message.html
        _http_json_post(self.url, payload, headers={"api-key": self.api_key}, timeout=self.timeout)


class SmtpEmailChannel:
    provider_code = "smtp"

    def __init__(self, cfg: Settings):
        if not cfg.SMTP_USER or not cfg.SMTP_PASSWORD:
            raise ValueError("SMTP_USER and SMTP_PASSWORD are required for EMAIL_PROVIDER=smtp")
        self.cfg = cfg

    def send(self, message: OutboundEmail) -> None:
        mime = MimeMessage()
        mime["From"] = self.cfg.EMAIL_FROM
        mime["To"] = message.to
        mime["Subject"] = message.subject
        mime.set_content(message.text)
        if message.html:
            mime.add_alternative(message.html, subtype="html")

        timeout = self.cfg.NOTIFY_TIMEOUT_SECONDS
        if self.cfg.SMTP_PORT == 465:
            smtp = smtplib.SMTP_SSL(self.cfg.SMTP_HOST, self.cfg.SMTP_PORT, timeout=timeout, context=ssl.create_default_context())
        else:
            smtp = smtplib.SMTP(self.cfg.SMTP_HOST, self.cfg.SMTP_PORT, timeout=timeout)
        with smtp:
            if self.cfg.SMTP_PORT != 465:
                smtp.starttls(context=ssl.create_default_context())
            smtp.login(self.cfg.SMTP_USER, self.cfg.SMTP_PASSWORD)
            smtp.send_message(mime)


class ConsoleSmsChannel:
    provider_code = "console"

    def send(self, to: str, body: str) -> None:
        logger.info("[console sms] to=%s\n%s", to, body)


class TwilioSmsChannel:
    provider_code = "twilio"

    def __init__(self, cfg: Settings):
        if not (cfg.TWILIO_ACCOUNT_SID and cfg.TWILIO_AUTH_TOKEN and cfg.TWILIO_FROM_NUMBER):
            raise ValueError("TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and TWILIO_FROM_NUMBER are required for SMS_PROVIDER=twilio")
        self.from_number = cfg.TWILIO_FROM_NUMBER
        self.client = TwilioClient(
            cfg.TWILIO_ACCOUNT_SID,
            cfg.TWILIO_AUTH_TOKEN,
            http_client=TwilioHttpClient(timeout=cfg.NOTIFY_TIMEOUT_SECONDS),
        )

    def send(self, to: str, body: str) -> None:
        self.client.messages.create(to=to, from_=self.from_number, body=body)


def get_email_channel(cfg: Settings) -> EmailChannel:
    code = (cfg.EMAIL_PROVIDER or "console").strip().lower()
    if code == "brevo":
        return BrevoEmailChannel(cfg)
    if code == "smtp":
        return SmtpEmailChannel(cfg)
    return ConsoleEmailChannel()


def get_sms_channel(cfg: Settings) -> SmsChannel:
    code = (cfg.SMS_PROVIDER or "console").strip().lower()
    if code == "twilio":
        return TwilioSmsChannel(cfg)
    return ConsoleSmsChannel()


def format_phone(phone: str, default_country_code: str) -> str:
    raw = phone.strip()
    if raw.startswith("+"):
        return raw
    return f"+{default_country_code.lstrip('+')}{raw}"


class Notifier:
    """Renders and delivers member notifications.

    Every public method is safe to run as a background task: delivery
    errors are logged and reported through the boolean result, never
    raised.
    """

    def __init__(self, cfg: Settings, email: EmailChannel, sms: SmsChannel):
        self.cfg = cfg
        self.email = email
        self.sms = sms

    def send_otp(self, purpose: str, contact: str, code: str, name: str | None = None) -> bool:
        minutes = max(1, self.cfg.OTP_TTL_SECONDS // 60)
        if purpose == "phone":
            to = format_phone(contact, self.cfg.SMS_DEFAULT_COUNTRY_CODE)
            body = (
                f"Your {self.cfg.COMMUNITY_NAME} verification code is: {code}. "
                f"Valid for {minutes} minutes. Do not share this code with anyone."
            )
            return self._deliver("otp sms", mask_phone(to), self.sms.send, to, body)

        greeting = f"Hello {name}!" if name else "Hello!"
        text = (
            f"{greeting}\n\n"
            f"Your verification code is: {code}\n\n"
            f"This code is valid for {minutes} minutes. Do not share it with anyone.\n\n"
            f"- {self.cfg.COMMUNITY_NAME}"
        )
        html = (
            f"<h2>{greeting}</h2>"
            f"<p>Your verification code is:</p>"
            f"<p style=\"font-size:32px;letter-spacing:8px;font-weight:bold\">{code}</p>"
            f"<p>This code is valid for {minutes} minutes. Do not share it with anyone.</p>"
        )
        message = OutboundEmail(to=contact, subject=f"Your {self.cfg.COMMUNITY_NAME} Verification Code", text=text, html=html)
        return self._deliver("otp email", mask_email(contact), self.email.send, message)

    def send_approval(self, email: str, name: str | None) -> bool:
        text = (
            f"Dear {name or 'Member'},\n\n"
            f"Your registration with {self.cfg.COMMUNITY_NAME} has been approved. "
            "You can now log in and use the member directory.\n"
        )
        message = OutboundEmail(to=email, subject=f"Welcome to {self.cfg.COMMUNITY_NAME} - Account Approved", text=text)
        return self._deliver("approval email", mask_email(email), self.email.send, message)

    def send_rejection(self, email: str, name: str | None) -> bool:
        text = (
            f"Dear {name or 'Member'},\n\n"
            f"We could not approve your registration with {self.cfg.COMMUNITY_NAME} at this time. "
            "Your application data has been removed. You may sign up again with correct details.\n"
        )
        message = OutboundEmail(to=email, subject=f"{self.cfg.COMMUNITY_NAME} - Registration Update", text=text)
        return self._deliver("rejection email", mask_email(email), self.email.send, message)

    def _deliver(self, label: str, masked_to: str, send, *args) -> bool:
        try:
            send(*args)
        except Exception:
            logger.exception("%s to %s failed", label, masked_to)
            return False
        logger.info("%s sent to %s", label, masked_to)
        return True


def build_notifier(cfg: Settings) -> Notifier:
    return Notifier(cfg, get_email_channel(cfg), get_sms_channel(cfg))
