# meeting_notes/services/emailer.py
import logging, re, secrets, smtplib, time
from datetime import date
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional
import httpx

from ..catalog import EMAIL_TEMPLATES, EmailFormat
from ..config import Settings
from ..errors import ApiError, EmailDeliveryError
from .rendering import render_summary_html, strip_markdown

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
RESEND_URL = "https://api.resend.com/emails"
FALLBACK_SENDER = "meeting-bot@localhost"

def is_valid_email(address: str) -> bool:
    return isinstance(address, str) and bool(EMAIL_RE.match(address))

def display_date(d: Optional[date] = None) -> str:
    d = d or date.today()
    return f"{d.month}/{d.day}/{d.year}"

def default_subject(d: Optional[date] = None) -> str:
    return f"Meeting Summary - {display_date(d)}"

def validate_share(recipients, body: Optional[str], summary: Optional[str]) -> list[str]:
    """
    Check a share request in the order the client expects errors:
    recipients present, something to send, then every address well formed.
    """
    if not recipients or not isinstance(recipients, list):
        raise ApiError(400, "At least one recipient is required")
    if not summary and not body:
        raise ApiError(400, "Summary or message body is required")
    invalid = [str(r) for r in recipients if not is_valid_email(r)]
    if invalid:
        raise ApiError(400, f"Invalid email addresses: {', '.join(invalid)}")
    return list(recipients)

def compose_from_template(template_key: str, summary: str, when: Optional[str] = None) -> tuple[str, str]:
    """Returns: (subject, body) with {date} and {summary} filled in."""
    template = EMAIL_TEMPLATES.get(template_key)
    if template is None:
        raise ApiError(400, f"Unknown email template: {template_key}")
    when = when or display_date()
    subject = template["subject"].replace("{date}", when)
    body = template["content"].replace("{summary}", summary).replace("{date}", when)
    return subject, body

def build_message(
    settings: Settings,
    recipients: list[str],
    subject: str,
    text: str,
    fmt: str = EmailFormat.HTML,
) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = subject
    sender = settings.from_email or settings.smtp_user or FALLBACK_SENDER
    msg["From"] = formataddr((settings.from_name, sender))
    msg["To"] = ", ".join(recipients)

    # anything other than html/plain goes out as the raw markdown text
    if fmt == EmailFormat.PLAIN:
        msg.set_content(strip_markdown(text), subtype="plain", charset="utf-8")
    else:
        msg.set_content(text or "", subtype="plain", charset="utf-8")
        if fmt == EmailFormat.HTML:
            msg.add_alternative(render_summary_html(text, subject=subject), subtype="html", charset="utf-8")
    return msg

# --- Dev outbox (always available) ---
def _outbox_send(settings: Settings, msg: EmailMessage) -> None:
    settings.outbox_dir.mkdir(parents=True, exist_ok=True)
    fname = settings.outbox_dir / f"email-{int(time.time())}-{secrets.token_hex(4)}.eml"
    fname.write_bytes(bytes(msg))
    logger.info(f"Email written to outbox: {fname}")

# --- SMTP ---
def _smtp_send(settings: Settings, msg: EmailMessage) -> None:
    try:
        with smtplib.SMTP(settings.smtp_host, int(settings.smtp_port or 587), timeout=30) as server:
            server.ehlo(); server.starttls(); server.ehlo()
            server.login(settings.smtp_user, settings.smtp_pass)
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        raise EmailDeliveryError(str(e) or e.__class__.__name__) from e

# --- Resend ---
def _resend_send(settings: Settings, msg: EmailMessage) -> None:
    text_part = msg.get_body(preferencelist=("plain",))
    html_part = msg.get_body(preferencelist=("html",))
    data = {
        "from": str(msg["From"]),
        "to": [a.strip() for a in str(msg["To"]).split(",")],
        "subject": str(msg["Subject"]),
        "text": text_part.get_content() if text_part is not None else "",
    }
    if html_part is not None:
        data["html"] = html_part.get_content()

    headers = {"Authorization": f"Bearer {settings.resend_api_key}", "Content-Type": "application/json"}
    try:
        with httpx.Client(timeout=30) as client:
            r = client.post(RESEND_URL, headers=headers, json=data)
    except httpx.HTTPError as e:
        raise EmailDeliveryError(f"Resend request failed: {e}") from e
    if r.status_code >= 400:
        raise EmailDeliveryError(f"Resend error {r.status_code}: {r.text}")

def resolve_transport(settings: Settings) -> str:
    service = settings.email_service
    if service != "auto":
        return service
    if settings.resend_api_key:
        return "resend"
    if settings.smtp_user and settings.smtp_pass:
        return "smtp"
    return "outbox"

_TRANSPORTS = {
    "outbox": _outbox_send,
    "smtp": _smtp_send,
    "resend": _resend_send,
}

# --- Public API ---
def send_email(settings: Settings, msg: EmailMessage) -> str:
    """
    Hand one message to the configured transport and return its name.
    Raises EmailDeliveryError when the transport refuses it.
    """
    name = resolve_transport(settings)
    transport = _TRANSPORTS.get(name)
    if transport is None:
        raise EmailDeliveryError(f"Unknown email service: {name}")
    transport(settings, msg)
    logger.info(f"Email sent via {name} to {msg['To']}")
    return name

def share_summary(
    settings: Settings,
    *,
    recipients,
    summary: Optional[str],
    body: Optional[str] = None,
    subject: Optional[str] = None,
    fmt: str = EmailFormat.HTML,
) -> int:
    """Validate, build and send one email to every recipient. Returns the recipient count."""
    to = validate_share(recipients, body, summary)
    msg = build_message(settings, to, subject or default_subject(), body or summary, fmt)
    send_email(settings, msg)
    return len(to)
