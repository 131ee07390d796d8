"""
Order notification emails.

Payment confirmations from the gateway and order submissions from the
configurator are relayed to the shop admin by email. Delivery is best
effort: callers log failures and never let them affect the payment flow.
"""

import smtplib
from dataclasses import dataclass
from email.mime.text import MIMEText
from typing import Optional

from midi_configurator.config import Settings
from midi_configurator.utils import get_logger

logger = get_logger("payments.notifications")

# Gateway transaction state for an approved payment
STATE_APPROVED = "4"

NOT_SPECIFIED = "No especificadas"


@dataclass
class PaymentNotification:
    """Fields of a gateway confirmation relevant to the shop."""

    state: str
    buyer_email: str = ""
    reference: str = ""
    description: str = ""
    value: str = ""
    specification: str = ""

    @property
    def approved(self) -> bool:
        return self.state == STATE_APPROVED

    @classmethod
    def from_dict(cls, data: dict) -> "PaymentNotification":
        """Create from the gateway's confirmation fields."""
        return cls(
            state=str(data.get("state_pol", "")),
            buyer_email=str(data.get("email_buyer", "")),
            reference=str(data.get("reference_sale", "")),
            description=str(data.get("description", "")),
            value=str(data.get("value", "")),
            specification=str(data.get("extra1") or ""),
        )


@dataclass
class EmailMessage:
    """A plain-text notification email."""
    subject: str
    body: str
    to: str
    reply_to: Optional[str] = None


def payment_email(notification: PaymentNotification, to: str) -> EmailMessage:
    """Email announcing an approved payment."""
    body = (
        "Pago aprobado.\n"
        f"Comprador: {notification.buyer_email}\n"
        f"Referencia: {notification.reference}\n"
        f"Producto: {notification.description}\n"
        f"Valor: {notification.value}\n"
        f"Especificaciones: {notification.specification or NOT_SPECIFIED}"
    )
    return EmailMessage(subject="¡Nuevo pago recibido!", body=body, to=to)


def order_email(
    specification: str,
    payment_method: str,
    to: str,
    buyer_email: Optional[str] = None,
) -> EmailMessage:
    """Email describing an order submitted from the configurator."""
    body = (
        "Nuevo pedido desde el configurador.\n"
        f"Método de pago: {payment_method}\n"
        f"Comprador: {buyer_email or 'Desconocido'}\n"
        f"Especificaciones: {specification or NOT_SPECIFIED}"
    )
    return EmailMessage(
        subject=f"Nuevo pedido ({payment_method})",
        body=body,
        to=to,
        reply_to=buyer_email,
    )


class Mailer:
    """Sends notification emails over SMTP."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def configured(self) -> bool:
        return bool(self.settings.notify_email_user and self.settings.notify_recipient)

    @property
    def sender(self) -> str:
        return f"{self.settings.notify_sender_name} <{self.settings.notify_email_user}>"

    def build(self, message: EmailMessage) -> MIMEText:
        mime = MIMEText(message.body, "plain", "utf-8")
        mime["Subject"] = message.subject
        mime["From"] = self.sender
        mime["To"] = message.to
        if message.reply_to:
            mime["Reply-To"] = message.reply_to
        return mime

    def send(self, message: EmailMessage) -> None:
        """Send a message; raises on SMTP or configuration errors."""
        if not self.configured:
            raise RuntimeError("Notification email is not configured")

        settings = self.settings
        if settings.smtp_use_ssl:
            server = smtplib.SMTP_SSL(settings.smtp_host, settings.smtp_port, timeout=30)
        else:
            server = smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=30)

        with server:
            if not settings.smtp_use_ssl:
                server.starttls()
            if settings.notify_email_pass:
                server.login(settings.notify_email_user, settings.notify_email_pass)
            server.send_message(self.build(message))

        logger.info(f"Notification email sent: {message.subject}")
