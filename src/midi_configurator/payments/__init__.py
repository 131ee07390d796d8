"""Payment gateway signing and order notifications."""

from midi_configurator.payments.signature import (
    SignatureRequest,
    MissingFieldsError,
    payment_signature,
)
from midi_configurator.payments.notifications import (
    EmailMessage,
    Mailer,
    PaymentNotification,
    payment_email,
    order_email,
    STATE_APPROVED,
)

__all__ = [
    "SignatureRequest",
    "MissingFieldsError",
    "payment_signature",
    "EmailMessage",
    "Mailer",
    "PaymentNotification",
    "payment_email",
    "order_email",
    "STATE_APPROVED",
]
