"""Payment gateway request signatures."""

import hashlib
from dataclasses import dataclass

from midi_configurator.utils import get_logger

logger = get_logger("payments.signature")

SIGNATURE_FIELDS = ("referenceCode", "amount", "currency")


class MissingFieldsError(ValueError):
    """Raised when a signature request lacks required fields."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


@dataclass(frozen=True)
class SignatureRequest:
    """The three order fields the gateway signs."""
    reference_code: str
    amount: str
    currency: str

    @classmethod
    def from_dict(cls, data: dict) -> "SignatureRequest":
        """Create from a request body, rejecting missing or empty fields."""
        missing = [name for name in SIGNATURE_FIELDS if not data.get(name)]
        if missing:
            raise MissingFieldsError(missing)
        return cls(
            reference_code=str(data["referenceCode"]),
            amount=str(data["amount"]),
            currency=str(data["currency"]),
        )


def payment_signature(api_key: str, merchant_id: str, request: SignatureRequest) -> str:
    """Sign a payment request.

    The gateway expects the MD5 hex digest of
    ``apiKey~merchantId~referenceCode~amount~currency``.
    """
    payload = "~".join((
        api_key,
        merchant_id,
        request.reference_code,
        request.amount,
        request.currency,
    ))
    signature = hashlib.md5(payload.encode("utf-8")).hexdigest()
    logger.debug(f"Signed payment {request.reference_code}")
    return signature
