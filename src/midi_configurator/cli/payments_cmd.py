"""Payment signing command."""

import click
from rich.console import Console

from midi_configurator.config import get_settings
from midi_configurator.payments import SignatureRequest, payment_signature

console = Console()


@click.command()
@click.argument("reference")
@click.argument("amount")
@click.argument("currency")
def signature(reference: str, amount: str, currency: str) -> None:
    """Compute the payment signature for an order.

    Uses the API key and merchant id from the environment.

    Example: midi-configurator signature mixo-001 185.00 USD
    """
    settings = get_settings()
    if not settings.payu_api_key or not settings.payu_merchant_id:
        console.print("[yellow]Warning: PayU credentials are not configured[/yellow]")

    request = SignatureRequest(reference_code=reference, amount=amount, currency=currency)
    console.print(payment_signature(settings.payu_api_key, settings.payu_merchant_id, request))
