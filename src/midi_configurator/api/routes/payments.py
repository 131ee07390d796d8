"""Payment gateway routes: request signing and confirmation webhook."""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse

from midi_configurator.api.dependencies import get_app_settings, get_mailer
from midi_configurator.config import Settings
from midi_configurator.observability import LogContext
from midi_configurator.payments import (
    Mailer,
    MissingFieldsError,
    PaymentNotification,
    SignatureRequest,
    payment_email,
    payment_signature,
)
from midi_configurator.utils import get_logger

logger = get_logger("api.payments")

router = APIRouter()


async def read_body(request: Request) -> dict:
    """Read a JSON or form-encoded body as a plain dict."""
    content_type = request.headers.get("content-type", "")
    if "application/json" in content_type:
        data = await request.json()
        return data if isinstance(data, dict) else {}
    form = await request.form()
    return {key: value for key, value in form.items()}


@router.post("/payu-signature")
async def create_signature(
    request: Request,
    settings: Settings = Depends(get_app_settings),
):
    """Sign a payment request for the checkout form."""
    try:
        body = await request.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    try:
        signature_request = SignatureRequest.from_dict(body)
    except MissingFieldsError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})

    signature = payment_signature(
        settings.payu_api_key,
        settings.payu_merchant_id,
        signature_request,
    )
    return {"signature": signature}


@router.post("/payu-webhook", response_class=PlainTextResponse)
async def payment_webhook(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    mailer: Mailer = Depends(get_mailer),
):
    """Receive a payment confirmation and notify the shop when approved."""
    notification = PaymentNotification.from_dict(await read_body(request))

    with LogContext(reference=notification.reference, state=notification.state):
        logger.info("Payment confirmation received")
        if notification.approved:
            message = payment_email(notification, settings.notify_recipient or "")
            try:
                await run_in_threadpool(mailer.send, message)
            except Exception:
                logger.exception("Failed to send payment notification")

    return "OK"
