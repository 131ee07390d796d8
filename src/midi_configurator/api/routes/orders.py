"""Order notification route used by the configurator checkout."""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from midi_configurator.api.dependencies import get_app_settings, get_mailer
from midi_configurator.config import Settings
from midi_configurator.configurator.record import ConfigurationRecord
from midi_configurator.observability import LogContext
from midi_configurator.payments import Mailer, order_email
from midi_configurator.utils import get_logger

logger = get_logger("api.orders")

router = APIRouter()


class OrderNotification(BaseModel):
    colors: dict = Field(default_factory=dict)
    paymentMethod: str
    buyerEmail: Optional[str] = None


class OrderNotificationResponse(BaseModel):
    sent: bool


@router.post("/order-notification", response_model=OrderNotificationResponse)
async def notify_order(
    order: OrderNotification,
    settings: Settings = Depends(get_app_settings),
    mailer: Mailer = Depends(get_mailer),
):
    """Email the shop the color specification of a submitted order."""
    specification = ConfigurationRecord.from_dict(order.colors).specification()
    message = order_email(
        specification,
        order.paymentMethod,
        to=settings.notify_recipient or "",
        buyer_email=order.buyerEmail,
    )

    with LogContext(payment_method=order.paymentMethod, buyer=order.buyerEmail or "-"):
        try:
            await run_in_threadpool(mailer.send, message)
        except Exception:
            logger.exception("Failed to send order notification")
            return OrderNotificationResponse(sent=False)
        logger.info("Order notification sent")

    return OrderNotificationResponse(sent=True)
