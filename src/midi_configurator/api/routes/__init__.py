"""API route modules."""

from midi_configurator.api.routes.payments import router as payments_router
from midi_configurator.api.routes.orders import router as orders_router
from midi_configurator.api.routes.products import router as products_router

__all__ = [
    "payments_router",
    "orders_router",
    "products_router",
]
