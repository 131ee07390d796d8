"""Add-to-cart payloads for the host store page."""

from typing import Optional

from midi_configurator.configurator.products import ProductDefinition
from midi_configurator.configurator.record import ConfigurationRecord

# Option names must match the product options configured in the store
PACKAGE_OPTION = "Configuration Type"
SPECIFICATION_FIELD = "Specifications"


def build_cart_payload(
    record: ConfigurationRecord,
    product: ProductDefinition,
    package: Optional[str] = None,
    price: Optional[str] = None,
) -> dict:
    """
    Build the structured cart message for a configured controller.

    Args:
        record: Current color choices
        product: Product being configured
        package: Price package selection (defaults to the product's)
        price: Final price (defaults to the product's)

    Returns:
        Message with the store product id, package choice and a
        human-readable specification of the chosen colors
    """
    return {
        "productId": product.cart_product_id or product.name,
        "quantity": 1,
        "price": price or product.price,
        "options": {
            "choices": {PACKAGE_OPTION: package or product.package},
            "customTextFields": [
                {"title": SPECIFICATION_FIELD, "value": record.specification()},
            ],
        },
    }
