"""Tests for add-to-cart payloads."""

from midi_configurator.configurator import ConfigurationRecord, build_cart_payload, get_product
from midi_configurator.configurator.cart import PACKAGE_OPTION, SPECIFICATION_FIELD


class TestCartPayload:
    """Tests for build_cart_payload."""

    def test_beato_payload(self):
        record = ConfigurationRecord(chassis="Gris", buttons={"boton1": "Rojo"})
        payload = build_cart_payload(record, get_product("beato"))

        assert payload == {
            "productId": "3d58a487-8b74-2a0b-7e04-43fca04e5333",
            "quantity": 1,
            "price": "250.00",
            "options": {
                "choices": {PACKAGE_OPTION: "Paquete Pro"},
                "customTextFields": [
                    {"title": SPECIFICATION_FIELD, "value": "Chassis: Gris, Buttons: Rojo"},
                ],
            },
        }

    def test_overrides(self):
        payload = build_cart_payload(
            ConfigurationRecord(),
            get_product("mixo"),
            package="Paquete Basico",
            price="150.00",
        )
        assert payload["productId"] == "mixo"
        assert payload["price"] == "150.00"
        assert payload["options"]["choices"][PACKAGE_OPTION] == "Paquete Basico"
