"""Tests for the configuration record."""

import pytest

from midi_configurator.configurator import ConfigurationRecord
from midi_configurator.configurator.record import CONFIG_UPDATE


class TestConfigurationRecord:
    """Tests for ConfigurationRecord."""

    def test_to_dict(self):
        record = ConfigurationRecord(chassis="Azul", buttons={"boton1": "Rojo"})
        data = record.to_dict()

        assert data["type"] == CONFIG_UPDATE
        assert data["chassis"] == "Azul"
        assert data["buttons"] == {"boton1": "Rojo"}
        assert data["faders"] == {}

    def test_from_dict(self):
        """Test loading a broadcast message."""
        record = ConfigurationRecord.from_dict({
            "type": CONFIG_UPDATE,
            "chassis": "Gris",
            "knobs": {"knob1_a": "Rosa"},
        })
        assert record.chassis == "Gris"
        assert record.knobs == {"knob1_a": "Rosa"}
        assert record.buttons == {}

    def test_broadcast_on_change(self):
        """Test every mutation sends the full record."""
        messages = []
        record = ConfigurationRecord()
        record.subscribe(messages.append)

        record.set_chassis("Negro")
        record.set_part("buttons", "boton1", "Rojo")

        assert len(messages) == 2
        assert messages[-1]["chassis"] == "Negro"
        assert messages[-1]["buttons"] == {"boton1": "Rojo"}

    def test_unsubscribe(self):
        messages = []
        record = ConfigurationRecord()
        record.subscribe(messages.append)
        record.unsubscribe(messages.append)
        record.set_chassis("Negro")
        assert messages == []

    def test_listener_error(self):
        """Test a failing listener does not stop other listeners."""
        messages = []

        def broken(message):
            raise RuntimeError("host page gone")

        record = ConfigurationRecord()
        record.subscribe(broken)
        record.subscribe(messages.append)
        record.set_chassis("Negro")

        assert len(messages) == 1

    def test_replace_keeps_listeners(self):
        messages = []
        record = ConfigurationRecord()
        record.subscribe(messages.append)
        record.replace(ConfigurationRecord(chassis="Rojo", faders={"fader1_1": "Azul"}))

        assert record.faders == {"fader1_1": "Azul"}
        assert messages[-1]["chassis"] == "Rojo"

    def test_unknown_bucket(self):
        with pytest.raises(KeyError):
            ConfigurationRecord().bucket("wheels")

    def test_specification(self):
        """Test the human-readable summary."""
        record = ConfigurationRecord(
            chassis="Azul",
            buttons={"boton1": "Rojo", "aro1": "Rojo"},
            knobs={"knob1_a": "Rosa"},
        )
        assert record.specification() == "Chassis: Azul, Buttons: Rojo, Rojo, Knobs: Rosa"

    def test_specification_default(self):
        assert ConfigurationRecord().specification() == "Chassis: Default"
