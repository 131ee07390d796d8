"""Tests for color application."""

from midi_configurator.configurator import View
from midi_configurator.configurator.applicator import NOTHING_SELECTED

ROJO = "#E52421"


class TestApplyColor:
    """Tests for ColorApplicator.apply_color."""

    def test_single_with_companion(self, classification, selection, applicator):
        """Test painting a button also paints its ring."""
        selection.select(classification.get("boton1"))
        assert applicator.apply_color(View.BUTTONS, "Rojo", ROJO)

        record = classification.record
        assert record.buttons["boton1"] == "Rojo"
        assert record.buttons["aro1"] == "Rojo"
        assert record.buttons["boton2"] == "Amarillo"
        assert classification.get("aro1").mesh.material.color == ROJO
        assert classification.get("boton1").color_name == "Rojo"

    def test_nothing_selected(self, classification, applicator):
        """Test applying without a selection only raises a notice."""
        notices = []
        applicator.on_notice(notices.append)
        before = classification.record.to_dict()

        assert not applicator.apply_color(View.BUTTONS, "Rojo", ROJO)
        assert classification.record.to_dict() == before
        assert notices == [NOTHING_SELECTED]

    def test_chassis_uniform(self, mixo, selection):
        """Test the chassis view paints every chassis part."""
        from midi_configurator.configurator import ColorApplicator, SceneMesh, classify_parts

        result = classify_parts([SceneMesh("cubeChasis"), SceneMesh("cubeChasis.001")], mixo)
        applicator = ColorApplicator(result, selection, result.record)

        assert applicator.apply_color(View.CHASSIS, "Rojo", ROJO)
        assert {p.mesh.material.color for p in result.bucket("chassis")} == {ROJO}
        assert result.record.chassis == "Rojo"

    def test_single_chassis_part(self, classification, selection, applicator):
        """Test a selected chassis part recolors the whole chassis."""
        selection.select(classification.get("cubeChasis"))
        applicator.apply_color(View.BUTTONS, "Verde", "#7CBA40")
        assert classification.record.chassis == "Verde"

    def test_multi(self, classification, selection, applicator):
        """Test a multi-selection paints all members and companions."""
        selection.extend(classification.get("boton1"))
        selection.extend(classification.get("boton2"))

        assert applicator.apply_color(View.BUTTONS, "Rojo", ROJO)
        assert classification.record.buttons == {"boton1": "Rojo", "aro1": "Rojo", "boton2": "Rojo"}
        assert selection.is_empty
        assert not any(p.highlighted for p in classification.parts)

    def test_multi_single_update(self, classification, selection, applicator):
        """Test a multi-selection broadcasts one update."""
        messages = []
        classification.record.subscribe(messages.append)
        selection.extend(classification.get("boton1"))
        selection.extend(classification.get("boton2"))

        applicator.apply_color(View.BUTTONS, "Rojo", ROJO)
        assert len(messages) == 1
        assert messages[0]["buttons"]["boton2"] == "Rojo"

    def test_single_dims_highlight(self, classification, selection, applicator):
        """Test the highlight goes off after painting a single part."""
        boton = classification.get("boton1")
        selection.select(boton)
        applicator.apply_color(View.BUTTONS, "Rojo", ROJO)

        assert not boton.highlighted
        assert selection.active is boton

    def test_idempotent(self, classification, selection, applicator):
        """Test applying the same color twice changes nothing further."""
        selection.select(classification.get("boton1"))
        applicator.apply_color(View.BUTTONS, "Rojo", ROJO)
        first = classification.record.to_dict()

        assert applicator.apply_color(View.BUTTONS, "Rojo", ROJO)
        assert classification.record.to_dict() == first

    def test_knob(self, classification, selection, applicator):
        """Test knobs have no companion."""
        selection.select(classification.get("knob1_a"))
        applicator.apply_color(View.KNOBS, "Verde", "#7CBA40")
        assert classification.record.knobs == {"knob1_a": "Verde"}
        assert classification.record.buttons["boton1"] == "Amarillo"


class TestRestore:
    """Tests for ColorApplicator.restore."""

    def test_restore(self, mixo, classification, applicator):
        """Test stored choices are repainted and recorded."""
        from midi_configurator.configurator import ConfigurationRecord

        stored = ConfigurationRecord(
            chassis="Negro",
            buttons={"boton1": "Rojo", "ghost9": "Verde"},
            knobs={"knob1_a": "NotAColor"},
        )
        applicator.restore(stored, mixo.palette)

        record = classification.record
        assert record.chassis == "Negro"
        assert record.buttons["boton1"] == "Rojo"
        assert "ghost9" not in record.buttons
        assert record.knobs["knob1_a"] == "Rosa"
        assert classification.get("boton1").mesh.material.color == ROJO
