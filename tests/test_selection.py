"""Tests for the selection state machine."""

from midi_configurator.configurator import Selection, SelectionMode


def names(parts):
    return sorted(part.name for part in parts)


class TestSelection:
    """Tests for Selection transitions."""

    def test_starts_empty(self):
        selection = Selection()
        assert selection.is_empty
        assert selection.parts == []
        assert selection.bucket is None

    def test_select_single(self, classification, selection):
        """Test a plain click arms one part and lights it."""
        boton = classification.get("boton1")
        selection.select(boton)

        assert selection.mode == SelectionMode.SINGLE
        assert selection.active is boton
        assert boton.highlighted

    def test_select_replaces(self, classification, selection):
        """Test a second plain click moves the highlight."""
        first = classification.get("boton1")
        second = classification.get("boton2")
        selection.select(first)
        selection.select(second)

        assert selection.active is second
        assert not first.highlighted
        assert second.highlighted

    def test_extend_toggle(self, classification, selection):
        """Test extend-clicks add and then remove members."""
        boton1 = classification.get("boton1")
        boton2 = classification.get("boton2")

        selection.extend(boton1)
        selection.extend(boton2)
        assert selection.mode == SelectionMode.MULTI
        assert names(selection.members) == ["boton1", "boton2"]

        selection.extend(boton1)
        assert selection.mode == SelectionMode.MULTI
        assert names(selection.members) == ["boton2"]
        assert not boton1.highlighted

    def test_extend_to_empty(self, classification, selection):
        """Test toggling off the last member empties the selection."""
        boton = classification.get("boton1")
        selection.extend(boton)
        selection.extend(boton)
        assert selection.is_empty
        assert not boton.highlighted

    def test_extend_from_single(self, classification, selection):
        """Test extending a single selection keeps the active part."""
        boton1 = classification.get("boton1")
        boton2 = classification.get("boton2")
        selection.select(boton1)
        selection.extend(boton2)

        assert selection.mode == SelectionMode.MULTI
        assert names(selection.members) == ["boton1", "boton2"]

    def test_extend_other_bucket(self, classification, selection):
        """Test extending with a part of another bucket starts over."""
        selection.extend(classification.get("boton1"))
        selection.extend(classification.get("knob1_a"))

        assert names(selection.members) == ["knob1_a"]
        assert selection.bucket == "knobs"
        assert not classification.get("boton1").highlighted

    def test_extend_chassis(self, classification, selection):
        """Test the chassis is never multi-selected."""
        chassis = classification.get("cubeChasis")
        selection.extend(chassis)
        assert selection.mode == SelectionMode.SINGLE
        assert selection.active is chassis

    def test_highlight_mirrors_selection(self, classification, selection):
        """Test highlighted parts always equal the selected parts."""
        clicks = ["boton1", "boton2", "aro1", "boton2", "boton1"]
        for name in clicks:
            selection.extend(classification.get(name))
            lit = [p.name for p in classification.parts if p.highlighted]
            assert sorted(lit) == names(selection.parts)
            assert names(selection.highlighted) == names(selection.parts)

    def test_clear(self, classification, selection):
        selection.extend(classification.get("boton1"))
        selection.extend(classification.get("boton2"))
        selection.clear()

        assert selection.is_empty
        assert not any(p.highlighted for p in classification.parts)

    def test_dim_keeps_selection(self, classification, selection):
        """Test dimming drops the highlight but keeps the part armed."""
        boton = classification.get("boton1")
        selection.select(boton)
        selection.dim()

        assert selection.mode == SelectionMode.SINGLE
        assert not boton.highlighted
        assert selection.highlighted == []
