"""Tests for button/ring pairing."""

from midi_configurator.configurator import Category, Part, SceneMesh
from midi_configurator.configurator.pairing import PairingTable, name_index


def make_part(name, category):
    return Part(name=name, category=category, color_name="Negro", mesh=SceneMesh(name))


class TestNameIndex:
    """Tests for name_index."""

    def test_first_digit_run(self):
        assert name_index("boton12") == "12"
        assert name_index("knob3_4") == "3"

    def test_no_digits(self):
        assert name_index("cubeChasis") is None


class TestPairingTable:
    """Tests for PairingTable."""

    def test_button_and_ring(self):
        """Test buttons and rings find each other by index."""
        boton = make_part("boton1", Category.BUTTON)
        aro = make_part("aro1", Category.RING)
        table = PairingTable([boton, aro])

        assert table.find_companion(boton) is aro
        assert table.find_companion(aro) is boton

    def test_companion_miss(self):
        """Test a part without a counterpart has no companion."""
        boton = make_part("boton2", Category.BUTTON)
        table = PairingTable([boton, make_part("aro1", Category.RING)])
        assert table.find_companion(boton) is None

    def test_other_categories(self):
        """Test knobs and faders never pair."""
        knob = make_part("knob1_a", Category.KNOB)
        table = PairingTable([knob, make_part("boton1", Category.BUTTON)])
        assert table.find_companion(knob) is None
        assert len(table) == 1

    def test_duplicate_index_keeps_first(self):
        """Test the first part with a given index wins."""
        first = make_part("boton1", Category.BUTTON)
        second = make_part("boton1_copy", Category.BUTTON)
        aro = make_part("aro1", Category.RING)
        table = PairingTable([first, second, aro])

        assert table.find_companion(aro) is first

    def test_from_classification(self, classification):
        """Test the classifier builds the table once."""
        assert classification.find_companion("boton1").name == "aro1"
        assert classification.find_companion("boton2") is None
        assert classification.find_companion("missing") is None
