"""Shared fixtures for configurator tests."""

import pytest

from midi_configurator.configurator import (
    ColorApplicator,
    Selection,
    SceneMesh,
    classify_parts,
    get_product,
)

DARK = (0.1, 0.1, 0.1)


@pytest.fixture
def mixo():
    return get_product("mixo")


@pytest.fixture
def mixo_meshes():
    """Part listing of a small Mixo model."""
    return [
        SceneMesh("cubeChasis"),
        SceneMesh("boton1"),
        SceneMesh("aro1"),
        SceneMesh("boton2"),
        SceneMesh("knob1_a", base_color=DARK),
        SceneMesh("fader1_1", base_color=DARK),
    ]


@pytest.fixture
def classification(mixo, mixo_meshes):
    return classify_parts(mixo_meshes, mixo)


@pytest.fixture
def selection():
    return Selection()


@pytest.fixture
def applicator(classification, selection):
    return ColorApplicator(classification, selection, classification.record)
