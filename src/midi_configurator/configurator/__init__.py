"""Mesh selection and color application for the controller configurators."""

from midi_configurator.configurator.palette import (
    Category,
    Color,
    Palette,
    View,
    UnknownColorError,
)
from midi_configurator.configurator.products import (
    ProductDefinition,
    CategoryRule,
    RingFallback,
    UnknownProductError,
    get_product,
    list_products,
    PRODUCTS,
)
from midi_configurator.configurator.scene import (
    Scene,
    SceneMesh,
    Material,
    Finish,
)
from midi_configurator.configurator.classifier import (
    Part,
    Classification,
    classify_parts,
)
from midi_configurator.configurator.record import ConfigurationRecord
from midi_configurator.configurator.selection import Selection, SelectionMode
from midi_configurator.configurator.applicator import ColorApplicator
from midi_configurator.configurator.views import (
    CameraAnimator,
    CameraRig,
    ViewController,
    UnknownViewError,
)
from midi_configurator.configurator.storage import ClientStorage
from midi_configurator.configurator.cart import build_cart_payload
from midi_configurator.configurator.session import ConfiguratorSession

__all__ = [
    "Category",
    "Color",
    "Palette",
    "View",
    "UnknownColorError",
    "ProductDefinition",
    "CategoryRule",
    "RingFallback",
    "UnknownProductError",
    "get_product",
    "list_products",
    "PRODUCTS",
    "Scene",
    "SceneMesh",
    "Material",
    "Finish",
    "Part",
    "Classification",
    "classify_parts",
    "ConfigurationRecord",
    "Selection",
    "SelectionMode",
    "ColorApplicator",
    "CameraAnimator",
    "CameraRig",
    "ViewController",
    "UnknownViewError",
    "ClientStorage",
    "build_cart_payload",
    "ConfiguratorSession",
]
