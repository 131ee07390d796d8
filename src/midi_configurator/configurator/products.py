"""
Product definitions for the configurable controllers.

A product definition is the data that drives one configurator: which views it
offers, how sub-mesh names map to categories, default colors and finishes,
pairing policy, camera poses and checkout identifiers. The selection and
coloring code is shared; only this data differs between controllers.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from midi_configurator.configurator.palette import (
    CLASSIC_PALETTE,
    STUDIO_PALETTE,
    Category,
    Palette,
    View,
)
from midi_configurator.configurator.scene import Finish

Vector3 = Tuple[float, float, float]


class UnknownProductError(KeyError):
    """Raised when a product name has no definition."""


class RingFallback(str, Enum):
    """What a ring click does when its button cannot be resolved."""
    IGNORE = "ignore"  # Selection unchanged
    SELECT_RING = "select_ring"  # Select the ring itself


@dataclass(frozen=True)
class CameraPose:
    """Camera position and orbit target for a view."""
    position: Vector3
    target: Vector3


@dataclass(frozen=True)
class CategoryRule:
    """Naming rule that assigns a mesh to a category."""

    category: Category
    pattern: str
    default_color: str
    finish: Finish = Finish()
    # Parts at or above this baseline lightness stay fixed white
    tone_threshold: Optional[float] = None
    # Inclusive range for the index captured by the pattern's first group
    index_range: Optional[Tuple[int, int]] = None

    def matches(self, name: str) -> bool:
        """Check a mesh name against this rule (case-insensitive)."""
        match = re.search(self.pattern, name.lower())
        if match is None:
            return False
        if self.index_range is None or not match.groups():
            return True
        low, high = self.index_range
        return low <= int(match.group(1)) <= high


NORMAL_POSE = CameraPose(position=(2.0, 1.0, -0.1), target=(0.0, -0.5, -0.1))


@dataclass(frozen=True)
class ProductDefinition:
    """Configuration-driven description of one controller."""

    name: str
    title: str
    palette: Palette
    views: Tuple[View, ...]
    rules: Tuple[CategoryRule, ...]
    top_pose: CameraPose
    normal_pose: CameraPose = NORMAL_POSE
    ring_fallback: RingFallback = RingFallback.IGNORE

    # Checkout
    cart_product_id: str = ""
    package: str = "Paquete Pro"
    price: str = "185.00"
    currency: str = "USD"
    description: str = "Controlador MIDI personalizado"

    def rule_for(self, category: Category) -> Optional[CategoryRule]:
        for rule in self.rules:
            if rule.category == category:
                return rule
        return None

    def default_color(self, category: Category) -> Optional[str]:
        rule = self.rule_for(category)
        return rule.default_color if rule else None

    def pose_for(self, view: View) -> CameraPose:
        return self.normal_pose if view is View.NORMAL else self.top_pose

    @property
    def has_rings(self) -> bool:
        return self.rule_for(Category.RING) is not None

    @property
    def buckets(self) -> List[str]:
        return [view.bucket for view in self.views if view is not View.NORMAL]


CHASSIS_FINISH = Finish(metalness=0.9, roughness=0.1)
BUTTON_FINISH = Finish(metalness=0.4, roughness=0.2)
GLOSS_BUTTON_FINISH = Finish(metalness=0.0, roughness=0.0)
RING_FINISH = Finish(metalness=0.0, roughness=0.2, opacity=0.7)
MATTE_FINISH = Finish(metalness=0.0, roughness=1.0)


BEATO = ProductDefinition(
    name="beato",
    title="Beato",
    palette=CLASSIC_PALETTE,
    views=(View.NORMAL, View.CHASSIS, View.BUTTONS, View.KNOBS),
    rules=(
        CategoryRule(Category.CHASSIS, r"cubechasis", "Gris", CHASSIS_FINISH),
        CategoryRule(Category.BUTTON, r"boton", "Negro", BUTTON_FINISH),
        CategoryRule(Category.RING, r"aro", "Negro", BUTTON_FINISH),
        CategoryRule(Category.KNOB, r"knob", "Rosa", MATTE_FINISH, tone_threshold=0.5),
    ),
    top_pose=CameraPose(position=(1.0, 2.0, -0.6), target=(-0.1, -0.8, -0.6)),
    cart_product_id="3d58a487-8b74-2a0b-7e04-43fca04e5333",
    price="250.00",
    ring_fallback=RingFallback.SELECT_RING,
)

MIXO = ProductDefinition(
    name="mixo",
    title="Mixo",
    palette=STUDIO_PALETTE,
    views=(View.NORMAL, View.CHASSIS, View.BUTTONS, View.KNOBS, View.FADERS),
    rules=(
        CategoryRule(Category.CHASSIS, r"cubechasis", "Azul", CHASSIS_FINISH),
        CategoryRule(Category.BUTTON, r"boton", "Amarillo", GLOSS_BUTTON_FINISH),
        CategoryRule(Category.RING, r"aro", "Negro", RING_FINISH),
        CategoryRule(Category.KNOB, r"^knob[1-4]_", "Rosa", MATTE_FINISH, tone_threshold=0.5),
        # Fader caps are always selectable; other fader meshes only when dark
        CategoryRule(Category.FADER, r"^fader[1-4]_1$", "Rosa", MATTE_FINISH),
        CategoryRule(Category.FADER, r"fader", "Rosa", MATTE_FINISH, tone_threshold=0.8),
    ),
    top_pose=CameraPose(position=(1.0, 1.65, -0.6), target=(-0.35, -0.9, -0.6)),
)

FADO = ProductDefinition(
    name="fado",
    title="Fado",
    palette=STUDIO_PALETTE,
    views=(View.NORMAL, View.CHASSIS, View.FADERS),
    rules=(
        CategoryRule(Category.CHASSIS, r"cubechasis", "Azul", CHASSIS_FINISH),
        CategoryRule(Category.FADER, r"fader[_-]?(\d+)", "Rosa", MATTE_FINISH, index_range=(1, 8)),
    ),
    top_pose=CameraPose(position=(1.0, 1.65, -0.6), target=(-0.35, -0.9, -0.6)),
)

PRODUCTS: Dict[str, ProductDefinition] = {
    product.name: product for product in (BEATO, MIXO, FADO)
}


def get_product(name: str) -> ProductDefinition:
    """Get a product definition by name (case-insensitive)."""
    try:
        return PRODUCTS[name.lower()]
    except KeyError:
        raise UnknownProductError(f"Unknown product: {name}") from None


def list_products() -> List[ProductDefinition]:
    return list(PRODUCTS.values())
