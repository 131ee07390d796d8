"""
Part classification for loaded controller models.

Scans the named sub-meshes of a model once, buckets them into selectable
categories by naming convention, assigns default colors and finishes, and
builds the button/ring pairing table.

Usage:
    from midi_configurator.configurator.classifier import classify_parts
    from midi_configurator.configurator.products import get_product

    result = classify_parts(scene, get_product("mixo"))
    print([p.name for p in result.buckets["buttons"]])
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from midi_configurator.configurator.palette import CATEGORY_BUCKETS, Category
from midi_configurator.configurator.pairing import PairingTable
from midi_configurator.configurator.products import CategoryRule, ProductDefinition
from midi_configurator.configurator.record import ConfigurationRecord
from midi_configurator.configurator.scene import Material, SceneMesh
from midi_configurator.utils import get_logger

logger = get_logger("configurator.classifier")

FIXED_WHITE = "#FFFFFF"


@dataclass(eq=False)
class Part:
    """A selectable, independently colorable piece of the model."""

    name: str
    category: Category
    color_name: str
    mesh: SceneMesh = field(repr=False)

    @property
    def bucket(self) -> str:
        return CATEGORY_BUCKETS[self.category]

    @property
    def highlighted(self) -> bool:
        return self.mesh.highlighted

    def set_highlight(self, on: bool) -> None:
        self.mesh.set_highlight(on)

    def paint(self, color_name: str, hex_value: str) -> None:
        """Set the rendered color and remember its name."""
        self.mesh.material.color = hex_value
        self.color_name = color_name


@dataclass
class Classification:
    """Result of classifying a model's meshes."""

    buckets: Dict[str, List[Part]]
    record: ConfigurationRecord
    pairing: PairingTable
    # Light-toned parts kept white and excluded from selection
    fixed: List[SceneMesh] = field(default_factory=list)
    unclassified: List[SceneMesh] = field(default_factory=list)

    @property
    def parts(self) -> List[Part]:
        return [part for bucket in self.buckets.values() for part in bucket]

    def get(self, name: str) -> Optional[Part]:
        for part in self.parts:
            if part.name == name:
                return part
        return None

    def bucket(self, name: str) -> List[Part]:
        return self.buckets.get(name, [])

    def find_companion(self, part_name: str) -> Optional[Part]:
        """Companion part of a named part (ring for a button and back)."""
        part = self.get(part_name)
        if part is None:
            return None
        return self.pairing.find_companion(part)

    @classmethod
    def empty(cls, product: ProductDefinition) -> "Classification":
        return cls(
            buckets={bucket: [] for bucket in product.buckets},
            record=ConfigurationRecord(),
            pairing=PairingTable(),
        )


def match_rule(name: str, product: ProductDefinition) -> Optional[CategoryRule]:
    """First rule of the product matching a mesh name."""
    for rule in product.rules:
        if rule.matches(name):
            return rule
    return None


def classify_parts(meshes: Iterable[SceneMesh], product: ProductDefinition) -> Classification:
    """
    Bucket a model's meshes into selectable categories.

    Args:
        meshes: Named meshes in traversal order
        product: Definition supplying naming rules and defaults

    Returns:
        Classification with buckets, default record and pairing table.
        Each classified mesh gets a fresh material in its default color.
    """
    result = Classification.empty(product)
    record = result.record

    for mesh in meshes:
        rule = match_rule(mesh.name, product)
        if rule is None:
            result.unclassified.append(mesh)
            continue

        if rule.tone_threshold is not None:
            lightness = mesh.lightness
            if lightness is None:
                logger.debug(f"No baseline color for {mesh.name}, skipping")
                result.unclassified.append(mesh)
                continue
            if lightness >= rule.tone_threshold:
                mesh.material = Material(color=FIXED_WHITE)
                result.fixed.append(mesh)
                continue

        color = product.palette.color(rule.category, rule.default_color)
        mesh.material = Material.with_finish(color.hex, rule.finish)
        part = Part(name=mesh.name, category=rule.category, color_name=color.name, mesh=mesh)
        result.buckets.setdefault(part.bucket, []).append(part)
        result.pairing.add(part)

        if rule.category == Category.CHASSIS:
            record.chassis = color.name
        else:
            record.bucket(part.bucket)[part.name] = color.name

    if not record.chassis:
        record.chassis = product.default_color(Category.CHASSIS) or ""

    logger.info(
        f"Classified {len(result.parts)} parts for {product.name}: "
        + ", ".join(f"{k}={len(v)}" for k, v in result.buckets.items())
    )
    return result
