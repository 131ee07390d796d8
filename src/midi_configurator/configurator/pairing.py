"""Button/ring pairing by shared naming index."""

import re
from typing import TYPE_CHECKING, Dict, Iterable, Optional

from midi_configurator.configurator.palette import Category
from midi_configurator.utils import get_logger

logger = get_logger("configurator.pairing")

if TYPE_CHECKING:
    from midi_configurator.configurator.classifier import Part

_DIGITS = re.compile(r"\d+")

# Category whose parts follow a primary part's color
COMPANION_CATEGORY = {
    Category.BUTTON: Category.RING,
    Category.RING: Category.BUTTON,
}


def name_index(name: str) -> Optional[str]:
    """First run of digits in a part name, if any."""
    match = _DIGITS.search(name)
    return match.group(0) if match else None


class PairingTable:
    """Companion lookup built once from classified parts.

    Parts are keyed by their category and embedded digit run. When two parts
    of the same category share a digit run, the first in traversal order is
    kept.
    """

    def __init__(self, parts: Iterable["Part"] = ()):
        self._by_index: Dict[Category, Dict[str, "Part"]] = {}
        for part in parts:
            self.add(part)

    def add(self, part: "Part") -> None:
        if part.category not in COMPANION_CATEGORY:
            return
        index = name_index(part.name)
        if index is None:
            return
        slot = self._by_index.setdefault(part.category, {})
        if index in slot:
            logger.warning(
                f"Duplicate index {index} for {part.category.value}: "
                f"keeping {slot[index].name}, ignoring {part.name}"
            )
            return
        slot[index] = part

    def find_companion(self, part: "Part") -> Optional["Part"]:
        """Companion of a part, or None when the category has none or no match."""
        companion_category = COMPANION_CATEGORY.get(part.category)
        if companion_category is None:
            return None
        index = name_index(part.name)
        if index is None:
            return None
        return self._by_index.get(companion_category, {}).get(index)

    def __len__(self) -> int:
        return sum(len(slot) for slot in self._by_index.values())

