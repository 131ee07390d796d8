"""
Selection state machine for configurator views.

States:
- EMPTY: nothing armed for coloring
- SINGLE: one active part
- MULTI: an unordered set of parts from one bucket (extend-clicks)

The highlight overlay always mirrors the selection: after every transition the
highlighted parts are exactly the selected ones.
"""

from enum import Enum
from typing import List, Optional

from midi_configurator.configurator.classifier import Part
from midi_configurator.configurator.palette import Category
from midi_configurator.utils import get_logger

logger = get_logger("configurator.selection")


class SelectionMode(str, Enum):
    """Current selection state."""
    EMPTY = "empty"
    SINGLE = "single"
    MULTI = "multi"


class Selection:
    """Parts currently armed for coloring."""

    def __init__(self):
        self.mode = SelectionMode.EMPTY
        self.active: Optional[Part] = None
        self._members: List[Part] = []
        self._lit: List[Part] = []

    @property
    def members(self) -> List[Part]:
        """Multi-selection members in click order."""
        return list(self._members)

    @property
    def parts(self) -> List[Part]:
        """Every selected part regardless of mode."""
        if self.mode == SelectionMode.MULTI:
            return list(self._members)
        if self.mode == SelectionMode.SINGLE:
            return [self.active]
        return []

    @property
    def bucket(self) -> Optional[str]:
        parts = self.parts
        return parts[0].bucket if parts else None

    @property
    def is_empty(self) -> bool:
        return self.mode == SelectionMode.EMPTY

    @property
    def highlighted(self) -> List[Part]:
        return list(self._lit)

    def __contains__(self, part: Part) -> bool:
        return any(p is part for p in self.parts)

    def clear(self) -> None:
        """Transition to EMPTY and drop every highlight."""
        self._transition(SelectionMode.EMPTY, None, [])

    def select(self, part: Part) -> None:
        """Plain click: make a part the single active selection."""
        self._transition(SelectionMode.SINGLE, part, [])

    def extend(self, part: Part) -> None:
        """Extend-click: build up or toggle the multi-selection."""
        if part.category == Category.CHASSIS:
            self.select(part)
            return

        if self.bucket is not None and self.bucket != part.bucket:
            self._transition(SelectionMode.MULTI, None, [part])
            return

        if self.mode == SelectionMode.EMPTY:
            members = [part]
        elif self.mode == SelectionMode.SINGLE:
            members = [self.active] if self.active is part else [self.active, part]
        elif part in self:
            members = [p for p in self._members if p is not part]
        else:
            members = self._members + [part]

        if members:
            self._transition(SelectionMode.MULTI, None, members)
        else:
            self._transition(SelectionMode.EMPTY, None, [])

    def dim(self) -> None:
        """Turn the highlight off while keeping the selection armed."""
        for part in self._lit:
            part.set_highlight(False)
        self._lit = []

    def _transition(self, mode: SelectionMode, active: Optional[Part], members: List[Part]) -> None:
        self.mode = mode
        self.active = active
        self._members = members

        lit = self.parts
        for part in self._lit:
            if not any(p is part for p in lit):
                part.set_highlight(False)
        for part in lit:
            part.set_highlight(True)
        self._lit = lit

        logger.debug(f"Selection {mode.value}: {[p.name for p in lit]}")
