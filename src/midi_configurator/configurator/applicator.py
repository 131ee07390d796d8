"""Color application onto the current selection."""

from typing import Callable, Dict, List, Optional

from midi_configurator.configurator.classifier import Classification, Part
from midi_configurator.configurator.palette import Palette, UnknownColorError, View
from midi_configurator.configurator.record import PART_BUCKETS, ConfigurationRecord
from midi_configurator.configurator.selection import Selection, SelectionMode
from midi_configurator.utils import get_logger

logger = get_logger("configurator.applicator")

NOTHING_SELECTED = "Click a part of the controller to apply the color."

NoticeListener = Callable[[str], None]


class ColorApplicator:
    """
    Applies palette swatches to the selected parts.

    The applicator is the only writer of part colors and of the
    configuration record, so what is rendered and what is recorded
    agree after every call.
    """

    def __init__(
        self,
        classification: Classification,
        selection: Selection,
        record: ConfigurationRecord,
    ):
        self.classification = classification
        self.selection = selection
        self.record = record
        self._notice_listeners: List[NoticeListener] = []

    def on_notice(self, listener: NoticeListener) -> None:
        """Register a callback for user-facing notices."""
        self._notice_listeners.append(listener)

    def notify(self, message: str) -> None:
        logger.info(message)
        for listener in self._notice_listeners:
            listener(message)

    def apply_color(self, view: View, color_name: str, color_value: str) -> bool:
        """
        Paint the current target(s) of a view.

        Args:
            view: Active view
            color_name: Palette name recorded in the configuration
            color_value: Hex color written to the materials

        Returns:
            True if anything was painted, False if nothing was selected
        """
        if view is View.CHASSIS:
            return self._apply_chassis(color_name, color_value)

        if view is not View.NORMAL and self.selection.mode == SelectionMode.MULTI:
            members = self.selection.members
            self._paint_parts(members, color_name, color_value)
            self.selection.clear()
            return True

        if self.selection.mode == SelectionMode.SINGLE:
            part = self.selection.active
            if part.bucket == "chassis":
                return self._apply_chassis(color_name, color_value)
            self._paint_parts([part], color_name, color_value)
            self.selection.dim()
            return True

        self.notify(NOTHING_SELECTED)
        return False

    def restore(self, stored: ConfigurationRecord, palette: Palette) -> None:
        """Repaint classified parts from a stored record.

        Entries naming unknown parts or colors are skipped; the resulting
        record matches what ends up rendered.
        """
        chassis = self.classification.bucket("chassis")
        if stored.chassis and chassis:
            try:
                color = palette.lookup("chassis", stored.chassis)
            except UnknownColorError:
                logger.warning(f"Ignoring stored chassis color {stored.chassis}")
            else:
                for part in chassis:
                    part.paint(color.name, color.hex)
                self.record.chassis = color.name

        for bucket in PART_BUCKETS:
            target = self.record.bucket(bucket)
            for name, color_name in stored.bucket(bucket).items():
                part = self.classification.get(name)
                if part is None or part.bucket != bucket:
                    continue
                try:
                    color = palette.lookup(bucket, color_name)
                except UnknownColorError:
                    logger.warning(f"Ignoring stored color {color_name} for {name}")
                    continue
                part.paint(color.name, color.hex)
                target[name] = color.name

        self.record.publish()

    def _apply_chassis(self, color_name: str, color_value: str) -> bool:
        for part in self.classification.bucket("chassis"):
            part.paint(color_name, color_value)
        self.record.set_chassis(color_name)
        return True

    def _paint_parts(self, parts: List[Part], color_name: str, color_value: str) -> None:
        updates: Dict[str, Dict[str, str]] = {}
        for part in parts:
            for target in self._with_companion(part):
                target.paint(color_name, color_value)
                updates.setdefault(target.bucket, {})[target.name] = color_name
        for bucket, colors in updates.items():
            self.record.set_parts(bucket, colors)

    def _with_companion(self, part: Part) -> List[Part]:
        companion: Optional[Part] = self.classification.pairing.find_companion(part)
        return [part, companion] if companion is not None else [part]
