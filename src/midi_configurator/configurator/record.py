"""Configuration record: the user's accumulated color choices."""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from midi_configurator.utils import get_logger

logger = get_logger("configurator.record")

CONFIG_UPDATE = "configUpdate"
PART_BUCKETS = ("buttons", "knobs", "faders")

RecordListener = Callable[[dict], None]


@dataclass
class ConfigurationRecord:
    """Chosen color names, one chassis-wide plus one per part.

    Every mutation re-broadcasts the full record to the registered
    listeners as a ``configUpdate`` message.
    """

    chassis: str = ""
    buttons: Dict[str, str] = field(default_factory=dict)
    knobs: Dict[str, str] = field(default_factory=dict)
    faders: Dict[str, str] = field(default_factory=dict)
    _listeners: List[RecordListener] = field(default_factory=list, repr=False, compare=False)

    def subscribe(self, listener: RecordListener) -> None:
        """Register a callback receiving every update message."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: RecordListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def bucket(self, name: str) -> Dict[str, str]:
        if name not in PART_BUCKETS:
            raise KeyError(f"Unknown record bucket: {name}")
        return getattr(self, name)

    def color_of(self, bucket: str, part_name: str) -> Optional[str]:
        if bucket == "chassis":
            return self.chassis or None
        return self.bucket(bucket).get(part_name)

    def set_chassis(self, color_name: str) -> None:
        self.chassis = color_name
        self._emit()

    def set_parts(self, bucket: str, colors: Dict[str, str]) -> None:
        """Record several part colors as one mutation."""
        self.bucket(bucket).update(colors)
        self._emit()

    def set_part(self, bucket: str, part_name: str, color_name: str) -> None:
        self.set_parts(bucket, {part_name: color_name})

    def replace(self, other: "ConfigurationRecord") -> None:
        """Take over another record's choices, keeping listeners."""
        self.chassis = other.chassis
        self.buttons = dict(other.buttons)
        self.knobs = dict(other.knobs)
        self.faders = dict(other.faders)
        self._emit()

    def publish(self) -> None:
        """Broadcast the current record without changing it."""
        self._emit()

    def specification(self) -> str:
        """Human-readable summary joining the chosen color names."""
        parts = [f"Chassis: {self.chassis or 'Default'}"]
        for label, bucket in (("Buttons", self.buttons), ("Knobs", self.knobs), ("Faders", self.faders)):
            if bucket:
                parts.append(f"{label}: {', '.join(bucket.values())}")
        return ", ".join(parts)

    def to_dict(self) -> dict:
        """Convert to the broadcast message."""
        return {
            "type": CONFIG_UPDATE,
            "chassis": self.chassis,
            "buttons": dict(self.buttons),
            "knobs": dict(self.knobs),
            "faders": dict(self.faders),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ConfigurationRecord":
        """Create from a broadcast message or stored copy."""
        return cls(
            chassis=data.get("chassis", ""),
            buttons=dict(data.get("buttons", {})),
            knobs=dict(data.get("knobs", {})),
            faders=dict(data.get("faders", {})),
        )

    def _emit(self) -> None:
        message = self.to_dict()
        for listener in list(self._listeners):
            try:
                listener(message)
            except Exception as e:
                logger.error(f"Record listener error: {e}")
