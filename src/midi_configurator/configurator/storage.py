"""Client-local storage for configurator sessions.

A small key/value store persisted as one JSON file, keyed the way the
browser build keys its local storage (``<product>_currentView`` and
``<product>_chosenColors``).
"""

import json
from pathlib import Path
from typing import Dict, Optional

from midi_configurator.config import get_settings
from midi_configurator.configurator.palette import View
from midi_configurator.configurator.record import ConfigurationRecord
from midi_configurator.utils import get_logger

logger = get_logger("configurator.storage")


class ClientStorage:
    """String key/value store backed by a JSON file."""

    def __init__(self, data_file: Optional[Path] = None):
        self.data_file = Path(data_file or get_settings().data_dir / "client_storage.json")
        self._items: Dict[str, str] = {}
        self._load()

    def _load(self) -> None:
        """Load items from disk."""
        if self.data_file.exists():
            try:
                with open(self.data_file) as f:
                    self._items = {str(k): str(v) for k, v in json.load(f).items()}
                logger.debug(f"Loaded {len(self._items)} stored items")
            except Exception as e:
                logger.error(f"Failed to load client storage: {e}")
                self._items = {}

    def _save(self) -> None:
        """Save items to disk."""
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.data_file, "w") as f:
            json.dump(self._items, f, indent=2)

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._save()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._save()

    # Session helpers

    def save_view(self, product: str, view: View) -> None:
        self.set_item(f"{product}_currentView", view.value)

    def load_view(self, product: str) -> Optional[View]:
        saved = self.get_item(f"{product}_currentView")
        if saved is None:
            return None
        try:
            return View(saved)
        except ValueError:
            logger.warning(f"Ignoring stored view {saved!r} for {product}")
            return None

    def save_record(self, product: str, record: dict) -> None:
        self.set_item(f"{product}_chosenColors", json.dumps(record))

    def load_record(self, product: str) -> Optional[ConfigurationRecord]:
        saved = self.get_item(f"{product}_chosenColors")
        if saved is None:
            return None
        try:
            return ConfigurationRecord.from_dict(json.loads(saved))
        except (ValueError, AttributeError) as e:
            logger.error(f"Error parsing saved colors for {product}: {e}")
            return None

    def clear(self, product: str) -> None:
        self.remove_item(f"{product}_currentView")
        self.remove_item(f"{product}_chosenColors")
