"""
Configurator session: one product, one loaded model, one user.

Wires the classifier, selection state machine, color applicator, view
controller and client storage behind the handful of events the UI produces:
pointer clicks, swatch clicks, view buttons and add-to-cart.

Usage:
    session = ConfiguratorSession("mixo", storage=ClientStorage(path))
    session.on_update(host.post_message)
    session.load(scene)
    session.change_view("buttons")
    session.click(["boton1"])
    session.apply_swatch("Rojo")
"""

from typing import Callable, Iterable, List, Optional, Sequence, Union

from midi_configurator.configurator.applicator import ColorApplicator, NoticeListener
from midi_configurator.configurator.cart import build_cart_payload
from midi_configurator.configurator.classifier import Classification, Part, classify_parts
from midi_configurator.configurator.palette import Category, Color, View
from midi_configurator.configurator.products import ProductDefinition, RingFallback, get_product
from midi_configurator.configurator.record import ConfigurationRecord, RecordListener
from midi_configurator.configurator.scene import SceneMesh
from midi_configurator.configurator.selection import Selection
from midi_configurator.configurator.storage import ClientStorage
from midi_configurator.configurator.views import ViewController
from midi_configurator.utils import get_logger

logger = get_logger("configurator.session")

CartListener = Callable[[dict], None]


class ConfiguratorSession:
    """Interactive configurator state for one product."""

    def __init__(
        self,
        product: Union[str, ProductDefinition],
        storage: Optional[ClientStorage] = None,
    ):
        self.product = get_product(product) if isinstance(product, str) else product
        self.storage = storage
        self.record = ConfigurationRecord()
        self.selection = Selection()
        self.classification = Classification.empty(self.product)
        self.applicator = ColorApplicator(self.classification, self.selection, self.record)
        self.interactive = False
        self._cart_listeners: List[CartListener] = []

        view = storage.load_view(self.product.name) if storage else None
        if view not in self.product.views:
            view = View.NORMAL
        self.views = ViewController(self.product, self.selection, view=view)

        if storage is not None:
            self.record.subscribe(self._persist_record)

    # Listeners

    def on_update(self, listener: RecordListener) -> None:
        """Receive the full record on every change (host page broadcast)."""
        self.record.subscribe(listener)

    def on_notice(self, listener: NoticeListener) -> None:
        self.applicator.on_notice(listener)

    def on_cart(self, listener: CartListener) -> None:
        self._cart_listeners.append(listener)

    # State

    @property
    def view(self) -> View:
        return self.views.current

    def palette(self) -> List[Color]:
        """Swatches offered in the current view."""
        return self.product.palette.colors(self.view.bucket)

    def pickable(self) -> List[Part]:
        """Parts the pointer ray is tested against in the current view."""
        if self.view is View.NORMAL:
            return self.classification.bucket("buttons")
        return self.classification.bucket(self.view.bucket)

    # Events

    def load(self, meshes: Iterable[SceneMesh]) -> Classification:
        """Classify a freshly loaded model and rehydrate stored choices."""
        stored = self.storage.load_record(self.product.name) if self.storage else None

        result = classify_parts(meshes, self.product)
        self.selection.clear()
        self.record.replace(result.record)
        result.record = self.record
        self.classification = result
        self.applicator.classification = result

        if stored is not None:
            self.applicator.restore(stored, self.product.palette)
            logger.info(f"Restored saved configuration for {self.product.name}")

        chassis = result.bucket("chassis")
        if self.view is View.CHASSIS and chassis:
            self.selection.select(chassis[0])

        self.interactive = True
        return result

    def load_failed(self, error: Exception) -> None:
        """Record a model load failure; the session stays non-interactive."""
        logger.error(f"Model load failed for {self.product.name}: {error}")
        self.selection.clear()
        self.classification = Classification.empty(self.product)
        self.applicator.classification = self.classification
        self.interactive = False

    def click(self, hits: Sequence[str], extend: bool = False) -> None:
        """
        Handle a pointer click.

        Args:
            hits: Names of meshes under the pointer, nearest first
            extend: Whether the extend modifier (shift) was held
        """
        if not self.interactive:
            return

        # The chassis view has no pickable parts
        if self.view is View.CHASSIS:
            return

        pickable = {part.name: part for part in self.pickable()}
        part = next((pickable[name] for name in hits if name in pickable), None)

        if self.view is View.NORMAL:
            return

        if part is None:
            self.selection.clear()
            return

        if self.view is View.BUTTONS and part.category == Category.RING:
            companion = self.classification.pairing.find_companion(part)
            if companion is not None:
                part = companion
            elif self.product.ring_fallback == RingFallback.IGNORE:
                logger.debug(f"No button for ring {part.name}, ignoring click")
                return

        if extend:
            self.selection.extend(part)
        else:
            self.selection.select(part)

    def apply_swatch(self, color_name: str) -> bool:
        """Apply a palette color of the current view by name."""
        if self.view is View.NORMAL:
            self.applicator.notify("Choose an editing view to apply colors.")
            return False
        color = self.product.palette.lookup(self.view.bucket, color_name)
        return self.apply_color(color.name, color.hex)

    def apply_color(self, color_name: str, color_value: str) -> bool:
        if not self.interactive:
            self.applicator.notify("The model is not ready yet.")
            return False
        return self.applicator.apply_color(self.view, color_name, color_value)

    def change_view(self, view: Union[str, View]) -> int:
        """Switch view; returns the camera move token."""
        token = self.views.change_view(view, self.classification)
        if self.storage is not None:
            self.storage.save_view(self.product.name, self.view)
        return token

    def add_to_cart(self, package: Optional[str] = None, price: Optional[str] = None) -> dict:
        """Broadcast the cart payload for the current configuration."""
        payload = build_cart_payload(self.record, self.product, package=package, price=price)
        for listener in self._cart_listeners:
            listener(payload)
        logger.info(f"Cart payload sent for {self.product.name}")
        return payload

    def _persist_record(self, message: dict) -> None:
        self.storage.save_record(self.product.name, message)
