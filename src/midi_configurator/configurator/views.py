"""
View switching and camera transitions.

Camera moves are time-based interpolations spread over many frames. Each move
gets a token; starting a new move supersedes the previous one, and frames of a
superseded move are dropped (last write wins).
"""

from dataclasses import dataclass
from typing import Optional

from midi_configurator.configurator.classifier import Classification
from midi_configurator.configurator.palette import View
from midi_configurator.configurator.products import CameraPose, ProductDefinition, Vector3
from midi_configurator.configurator.selection import Selection
from midi_configurator.utils import get_logger

logger = get_logger("configurator.views")

TRANSITION_SECONDS = 1.2


class UnknownViewError(ValueError):
    """Raised when a product does not offer the requested view."""


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out over 0..1."""
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    return tuple(x + (y - x) * t for x, y in zip(a, b))


@dataclass
class CameraRig:
    """Camera state read by the renderer each frame."""
    position: Vector3
    target: Vector3
    orbit_enabled: bool = True


@dataclass
class CameraTransition:
    """One in-flight camera move."""

    token: int
    start: CameraPose
    end: CameraPose
    duration: float = TRANSITION_SECONDS
    elapsed: float = 0.0

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(self.elapsed / self.duration, 1.0)

    @property
    def finished(self) -> bool:
        return self.progress >= 1.0

    def pose_at(self, progress: float) -> CameraPose:
        eased = ease_in_out_cubic(progress)
        return CameraPose(
            position=lerp(self.start.position, self.end.position, eased),
            target=lerp(self.start.target, self.end.target, eased),
        )


class CameraAnimator:
    """Drives camera transitions with a current-token policy."""

    def __init__(self, rig: CameraRig, duration: float = TRANSITION_SECONDS):
        self.rig = rig
        self.duration = duration
        self._token = 0
        self._current: Optional[CameraTransition] = None

    @property
    def current_token(self) -> int:
        return self._token

    @property
    def in_flight(self) -> bool:
        return self._current is not None and not self._current.finished

    def start(self, pose: CameraPose) -> int:
        """Start a move to a pose, superseding any move in flight."""
        self._token += 1
        self._current = CameraTransition(
            token=self._token,
            start=CameraPose(self.rig.position, self.rig.target),
            end=pose,
            duration=self.duration,
        )
        return self._token

    def advance(self, dt: float, token: Optional[int] = None) -> bool:
        """Advance the current move by dt seconds.

        Frames carrying a stale token are ignored. Returns True once the
        current move has reached its pose.
        """
        transition = self._current
        if transition is None:
            return True
        if token is not None and token != transition.token:
            logger.debug(f"Dropping frame for superseded camera move {token}")
            return False
        transition.elapsed += dt
        pose = transition.pose_at(transition.progress)
        self.rig.position = pose.position
        self.rig.target = pose.target
        return transition.finished

    def complete(self, token: int) -> bool:
        """Snap to the end pose if the token is still current."""
        transition = self._current
        if transition is None or transition.token != token:
            return False
        transition.elapsed = transition.duration
        self.rig.position = transition.end.position
        self.rig.target = transition.end.target
        return True


class ViewController:
    """Switches the active editing view of a configurator."""

    def __init__(
        self,
        product: ProductDefinition,
        selection: Selection,
        animator: Optional[CameraAnimator] = None,
        view: View = View.NORMAL,
    ):
        self.product = product
        self.selection = selection
        pose = product.pose_for(view)
        self.animator = animator or CameraAnimator(CameraRig(pose.position, pose.target))
        self.current = view
        # A restored view starts framed on its own pose
        self.animator.rig.position = pose.position
        self.animator.rig.target = pose.target
        self.animator.rig.orbit_enabled = view is View.NORMAL

    def resolve(self, view) -> View:
        """Validate a view (or its name) against the product."""
        try:
            view = View(view)
        except ValueError:
            raise UnknownViewError(f"Unknown view: {view}") from None
        if view not in self.product.views:
            raise UnknownViewError(f"{self.product.title} has no {view.value} view")
        return view

    def change_view(self, view, classification: Classification) -> int:
        """
        Switch to a view.

        Clears the selection (the chassis view arms its first part), toggles
        orbiting and starts the camera move.

        Returns:
            Token of the camera move started for this view
        """
        view = self.resolve(view)
        self.current = view

        self.selection.clear()
        chassis = classification.bucket("chassis")
        if view is View.CHASSIS and chassis:
            self.selection.select(chassis[0])

        self.animator.rig.orbit_enabled = view is View.NORMAL
        token = self.animator.start(self.product.pose_for(view))
        logger.info(f"View changed to {view.value} (camera move {token})")
        return token
