"""Engine-neutral scene graph nodes read by the renderer.

The renderer owns drawing; the configurator only writes material state on
these nodes. Everything here is plain data so the selection and coloring
logic can run without a GPU.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

# Emissive overlay toggled on selection
HIGHLIGHT_ON = 0x444444
HIGHLIGHT_OFF = 0x000000


@dataclass(frozen=True)
class Finish:
    """Category-specific surface parameters."""
    metalness: float = 0.0
    roughness: float = 1.0
    opacity: float = 1.0

    @property
    def transparent(self) -> bool:
        return self.opacity < 1.0


@dataclass
class Material:
    """Visual appearance of a mesh."""
    color: str = "#FFFFFF"
    emissive: int = HIGHLIGHT_OFF
    metalness: float = 0.0
    roughness: float = 1.0
    opacity: float = 1.0

    @classmethod
    def with_finish(cls, color: str, finish: Finish) -> "Material":
        return cls(
            color=color,
            metalness=finish.metalness,
            roughness=finish.roughness,
            opacity=finish.opacity,
        )


@dataclass
class SceneMesh:
    """A named sub-mesh of a loaded controller model."""

    name: str
    material: Material = field(default_factory=Material)
    # Baseline color as loaded from the model file, (r, g, b) in 0..1
    base_color: Optional[Tuple[float, float, float]] = None

    @property
    def lightness(self) -> Optional[float]:
        """Mean channel value of the baseline color, if the model has one."""
        if self.base_color is None:
            return None
        return sum(self.base_color) / 3

    @property
    def highlighted(self) -> bool:
        return self.material.emissive == HIGHLIGHT_ON

    def set_highlight(self, on: bool) -> None:
        self.material.emissive = HIGHLIGHT_ON if on else HIGHLIGHT_OFF


class Scene:
    """Flat traversal order over the meshes of a loaded model."""

    def __init__(self, meshes: Iterable[SceneMesh] = ()):
        self.meshes: List[SceneMesh] = list(meshes)

    def __iter__(self) -> Iterator[SceneMesh]:
        return iter(self.meshes)

    def __len__(self) -> int:
        return len(self.meshes)

    def find(self, name: str) -> Optional[SceneMesh]:
        for mesh in self.meshes:
            if mesh.name == name:
                return mesh
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "Scene":
        """Build a scene from a part listing.

        Accepts ``{"parts": [{"name": ..., "color": [r, g, b]}, ...]}`` or a
        plain list of names under ``"parts"``.
        """
        meshes = []
        for entry in data.get("parts", []):
            if isinstance(entry, str):
                meshes.append(SceneMesh(name=entry))
                continue
            color = entry.get("color")
            meshes.append(SceneMesh(
                name=entry["name"],
                base_color=tuple(color) if color is not None else None,
            ))
        return cls(meshes)
