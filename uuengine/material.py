"""Surface material description."""

from __future__ import annotations

from dataclasses import dataclass, field

from uuengine.linalg import Vector3

NO_MAP = "null"


@dataclass
class Material:
    """Colours, shininess and texture map paths of a surface."""

    name: str = ""
    diffuse_color: Vector3 = field(default_factory=lambda: Vector3(0.7, 0.7, 0.7))
    ambience_color: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    specular_color: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    shininess: float = 100.0
    diffuse_map_path: str = NO_MAP
    normal_map_path: str = NO_MAP
    uses_diffuse_map: bool = False
    uses_normal_map: bool = False

    def set_diffuse_map(self, path: str) -> None:
        """Use the image at ``path`` as diffuse map."""
        self.diffuse_map_path = path
        self.uses_diffuse_map = True

    def set_normal_map(self, path: str) -> None:
        """Use the image at ``path`` as normal map."""
        self.normal_map_path = path
        self.uses_normal_map = True