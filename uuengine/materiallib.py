"""A set of materials, loadable from a .mtl file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from uuengine.linalg import Vector3
from uuengine.material import Material
from uuengine.projectinfo import ProjectInfo


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


class MaterialLibrary:
    """An ordered collection of distinct materials."""

    def __init__(self) -> None:
        self.materials: list[Material] = []

    def __len__(self) -> int:
        return len(self.materials)

    def __iter__(self) -> Iterator[Material]:
        return iter(self.materials)

    def add(self, material: Material | None) -> None:
        """Add a material unless it is None or already present."""
        if material is None:
            return
        if any(existing is material for existing in self.materials):
            return
        self.materials.append(material)

    def load_file(self, path: str, project: ProjectInfo | None = None) -> None:
        """Replace the library with the materials of a .mtl file.

        Texture maps are resolved next to the file and, if ``project`` is
        given, copied into its Models folder.
        """
        text = Path(path).read_text(encoding="utf-8")
        base = Path(path).resolve().parent.as_posix()

        self.materials = []
        current: Material | None = None

        for line_number, line in enumerate(text.splitlines(), start=1):
            fields = line.split(" ")
            keyword = fields[0]
            if keyword not in ("newmtl", "Ns", "Ka", "Kd", "Ks", "map_Kd", "map_Bump"):
                continue
            try:
                if keyword == "newmtl":
                    self.add(current)
                    current = Material(name=fields[1])
                    continue
                if current is None:
                    raise ValueError(f"{path}:{line_number}: '{keyword}' before any 'newmtl'")
                if keyword == "Ns":
                    current.shininess = _to_float(fields[1])
                elif keyword in ("Ka", "Kd", "Ks"):
                    color = Vector3(*(_to_float(value) for value in fields[1:4]))
                    if len(fields) < 4:
                        raise IndexError
                    if keyword == "Ka":
                        current.ambience_color = color
                    elif keyword == "Kd":
                        current.diffuse_color = color
                    else:
                        current.specular_color = color
                else:
                    map_path = f"{base}/{fields[1]}"
                    if keyword == "map_Kd":
                        current.set_diffuse_map(map_path)
                    else:
                        current.set_normal_map(map_path)
                    if project is not None:
                        project.copy_to_models(map_path)
            except IndexError:
                raise ValueError(f"{path}:{line_number}: too few values for '{keyword}'") from None

        self.add(current)

    def by_index(self, index: int) -> Material | None:
        """Material at ``index``, or None if out of range."""
        if 0 <= index < len(self.materials):
            return self.materials[index]
        return None

    def by_name(self, name: str) -> Material | None:
        """First material called ``name``, or None."""
        return next((m for m in self.materials if m.name == name), None)