"""Loading models from files through interchangeable factories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from uuengine.linalg import Vector2, Vector3
from uuengine.material import Material
from uuengine.materiallib import MaterialLibrary
from uuengine.models import CustomModel, ModelParticle, VertexData
from uuengine.projectinfo import ProjectInfo


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


class ModelFactory(ABC):
    """Builds a model from a file."""

    @abstractmethod
    def create_model(self, path: str) -> CustomModel:
        """Read the model stored at ``path``."""


class ObjModelFactory(ModelFactory):
    """Reads Wavefront OBJ files together with their material libraries."""

    def __init__(self, project: ProjectInfo | None = None) -> None:
        self.project = project
        self.library = MaterialLibrary()

    def create_model(self, path: str) -> CustomModel:
        """Parse an OBJ file; a missing file gives an empty model.

        Each ``usemtl`` starts a new particle once geometry has been read.
        If a project is set, the file and its assets are copied into it.
        """
        source = Path(path)
        if not source.exists():
            return CustomModel()

        text = source.read_text(encoding="utf-8")
        if self.project is not None:
            self.project.copy_to_models(path)

        coordinates: list[Vector3] = []
        texture_coordinates: list[Vector2] = []
        normals: list[Vector3] = []
        vertices: list[VertexData] = []
        indices: list[int] = []
        particles: list[ModelParticle] = []
        material: Material | None = None

        for line_number, line in enumerate(text.splitlines(), start=1):
            fields = line.split(" ")
            keyword = fields[0]
            try:
                if keyword == "v":
                    coordinates.append(Vector3(*(_to_float(v) for v in fields[1:4])))
                    if len(fields) < 4:
                        raise IndexError
                elif keyword == "vt":
                    texture_coordinates.append(Vector2(_to_float(fields[1]), _to_float(fields[2])))
                elif keyword == "vn":
                    normals.append(Vector3(*(_to_float(v) for v in fields[1:4])))
                    if len(fields) < 4:
                        raise IndexError
                elif keyword == "f":
                    for item in filter(None, fields[1:]):
                        vertices.append(self._face_vertex(
                            item, coordinates, texture_coordinates, normals))
                        indices.append(len(indices))
                elif keyword == "mtllib":
                    mtl_path = f"{source.resolve().parent.as_posix()}/{fields[1]}"
                    if self.project is not None:
                        self.project.copy_to_models(mtl_path)
                    self.library.load_file(mtl_path, self.project)
                elif keyword == "usemtl":
                    if vertices and indices:
                        particles.append(ModelParticle(vertices, indices, material))
                        vertices, indices = [], []
                    material = self.library.by_name(fields[1])
            except (IndexError, ValueError) as error:
                raise ValueError(f"{path}:{line_number}: malformed '{keyword}' line") from error

        particles.append(ModelParticle(vertices, indices, material))
        return CustomModel(particles)

    @staticmethod
    def _face_vertex(item: str, coordinates: list[Vector3],
                     texture_coordinates: list[Vector2],
                     normals: list[Vector3]) -> VertexData:
        parts = item.split("/")
        if len(parts) < 3:
            raise ValueError(f"face element '{item}' needs position/texture/normal")

        def pick(table: list, text: str):
            index = int(text) - 1
            if not 0 <= index < len(table):
                raise ValueError(f"face index {text} out of range")
            return table[index]

        return VertexData(
            pick(coordinates, parts[0]),
            pick(texture_coordinates, parts[1]),
            pick(normals, parts[2]),
        )


class ModelLoader:
    """Creates models with whichever factory is currently set."""

    def __init__(self, factory: ModelFactory | None = None) -> None:
        self.factory = factory

    def create_model(self, path: str) -> CustomModel:
        if self.factory is None:
            raise RuntimeError("no model factory is set")
        return self.factory.create_model(path)