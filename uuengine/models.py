"""Mesh data: vertices, model particles and models built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from uuengine.linalg import Vector2, Vector3
from uuengine.material import Material


@dataclass
class VertexData:
    """One vertex with its texture coordinate and shading frame."""

    position: Vector3 = field(default_factory=Vector3)
    texture: Vector2 = field(default_factory=Vector2)
    normal: Vector3 = field(default_factory=Vector3)
    tangent: Vector3 = field(default_factory=Vector3)
    bitangent: Vector3 = field(default_factory=Vector3)


class ModelType(Enum):
    SIMPLE = "simple"
    CUSTOM = "custom"
    UNKNOWN = "unknown"


class Model:
    """Base of all models; knows only its kind."""

    def __init__(self, model_type: ModelType = ModelType.UNKNOWN) -> None:
        self.model_type = model_type


def _safe_reciprocal(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


class ModelParticle:
    """A single mesh with one material."""

    def __init__(
        self,
        vertices: Sequence[VertexData] | None = None,
        indices: Sequence[int] | None = None,
        material: Material | None = None,
    ) -> None:
        self.vertices: list[VertexData] = []
        self.indices: list[int] = []
        self.material = material
        if vertices and indices:
            vertex_list = list(vertices)
            self.calculate_tbn(vertex_list)
            self.vertices = vertex_list
            self.indices = list(indices)

    @staticmethod
    def _require(material: Material | None) -> Material:
        if material is None:
            raise ValueError("model particle has no material")
        return material

    def calculate_tbn(self, vertices: Sequence[VertexData]) -> None:
        """Fill tangents and bitangents of each vertex triple in place."""
        stream = iter(vertices)
        for a, b, c in zip(stream, stream, stream):
            delta_v1 = b.position - a.position
            delta_v2 = c.position - a.position
            delta_uv1 = b.texture - a.texture
            delta_uv2 = c.texture - a.texture

            r = _safe_reciprocal(delta_v1.x * delta_uv2.y - delta_uv1.y * delta_uv2.x)
            tangent = (delta_v1 * delta_uv1.y - delta_v2 * delta_uv1.y) * r
            bitangent = (delta_v2 * delta_uv1.x - delta_v1 * delta_uv2.x) * r

            for vertex in (a, b, c):
                vertex.tangent = tangent
                vertex.bitangent = bitangent

    def set_material(self, material: Material) -> None:
        """Replace the material, keeping any maps it already uses."""
        self.material = material
        if material.uses_diffuse_map:
            self.set_diffuse_map(material.diffuse_map_path)
        if material.uses_normal_map:
            self.set_normal_map(material.normal_map_path)

    def set_diffuse_map(self, path: str) -> None:
        self._require(self.material).set_diffuse_map(path)

    def set_normal_map(self, path: str) -> None:
        self._require(self.material).set_normal_map(path)


class SimpleModel(Model):
    """A model made of one particle."""

    def __init__(self, particle: ModelParticle | None = None) -> None:
        super().__init__(ModelType.SIMPLE)
        self.particle = particle


class CustomModel(Model):
    """A model loaded from a file, made of several particles."""

    def __init__(self, particles: Iterable[ModelParticle] = ()) -> None:
        super().__init__(ModelType.CUSTOM)
        self.particles: list[ModelParticle] = list(particles)

    def set_particles(self, particles: Iterable[ModelParticle]) -> None:
        self.particles = list(particles)

    def particle(self, index: int) -> ModelParticle:
        return self.particles[index]