"""Procedural construction of simple meshes: cubes, skyboxes and spheres."""

from __future__ import annotations

import math
from enum import Enum

from uuengine.linalg import Vector2, Vector3
from uuengine.material import Material
from uuengine.models import ModelParticle, SimpleModel, VertexData

_PI = 3.1415926
_FACE_VERTICES = 4
_BOX_VERTICES = 24


class SimpleModelType(Enum):
    """Kinds of primitive a simple model can describe."""

    CUBE = "CUBE"
    PYRAMID = "PYRAMID"
    SPHERE = "SPHERE"
    PRISM = "PRISM"
    CONE = "CONE"
    CYLINDER = "CYLINDER"


def _vertex(position: tuple[float, float, float],
            texture: tuple[float, float],
            normal: tuple[float, float, float]) -> VertexData:
    return VertexData(Vector3(*position), Vector2(*texture), Vector3(*normal))


def _quad_indices(winding: tuple[int, ...]) -> list[int]:
    return [start + offset
            for start in range(0, _BOX_VERTICES, _FACE_VERTICES)
            for offset in winding]


def create_cube(width: float, height: float, depth: float) -> SimpleModel:
    """Box spanning ``±width``, ``±height`` and ``±depth`` with outward normals."""
    w, h, d = width, height, depth
    vertices = [
        _vertex((-w, h, d), (0.0, 1.0), (0.0, 0.0, 1.0)),
        _vertex((-w, -h, d), (0.0, 0.0), (0.0, 0.0, 1.0)),
        _vertex((w, h, d), (1.0, 1.0), (0.0, 0.0, 1.0)),
        _vertex((w, -h, d), (1.0, 0.0), (0.0, 0.0, 1.0)),

        _vertex((w, h, d), (0.0, 1.0), (1.0, 0.0, 0.0)),
        _vertex((w, -h, d), (0.0, 0.0), (1.0, 0.0, 0.0)),
        _vertex((w, h, -d), (1.0, 1.0), (1.0, 0.0, 0.0)),
        _vertex((w, -h, -d), (1.0, 0.0), (1.0, 0.0, 0.0)),

        _vertex((w, h, d), (0.0, 1.0), (0.0, 1.0, 0.0)),
        _vertex((w, h, -d), (0.0, 0.0), (0.0, 1.0, 0.0)),
        _vertex((-w, h, d), (1.0, 1.0), (0.0, 1.0, 0.0)),
        _vertex((-w, h, -d), (1.0, 0.0), (0.0, 1.0, 0.0)),

        _vertex((w, h, -d), (0.0, 1.0), (0.0, 0.0, -1.0)),
        _vertex((w, -h, -d), (0.0, 0.0), (0.0, 0.0, -1.0)),
        _vertex((-w, h, -d), (1.0, 1.0), (0.0, 0.0, -1.0)),
        _vertex((-w, -h, -d), (1.0, 0.0), (0.0, 0.0, -1.0)),

        _vertex((-w, h, d), (0.0, 1.0), (-1.0, 0.0, 0.0)),
        _vertex((-w, h, -d), (0.0, 0.0), (-1.0, 0.0, 0.0)),
        _vertex((-w, -h, d), (1.0, 1.0), (-1.0, 0.0, 0.0)),
        _vertex((-w, -h, -d), (1.0, 0.0), (-1.0, 0.0, 0.0)),

        _vertex((-w, -h, d), (0.0, 1.0), (0.0, -1.0, 0.0)),
        _vertex((-w, -h, -d), (0.0, 0.0), (0.0, -1.0, 0.0)),
        _vertex((w, -h, d), (1.0, 1.0), (0.0, -1.0, 0.0)),
        _vertex((w, -h, -d), (1.0, 0.0), (0.0, -1.0, 0.0)),
    ]
    indices = _quad_indices((0, 1, 2, 2, 1, 3))
    material = Material(diffuse_color=Vector3(0.5, 0.5, 0.5))
    return SimpleModel(ModelParticle(vertices, indices, material))


def create_skybox(size: float, texture: str) -> SimpleModel:
    """Inward-facing box of half-size ``size`` textured with a cross layout image."""
    s = size
    third, two_thirds = 1.0 / 3.0, 2.0 / 3.0
    quarter, half, three_quarters = 1.0 / 4.0, 2.0 / 4.0, 3.0 / 4.0
    vertices = [
        _vertex((-s, s, s), (1.0, two_thirds), (0.0, 0.0, -1.0)),
        _vertex((-s, -s, s), (1.0, third), (0.0, 0.0, -1.0)),
        _vertex((s, s, s), (three_quarters, two_thirds), (0.0, 0.0, -1.0)),
        _vertex((s, -s, s), (three_quarters, third), (0.0, 0.0, -1.0)),

        _vertex((s, s, s), (three_quarters, two_thirds), (-1.0, 0.0, 0.0)),
        _vertex((s, -s, s), (three_quarters, third), (-1.0, 0.0, 0.0)),
        _vertex((s, s, -s), (half, two_thirds), (-1.0, 0.0, 0.0)),
        _vertex((s, -s, -s), (half, third), (-1.0, 0.0, 0.0)),

        _vertex((s, s, s), (half, 1.0), (0.0, -1.0, 0.0)),
        _vertex((s, s, -s), (half, two_thirds), (0.0, -1.0, 0.0)),
        _vertex((-s, s, s), (quarter, 1.0), (0.0, -1.0, 0.0)),
        _vertex((-s, s, -s), (quarter, two_thirds), (0.0, -1.0, 0.0)),

        _vertex((s, s, -s), (half, two_thirds), (0.0, 0.0, 1.0)),
        _vertex((s, -s, -s), (half, third), (0.0, 0.0, 1.0)),
        _vertex((-s, s, -s), (quarter, two_thirds), (0.0, 0.0, 1.0)),
        _vertex((-s, -s, -s), (quarter, third), (0.0, 0.0, 1.0)),

        _vertex((-s, s, s), (0.0, two_thirds), (1.0, 0.0, 0.0)),
        _vertex((-s, s, -s), (quarter, two_thirds), (1.0, 0.0, 0.0)),
        _vertex((-s, -s, s), (0.0, third), (1.0, 0.0, 0.0)),
        _vertex((-s, -s, -s), (quarter, third), (1.0, 0.0, 0.0)),

        _vertex((-s, -s, s), (quarter, 0.0), (0.0, 1.0, 0.0)),
        _vertex((-s, -s, -s), (quarter, third), (0.0, 1.0, 0.0)),
        _vertex((s, -s, s), (half, 0.0), (0.0, 1.0, 0.0)),
        _vertex((s, -s, -s), (half, third), (0.0, 1.0, 0.0)),
    ]
    indices = _quad_indices((0, 2, 1, 2, 3, 1))
    material = Material()
    material.set_diffuse_map(texture)
    return SimpleModel(ModelParticle(vertices, indices, material))


def create_sphere(radius: float, stacks: int, sectors: int) -> SimpleModel:
    """UV sphere around the origin with ``stacks`` rings and ``sectors`` slices."""
    if radius == 0:
        raise ValueError("sphere radius must not be zero")
    if stacks < 1 or sectors < 1:
        raise ValueError("a sphere needs at least one stack and one sector")

    length_inv = 1.0 / radius
    sector_step = 2.0 * _PI / sectors
    stack_step = _PI / stacks

    vertices: list[VertexData] = []
    for i in range(stacks + 1):
        stack_angle = _PI / 2.0 - i * stack_step
        xy = radius * math.cos(stack_angle)
        z = radius * math.sin(stack_angle)
        for j in range(sectors + 1):
            sector_angle = j * sector_step
            x = xy * math.cos(sector_angle)
            y = xy * math.sin(sector_angle)
            vertices.append(VertexData(
                Vector3(x, y, z),
                Vector2(j / sectors, i / stacks),
                Vector3(x * length_inv, y * length_inv, z * length_inv),
            ))

    indices: list[int] = []
    for i in range(stacks):
        row = i * (sectors + 1)
        next_row = row + sectors + 1
        for j in range(sectors):
            k1, k2 = row + j, next_row + j
            if i != 0:
                indices.extend((k1, k2, k1 + 1))
            if i != stacks - 1:
                indices.extend((k1 + 1, k2, k2 + 1))

    material = Material(diffuse_color=Vector3(0.5, 0.5, 0.5))
    return SimpleModel(ModelParticle(vertices, indices, material))