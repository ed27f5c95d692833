"""Mesh geometry and material description."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

TEXTURE_SLOTS = 6


def _empty_paths() -> list[str]:
    return [""] * TEXTURE_SLOTS


@dataclass
class Mesh:
    """A mesh: vertex positions, triangle indices and material settings.

    ``vertices`` holds one position (x, y, z) per vertex; every three
    entries of ``indices`` form a triangle.
    """

    number: int
    vertices: list[Any] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    name: str = ""
    mesh_name: str = ""
    emissivity_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    texture_paths: list[str] = field(default_factory=_empty_paths)
    raw_texture_paths: list[str] = field(default_factory=_empty_paths)
    color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    global_mesh_number: int = 0
    min: tuple[float, float, float] = (10000.0, 10000.0, 10000.0)
    max: tuple[float, float, float] = (-10000.0, -10000.0, -10000.0)
    deleted: bool = False
    is_gltf: bool = False

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def indices_count(self) -> int:
        return len(self.indices)

    @property
    def indexed(self) -> bool:
        """Whether the mesh is drawn through an index list."""
        return len(self.indices) > 0

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3