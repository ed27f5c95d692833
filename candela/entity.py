"""Placed instances of objects in a scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


def _identity() -> np.ndarray:
    return np.identity(4)


@dataclass
class Entity:
    """An instance of an object with its own transform and material overrides.

    ``model`` is a 4x4 matrix acting on column vectors (``model @ v``).
    Translucency runs from 0.0 (opaque) to 1.0 (fully translucent). An
    ``override_color`` with negative components leaves the mesh color in use.
    """

    object: Any
    model: np.ndarray = field(default_factory=_identity)
    emissive_amount: float = 0.0
    roughness: float = 0.75
    metalness: float = 0.0
    roughness_multiplier: float = 1.0
    translucency_amount: float = 0.0
    override_color: tuple[float, float, float] = (-1.0, -1.0, -1.0)
    use_albedo_map: bool = True
    use_pbr_map: bool = True
    is_sphere_light: bool = False

    def __post_init__(self) -> None:
        self.model = np.array(self.model, dtype=float)
        if self.model.shape != (4, 4):
            raise ValueError(f"model must be a 4x4 matrix, got shape {self.model.shape}")

    def extract_scale(self) -> np.ndarray:
        """Return the length of each of the first three basis columns."""
        return np.linalg.norm(self.model[:3, :3], axis=0)