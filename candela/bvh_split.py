"""Axis-aligned bounds and split-plane selection for BVH construction."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

import numpy as np

ARBITRARY_MAX = 10000000.0
ARBITRARY_MIN = -10000000.0

INF_COST = 1e29
BIN_COUNT = 64
LINEAR_STEPS = 128
BINARY_COARSE_STEPS = 12
BINARY_REFINE_STEPS = 3


def _filled(value: float) -> np.ndarray:
    return np.full(3, value, dtype=float)


@dataclass(eq=False)
class Bounds:
    """An axis-aligned box. A default box is empty (min above max)."""

    min: np.ndarray = field(default_factory=lambda: _filled(ARBITRARY_MAX))
    max: np.ndarray = field(default_factory=lambda: _filled(ARBITRARY_MIN))

    def __post_init__(self) -> None:
        self.min = np.array(self.min, dtype=float).reshape(3)
        self.max = np.array(self.max, dtype=float).reshape(3)

    def center(self) -> np.ndarray:
        return (self.min + self.max) / 2.0

    def extent(self) -> np.ndarray:
        return self.max - self.min

    def area(self) -> float:
        """Half the surface area of the box."""
        ex, ey, ez = self.extent()
        return float(ex * ey + ey * ez + ez * ex)


class SplitMethod(Enum):
    """How a node's split plane is chosen."""

    MEDIAN = "median"
    SAH_LINEAR = "sah_linear"
    SAH_BINARY = "sah_binary"
    SAH_BINNED = "sah_binned"


def find_longest_axis(bounds: Bounds) -> int:
    """Return the index of the axis along which ``bounds`` is longest."""
    diff = bounds.extent()
    longest = max(diff[0], diff[1], diff[2])
    for axis in range(3):
        if diff[axis] == longest:
            return axis
    raise ValueError("bounds have no comparable extent")


def median_split(bounds: Bounds) -> tuple[int, float]:
    """Split across the longest axis at the centre of ``bounds``."""
    axis = find_longest_axis(bounds)
    return axis, float(bounds.center()[axis])


def _gather(
    references: Sequence[int],
    bounds_cache: Sequence[Bounds],
    centroid_cache: Sequence[Sequence[float]],
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    refs = list(references)
    mins = np.array([bounds_cache[r].min for r in refs], dtype=float).reshape(-1, 3)
    maxs = np.array([bounds_cache[r].max for r in refs], dtype=float).reshape(-1, 3)
    cents = np.array([centroid_cache[r] for r in refs], dtype=float).reshape(-1, 3)
    return mins, maxs, cents


def _extent_area(extent: np.ndarray) -> np.ndarray:
    ex, ey, ez = extent[..., 0], extent[..., 1], extent[..., 2]
    return ex * ey + ey * ez + ez * ex


def _union_area(mins: np.ndarray, maxs: np.ndarray) -> float:
    lo = mins.min(axis=0, initial=ARBITRARY_MAX)
    hi = maxs.max(axis=0, initial=ARBITRARY_MIN)
    return float(_extent_area(hi - lo))


def _cost(
    mins: np.ndarray, maxs: np.ndarray, cents: np.ndarray, axis: int, border: float
) -> float:
    left = cents[:, axis] < border
    right = ~left
    left_count = int(left.sum())
    right_count = len(cents) - left_count
    cost = left_count * _union_area(mins[left], maxs[left]) + right_count * _union_area(
        mins[right], maxs[right]
    )
    return cost if cost > 0.0001 else INF_COST


def sah_cost(
    references: Sequence[int],
    axis: int,
    border: float,
    bounds_cache: Sequence[Bounds],
    centroid_cache: Sequence[Sequence[float]],
) -> float:
    """Surface area heuristic cost of splitting ``references`` at ``border``.

    Triangles whose centroid lies below ``border`` on ``axis`` go left.
    A cost that is not positive is reported as ``INF_COST``.
    """
    mins, maxs, cents = _gather(references, bounds_cache, centroid_cache)
    return _cost(mins, maxs, cents, axis, border)


def search_sah_linear(
    node_bounds: Bounds,
    references: Sequence[int],
    bounds_cache: Sequence[Bounds],
    centroid_cache: Sequence[Sequence[float]],
) -> tuple[float, int, float]:
    """Try evenly spaced planes on every axis; return (cost, axis, border)."""
    mins, maxs, cents = _gather(references, bounds_cache, centroid_cache)
    best_axis, best_border = median_split(node_bounds)
    best_cost = INF_COST
    for axis in range(3):
        lo = float(node_bounds.min[axis])
        hi = float(node_bounds.max[axis])
        if lo == hi:
            continue
        step = (hi - lo) / float(LINEAR_STEPS)
        position = lo
        for _ in range(LINEAR_STEPS):
            position += step
            cost = _cost(mins, maxs, cents, axis, position)
            if cost < best_cost:
                best_cost, best_axis, best_border = cost, axis, position
    return best_cost, best_axis, best_border


def search_sah_binary(
    node_bounds: Bounds,
    references: Sequence[int],
    bounds_cache: Sequence[Bounds],
    centroid_cache: Sequence[Sequence[float]],
) -> tuple[float, int, float]:
    """Coarse plane scan followed by a short refining search; return (cost, axis, border)."""
    mins, maxs, cents = _gather(references, bounds_cache, centroid_cache)
    best_axis, best_border = median_split(node_bounds)
    best_cost = INF_COST
    last_step = 2.0 / 64.0
    for axis in range(3):
        lo = float(node_bounds.min[axis])
        hi = float(node_bounds.max[axis])
        if lo == hi:
            continue
        step = (hi - lo) / float(BINARY_COARSE_STEPS)
        position = lo
        for _ in range(BINARY_COARSE_STEPS):
            position += step
            cost = _cost(mins, maxs, cents, axis, position)
            if cost < best_cost:
                best_cost, best_axis, best_border = cost, axis, position
                last_step = step

    step = last_step * 0.5
    position = best_border + step
    for _ in range(BINARY_REFINE_STEPS):
        step *= 0.5
        cost = _cost(mins, maxs, cents, best_axis, position)
        if cost < best_cost:
            position += step
            best_cost = cost
        else:
            position -= step
    return best_cost, best_axis, position


def search_sah_binned(
    node_bounds: Bounds,
    references: Sequence[int],
    bounds_cache: Sequence[Bounds],
    centroid_cache: Sequence[Sequence[float]],
) -> tuple[float, int, float]:
    """Bin centroids along each axis and test the planes between bins.

    Returns (cost, axis, border). If no axis has any extent the median split
    of ``node_bounds`` is returned with ``INF_COST``.
    """
    mins, maxs, cents = _gather(references, bounds_cache, centroid_cache)
    best_axis, best_border = median_split(node_bounds)
    best_cost = INF_COST
    for axis in range(3):
        lo = float(node_bounds.min[axis])
        hi = float(node_bounds.max[axis])
        if lo == hi:
            continue
        extent = hi - lo
        scale = BIN_COUNT / extent
        bins = np.minimum(BIN_COUNT - 1, ((cents[:, axis] - lo) * scale).astype(int))

        counts = np.zeros(BIN_COUNT, dtype=int)
        bin_min = np.full((BIN_COUNT, 3), ARBITRARY_MAX)
        bin_max = np.full((BIN_COUNT, 3), ARBITRARY_MIN)
        np.add.at(counts, bins, 1)
        np.minimum.at(bin_min, bins, mins)
        np.maximum.at(bin_max, bins, maxs)

        left_counts = np.cumsum(counts)[:-1]
        left_areas = _extent_area(
            np.maximum.accumulate(bin_max, axis=0) - np.minimum.accumulate(bin_min, axis=0)
        )[:-1]
        right_counts = np.cumsum(counts[::-1])[::-1][1:]
        right_areas = _extent_area(
            np.maximum.accumulate(bin_max[::-1], axis=0)[::-1]
            - np.minimum.accumulate(bin_min[::-1], axis=0)[::-1]
        )[1:]

        costs = left_counts * left_areas + right_counts * right_areas
        index = int(np.argmin(costs))
        if costs[index] < best_cost:
            best_cost = float(costs[index])
            best_axis = axis
            best_border = lo + (extent / float(BIN_COUNT)) * (index + 1)
    return best_cost, best_axis, best_border


def find_split(
    node_bounds: Bounds,
    references: Sequence[int],
    bounds_cache: Sequence[Bounds],
    centroid_cache: Sequence[Sequence[float]],
    method: SplitMethod = SplitMethod.SAH_BINNED,
) -> tuple[int, float]:
    """Choose the (axis, border) split plane for a node with ``method``."""
    if method is SplitMethod.MEDIAN:
        return median_split(node_bounds)
    searches = {
        SplitMethod.SAH_LINEAR: search_sah_linear,
        SplitMethod.SAH_BINARY: search_sah_binary,
        SplitMethod.SAH_BINNED: search_sah_binned,
    }
    _, axis, border = searches[method](node_bounds, references, bounds_cache, centroid_cache)
    return axis, border