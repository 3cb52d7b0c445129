# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Palette extraction by k-means clustering.

Colors are converted into one working space and clustered on their
normalized components. Hue is circular and is clustered as a point on a
circle (cos, sin), so 359° and 1° are neighbours. Lloyd's
algorithm runs from a seeded k-means++ start, so the same input, k and
seed always give the same palette.

Fewer distinct colors than requested clusters is not an error: the
palette is then exactly the distinct colors, in order of first appearance.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from tincture.schema.channel import F64, Channel
from tincture.schema.colors import SPACES, Color, color_from_dict
from tincture.schema.illuminant import D65, WhitePoint

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when quantization is asked for zero clusters, zero colors or zero iterations."""


@dataclass(frozen=True)
class QuantizeConfig:
    """Configuration for palette quantization."""

    # Working space: a color class or its name ("lab", "rgb", ...).
    # None clusters in the space of the first input color.
    space: Optional[Union[type[Color], str]] = None

    # Seeding strategy: "kmeans++" (distance-weighted) or "random"
    init: str = "kmeans++"

    # Threads for the assignment step; 1 keeps everything on the caller's thread
    workers: int = 1

    def __post_init__(self):
        if self.init not in ("kmeans++", "random"):
            raise ValueError(f"init must be 'kmeans++' or 'random', got {self.init!r}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if isinstance(self.space, str) and self.space not in SPACES:
            raise ValueError(f"Unknown color space {self.space!r}")


@dataclass(frozen=True, slots=True)
class Palette:
    """
    Result of quantization.

    Unpacks as ``centroids, assignments = quantize(...)``.

    Attributes:
        centroids: One color per cluster, all in the working space
        assignments: Cluster index for each input color, in input order
        iterations: Lloyd iterations run (0 when no clustering was needed)
        converged: True if assignments stopped changing before the cap
        wcss_history: Within-cluster sum of squares after each assignment
    """
    centroids: tuple[Color, ...]
    assignments: tuple[int, ...]
    iterations: int = 0
    converged: bool = True
    wcss_history: tuple[float, ...] = field(default=())

    def __post_init__(self):
        k = len(self.centroids)
        for a in self.assignments:
            if not 0 <= a < k:
                raise ValueError(f"Assignment {a} out of range for {k} centroids")
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")

    @property
    def k(self) -> int:
        return len(self.centroids)

    @property
    def wcss(self) -> float:
        """Final within-cluster sum of squares."""
        return self.wcss_history[-1] if self.wcss_history else 0.0

    @property
    def counts(self) -> tuple[int, ...]:
        """Number of input colors assigned to each centroid."""
        counts = np.bincount(np.asarray(self.assignments, dtype=np.int64), minlength=self.k)
        return tuple(int(c) for c in counts)

    def __iter__(self) -> Iterator:
        yield self.centroids
        yield self.assignments

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "centroids": [c.to_dict() for c in self.centroids],
            "assignments": list(self.assignments),
            "iterations": self.iterations,
            "converged": self.converged,
            "wcss_history": list(self.wcss_history),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        return cls(
            centroids=tuple(color_from_dict(c) for c in data["centroids"]),
            assignments=tuple(int(a) for a in data["assignments"]),
            iterations=int(data.get("iterations", 0)),
            converged=bool(data.get("converged", True)),
            wcss_history=tuple(float(w) for w in data.get("wcss_history", ())),
        )


# =============================================================================
# Points
# =============================================================================


def _working_space(colors: Sequence[Color], config: QuantizeConfig) -> type[Color]:
    if config.space is None:
        return type(colors[0])
    if isinstance(config.space, str):
        return SPACES[config.space]
    return config.space


# Radius of the hue circle; opposite hues end up 1.0 apart, like the ends of a unit channel
_HUE_RADIUS = 0.5


def _embed_hue(data: NDArray[np.float64], index: int) -> NDArray[np.float64]:
    """Replace the hue column (degrees) with (cos, sin) columns appended at the end."""
    rad = np.radians(data[:, index])
    rest = np.delete(data, index, axis=1)
    return np.column_stack([rest, _HUE_RADIUS * np.cos(rad), _HUE_RADIUS * np.sin(rad)])


def _unembed_hue(points: NDArray[np.float64], index: int) -> NDArray[np.float64]:
    """Inverse of ``_embed_hue``; a hue vector that averaged out to zero gives hue 0."""
    x, y = points[:, -2], points[:, -1]
    hue = np.degrees(np.arctan2(y, x)) % 360.0
    hue = np.where(np.hypot(x, y) > 1e-12, hue, 0.0)
    return np.insert(points[:, :-2], index, hue, axis=1)


def _to_points(
    colors: Sequence[Color],
    space: type[Color],
    white_point: WhitePoint,
) -> NDArray[np.float64]:
    """
    Normalized components, one row per color.

    Hue is circular, so it is clustered as a point on a circle: shape is
    (N, 4) for hue spaces and (N, 3) otherwise.
    """
    data = np.array(
        [c.convert(space, channel=F64, white_point=white_point)._components() for c in colors],
        dtype=np.float64,
    )
    if space.hue_index is not None:
        data = _embed_hue(data, space.hue_index)
    return data


def _to_colors(
    points: NDArray[np.float64],
    space: type[Color],
    channel: Channel,
    white_point: WhitePoint,
) -> tuple[Color, ...]:
    points = np.asarray(points, dtype=np.float64)
    if space.hue_index is not None:
        points = _unembed_hue(points, space.hue_index)
    return tuple(
        space._from_components(p, channel=channel, white_point=white_point) for p in points
    )


# =============================================================================
# K-means
# =============================================================================


def _nearest(
    data: NDArray[np.float64],
    centroids: NDArray[np.float64],
) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
    """Index of and squared distance to the nearest centroid; ties go to the lowest index."""
    dists = np.sum(
        (data[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2,
        axis=2
    )
    labels = np.argmin(dists, axis=1)
    return labels, dists[np.arange(len(data)), labels]


def _assign(
    data: NDArray[np.float64],
    centroids: NDArray[np.float64],
    pool: Optional[Executor] = None,
    workers: int = 1,
) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
    """
    Assignment step.

    With a pool, points are split into one chunk per worker and the results
    are joined before returning; each chunk writes only its own slice.
    """
    if pool is None or workers <= 1 or len(data) < workers:
        return _nearest(data, centroids)

    chunks = np.array_split(data, workers)
    results = list(pool.map(lambda chunk: _nearest(chunk, centroids), chunks))
    labels = np.concatenate([r[0] for r in results])
    dists = np.concatenate([r[1] for r in results])
    return labels, dists


def _seed(
    unique_data: NDArray[np.float64],
    k: int,
    rng: np.random.Generator,
    init: str,
) -> NDArray[np.float64]:
    """Choose k initial centroids among the distinct points."""
    n_unique, d = unique_data.shape

    if init == "random":
        idx = rng.choice(n_unique, size=k, replace=False)
        return unique_data[np.sort(idx)].copy()

    # k-means++ initialization
    centroids = np.empty((k, d), dtype=np.float64)

    # First centroid: random unique point
    idx = rng.integers(n_unique)
    centroids[0] = unique_data[idx]

    # Remaining centroids: weighted by distance squared
    for i in range(1, k):
        _, dists = _nearest(unique_data, centroids[:i])
        total = dists.sum()
        if total == 0:
            idx = rng.integers(n_unique)
        else:
            idx = rng.choice(n_unique, p=dists / total)
        centroids[i] = unique_data[idx]

    return centroids


def _update(
    data: NDArray[np.float64],
    labels: NDArray[np.int64],
    dists: NDArray[np.float64],
    centroids: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Move each centroid to the mean of its cluster.

    An empty cluster is reseeded at the point farthest from its current
    centroid, skipping points that coincide with a centroid already placed
    in this step, so no two centroids end up identical.
    """
    updated = centroids.copy()
    empty = []
    placed = []

    for j in range(len(centroids)):
        mask = labels == j
        if np.any(mask):
            updated[j] = data[mask].mean(axis=0)
            placed.append(j)
        else:
            empty.append(j)

    order = np.argsort(-dists, kind="stable")
    for j in empty:
        for idx in order:
            candidate = data[idx]
            if any(np.array_equal(candidate, updated[m]) for m in placed):
                continue
            updated[j] = candidate
            placed.append(j)
            logger.debug("Reseeded empty cluster %d at point %d", j, int(idx))
            break

    return updated


def _kmeans(
    data: NDArray[np.float64],
    unique_data: NDArray[np.float64],
    k: int,
    max_iter: int,
    seed: Optional[int],
    init: str,
    pool: Optional[Executor] = None,
    workers: int = 1,
) -> tuple[NDArray[np.float64], NDArray[np.int64], int, bool, list[float]]:
    """
    Lloyd's algorithm on (N, D) data.

    Returns:
        (centroids, labels, iterations, converged, wcss_history)
    """
    rng = np.random.default_rng(seed)
    centroids = _seed(unique_data, k, rng, init)

    labels, dists = _assign(data, centroids, pool, workers)
    history = [float(dists.sum())]
    converged = False
    iterations = 0

    for iterations in range(1, max_iter + 1):
        centroids = _update(data, labels, dists, centroids)
        new_labels, dists = _assign(data, centroids, pool, workers)
        history.append(float(dists.sum()))
        logger.debug("k-means iteration %d: wcss=%.6g", iterations, history[-1])

        if np.array_equal(new_labels, labels):
            converged = True
            break
        labels = new_labels

    return centroids, labels, iterations, converged, history


# =============================================================================
# Entry point
# =============================================================================


def quantize(
    colors: Sequence[Color],
    k: int,
    seed: Optional[int] = 0,
    max_iterations: int = 100,
    *,
    config: Optional[QuantizeConfig] = None,
) -> Palette:
    """
    Reduce a collection of colors to at most ``k`` representative colors.

    Args:
        colors: Input colors, any mix of spaces and channels
        k: Requested number of clusters
        seed: Seed for the initialization RNG (None for a fresh one)
        max_iterations: Cap on Lloyd iterations
        config: Working space, seeding strategy and worker threads

    Returns:
        Palette with min(k, distinct colors) centroids. Centroids use the
        first color's channel (F64 when that is an integer encoding and the
        working space is a CIE space).

    Raises:
        InvalidArgument: If k < 1, ``colors`` is empty or max_iterations < 1.
    """
    colors = list(colors)
    if k < 1:
        raise InvalidArgument(f"k must be >= 1, got {k}")
    if not colors:
        raise InvalidArgument("Cannot quantize an empty collection of colors")
    if max_iterations < 1:
        raise InvalidArgument(f"max_iterations must be >= 1, got {max_iterations}")

    config = config or QuantizeConfig()
    space = _working_space(colors, config)
    first = colors[0]
    channel = first.channel
    if space.float_only and channel.is_integer:
        channel = F64
    white_point = D65
    if space.has_white_point and first.has_white_point:
        white_point = getattr(first, "white_point")

    data = _to_points(colors, space, white_point)

    # Distinct points, in order of first appearance
    _, first_index, inverse = np.unique(
        data, axis=0, return_index=True, return_inverse=True
    )
    inverse = np.asarray(inverse).reshape(-1)
    n_unique = len(first_index)
    rank = np.empty(n_unique, dtype=np.int64)
    rank[np.argsort(first_index)] = np.arange(n_unique)
    unique_data = data[np.sort(first_index)]

    if k >= n_unique:
        if k > n_unique:
            logger.debug("Requested k=%d but only %d distinct colors", k, n_unique)
        return Palette(
            centroids=_to_colors(unique_data, space, channel, white_point),
            assignments=tuple(int(a) for a in rank[inverse]),
            iterations=0,
            converged=True,
            wcss_history=(0.0,),
        )

    if config.workers > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as pool:
            result = _kmeans(
                data, unique_data, k, max_iterations, seed, config.init, pool, config.workers
            )
    else:
        result = _kmeans(data, unique_data, k, max_iterations, seed, config.init)

    centroids, labels, iterations, converged, history = result
    return Palette(
        centroids=_to_colors(centroids, space, channel, white_point),
        assignments=tuple(int(a) for a in labels),
        iterations=iterations,
        converged=converged,
        wcss_history=tuple(history),
    )
