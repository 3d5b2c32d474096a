"""Side by side comparison of the two hull algorithms."""

from __future__ import annotations

from typing import FrozenSet, Tuple

import attr
import numpy as np
from numpy.typing import ArrayLike
from scipy.spatial import ConvexHull

from hullcompare.brute_force import brute_force_hull
from hullcompare.geometry import Edge, HullResult, PointSet, as_points
from hullcompare.monotone_chain import monotone_chain_hull


REFERENCE_POINTS: PointSet = as_points([
    (100, 100),
    (214, 150),
    (303, 80),
    (350, 251),
    (200, 300),
    (150, 250),
    (200, 360),
    (120, 336),
])

BRUTE_FORCE_TITLE = 'Slow Hull (Brute Force)'
MONOTONE_CHAIN_TITLE = 'Fast Hull (Monotone Chain)'


@attr.s(frozen=True, auto_attribs=True)
class Panel:
    title: str
    result: HullResult

    @property
    def caption(self) -> str:
        return f'Iterations: {self.result.iterations}'


@attr.s(frozen=True, auto_attribs=True)
class Comparison:
    points: PointSet
    brute_force: Panel
    monotone_chain: Panel

    @property
    def panels(self) -> Tuple[Panel, Panel]:
        return self.brute_force, self.monotone_chain

    @property
    def difference(self) -> FrozenSet[Edge]:
        """Edges reported by exactly one of the algorithms."""
        return self.brute_force.result.edges ^ self.monotone_chain.result.edges

    @property
    def agree(self) -> bool:
        return not self.difference


def compare(points: ArrayLike = REFERENCE_POINTS) -> Comparison:
    pts = as_points(points)
    return Comparison(
        points=pts,
        brute_force=Panel(BRUTE_FORCE_TITLE, brute_force_hull(pts)),
        monotone_chain=Panel(MONOTONE_CHAIN_TITLE, monotone_chain_hull(pts)),
    )


def reference_hull(points: ArrayLike) -> FrozenSet[Edge]:
    """Hull edges according to Qhull (collinear boundary points dropped).

    Inputs without 2D extent have no Qhull hull and yield no edges.
    """
    pts = as_points(points)
    if len(pts) < 3:
        return frozenset()

    arr = np.array(pts)
    if np.linalg.matrix_rank(arr - arr[0]) < 2:
        return frozenset()

    hull = ConvexHull(arr)
    return frozenset(Edge.between(int(a), int(b)) for a, b in hull.simplices)


__all__ = [
    'REFERENCE_POINTS', 'BRUTE_FORCE_TITLE', 'MONOTONE_CHAIN_TITLE',
    'Panel', 'Comparison', 'compare', 'reference_hull',
]
