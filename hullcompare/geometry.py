"""Points, edges and the orientation test shared by the hull algorithms."""

from __future__ import annotations

from typing import Dict, FrozenSet, List, NamedTuple, Set, Tuple

import attr
import numpy as np
from numpy.typing import ArrayLike


EPS = 1e-9


class Point(NamedTuple):
    x: float
    y: float


PointSet = Tuple[Point, ...]


def as_points(data: ArrayLike) -> PointSet:
    """Coerce an (n, 2) array-like of coordinates into a PointSet.

    Raises:
      ValueError: if the data is not (n, 2) or has non-finite coordinates.
    """
    arr = np.asarray(data, dtype=float)
    if arr.size == 0:
        return ()
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f'Expected (n, 2) coordinates, got shape {arr.shape}!')
    if not np.isfinite(arr).all():
        raise ValueError('Coordinates must be finite!')
    return tuple(Point(float(x), float(y)) for x, y in arr)


def orientation(a: Point, b: Point, c: Point) -> float:
    """Signed area of the parallelogram spanned by a->b and a->c.

    Positive iff c is left of the directed line a->b (counter-clockwise),
    negative iff it is right of it and zero iff the points are collinear.
    """
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def turn(a: Point, b: Point, c: Point, eps: float = EPS) -> int:
    """Classify orientation(a, b, c) as 1 (left), -1 (right) or 0."""
    area = orientation(a, b, c)
    if area > eps:
        return 1
    elif area < -eps:
        return -1
    return 0


@attr.s(frozen=True, auto_attribs=True, order=True, slots=True)
class Edge:
    """Undirected hull edge between two point indices, i <= j."""
    i: int
    j: int

    def __attrs_post_init__(self) -> None:
        assert 0 <= self.i <= self.j

    @staticmethod
    def between(a: int, b: int) -> Edge:
        return Edge(min(a, b), max(a, b))


@attr.s(frozen=True, auto_attribs=True)
class HullResult:
    edges: FrozenSet[Edge] = attr.ib(converter=frozenset)
    iterations: int = 0

    def __attrs_post_init__(self) -> None:
        assert self.iterations >= 0

    @property
    def vertices(self) -> Set[int]:
        return {v for e in self.edges for v in (e.i, e.j)}

    def cycle(self) -> Tuple[int, ...]:
        """Hull vertices in boundary order, starting at the smallest index.

        Raises:
          ValueError: if the edges do not form a single simple cycle, e.g.
            brute force output with collinear boundary points.
        """
        if not self.edges:
            return ()
        if len(self.edges) == 1:
            (edge,) = self.edges
            return (edge.i, edge.j)

        adjacent: Dict[int, List[int]] = {v: [] for v in self.vertices}
        for edge in self.edges:
            adjacent[edge.i].append(edge.j)
            adjacent[edge.j].append(edge.i)
        if any(len(nbrs) != 2 for nbrs in adjacent.values()):
            raise ValueError('Edges do not form a simple cycle!')

        start = min(adjacent)
        order, prev, node = [start], start, min(adjacent[start])
        while node != start:
            order.append(node)
            prev, node = node, next(n for n in adjacent[node] if n != prev)

        if len(order) != len(adjacent):
            raise ValueError('Edges form more than one cycle!')
        return tuple(order)


__all__ = [
    'EPS', 'Point', 'PointSet', 'Edge', 'HullResult',
    'as_points', 'orientation', 'turn',
]
