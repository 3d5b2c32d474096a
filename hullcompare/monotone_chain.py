"""Andrew's monotone chain hull in O(n log n)."""

from typing import List, Sequence, Tuple

from numpy.typing import ArrayLike

from hullcompare.geometry import Edge, HullResult, PointSet, as_points
from hullcompare.geometry import orientation


def _chain(
        pts: PointSet, order: Sequence[int], stack: List[int], floor: int,
) -> int:
    """Extend stack over order, popping non-left turns. Returns # checks.

    Popping is only allowed while the stack holds at least floor entries.
    """
    count = 0
    for idx in order:
        while len(stack) >= floor and orientation(
                pts[stack[-2]], pts[stack[-1]], pts[idx]) <= 0:
            count += 1
            stack.pop()
        if len(stack) >= floor:
            count += 1  # The check that ended the while loop.
        stack.append(idx)
    return count


def monotone_chain_hull(points: ArrayLike) -> HullResult:
    """Build lower then upper chains over the (x, y) sorted points.

    Collinear points on the boundary are dropped, so the result can be
    smaller than brute_force_hull's on degenerate inputs.
    """
    pts = as_points(points)
    n = len(pts)
    if n < 3:
        return HullResult(edges=frozenset(), iterations=0)

    order = sorted(range(n), key=lambda i: (pts[i].x, pts[i].y))

    hull: List[int] = []
    count = _chain(pts, order, hull, floor=2)                 # Lower chain.
    count += _chain(pts, order[-2::-1], hull, len(hull) + 1)  # Upper chain.
    hull.pop()  # Closing point repeats the start.

    pairs: List[Tuple[int, int]] = list(zip(hull, hull[1:] + hull[:1]))
    edges = {Edge.between(a, b) for a, b in pairs if a != b}
    return HullResult(edges=edges, iterations=count)


__all__ = ['monotone_chain_hull']
