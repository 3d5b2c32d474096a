"""O(n³) hull: keep every pair with all other points on one side."""

from numpy.typing import ArrayLike

from hullcompare.geometry import Edge, HullResult, as_points, turn


def brute_force_hull(points: ArrayLike) -> HullResult:
    """Test every pair of points against every other point.

    The iteration counter ticks once per (i, j, k) triple visited, including
    k == i and k == j, until a pair is ruled out.
    """
    pts = as_points(points)
    n = len(pts)
    if n < 3:
        return HullResult(edges=frozenset(), iterations=0)

    count, edges = 0, set()
    for i in range(n):
        for j in range(i + 1, n):
            pos = neg = False
            for k in range(n):
                count += 1
                if k in (i, j):
                    continue
                side = turn(pts[i], pts[j], pts[k])
                pos, neg = pos or side > 0, neg or side < 0
                if pos and neg:
                    break

            if not (pos and neg):
                edges.add(Edge.between(i, j))

    return HullResult(edges=edges, iterations=count)


__all__ = ['brute_force_hull']
