import numpy as np
import pytest

from hullcompare.geometry import (
    EPS, Edge, HullResult, Point, as_points, orientation, turn,
)


def test_orientation_signs():
    a, b = Point(0, 0), Point(4, 0)

    assert orientation(a, b, Point(1, 3)) == 12
    assert orientation(a, b, Point(1, -3)) == -12
    assert orientation(a, b, Point(9, 0)) == 0

    assert turn(a, b, Point(1, 3)) == 1
    assert turn(a, b, Point(1, -3)) == -1
    assert turn(a, b, Point(9, 0)) == 0


def test_turn_absorbs_noise():
    a, b = Point(0, 0), Point(1, 0)

    assert turn(a, b, Point(0.5, EPS / 2)) == 0
    assert turn(a, b, Point(0.5, -EPS / 2)) == 0
    assert turn(a, b, Point(0.5, 1e-6)) == 1
    assert turn(a, b, Point(0.5, 1e-6), eps=1e-3) == 0


def test_as_points():
    pts = as_points([(1, 2), (3, 4.5)])
    assert pts == (Point(1.0, 2.0), Point(3.0, 4.5))
    assert as_points(np.array([[1, 2], [3, 4.5]])) == pts
    assert as_points(pts) == pts
    assert as_points([]) == ()

    with pytest.raises(ValueError):
        as_points([1, 2, 3])

    with pytest.raises(ValueError):
        as_points(np.zeros((3, 3)))

    with pytest.raises(ValueError):
        as_points([(0, 0), (1, float('nan'))])

    with pytest.raises(ValueError):
        as_points([(0, float('inf'))])


def test_edge_canonical():
    assert Edge.between(5, 2) == Edge(2, 5)
    assert Edge.between(2, 5) == Edge.between(5, 2)
    assert len({Edge.between(1, 0), Edge.between(0, 1)}) == 1
    assert sorted([Edge(1, 3), Edge(0, 4), Edge(1, 2)]) == [
        Edge(0, 4), Edge(1, 2), Edge(1, 3),
    ]

    with pytest.raises(AssertionError):
        Edge(5, 2)


def test_hull_result_cycle():
    square = HullResult(
        edges={Edge(0, 1), Edge(1, 3), Edge(2, 3), Edge(0, 2)},
        iterations=4,
    )
    assert square.vertices == {0, 1, 2, 3}
    assert square.cycle() == (0, 1, 3, 2)

    assert HullResult(edges=set()).cycle() == ()
    assert HullResult(edges={Edge(2, 7)}).cycle() == (2, 7)


def test_hull_result_cycle_rejects_chords():
    with_chord = HullResult(edges={
        Edge(0, 1), Edge(1, 2), Edge(2, 3), Edge(0, 3), Edge(0, 2),
    })
    with pytest.raises(ValueError):
        with_chord.cycle()

    two_triangles = HullResult(edges={
        Edge(0, 1), Edge(1, 2), Edge(0, 2),
        Edge(3, 4), Edge(4, 5), Edge(3, 5),
    })
    with pytest.raises(ValueError):
        two_triangles.cycle()
