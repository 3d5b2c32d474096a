from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from blessings import Terminal

import hullcompare as HC


TERM = Terminal()
WIDTH, HEIGHT = 36, 18
Cell = Tuple[int, int]


def to_cell(point: HC.Point, points: HC.PointSet) -> Cell:
    xs, ys = [p.x for p in points], [p.y for p in points]
    dx, dy = (max(xs) - min(xs)) or 1, (max(ys) - min(ys)) or 1
    col = round((point.x - min(xs)) / dx * (WIDTH - 1))
    row = round((point.y - min(ys)) / dy * (HEIGHT - 1))
    return row, col  # Screen coordinates: y grows downward.


def segment(start: Cell, end: Cell) -> Iterator[Cell]:
    steps = max(abs(end[0] - start[0]), abs(end[1] - start[1]), 1)
    for s in range(steps + 1):
        yield (
            round(start[0] + (end[0] - start[0]) * s / steps),
            round(start[1] + (end[1] - start[1]) * s / steps),
        )


def render(panel: HC.Panel, points: HC.PointSet) -> List[str]:
    cells: Dict[Cell, str] = {}
    for edge in panel.result.edges:
        start = to_cell(points[edge.i], points)
        end = to_cell(points[edge.j], points)
        cells.update((c, TERM.blue('·')) for c in segment(start, end))
    for idx, point in enumerate(points):
        cells[to_cell(point, points)] = TERM.bold(str(idx % 10))

    rows = [panel.title.ljust(WIDTH), panel.caption.ljust(WIDTH)]
    for row in range(HEIGHT):
        rows.append(''.join(cells.get((row, col), ' ') for col in range(WIDTH)))
    return rows


def main():
    comparison = HC.compare(HC.REFERENCE_POINTS)
    left, right = (render(p, comparison.points) for p in comparison.panels)
    for lhs, rhs in zip(left, right):
        print(f'{lhs}  {TERM.yellow("|")}  {rhs}')

    if comparison.agree:
        print(TERM.green('Both hulls agree.'))
    else:
        edges = sorted(comparison.difference)
        print(TERM.red(f'Hulls differ on {len(edges)} edge(s): {edges}'))


if __name__ == '__main__':
    main()
