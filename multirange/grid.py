"""Grid tick geometry for the slider track.

``num_cells`` describes nested subdivisions: ``(3, 4)`` splits the track into
3 cells and each of those into 4, giving 12 cells in total. Every tick is
reported once, at the coarsest level it belongs to.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .slider_types import GridMark, GridView, SliderData


def cell_counts(num_cells) -> List[int]:
    """Cumulative cell count per level: ``(3, 4) -> [3, 12]``.

    Counts are expected to be positive; validation and the integrity checks
    keep the product within ``defaults.GRID_MAX_CELLS``.
    """
    counts = np.cumprod([int(n) for n in num_cells], dtype=np.int64)
    return [int(c) for c in counts]


def make_grid(data: SliderData) -> GridView:
    css_class = f"{data.css_class}__grid"
    if not data.grid.is_visible:
        return GridView(False, data.orientation, css_class)
    if not data.grid.num_cells:
        return GridView(True, data.orientation, css_class)

    counts = cell_counts(data.grid.num_cells)
    finest = counts[-1]
    positions = np.linspace(0.0, 100.0, finest + 1)
    values = data.min + (data.max - data.min) * positions / 100.0

    marks = []
    for index, (position, value) in enumerate(zip(positions, values)):
        level = next(k for k, count in enumerate(counts) if index % (finest // count) == 0)
        value = float(value)
        label = data.tooltip_formatter(value) if level == 0 else ""
        marks.append(GridMark(float(position), level, value, label))

    return GridView(True, data.orientation, css_class, tuple(marks))
