"""Packed sheet layout and consistency checks.

A Layout bundles the positions returned by the packer with the shapes they
belong to and the final sheet size, and offers vectorized checks that the
placed rectangles are disjoint and inside the sheet.
"""

from typing import List, Sequence, Tuple

import numpy as np

from .packer_types import Position, is_alias


class Layout:
    """Result of packing a set of shapes onto one sheet.

    Attributes:
        shapes: The packed shapes, in input order.
        positions: Top-left corner for every shape, index-aligned with shapes.
        width: Width of the sheet.
        height: Height of the sheet.
    """

    def __init__(self, shapes: Sequence, positions: Sequence[Position], width, height) -> None:
        if len(shapes) != len(positions):
            raise ValueError(
                "Got {} positions for {} shapes".format(len(positions), len(shapes))
            )
        self.shapes = list(shapes)
        self.positions = list(positions)
        self.width = width
        self.height = height

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    def __getitem__(self, index: int) -> Position:
        return self.positions[index]

    def __repr__(self) -> str:
        return "Layout(shapes={}, width={}, height={})".format(len(self.shapes), self.width, self.height)

    @property
    def size(self) -> Tuple:
        return self.width, self.height

    def packed_indices(self) -> List[int]:
        """Indices of the shapes that were placed by the packer (non-aliases)."""
        return [i for i, shape in enumerate(self.shapes) if not is_alias(shape)]

    def rectangles(self) -> np.ndarray:
        """Placed rectangles as an (n, 4) array of left, top, right, bottom.

        Rows follow packed_indices().
        """
        indices = self.packed_indices()
        if not indices:
            return np.empty((0, 4), dtype=float)

        left = np.array([self.positions[i].x for i in indices], dtype=float)
        top = np.array([self.positions[i].y for i in indices], dtype=float)
        right = left + np.array([self.shapes[i].width for i in indices], dtype=float)
        bottom = top + np.array([self.shapes[i].height for i in indices], dtype=float)
        return np.column_stack((left, top, right, bottom))

    @property
    def utilization(self) -> float:
        """Share of the sheet covered by packed shapes, between 0 and 1."""
        sheet_area = float(self.width) * float(self.height)
        if sheet_area <= 0:
            return 0.0
        rects = self.rectangles()
        used_area = np.sum((rects[:, 2] - rects[:, 0]) * (rects[:, 3] - rects[:, 1]))
        return float(used_area / sheet_area)

    def overlapping_pairs(self, tolerance: float = 0.0) -> List[Tuple[int, int]]:
        """Find pairs of packed shapes whose rectangles overlap.

        Rectangles that only share an edge do not overlap.

        Args:
            tolerance: Overlap depth to ignore, for float sizes.

        Returns:
            Pairs of input indices (i, j) with i < j.
        """
        rects = self.rectangles()
        if len(rects) < 2:
            return []

        left, top, right, bottom = (rects[:, k] for k in range(4))
        overlap_x = np.minimum(right[:, None], right[None, :]) - np.maximum(left[:, None], left[None, :])
        overlap_y = np.minimum(bottom[:, None], bottom[None, :]) - np.maximum(top[:, None], top[None, :])
        clash = (overlap_x > tolerance) & (overlap_y > tolerance)
        clash = np.triu(clash, k=1)

        indices = self.packed_indices()
        pairs = [(indices[a], indices[b]) for a, b in np.argwhere(clash)]
        return sorted(pairs)

    def out_of_bounds(self, tolerance: float = 0.0) -> List[int]:
        """Input indices of packed shapes that extend past the sheet."""
        rects = self.rectangles()
        if not len(rects):
            return []

        outside = (
            (rects[:, 0] < -tolerance)
            | (rects[:, 1] < -tolerance)
            | (rects[:, 2] > float(self.width) + tolerance)
            | (rects[:, 3] > float(self.height) + tolerance)
        )
        indices = self.packed_indices()
        return [indices[i] for i in np.flatnonzero(outside)]
