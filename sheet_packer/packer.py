"""Bin packing algorithm for laying out shapes on a single sheet.

This module provides a binary tree based bin packing algorithm for
arranging rectangular shapes (icon glyphs, textures) into one composite
sheet. The sheet grows as needed to fit all shapes while trying to keep
it close to square and minimize wasted space.

Original algorithm by Jake Gordon
https://github.com/jakesgordon/bin-packing

Copyright (c) 2011, 2012, 2013, 2014, 2015, 2016 Jake Gordon and contributors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

Typical usage example:
    shapes = [Shape(100, 200), Shape(150, 100), Shape(150, 100, is_alias=True)]
    packer = BinaryTreePacker(shapes)
    positions = packer.fit()
    canvas_size = (packer.width, packer.height)
"""

import logging
import math
import numbers
from typing import List, Optional, Sequence, Union

from .errors import InvalidDimensionsError, PackerAlreadyUsedError, PackingExhaustedError
from .packer_types import ORIGIN, Block, Failed, Node, Placed, Position, is_alias

logger = logging.getLogger(__name__)

PlacementResult = Union[Placed, Failed]


def _is_valid_dimension(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and value > 0


class BinaryTreePacker:
    """Binary tree-based bin packing algorithm.

    The packer places shapes on a sheet that starts out as large as the
    biggest shape and grows one strip at a time. It works by:
    1. Sorting the shapes by their longest side, largest first.
    2. Finding the first free node where a shape can fit.
    3. Splitting that node to leave the remaining space available.
    4. Growing the sheet to the right or downward when nothing fits.

    A packer is single-use: fit() may only be called once.

    Attributes:
        shapes: The shapes to be packed, in input order.
        blocks: Packable blocks for every non-alias shape, largest first.
        positions: Top-left corner for every shape, index-aligned with shapes.
        nodes: All tree nodes created so far.
        root: Index of the current root node in nodes.
    """

    def __init__(self, shapes: Sequence) -> None:
        """Initialize the packer with a set of shapes.

        Args:
            shapes: Ordered shapes, each exposing width, height and
                optionally is_alias.

        Raises:
            InvalidDimensionsError: If a non-alias shape has a width or height
                that is not a finite number greater than zero.
        """
        self.shapes = list(shapes)
        self.blocks = []  # type: List[Block]
        self.positions = []  # type: List[Position]

        for index, shape in enumerate(self.shapes):
            if not is_alias(shape):
                width, height = shape.width, shape.height
                if not (_is_valid_dimension(width) and _is_valid_dimension(height)):
                    name = getattr(shape, "name", None)
                    logger.error("Rejecting shape %d (%r): invalid size %r x %r", index, name, width, height)
                    raise InvalidDimensionsError(index, width, height, name)
                self.blocks.append(Block(index, width, height))

            self.positions.append(ORIGIN)

        # Ties keep their input order so layouts are reproducible
        self.blocks.sort(key=lambda block: (-max(block.width, block.height), block.source_index))

        self.nodes = [Node()]  # type: List[Node]
        self.root = 0
        self._fitted = False

    @property
    def width(self):
        """Current width of the sheet."""
        return self.nodes[self.root].width

    @property
    def height(self):
        """Current height of the sheet."""
        return self.nodes[self.root].height

    def fit(self) -> List[Position]:
        """Pack all blocks onto the sheet.

        Returns:
            A position for every input shape, in input order. Alias shapes
            keep the (0, 0) default.

        Raises:
            PackerAlreadyUsedError: If called more than once.
            PackingExhaustedError: If a block could not be placed.
        """
        if self._fitted:
            raise PackerAlreadyUsedError("fit() can only be called once per packer")
        self._fitted = True

        positions = list(self.positions)
        if not self.blocks:
            logger.debug("Nothing to pack among %d shape(s)", len(self.shapes))
            return positions

        first = self.blocks[0]
        root = self.nodes[self.root]
        root.width, root.height = first.width, first.height

        for block in self.blocks:
            node = self.find_node(self.root, block.width, block.height)
            result = (
                self.split_node(node, block.width, block.height)
                if node is not None
                else self.grow_node(block.width, block.height)
            )
            if not result.ok:
                logger.error("Packing failed for shape %d: %s", block.source_index, result.reason)
                raise PackingExhaustedError(block, result.reason)

            placed = self.nodes[result.node]
            positions[block.source_index] = Position(placed.x, placed.y)

        self.positions = positions
        logger.info(
            "Packed %d of %d shape(s) into a %s x %s sheet",
            len(self.blocks), len(self.shapes), self.width, self.height,
        )
        return positions

    def find_node(self, start: int, width, height) -> Optional[int]:
        """Find a free node that can accommodate the specified dimensions.

        The right subtree of a used node is searched before its down subtree.

        Args:
            start: Index of the node to search from.
            width: Width required.
            height: Height required.

        Returns:
            Index of the first suitable node or None if none is found.
        """
        stack = [start]
        while stack:
            index = stack.pop()
            node = self.nodes[index]
            if node.used:
                stack.append(node.down)
                stack.append(node.right)
            elif node.fits(width, height):
                return index
        return None

    def split_node(self, index: int, width, height) -> Placed:
        """Split a node to fit the specified dimensions.

        Creates 'down' and 'right' child nodes with the remaining space.

        Args:
            index: Index of the node to split.
            width: Width required.
            height: Height required.

        Returns:
            Placed result pointing at the split node.
        """
        node = self.nodes[index]
        node.used = True
        node.down = self._add_node(node.x, node.y + height, node.width, node.height - height)
        node.right = self._add_node(node.x + width, node.y, node.width - width, height)
        return Placed(index)

    def grow_node(self, width, height) -> PlacementResult:
        """Grow the sheet to accommodate a block that doesn't fit.

        Growing right is preferred while the sheet is much taller than wide,
        growing down while it is much wider than tall.

        Args:
            width: Width required.
            height: Height required.

        Returns:
            Placed result, or Failed if neither direction can hold the block.
        """
        root = self.nodes[self.root]
        can_grow_right = height <= root.height
        can_grow_down = width <= root.width

        should_grow_right = can_grow_right and root.height >= root.width + width
        should_grow_down = can_grow_down and root.width >= root.height + height

        if should_grow_right:
            return self.grow_right(width, height)
        if should_grow_down:
            return self.grow_down(width, height)
        if can_grow_right:
            return self.grow_right(width, height)
        if can_grow_down:
            return self.grow_down(width, height)
        return Failed(
            "block {} x {} is larger than the {} x {} sheet in both directions".format(
                width, height, root.width, root.height
            )
        )

    def grow_right(self, width, height) -> PlacementResult:
        """Grow the sheet to the right.

        The previous root becomes the 'down' child of the new root.

        Args:
            width: Width to grow by.
            height: Height required.
        """
        old = self.nodes[self.root]
        new_width = old.width + width
        if not math.isfinite(new_width):
            return Failed("growing the sheet right by {} overflows its width".format(width))
        strip = self._add_node(old.width, 0, width, old.height)
        self.root = self._add_root(new_width, old.height, down=self.root, right=strip)
        logger.debug("Grew sheet right to %s x %s", self.width, self.height)
        return self._place_after_growth(width, height)

    def grow_down(self, width, height) -> PlacementResult:
        """Grow the sheet downward.

        The previous root becomes the 'right' child of the new root.

        Args:
            width: Width required.
            height: Height to grow by.
        """
        old = self.nodes[self.root]
        new_height = old.height + height
        if not math.isfinite(new_height):
            return Failed("growing the sheet down by {} overflows its height".format(height))
        strip = self._add_node(0, old.height, old.width, height)
        self.root = self._add_root(old.width, new_height, down=strip, right=self.root)
        logger.debug("Grew sheet down to %s x %s", self.width, self.height)
        return self._place_after_growth(width, height)

    def _place_after_growth(self, width, height) -> PlacementResult:
        node = self.find_node(self.root, width, height)
        if node is None:
            return Failed("no free node after growing the sheet to {} x {}".format(self.width, self.height))
        return self.split_node(node, width, height)

    def _add_node(self, x, y, width, height) -> int:
        self.nodes.append(Node(x, y, width, height))
        return len(self.nodes) - 1

    def _add_root(self, width, height, down: int, right: int) -> int:
        index = self._add_node(0, 0, width, height)
        root = self.nodes[index]
        root.used = True
        root.down = down
        root.right = right
        return index
