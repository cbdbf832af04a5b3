"""Sheet Packer.

This package lays out independently sized rectangular shapes, such as icon
glyphs or material textures, on a single composite sheet. Each shape gets an
offset on the sheet so it can later be addressed by offset and size.

MIT License

Copyright (c) 2026 The sheet_packer authors

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
"""

from typing import Iterable, Sequence, Tuple

from .errors import InvalidDimensionsError, PackerAlreadyUsedError, PackingError, PackingExhaustedError
from .layout import Layout
from .logger import setup_logging
from .packer import BinaryTreePacker
from .packer_types import Position, Shape

__version__ = "1.0.0"

__all__ = [
    "BinaryTreePacker",
    "InvalidDimensionsError",
    "Layout",
    "PackerAlreadyUsedError",
    "PackingError",
    "PackingExhaustedError",
    "Position",
    "Shape",
    "pack",
    "pack_sizes",
    "setup_logging",
]


def pack(shapes: Sequence) -> Layout:
    """Pack shapes onto a single sheet.

    Args:
        shapes: Ordered shapes exposing width, height and optionally is_alias.

    Returns:
        Layout with a position per shape and the final sheet size.
    """
    packer = BinaryTreePacker(shapes)
    positions = packer.fit()
    return Layout(packer.shapes, positions, packer.width, packer.height)


def pack_sizes(sizes: Iterable[Tuple]) -> Layout:
    """Pack plain (width, height) pairs onto a single sheet."""
    return pack([Shape(width, height) for width, height in sizes])
