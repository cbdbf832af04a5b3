from collections import namedtuple
from typing import Optional


# __dict__ based baseclass
class _Base:
    def __repr__(self):
        items = ("{}={}".format(k, repr(v)) for k, v in self.__dict__.items())
        return "{}({})".format(type(self).__name__, ", ".join(items))

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.__dict__ == other.__dict__


class Shape(_Base):
    """A rectangular item to be laid out on the sheet.

    Any object with ``width``, ``height`` and optionally ``is_alias`` can be
    handed to the packer; this is the ready-made one.

    Attributes:
        width: Width of the item.
        height: Height of the item.
        is_alias: True when the item shares its geometry with another item and
            must not be packed on its own.
        name: Optional label, only used in log and error messages.
    """

    def __init__(self, width, height, is_alias: bool = False, name: Optional[str] = None):
        self.width = width
        self.height = height
        self.is_alias = is_alias
        self.name = name


def is_alias(shape) -> bool:
    """True when the shape takes its placement from another shape."""
    return bool(getattr(shape, "is_alias", False))


class Block(_Base):
    """A packable rectangle derived from a non-alias shape."""

    def __init__(self, source_index: int, width, height):
        self.source_index = source_index
        self.width = width
        self.height = height


class Node(_Base):
    """A region of the canvas tree.

    ``down`` and ``right`` are indices into the packer's node list and stay
    None until the node is used.
    """

    def __init__(self, x=0, y=0, width=0, height=0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.used = False
        self.down = None  # type: Optional[int]
        self.right = None  # type: Optional[int]

    def fits(self, width, height) -> bool:
        return not self.used and width <= self.width and height <= self.height


Position = namedtuple('Position', ['x', 'y'])

ORIGIN = Position(0, 0)


class Placed(namedtuple('PlacedBase', ['node'])):
    """The block went into the node with this index."""

    ok = True


class Failed(namedtuple('FailedBase', ['reason'])):
    """The block could not be placed."""

    ok = False
