"""Exceptions raised by the sheet packer."""


class PackingError(Exception):
    """Indicates an error occurred during the packing process."""

    pass


class InvalidDimensionsError(PackingError, ValueError):
    """A shape to be packed has a non-positive, non-finite or non-numeric size."""

    def __init__(self, index, width, height, name=None):
        self.index = index
        self.width = width
        self.height = height
        self.name = name
        label = "shape {}".format(index) if name is None else "shape {} ({!r})".format(index, name)
        super().__init__(
            "{} has invalid dimensions {!r} x {!r}; width and height must be "
            "finite numbers greater than zero".format(label, width, height)
        )


class PackingExhaustedError(PackingError):
    """Neither growth direction could make room for a block.

    This includes growth that would push the sheet size past the largest
    finite float.
    """

    def __init__(self, block, reason):
        self.block = block
        self.reason = reason
        super().__init__(
            "Could not place shape {} ({} x {}): {}".format(
                block.source_index, block.width, block.height, reason
            )
        )


class PackerAlreadyUsedError(PackingError, RuntimeError):
    """fit() was called a second time on the same packer."""

    pass
