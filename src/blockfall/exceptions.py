"""Exceptions raised by the blockfall engine."""


class BlockfallError(Exception):
    """Base class for engine errors."""
    pass


class OutOfBoundsError(BlockfallError):
    """An overlay was placed so that part of it falls outside the target grid."""
    pass


class ShapeMismatchError(BlockfallError, ValueError):
    """A cell array does not match the dimension it was paired with."""
    pass
