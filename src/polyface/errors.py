"""Exception types raised by polyface."""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for polyface errors."""


class FaceConstructionError(GeometryError):
    """Input that cannot be turned into a face."""


class LoopStructureError(GeometryError):
    """A mutation whose structural precondition does not hold.

    Raised for edges that are not members of the face being mutated,
    which includes removing the same edge twice.
    """
