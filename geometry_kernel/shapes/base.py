"""Common capability surface shared by every shape."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..errors import UnsupportedOperationError

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .point import Point
    from .rectangle import Rectangle


class Shape(ABC):
    """A 2-D shape that can be related to other shapes.

    Concrete shapes resolve same-type and simple cross-type pairs themselves and
    hand compound pairs to :mod:`geometry_kernel.predicates`. A pair without a
    geometric meaning raises :class:`UnsupportedOperationError`.
    """

    kind: str = "shape"

    @abstractmethod
    def bounding_box(self) -> "Rectangle":
        """Return the minimum bounding rectangle."""

    @abstractmethod
    def distance_to(self, point: "Point") -> float:
        """Return the Euclidean distance from ``point`` to this shape."""

    @abstractmethod
    def center(self) -> "Point":
        ...

    @abstractmethod
    def intersects(self, other: "Shape") -> bool:
        ...

    def contains(self, other: "Shape") -> bool:
        raise UnsupportedOperationError("contains", self, other)

    def is_edge_intersection(self, other: "Shape") -> bool:
        raise UnsupportedOperationError("is_edge_intersection", self, other)


__all__ = ["Shape"]
