"""Broad-phase box index over a polygon's edges.

:class:`EdgeIndex` is shared by a polygon and all of its faces.  Boxes
live in one contiguous ``(capacity, 4)`` numpy array so a range query is
a single vectorised comparison; freed rows are filled with NaN (which
never compares true) and reused.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

import numpy as np

from .shapes import Box
from .utils import get_tolerance

if TYPE_CHECKING:
    from .edge import Edge

logger = logging.getLogger(__name__)

_XMIN, _YMIN, _XMAX, _YMAX = range(4)


class EdgeIndex:
    """Set of edges with box-overlap search.

    Edges are keyed by identity.  Adding an edge that is already
    registered refreshes its stored box.
    """

    def __init__(self, capacity: int = 16) -> None:
        capacity = max(int(capacity), 1)
        self._boxes = np.full((capacity, 4), np.nan)
        self._items: List[Optional["Edge"]] = [None] * capacity
        self._slots: Dict["Edge", int] = {}
        self._free: List[int] = list(range(capacity - 1, -1, -1))

    # ── set protocol ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, edge: object) -> bool:
        return edge in self._slots

    def __iter__(self) -> Iterator["Edge"]:
        return iter(list(self._slots))

    def add(self, edge: "Edge") -> None:
        slot = self._slots.get(edge)
        if slot is None:
            if not self._free:
                self._grow()
            slot = self._free.pop()
            self._slots[edge] = slot
            self._items[slot] = edge
        box = edge.box
        self._boxes[slot] = (box.xmin, box.ymin, box.xmax, box.ymax)

    def update(self, edge: "Edge") -> None:
        """Refresh the stored box of a registered edge."""
        if edge in self._slots:
            self.add(edge)

    def delete(self, edge: "Edge") -> bool:
        slot = self._slots.pop(edge, None)
        if slot is None:
            return False
        self._boxes[slot] = np.nan
        self._items[slot] = None
        self._free.append(slot)
        return True

    def clear(self) -> None:
        self.__init__(len(self._items))

    # ── queries ─────────────────────────────────────────────────────

    def search(self, box: Box) -> List["Edge"]:
        """Return registered edges whose boxes overlap *box*."""
        if box.is_empty() or not self._slots:
            return []
        tol = get_tolerance()
        boxes = self._boxes
        mask = (
            (boxes[:, _XMIN] <= box.xmax + tol)
            & (boxes[:, _XMAX] >= box.xmin - tol)
            & (boxes[:, _YMIN] <= box.ymax + tol)
            & (boxes[:, _YMAX] >= box.ymin - tol)
        )
        return [self._items[i] for i in np.flatnonzero(mask)]

    @property
    def box(self) -> Box:
        """Union of every registered edge box."""
        if not self._slots:
            return Box.empty()
        rows = self._boxes[list(self._slots.values())]
        return Box(
            float(rows[:, _XMIN].min()),
            float(rows[:, _YMIN].min()),
            float(rows[:, _XMAX].max()),
            float(rows[:, _YMAX].max()),
        )

    # ── internals ───────────────────────────────────────────────────

    def _grow(self) -> None:
        old = len(self._items)
        new = old * 2
        boxes = np.full((new, 4), np.nan)
        boxes[:old] = self._boxes
        self._boxes = boxes
        self._items.extend([None] * (new - old))
        self._free.extend(range(new - 1, old - 1, -1))
        logger.debug("EdgeIndex grown from %d to %d slots", old, new)
