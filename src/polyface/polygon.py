from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Optional

from .face import Face
from .shapes import Box
from .sources import as_face_source
from .spatial_index import EdgeIndex

logger = logging.getLogger(__name__)


class Polygon:
    """Container of faces sharing one :class:`EdgeIndex`.

    *faces* may hold anything :meth:`add_face` accepts.
    """

    VERSION = "1.0"

    def __init__(self, faces: Optional[Iterable[Any]] = None) -> None:
        self.edges = EdgeIndex()
        self.faces: List[Face] = []
        for data in faces or []:
            self.add_face(data)

    # ── faces ───────────────────────────────────────────────────────

    def add_face(self, data: Any) -> Face:
        """Build a face from *data* and register its edges.

        Raises :class:`FaceConstructionError` when *data* is not a
        recognised face input.
        """
        face = Face.build(self.edges, as_face_source(data))
        self.faces.append(face)
        return face

    def delete_face(self, face: Face) -> None:
        for edge in face:
            self.edges.delete(edge)
        self.faces.remove(face)

    def is_empty(self) -> bool:
        return not self.faces

    def reverse(self) -> None:
        for face in self.faces:
            face.reverse()
        for edge in list(self.edges):
            self.edges.update(edge)

    # ── geometry ────────────────────────────────────────────────────

    @property
    def box(self) -> Box:
        box = Box.empty()
        for face in self.faces:
            box = box.merge(face.box)
        return box

    def area(self) -> float:
        """Absolute value of the summed face signed areas.

        Holes wound opposite to their outer face subtract from it.
        """
        return abs(sum(face.signed_area() for face in self.faces))

    def is_valid(self) -> bool:
        return all(face.is_simple(self.edges) for face in self.faces)

    def validate(self) -> List[str]:
        errors: List[str] = []
        for i, face in enumerate(self.faces):
            for error in face.validate():
                errors.append(f"Face {i}: {error}")
            if not face.is_empty() and not face.is_simple(self.edges):
                errors.append(f"Face {i}: boundary intersects itself")
        for error in errors:
            logger.warning(error)
        return errors

    # ── serialization ───────────────────────────────────────────────

    def svg(self) -> str:
        return "".join(face.svg() for face in self.faces)

    def to_dict(self) -> dict:
        return {
            "version": self.VERSION,
            "faces": [face.to_list() for face in self.faces],
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "Polygon":
        return cls(payload.get("faces", []))

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)

    @classmethod
    def from_json(cls, json_data: str) -> "Polygon":
        return cls.from_dict(json.loads(json_data))
