from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple
from PySide6.QtCore import QRectF


class Kind:
    FURNITURE = "furniture"
    WINDOW = "window"
    DOOR = "door"
    OUTLET = "outlet"

    ALL: Tuple[str, ...] = (FURNITURE, WINDOW, DOOR, OUTLET)
    FIXTURES: Tuple[str, ...] = (WINDOW, DOOR, OUTLET)


class Shape:
    RECT = "rect"
    QUADRANT = "quadrant"


class Interaction:
    IDLE = "idle"
    SELECTED = "selected"
    DRAGGING = "dragging"


# width, height in feet
DEFAULT_SIZES: Dict[str, Tuple[int, int]] = {
    Kind.FURNITURE: (3, 3),
    Kind.WINDOW: (4, 2),
    Kind.DOOR: (3, 3),
    Kind.OUTLET: (1, 1),
}


def default_size(kind: str) -> Tuple[int, int]:
    return DEFAULT_SIZES.get(kind, (3, 3))


def shape_for(kind: str) -> str:
    return Shape.QUADRANT if kind == Kind.DOOR else Shape.RECT


def is_fixture(kind: str) -> bool:
    return kind in Kind.FIXTURES


@dataclass
class Room:
    width: int      # ft
    length: int     # ft

    def rect(self, scale: float) -> QRectF:
        return QRectF(0, 0, self.width * scale, self.length * scale)


@dataclass
class PlacedObject:
    id: int
    kind: str
    name: str
    width: int      # ft
    height: int     # ft
    x: float = 0.0  # px, top-left
    y: float = 0.0
    shape: str = Shape.RECT
    orientation: int = 0  # quadrant pivot corner, 0..3 clockwise from top-left

    @property
    def is_fixture(self) -> bool:
        return is_fixture(self.kind)

    def size_px(self, scale: float) -> Tuple[float, float]:
        return self.width * scale, self.height * scale

    def rect(self, scale: float) -> QRectF:
        w, h = self.size_px(scale)
        return QRectF(self.x, self.y, w, h)

    def rect_at(self, x: float, y: float, scale: float) -> QRectF:
        w, h = self.size_px(scale)
        return QRectF(x, y, w, h)

    def set_kind(self, kind: str):
        """Change kind and re-derive shape. A door freshly made quadrant starts at orientation 0."""
        self.kind = kind
        shape = shape_for(kind)
        if shape != self.shape:
            self.orientation = 0
        self.shape = shape
