from __future__ import annotations
from typing import Dict, Optional, Tuple
from PySide6.QtCore import QRectF

# ===== Scale / grid =====
SCALE = 30                  # px per foot
EPS = 1e-6

# ===== Room =====
DEFAULT_ROOM_W = 20         # ft
DEFAULT_ROOM_L = 20         # ft

# ===== Collision retry budgets =====
ADD_RETRIES = 20
RESOLVE_RETRIES = 50

# ===== Walls, in tie-break order =====
WALLS: Tuple[str, ...] = ("left", "right", "top", "bottom")


def snap(v: float, step: float) -> float:
    return round(v / step) * step


def clamp(v: float, lo: float, hi: float) -> float:
    # lo > hi only when the object is bigger than the room; lo wins
    return max(lo, min(v, hi))


def overlaps(a: QRectF, b: QRectF) -> bool:
    """Positive-area intersection. Boxes that only share an edge do not overlap."""
    return (
        (a.left()   < b.right())  and
        (a.right()  > b.left())   and
        (a.top()    < b.bottom()) and
        (a.bottom() > b.top())
    )


def wall_distances(r: QRectF, room: QRectF) -> Dict[str, float]:
    return {
        "left":   abs(r.left() - room.left()),
        "right":  abs(room.right() - r.right()),
        "top":    abs(r.top() - room.top()),
        "bottom": abs(room.bottom() - r.bottom()),
    }


def nearest_wall(r: QRectF, room: QRectF) -> str:
    d = wall_distances(r, room)
    best = WALLS[0]
    for wall in WALLS[1:]:
        if d[wall] < d[best]:
            best = wall
    return best


def parse_positive_int(value) -> Optional[int]:
    """Form field -> positive int, or None for blank, non-numeric or <= 0."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        n = int(value)
    except (TypeError, ValueError):
        try:
            n = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return None
    return n if n > 0 else None
