from __future__ import annotations
import logging
from typing import Tuple
from PySide6.QtCore import QPointF, QRectF
from .models import PlacedObject, Room
from .utils import EPS, clamp, nearest_wall

logger = logging.getLogger(__name__)

FLOATING = "floating"


def snap_position(x: float, y: float, w: float, h: float, room: QRectF) -> Tuple[QPointF, str]:
    """Project a w*h box proposed at (x, y) onto its nearest wall.

    Distances are taken from the proposed box, ties go left > right > top >
    bottom. The coordinate along the wall is clamped so the box stays inside
    the room. Returns the new top-left and the wall it landed on.
    """
    edge = nearest_wall(QRectF(x, y, w, h), room)
    if edge == "left":
        return QPointF(room.left(), clamp(y, room.top(), room.bottom() - h)), edge
    if edge == "right":
        return QPointF(room.right() - w, clamp(y, room.top(), room.bottom() - h)), edge
    if edge == "top":
        return QPointF(clamp(x, room.left(), room.right() - w), room.top()), edge
    return QPointF(clamp(x, room.left(), room.right() - w), room.bottom() - h), edge


def snap_to_nearest_wall(obj: PlacedObject, room: Room, scale: float) -> str:
    w, h = obj.size_px(scale)
    pos, edge = snap_position(obj.x, obj.y, w, h, room.rect(scale))
    obj.x, obj.y = pos.x(), pos.y()
    logger.debug("%s snapped to %s wall at (%s, %s)", obj.name, edge, obj.x, obj.y)
    return edge


def wall_side(obj: PlacedObject, room: Room, scale: float) -> str:
    """Wall the object currently sits against, or ``"floating"``."""
    r = obj.rect(scale)
    rr = room.rect(scale)
    if abs(r.left() - rr.left()) < EPS:
        return "left"
    if abs(r.right() - rr.right()) < EPS:
        return "right"
    if abs(r.top() - rr.top()) < EPS:
        return "top"
    if abs(r.bottom() - rr.bottom()) < EPS:
        return "bottom"
    return FLOATING
