from __future__ import annotations
import logging
from typing import Iterable
from .models import Kind, PlacedObject, Room
from .utils import RESOLVE_RETRIES, clamp, overlaps

logger = logging.getLogger(__name__)


def would_collide(obj: PlacedObject, x: float, y: float,
                  objects: Iterable[PlacedObject], scale: float) -> bool:
    """True if ``obj`` placed at (x, y) overlaps another piece of furniture.

    Only furniture collides; windows, doors and outlets may sit on top of
    anything.
    """
    if obj.kind != Kind.FURNITURE:
        return False
    mine = obj.rect_at(x, y, scale)
    for other in objects:
        if other is obj or other.kind != Kind.FURNITURE:
            continue
        if overlaps(mine, other.rect(scale)):
            return True
    return False


def resolve_placement(obj: PlacedObject, objects: Iterable[PlacedObject], room: Room,
                      scale: float, retries: int = RESOLVE_RETRIES) -> bool:
    """Row-major nudge search starting at the object's current position.

    Moves one grid cell right at a time, wrapping to the next row at the
    right wall and back to the top row at the bottom wall. Gives up after
    ``retries`` moves and keeps the last candidate. Returns True when the
    final position is collision-free.
    """
    objects = list(objects)
    rr = room.rect(scale)
    w, h = obj.size_px(scale)
    tries = 0
    while would_collide(obj, obj.x, obj.y, objects, scale) and tries < retries:
        obj.x += scale
        if obj.x + w > rr.width():
            obj.x = 0
            obj.y += scale
            if obj.y + h > rr.height():
                obj.y = 0
        tries += 1

    ok = not would_collide(obj, obj.x, obj.y, objects, scale)
    if ok:
        logger.debug("%s placed at (%s, %s) after %d nudges", obj.name, obj.x, obj.y, tries)
    else:
        logger.debug("%s still overlaps after %d nudges, keeping (%s, %s)",
                     obj.name, tries, obj.x, obj.y)
    return ok


def ensure_in_bounds(obj: PlacedObject, objects: Iterable[PlacedObject], room: Room,
                     scale: float, retries: int = RESOLVE_RETRIES) -> bool:
    """Clamp furniture into the room, then nudge it off other furniture."""
    rr = room.rect(scale)
    w, h = obj.size_px(scale)
    obj.x = clamp(obj.x, 0, rr.width() - w)
    obj.y = clamp(obj.y, 0, rr.height() - h)
    return resolve_placement(obj, objects, room, scale, retries)
