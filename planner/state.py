from __future__ import annotations
import itertools
import logging
from typing import Callable, Dict, List, Optional, Tuple
from PySide6.QtCore import QPointF, QSizeF
from .collision import ensure_in_bounds, would_collide
from .factory import ObjectFactory
from .models import Interaction, Kind, PlacedObject, Room, Shape, default_size
from .snapping import snap_position, snap_to_nearest_wall
from .utils import (SCALE, DEFAULT_ROOM_W, DEFAULT_ROOM_L,
                    clamp, parse_positive_int, snap)

logger = logging.getLogger(__name__)

NO_SELECTION = "No object selected. Click an object on the canvas first."

_LOG_LEVELS = {"warning": logging.WARNING, "error": logging.WARNING}


class EditorState:
    """Editing session: the room, the placed objects and the pointer/selection state.

    The state owns the object list. Selection and the active drag refer to
    objects by id and are dropped together when that object goes away.
    Every mutation re-applies the placement rules before returning, so
    ``render_records()`` can be handed to the view at any time.

    ``notify(level, text)`` receives user-facing messages; level is
    ``"warning"`` or ``"error"``.
    """

    def __init__(self, room: Optional[Room] = None, scale: float = SCALE,
                 notify: Optional[Callable[[str, str], None]] = None):
        self.room = room or Room(DEFAULT_ROOM_W, DEFAULT_ROOM_L)
        self.scale = scale
        self.objects: List[PlacedObject] = []
        self.type_counters: Dict[str, int] = {k: 0 for k in Kind.ALL}
        self.snap_to_grid = False
        self._notify_cb = notify
        self._ids = itertools.count(1)
        self._selected_id: Optional[int] = None
        self._drag: Optional[Tuple[int, QPointF]] = None   # (object id, grab offset)
        self.factory = ObjectFactory(self)

    # ---- plumbing ----
    def next_id(self) -> int:
        return next(self._ids)

    def set_notify(self, cb: Optional[Callable[[str, str], None]]):
        self._notify_cb = cb

    def notify(self, level: str, text: str):
        logger.log(_LOG_LEVELS.get(level, logging.INFO), text)
        if self._notify_cb is not None:
            self._notify_cb(level, text)

    def find(self, obj_id: Optional[int]) -> Optional[PlacedObject]:
        if obj_id is None:
            return None
        for obj in self.objects:
            if obj.id == obj_id:
                return obj
        return None

    @property
    def selected(self) -> Optional[PlacedObject]:
        return self.find(self._selected_id)

    @property
    def interaction(self) -> str:
        if self._drag is not None:
            return Interaction.DRAGGING
        if self._selected_id is not None:
            return Interaction.SELECTED
        return Interaction.IDLE

    def room_px(self) -> QSizeF:
        return self.room.rect(self.scale).size()

    def object_at(self, x: float, y: float) -> Optional[PlacedObject]:
        # top-most first: later objects paint over earlier ones
        for obj in reversed(self.objects):
            r = obj.rect(self.scale)
            if r.left() <= x <= r.right() and r.top() <= y <= r.bottom():
                return obj
        return None

    # ---- room ----
    def set_room(self, width, length) -> bool:
        """Resize the room. Invalid fields are ignored and keep the prior value."""
        w = parse_positive_int(width)
        l = parse_positive_int(length)
        if w is None and l is None:
            return False
        if w is not None:
            self.room.width = w
        if l is not None:
            self.room.length = l
        logger.info("Room set to %d x %d ft", self.room.width, self.room.length)

        stuck = [obj.name for obj in self.objects if not self._revalidate(obj)]
        if stuck:
            self.notify("warning", "Could not place without overlap: " + ", ".join(stuck))
        return True

    # ---- objects ----
    def add_object(self, meta: Dict) -> Optional[PlacedObject]:
        obj = self.factory.create_from_meta(meta)
        if obj is not None:
            logger.info("Added %s (%s) at (%s, %s)", obj.name, obj.kind, obj.x, obj.y)
        return obj

    def remove_object(self, obj_id: int) -> bool:
        obj = self.find(obj_id)
        if obj is None:
            return False
        self.objects.remove(obj)
        if self._selected_id == obj_id:
            self._selected_id = None
            self._drag = None
        logger.info("Removed %s", obj.name)
        return True

    def _revalidate(self, obj: PlacedObject) -> bool:
        """Re-apply the rule for the object's kind. False if furniture still overlaps."""
        if obj.is_fixture:
            snap_to_nearest_wall(obj, self.room, self.scale)
            return True
        return ensure_in_bounds(obj, self.objects, self.room, self.scale)

    def _warn_overlap(self, obj: PlacedObject):
        self.notify("warning", f"{obj.name} could not be placed without overlapping other furniture.")

    # ---- pointer ----
    def pointer_down(self, x: float, y: float) -> Optional[PlacedObject]:
        obj = self.object_at(x, y)
        if obj is None:
            self._selected_id = None
            self._drag = None
            return None
        self._selected_id = obj.id
        self._drag = (obj.id, QPointF(x - obj.x, y - obj.y))
        return obj

    def pointer_move(self, x: float, y: float) -> bool:
        """Drag the grabbed object. Returns True if its position changed."""
        if self._drag is None:
            return False
        obj = self.find(self._drag[0])
        if obj is None:
            self._drag = None
            return False

        offset = self._drag[1]
        nx, ny = x - offset.x(), y - offset.y()
        if self.snap_to_grid:
            nx, ny = snap(nx, self.scale), snap(ny, self.scale)
        rr = self.room.rect(self.scale)
        w, h = obj.size_px(self.scale)
        old = (obj.x, obj.y)

        if obj.kind == Kind.FURNITURE:
            nx = clamp(nx, 0, rr.width() - w)
            ny = clamp(ny, 0, rr.height() - h)
            if would_collide(obj, nx, ny, self.objects, self.scale):
                logger.debug("Drag of %s to (%s, %s) rejected: overlap", obj.name, nx, ny)
                return False
            obj.x, obj.y = nx, ny
        else:
            # distances from the proposed position, so the fixture may change walls mid-drag
            pos, _ = snap_position(nx, ny, w, h, rr)
            obj.x, obj.y = pos.x(), pos.y()
        return (obj.x, obj.y) != old

    def pointer_up(self):
        self._drag = None

    # ---- edits on the selection ----
    def update_properties(self, meta: Dict) -> bool:
        """Apply a form submission to the selected object.

        Blank name and invalid sizes keep the current values. The object is
        then re-validated under its (possibly new) kind: fixtures snap to a
        wall, furniture is clamped and nudged off other furniture.
        """
        obj = self.selected
        if obj is None:
            self.notify("error", NO_SELECTION)
            return False
        kind = meta.get("kind") or obj.kind
        if kind not in Kind.ALL:
            self.notify("error", f"Unknown object type: {kind!r}")
            return False

        name = (meta.get("name") or "").strip()
        if name:
            obj.name = name
        w = parse_positive_int(meta.get("width"))
        h = parse_positive_int(meta.get("height"))
        if w is not None:
            obj.width = w
        if h is not None:
            obj.height = h
        if kind != obj.kind:
            logger.info("%s changed from %s to %s", obj.name, obj.kind, kind)
            obj.set_kind(kind)

        if not self._revalidate(obj):
            self._warn_overlap(obj)
        logger.info("Updated %s: %d x %d ft at (%s, %s)", obj.name, obj.width, obj.height, obj.x, obj.y)
        return True

    def rotate(self) -> bool:
        obj = self.selected
        if obj is None:
            self.notify("error", NO_SELECTION)
            return False
        if obj.shape == Shape.QUADRANT:
            obj.orientation = (obj.orientation + 1) % 4
        else:
            obj.width, obj.height = obj.height, obj.width
            if not self._revalidate(obj):
                self._warn_overlap(obj)
        logger.info("Rotated %s", obj.name)
        return True

    # ---- view / form contract ----
    def render_records(self) -> List[Dict]:
        out: List[Dict] = []
        for obj in self.objects:
            w, h = obj.size_px(self.scale)
            out.append({
                "id": obj.id,
                "kind": obj.kind,
                "shape": obj.shape,
                "name": obj.name,
                "x": obj.x, "y": obj.y,
                "w": w, "h": h,
                "orientation": obj.orientation if obj.shape == Shape.QUADRANT else None,
                "selected": obj.id == self._selected_id,
            })
        return out

    def selection_form(self) -> Optional[Dict]:
        obj = self.selected
        if obj is None:
            return None
        return {"kind": obj.kind, "name": obj.name, "width": obj.width, "height": obj.height}

    def form_defaults(self, kind: str) -> Optional[Dict]:
        # while something is selected the form shows that object, not defaults
        if self.selected is not None:
            return None
        w, h = default_size(kind)
        return {"width": w, "height": h}
