from __future__ import annotations
import logging
import math
from typing import Dict, Optional, TYPE_CHECKING
from .collision import resolve_placement
from .models import Kind, PlacedObject, default_size, shape_for
from .snapping import snap_to_nearest_wall
from .utils import ADD_RETRIES, clamp, parse_positive_int

if TYPE_CHECKING:
    from .state import EditorState

logger = logging.getLogger(__name__)


class ObjectFactory:
    def __init__(self, state: "EditorState"):
        self.state = state

    def _auto_name(self, kind: str) -> str:
        counters = self.state.type_counters
        counters[kind] = counters.get(kind, 0) + 1
        return f"{kind.capitalize()} {counters[kind]}"

    def create_from_meta(self, meta: Dict) -> Optional[PlacedObject]:
        """Build, place and register an object from an add-form submission.

        ``meta`` carries ``kind`` and optionally ``name``, ``width``, ``height``
        (feet). A blank name is auto-generated per kind; if either size is
        missing or invalid both fall back to the kind defaults.
        """
        kind = meta.get("kind", Kind.FURNITURE)
        if kind not in Kind.ALL:
            self.state.notify("error", f"Unknown object type: {kind!r}")
            return None

        name = (meta.get("name") or "").strip() or self._auto_name(kind)
        w = parse_positive_int(meta.get("width"))
        h = parse_positive_int(meta.get("height"))
        if w is None or h is None:
            w, h = default_size(kind)

        obj = PlacedObject(self.state.next_id(), kind, name, w, h, shape=shape_for(kind))
        if kind == Kind.FURNITURE:
            self._place_furniture(obj)
        else:
            self._place_fixture(obj)
        self.state.objects.append(obj)
        return obj

    def _place_furniture(self, obj: PlacedObject):
        st = self.state
        rr = st.room.rect(st.scale)
        w, h = obj.size_px(st.scale)
        obj.x = clamp(math.floor(rr.width() / 6), 0, rr.width() - w)
        obj.y = clamp(math.floor(rr.height() / 6), 0, rr.height() - h)
        if not resolve_placement(obj, st.objects, st.room, st.scale, ADD_RETRIES):
            # accepted silently on add
            logger.debug("%s added overlapping other furniture", obj.name)

    def _place_fixture(self, obj: PlacedObject):
        # left wall, vertically centred
        st = self.state
        rr = st.room.rect(st.scale)
        _, h = obj.size_px(st.scale)
        obj.x = 0
        obj.y = clamp(math.floor(rr.height() / 2 - h / 2), 0, rr.height() - h)
        snap_to_nearest_wall(obj, st.room, st.scale)
