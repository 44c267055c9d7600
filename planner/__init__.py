from .utils import SCALE, overlaps, clamp, wall_distances, nearest_wall, parse_positive_int
from .models import Kind, Shape, Interaction, Room, PlacedObject, default_size
from .collision import would_collide, resolve_placement, ensure_in_bounds
from .snapping import snap_to_nearest_wall, snap_position, wall_side
from .factory import ObjectFactory
from .state import EditorState

__all__ = [
    "SCALE", "overlaps", "clamp", "wall_distances", "nearest_wall", "parse_positive_int",
    "Kind", "Shape", "Interaction", "Room", "PlacedObject", "default_size",
    "would_collide", "resolve_placement", "ensure_in_bounds",
    "snap_to_nearest_wall", "snap_position", "wall_side",
    "ObjectFactory", "EditorState",
]
