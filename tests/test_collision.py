from planner import Kind, Room, ensure_in_bounds, resolve_placement, would_collide
from planner.utils import overlaps

from .conftest import place


def test_furniture_collides_with_furniture(state):
    a = place(state, Kind.FURNITURE, 0, 0)
    b = place(state, Kind.FURNITURE, 200, 200)
    assert would_collide(b, 60, 60, state.objects, 30)
    assert not would_collide(b, 90, 0, state.objects, 30)   # shares an edge only
    assert not would_collide(a, 0, 0, state.objects, 30)    # never against itself


def test_fixtures_never_collide(state):
    place(state, Kind.FURNITURE, 0, 0)
    window = place(state, Kind.WINDOW, 0, 0, 4, 2)
    sofa = place(state, Kind.FURNITURE, 300, 300)
    assert not would_collide(window, 0, 0, state.objects, 30)
    # a window on the spot does not block furniture
    state.objects.remove(state.objects[0])
    assert not would_collide(sofa, 0, 0, state.objects, 30)


def test_scan_shifts_right_one_cell_at_a_time(state):
    place(state, Kind.FURNITURE, 100, 100)
    b = place(state, Kind.FURNITURE, 100, 100)
    assert resolve_placement(b, state.objects, state.room, 30, retries=20)
    # 130 and 160 still overlap the 90 px box at 100
    assert (b.x, b.y) == (190, 100)


def test_scan_wraps_to_next_row(state):
    state.room = Room(10, 10)
    place(state, Kind.FURNITURE, 0, 0, width=10, height=1)
    b = place(state, Kind.FURNITURE, 0, 0)
    assert resolve_placement(b, state.objects, state.room, 30)
    assert (b.x, b.y) == (0, 30)


def test_budget_exhausted_keeps_last_candidate(state):
    state.room = Room(10, 10)
    a = place(state, Kind.FURNITURE, 0, 0, width=10, height=1)
    b = place(state, Kind.FURNITURE, 0, 0)
    assert not resolve_placement(b, state.objects, state.room, 30, retries=2)
    assert (b.x, b.y) == (60, 0)
    assert overlaps(a.rect(30), b.rect(30))


def test_scan_wraps_back_to_top_and_stays_in_room(state):
    state.room = Room(3, 3)
    place(state, Kind.FURNITURE, 0, 0)
    b = place(state, Kind.FURNITURE, 0, 0)
    assert not resolve_placement(b, state.objects, state.room, 30, retries=50)
    assert (b.x, b.y) == (0, 0)


def test_ensure_in_bounds_clamps_first(state):
    b = place(state, Kind.FURNITURE, 580, -40)
    assert ensure_in_bounds(b, state.objects, state.room, 30)
    assert (b.x, b.y) == (510, 0)


def test_ensure_in_bounds_then_nudges(state):
    place(state, Kind.FURNITURE, 510, 0)
    b = place(state, Kind.FURNITURE, 700, 0)
    assert ensure_in_bounds(b, state.objects, state.room, 30)
    # clamped onto the other piece at the right wall, wrapped to the next row
    assert (b.x, b.y) == (0, 30)
