import pytest

from planner import EditorState, Kind, PlacedObject, Room


class Notices(list):
    def __call__(self, level, text):
        self.append((level, text))

    def levels(self):
        return [lvl for lvl, _ in self]


@pytest.fixture
def notices():
    return Notices()


@pytest.fixture
def state(notices):
    # 20 x 20 ft at 30 px/ft -> 600 x 600 px
    return EditorState(Room(20, 20), scale=30, notify=notices)


def place(state, kind, x, y, width=3, height=3, name=None):
    """Drop an object at an exact pixel position, bypassing placement rules."""
    obj = PlacedObject(state.next_id(), Kind.FURNITURE, name or f"{kind} @{x},{y}", width, height, x, y)
    obj.set_kind(kind)
    state.objects.append(obj)
    return obj
