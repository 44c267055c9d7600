import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QPointF

from planner import EditorState, Kind, Room, Shape
from planner.items import PlanObjectItem
from planner.properties import PropertyPanel
from planner.scene import PlanScene


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def scene(qapp):
    return PlanScene(EditorState(Room(20, 20), scale=30))


def test_scene_rect_follows_room(scene):
    r = scene.sceneRect()
    assert (r.width(), r.height()) == (600, 600)
    scene.state.set_room(10, 12)
    scene.refresh()
    r = scene.sceneRect()
    assert (r.width(), r.height()) == (300, 360)


def test_refresh_builds_one_item_per_object(scene):
    scene.state.add_object({"kind": Kind.FURNITURE})
    scene.state.add_object({"kind": Kind.DOOR})
    scene.refresh()
    items = scene.object_items()
    assert [it.record["kind"] for it in items] == [Kind.FURNITURE, Kind.DOOR]
    assert (items[0].pos().x(), items[0].pos().y()) == (100, 100)
    scene.refresh()
    assert len([it for it in scene.items() if isinstance(it, PlanObjectItem)]) == 2


def test_press_reports_selection_after_model_changed(qapp):
    events = []
    scene = PlanScene(EditorState(Room(20, 20), scale=30), status_cb=events.append)
    scene.modelChanged.connect(lambda changed: events.append(("modelChanged", changed)))
    obj = scene.state.add_object({"kind": Kind.FURNITURE})
    assert scene.press_at(110, 110) is obj
    assert events == [("modelChanged", True), f"Selected: {obj.name}"]
    assert scene.object_items()[0].record["selected"]
    events.clear()
    assert scene.press_at(500, 500) is None
    assert events == [("modelChanged", True)]


def test_quadrant_path_is_pivoted_on_orientation_corner(scene):
    door = scene.state.add_object({"kind": Kind.DOOR})
    scene.refresh()
    item = scene.object_items()[0]
    assert item.record["shape"] == Shape.QUADRANT
    path = item.quadrant_path()
    r = path.boundingRect()
    assert (r.left(), r.top(), r.width(), r.height()) == pytest.approx((0, 0, 90, 90), abs=1e-6)
    assert path.contains(QPointF(5, 5))
    assert not path.contains(QPointF(85, 85))

    door.orientation = 2
    scene.refresh()
    path = scene.object_items()[0].quadrant_path()
    assert path.contains(QPointF(85, 85))
    assert not path.contains(QPointF(3, 3))


def test_property_panel_add_update_rotate(scene):
    panel = PropertyPanel(scene)
    panel.cmb_kind.setCurrentIndex(panel.cmb_kind.findData(Kind.WINDOW))
    assert (panel.sp_w.value(), panel.sp_h.value()) == (4, 2)
    panel.add_object()
    w = scene.state.objects[-1]
    assert w.name == "Window 1"
    assert len(scene.object_items()) == 1

    scene.state.pointer_down(5, 280)
    scene.state.pointer_up()
    scene.refresh(selection_changed=True)
    assert panel.ed_name.text() == "Window 1"
    assert panel.cmb_kind.currentData() == Kind.WINDOW

    panel.ed_name.setText("Bay window")
    panel.update_object()
    assert w.name == "Bay window"

    panel.rotate_object()
    assert (w.width, w.height) == (2, 4)
    assert (panel.sp_w.value(), panel.sp_h.value()) == (2, 4)


def test_property_panel_room(scene):
    panel = PropertyPanel(scene)
    panel.sp_room_w.setValue(15)
    panel.sp_room_l.setValue(8)
    panel._apply_room()
    assert (scene.state.room.width, scene.state.room.length) == (15, 8)
    assert scene.sceneRect().height() == 240
