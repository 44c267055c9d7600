from __future__ import annotations
from typing import Optional, Callable, List

from PySide6.QtCore import Qt, QLineF, QRectF, Signal
from PySide6.QtGui import QPainter, QPen, QColor, QWheelEvent
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView, QApplication

from .items import PlanObjectItem
from .state import EditorState

# ===== Grid visuals =====
BG_COLOR = QColor("#FFFFFF")
GRID_LINE = QColor("#E6E6E6")
ROOM_BORDER = QColor("#000000")
ROOM_BORDER_W = 2


class PlanScene(QGraphicsScene):
    # emitted after any model change; True when the selection may have changed
    modelChanged = Signal(bool)

    def __init__(self, state: EditorState, status_cb: Optional[Callable[[str], None]] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.state = state
        self._status_cb = status_cb
        self._items: List[PlanObjectItem] = []
        self.setItemIndexMethod(QGraphicsScene.NoIndex)
        self.refresh()

    # ---- model -> items ----
    def refresh(self, selection_changed: bool = False):
        size = self.state.room_px()
        self.setSceneRect(0, 0, size.width(), size.height())
        for it in self._items:
            self.removeItem(it)
        self._items = []
        for rec in self.state.render_records():
            item = PlanObjectItem(rec)
            self.addItem(item)
            self._items.append(item)
        self.update()
        self.modelChanged.emit(selection_changed)

    def object_items(self) -> List[PlanObjectItem]:
        return list(self._items)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        painter.fillRect(rect, BG_COLOR)
        room = self.sceneRect()
        step = self.state.scale
        painter.setPen(QPen(GRID_LINE, 1))
        x = room.left()
        while x <= room.right() + 0.5:
            painter.drawLine(QLineF(x, room.top(), x, room.bottom()))
            x += step
        y = room.top()
        while y <= room.bottom() + 0.5:
            painter.drawLine(QLineF(room.left(), y, room.right(), y))
            y += step
        painter.setPen(QPen(ROOM_BORDER, ROOM_BORDER_W)); painter.setBrush(Qt.NoBrush); painter.drawRect(room)

    # ---- pointer -> state ----
    def press_at(self, x: float, y: float):
        obj = self.state.pointer_down(x, y)
        self.refresh(selection_changed=True)
        # emitted after modelChanged, which rewrites the status bar
        if obj is not None and self._status_cb:
            self._status_cb(f"Selected: {obj.name}")
        return obj

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event); return
        p = event.scenePos()
        self.press_at(p.x(), p.y())
        event.accept()

    def mouseMoveEvent(self, event):
        p = event.scenePos()
        if self.state.pointer_move(p.x(), p.y()):
            self.refresh()
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.state.pointer_up()
        event.accept()


class PlanView(QGraphicsView):
    scaleChanged = Signal(float)

    def __init__(self, scene: PlanScene):
        super().__init__(scene)
        self.setRenderHint(QPainter.Antialiasing, True)
        self.setViewportUpdateMode(QGraphicsView.BoundingRectViewportUpdate)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.AnchorUnderMouse)
        self.setMouseTracking(False)

    def wheelEvent(self, event: QWheelEvent):
        if QApplication.keyboardModifiers() & Qt.ControlModifier:
            angle = event.angleDelta().y()
            factor = 1.15 if angle > 0 else 1.0 / 1.15
            self.scale(factor, factor)
            self.scaleChanged.emit(self.transform().m11())
            event.accept()
            return
        super().wheelEvent(event)
