from __future__ import annotations
from typing import Dict
from PySide6.QtCore import Qt, QRectF, QPointF
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen, QFont
from PySide6.QtWidgets import QGraphicsRectItem, QGraphicsItem
from .models import Kind, Shape

# ===== Colors =====
KIND_COLORS = {
    Kind.FURNITURE: QColor(0, 150, 255, 128),
    Kind.WINDOW:    QColor(0, 200, 0, 140),
    Kind.DOOR:      QColor(200, 150, 0, 140),
    Kind.OUTLET:    QColor(200, 0, 200, 140),
}
OUTLINE = QColor("#000000")
SELECTED_PEN = QPen(QColor(255, 140, 0), 2, Qt.DashLine)

# quadrant pivot corner and start angle (Qt degrees, counter-clockwise from 3 o'clock)
_QUADRANT = {
    0: ("tl", 270.0),
    1: ("tr", 180.0),
    2: ("br", 90.0),
    3: ("bl", 0.0),
}


class PlanObjectItem(QGraphicsRectItem):
    """Paints one render record. Geometry comes from the editor state; the item never moves itself."""

    def __init__(self, record: Dict):
        super().__init__(QRectF(0, 0, record["w"], record["h"]))
        self.record = record
        self.setPos(QPointF(record["x"], record["y"]))
        self.setFlag(QGraphicsItem.ItemIsMovable, False)
        self.setFlag(QGraphicsItem.ItemIsSelectable, False)
        self.setBrush(QBrush(KIND_COLORS.get(record["kind"], KIND_COLORS[Kind.FURNITURE])))
        self.setPen(QPen(OUTLINE, 1))
        self.setToolTip(f"{record['name']}\n{record['kind']}: "
                        f"{record['w']:.0f} × {record['h']:.0f} px")

    def quadrant_path(self) -> QPainterPath:
        r = self.rect()
        radius = min(r.width(), r.height())
        corner, start = _QUADRANT[self.record.get("orientation") or 0]
        pivot = {
            "tl": r.topLeft(), "tr": r.topRight(),
            "br": r.bottomRight(), "bl": r.bottomLeft(),
        }[corner]
        path = QPainterPath(pivot)
        path.arcTo(QRectF(pivot.x() - radius, pivot.y() - radius, 2 * radius, 2 * radius),
                   start, 90.0)
        path.closeSubpath()
        return path

    def paint(self, painter: QPainter, option, widget=None):
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setBrush(self.brush())
        painter.setPen(self.pen())
        if self.record["shape"] == Shape.QUADRANT:
            painter.drawPath(self.quadrant_path())
        else:
            painter.drawRect(self.rect())
            painter.setPen(OUTLINE)
            painter.setFont(QFont("", 8))
            painter.drawText(self.rect().adjusted(3, 2, -2, -2),
                             Qt.AlignLeft | Qt.AlignTop, self.record["name"])

        if self.record.get("selected"):
            painter.setBrush(Qt.NoBrush)
            painter.setPen(SELECTED_PEN)
            painter.drawRect(self.rect())
