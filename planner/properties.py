# planner/properties.py
from __future__ import annotations
from typing import Dict
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QFormLayout, QLineEdit, QDoubleSpinBox, QComboBox,
    QLabel, QHBoxLayout, QPushButton, QGroupBox
)

from .models import Kind
from .scene import PlanScene


def _spin(maximum: int = 999) -> QDoubleSpinBox:
    s = QDoubleSpinBox()
    s.setRange(1, maximum); s.setDecimals(0); s.setSingleStep(1); s.setSuffix(" ft")
    return s


class PropertyPanel(QWidget):
    # text for the status bar
    statusMessage = Signal(str)

    def __init__(self, scene: PlanScene, parent=None):
        super().__init__(parent)
        self.scene = scene
        self.state = scene.state

        self.setMinimumWidth(280)
        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(10)

        # ------- Room -------
        self.grp_room = QGroupBox("Room")
        fr = QFormLayout(self.grp_room)
        fr.setLabelAlignment(Qt.AlignRight)
        self.sp_room_w = _spin(); self.sp_room_l = _spin()
        self.btn_room = QPushButton("Apply room")
        fr.addRow("Width:", self.sp_room_w)
        fr.addRow("Length:", self.sp_room_l)
        fr.addRow(self.btn_room)
        self.btn_room.clicked.connect(self._apply_room)
        root.addWidget(self.grp_room)

        # ------- Object -------
        self.grp_obj = QGroupBox("Object")
        fo = QFormLayout(self.grp_obj)
        fo.setLabelAlignment(Qt.AlignRight)

        self.lbl_title = QLabel("Nothing selected")
        self.lbl_title.setStyleSheet("font-weight: 600;")
        self.cmb_kind = QComboBox()
        for kind in Kind.ALL:
            self.cmb_kind.addItem(kind.capitalize(), kind)
        self.ed_name = QLineEdit()
        self.ed_name.setPlaceholderText("auto")
        self.sp_w = _spin(); self.sp_h = _spin()

        fo.addRow(self.lbl_title)
        fo.addRow("Type:", self.cmb_kind)
        fo.addRow("Name:", self.ed_name)
        fo.addRow("Width:", self.sp_w)
        fo.addRow("Height:", self.sp_h)

        buttons = QHBoxLayout()
        self.btn_add = QPushButton("Add")
        self.btn_update = QPushButton("Update")
        self.btn_rotate = QPushButton("Rotate")
        for b in (self.btn_add, self.btn_update, self.btn_rotate):
            buttons.addWidget(b)
        fo.addRow(buttons)
        root.addWidget(self.grp_obj)
        root.addStretch(1)

        self.cmb_kind.currentIndexChanged.connect(self._on_kind_changed)
        self.btn_add.clicked.connect(self.add_object)
        self.btn_update.clicked.connect(self.update_object)
        self.btn_rotate.clicked.connect(self.rotate_object)
        self.scene.modelChanged.connect(self._on_model_changed)

        self.sp_room_w.setValue(self.state.room.width)
        self.sp_room_l.setValue(self.state.room.length)
        self._on_kind_changed()

    # ---------- API ----------
    def form_meta(self) -> Dict:
        return {
            "kind": self.cmb_kind.currentData(),
            "name": self.ed_name.text(),
            "width": int(self.sp_w.value()),
            "height": int(self.sp_h.value()),
        }

    def load_selection(self):
        form = self.state.selection_form()
        if form is None:
            self.lbl_title.setText("Nothing selected")
            self.ed_name.clear()
            return
        self.lbl_title.setText(f"Selected: {form['name']}")
        for w in (self.cmb_kind, self.ed_name, self.sp_w, self.sp_h):
            w.blockSignals(True)
        self.cmb_kind.setCurrentIndex(self.cmb_kind.findData(form["kind"]))
        self.ed_name.setText(form["name"])
        self.sp_w.setValue(form["width"])
        self.sp_h.setValue(form["height"])
        for w in (self.cmb_kind, self.ed_name, self.sp_w, self.sp_h):
            w.blockSignals(False)

    # ---------- handlers ----------
    def _on_model_changed(self, selection_changed: bool):
        if selection_changed:
            self.load_selection()

    def _on_kind_changed(self, *_):
        d = self.state.form_defaults(self.cmb_kind.currentData())
        if d is None:
            return
        self.sp_w.setValue(d["width"])
        self.sp_h.setValue(d["height"])

    def _apply_room(self):
        if self.state.set_room(int(self.sp_room_w.value()), int(self.sp_room_l.value())):
            self.scene.refresh()
            self.statusMessage.emit(f"Room: {self.state.room.width} × {self.state.room.length} ft")

    def add_object(self):
        obj = self.state.add_object(self.form_meta())
        if obj is None:
            return
        self.scene.refresh()
        self.statusMessage.emit(f"Added: {obj.name}")

    def update_object(self):
        if self.state.update_properties(self.form_meta()):
            self.scene.refresh(selection_changed=True)

    def rotate_object(self):
        if self.state.rotate():
            self.scene.refresh(selection_changed=True)
