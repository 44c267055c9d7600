#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations
import sys, logging
from PySide6.QtCore import Qt, QSizeF
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QToolBar, QStatusBar, QMessageBox, QDockWidget, QStyle
)
from planner import EditorState
from planner.scene import PlanScene, PlanView
from planner.properties import PropertyPanel


class MainWindow(QMainWindow):
    def __init__(self, state: EditorState | None = None):
        super().__init__()
        self.setWindowTitle("Room Planner")
        self.resize(1100, 780)

        # 1) model
        self.state = state or EditorState()
        self.state.set_notify(self._on_notice)

        # 2) scene/view
        self.scene = PlanScene(self.state, status_cb=self._status)
        self.view = PlanView(self.scene)
        self.setCentralWidget(self.view)

        # 3) properties dock
        self.props_panel = PropertyPanel(self.scene, self)
        self.props_dock = QDockWidget("Properties", self)
        self.props_dock.setWidget(self.props_panel)
        self.props_dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        self.props_dock.setMinimumWidth(280)
        self.props_dock.setMaximumWidth(560)
        self.addDockWidget(Qt.RightDockWidgetArea, self.props_dock)
        self.props_panel.statusMessage.connect(self._status)

        # 4) toolbar/status
        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))
        self.view.scaleChanged.connect(lambda s: self._status(f"Zoom: {int(s*100)}%"))
        self.scene.modelChanged.connect(lambda _: self._update_status())
        self._update_status()

    def _build_toolbar(self):
        tb = QToolBar("Tools", self)
        tb.setMovable(False)
        tb.setIconSize(QSizeF(18, 18).toSize())
        tb.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
        self.addToolBar(Qt.TopToolBarArea, tb)
        style = self.style()

        self.act_snap = QAction(style.standardIcon(QStyle.SP_DialogResetButton), "Grid snap", self, checkable=True)
        self.act_snap.setChecked(self.state.snap_to_grid)
        self.act_snap.toggled.connect(lambda on: setattr(self.state, "snap_to_grid", on))

        self.act_rotate = QAction(style.standardIcon(QStyle.SP_BrowserReload), "Rotate", self)
        self.act_rotate.setShortcut(QKeySequence("R"))
        self.act_rotate.triggered.connect(self.props_panel.rotate_object)

        self.act_props = QAction(style.standardIcon(QStyle.SP_FileDialogInfoView), "Properties", self, checkable=True)
        self.act_props.setChecked(True)
        self.act_props.toggled.connect(lambda on: (self.props_dock.show() if on else self.props_dock.hide()))
        self.props_dock.visibilityChanged.connect(lambda vis: self.act_props.setChecked(vis))

        tb.addAction(self.act_snap)
        tb.addAction(self.act_rotate)
        tb.addSeparator()
        tb.addAction(self.act_props)

    def _on_notice(self, level: str, text: str):
        if level == "error":
            QMessageBox.warning(self, "Room Planner", text)
        else:
            QMessageBox.information(self, "Overlap", text)

    def _status(self, text: str):
        self.statusBar().showMessage(text, 3000)

    def _update_status(self):
        sel = self.state.selected
        self.statusBar().showMessage(
            f"Room: {self.state.room.width}×{self.state.room.length} ft | "
            f"Objects: {len(self.state.objects)} | "
            f"Selected: {sel.name if sel else '-'}"
        )


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    app = QApplication(sys.argv)
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
