"""
Main Application Window
=======================
Holds the toolbar, the menu bar, the 3D viewport and the status bar.

Toolbar:
    - Draw the Cubes: rebuild the scene from its configuration and render it.
    - Legend / Camera info / Depth shading: overlay toggles.
"""
import logging
import os

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QFileDialog, QMessageBox, QToolBar, QLabel

from cubeview.model.io import SceneIO
from cubeview.model.scene import Scene
from cubeview.render.renderer import RenderStats, camera_readout
from cubeview.app.application import VISIBLE_APP_NAME
from cubeview.app.ui.viewport import SceneViewport

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, scene: Scene) -> None:
        super().__init__()
        self.scene: Scene = scene
        self.scene_path: str | None = None

        self.update_window_title()
        self.resize(scene.screen.width, scene.screen.height + 80)

        # --- CENTRAL VIEW ---
        self.viewport = SceneViewport(scene)
        self.setCentralWidget(self.viewport)

        # --- STATUS BAR ---
        self.status_label = QLabel()
        self.statusBar().addPermanentWidget(self.status_label, 1)

        # --- ACTIONS, MENUS & TOOLBAR ---
        self._create_actions()
        self._create_menus()
        self._create_toolbar()

        # --- SIGNAL CONNECTIONS ---
        self.viewport.frame_rendered.connect(self.on_frame_rendered)

        self.viewport.setFocus()

    def _create_actions(self) -> None:
        self.act_draw = QAction("Draw the Cubes", self)
        self.act_draw.setShortcut("Ctrl+R")
        self.act_draw.triggered.connect(self.on_draw_scene)

        self.act_open = QAction("Open Scene...", self)
        self.act_open.setShortcut("Ctrl+O")
        self.act_open.triggered.connect(self.on_file_open)

        self.act_save_as = QAction("Save Scene As...", self)
        self.act_save_as.setShortcut("Ctrl+Shift+S")
        self.act_save_as.triggered.connect(self.on_file_save_as)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_legend = QAction("Legend", self)
        self.act_legend.setCheckable(True)
        self.act_legend.setChecked(self.viewport.options.show_legend)
        self.act_legend.toggled.connect(self.viewport.set_show_legend)

        self.act_camera_info = QAction("Camera info", self)
        self.act_camera_info.setCheckable(True)
        self.act_camera_info.setChecked(self.viewport.options.show_camera_info)
        self.act_camera_info.toggled.connect(self.viewport.set_show_camera_info)

        self.act_depth_shading = QAction("Depth shading", self)
        self.act_depth_shading.setCheckable(True)
        self.act_depth_shading.setChecked(self.viewport.options.depth_shading)
        self.act_depth_shading.toggled.connect(self.viewport.set_depth_shading)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_open)
        file_menu.addAction(self.act_save_as)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.act_draw)
        view_menu.addSeparator()
        view_menu.addAction(self.act_legend)
        view_menu.addAction(self.act_camera_info)
        view_menu.addAction(self.act_depth_shading)

    def _create_toolbar(self) -> None:
        toolbar = QToolBar("Scene", self)
        toolbar.setMovable(False)
        toolbar.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        toolbar.addAction(self.act_draw)
        toolbar.addSeparator()
        toolbar.addAction(self.act_legend)
        toolbar.addAction(self.act_camera_info)
        toolbar.addAction(self.act_depth_shading)
        self.addToolBar(toolbar)

    # --- HELPER METHODS ---
    def update_window_title(self) -> None:
        filename = os.path.basename(self.scene_path) if self.scene_path else "Default scene"
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - [{filename}]")

    # --- SLOTS ---
    def on_frame_rendered(self, stats: RenderStats) -> None:
        self.status_label.setText(
            f"{camera_readout(self.scene.camera, self.scene.screen)} | "
            f"{stats.edges_drawn} edges, {stats.faces_drawn} faces"
        )

    def on_draw_scene(self) -> None:
        logger.info("Draw the cubes requested.")
        self.scene.reset()
        self.viewport.render_now()
        self.viewport.setFocus()

    def on_file_open(self) -> None:
        fname, _ = QFileDialog.getOpenFileName(self, "Open Scene", "", "Scene Files (*.json)")
        if not fname:
            return
        previous = self.scene.config
        try:
            self.scene.config = SceneIO.load_scene(fname)
            self.scene.reset()
        except (OSError, ValueError) as e:
            self.scene.config = previous
            QMessageBox.critical(self, "Error", f"Could not open the scene file:\n{e}")
            return
        self.viewport.controller.selected_index = 0
        self.scene_path = fname
        self.update_window_title()
        self.viewport.render_now()

    def on_file_save_as(self) -> None:
        fname, _ = QFileDialog.getSaveFileName(self, "Save Scene", "", "Scene Files (*.json)")
        if not fname:
            return
        if not fname.endswith(".json"):
            fname += ".json"
        try:
            SceneIO.save_scene(self.scene.config, fname)
        except OSError as e:
            QMessageBox.critical(self, "Error", f"Could not save the scene file:\n{e}")
            return
        self.scene_path = fname
        self.update_window_title()
