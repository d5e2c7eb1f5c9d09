"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the editor panel and the
3D preview.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (File -> Export/Import, presets) and
   the session's signals to the preview.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QSplitter, QFileDialog, QMessageBox
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from shelfconfigurator.config import VISIBLE_APP_NAME
from shelfconfigurator.controller.session import ConfiguratorSession
from shelfconfigurator.model.errors import ConfiguratorError
from shelfconfigurator.model.io import IOManager
from shelfconfigurator.model.state import Configuration
from shelfconfigurator.view.dialogs.json_dialog import JsonDialog
from shelfconfigurator.view.panels.configurator_panel import ConfiguratorPanel
from shelfconfigurator.view.widgets.plot_3d import PyVistaWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, session: ConfiguratorSession) -> None:
        super().__init__()
        self.session: ConfiguratorSession = session

        self.update_window_title()
        self.resize(1400, 900)

        # --- SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Editor ---
        self.panel = ConfiguratorPanel(self.session)
        splitter.addWidget(self.panel)

        # --- RIGHT SIDE: 3D Visualization ---
        self.visualizer = PyVistaWidget()
        splitter.addWidget(self.visualizer)

        # Set initial proportions (1 part sidebar : 4 parts 3D view)
        splitter.setSizes([350, 1050])

        # --- SIGNAL CONNECTIONS ---
        self.session.configuration_changed.connect(self.on_configuration_changed)
        self.session.selection_changed.connect(self.on_selection_changed)
        self.session.error_occurred.connect(self.on_error)
        self.visualizer.module_picked.connect(self.session.select_module)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self.update_visualization()

    def _create_actions(self) -> None:
        self.act_export_text = QAction("Export as Text...", self)
        self.act_export_text.setShortcut("Ctrl+E")
        self.act_export_text.triggered.connect(self.on_export_text)

        self.act_import_text = QAction("Import from Text...", self)
        self.act_import_text.setShortcut("Ctrl+I")
        self.act_import_text.triggered.connect(self.on_import_text)

        self.act_save = QAction("Save to File...", self)
        self.act_save.setShortcut("Ctrl+S")
        self.act_save.triggered.connect(self.on_file_save)

        self.act_open = QAction("Open File...", self)
        self.act_open.setShortcut("Ctrl+O")
        self.act_open.triggered.connect(self.on_file_open)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_reset_camera = QAction("Reset Camera", self)
        self.act_reset_camera.triggered.connect(self.visualizer.reset_camera)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_open)
        file_menu.addAction(self.act_save)
        file_menu.addSeparator()
        file_menu.addAction(self.act_import_text)
        file_menu.addAction(self.act_export_text)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.act_reset_camera)

    # --- HELPER METHODS ---
    def update_window_title(self) -> None:
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - [{self.session.configuration.name}]")

    def update_visualization(self) -> None:
        self.visualizer.update_scene(self.session.configuration, self.session.selected_module_id)

    # --- SLOTS ---
    def on_configuration_changed(self, _configuration: Configuration) -> None:
        self.update_window_title()
        self.update_visualization()

    def on_selection_changed(self, _module_id: str) -> None:
        self.update_visualization()

    def on_error(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    def on_export_text(self) -> None:
        dialog = JsonDialog("Export Configuration", self.session.export_json(), read_only=True, parent=self)
        dialog.copy_to_clipboard()
        dialog.exec()

    def on_import_text(self) -> None:
        dialog = JsonDialog("Import Configuration", parent=self)
        if not dialog.exec():
            return
        try:
            self.session.import_json(dialog.text())
        except ConfiguratorError as e:
            QMessageBox.warning(self, "Import Failed", str(e))

    def on_file_save(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Save Configuration", "", "Configuration (*.json)")
        if not path:
            return
        if not path.endswith(".json"):
            path += ".json"
        try:
            IOManager.save_configuration(self.session.configuration, path)
            self.statusBar().showMessage(f"Saved: {path}", 3000)
        except OSError as e:
            QMessageBox.critical(self, "Save Failed", str(e))

    def on_file_open(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Open Configuration", "", "Configuration (*.json)")
        if not path:
            return
        try:
            configuration = IOManager.load_configuration(path)
        except (OSError, ConfiguratorError) as e:
            QMessageBox.critical(self, "Open Failed", str(e))
            return
        self.session.load_configuration(configuration)
