"""
3D Visualization Widget (PyVista Wrapper)
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QVBoxLayout, QWidget

from pyvistaqt import QtInteractor

from shelfconfigurator.model.state import Configuration
from shelfconfigurator.view.scene import SceneReconciler

logger = logging.getLogger(__name__)


class PyVistaWidget(QWidget):
    # Emits the module id under the cursor when the user clicks a module
    module_picked = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._init_plotter()
        self.reconciler = SceneReconciler(self.plotter)
        self._first_render = True

    def _init_plotter(self) -> None:
        self.plotter.set_background("#E5E5E5")
        self.plotter.add_axes()
        self.plotter.enable_mesh_picking(
            callback=self._on_actor_picked,
            use_actor=True,
            show=False,
            show_message=False,
            left_clicking=True,
        )

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def update_scene(self, configuration: Configuration, selected_id: Optional[str] = None) -> None:
        """Reconcile actors with the configuration and re-render."""
        self.reconciler.reconcile(
            configuration.modules,
            selected_id=selected_id,
            base_height=configuration.base_height,
        )
        if self._first_render and configuration.modules:
            self.plotter.reset_camera()
            self._first_render = False
        self.plotter.render()

    def reset_camera(self) -> None:
        self.plotter.reset_camera()
        self.plotter.render()

    def closeEvent(self, event) -> None:
        self.plotter.close()
        super().closeEvent(event)

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _on_actor_picked(self, actor: Any) -> None:
        module_id = self.reconciler.module_id_for_actor(actor)
        if module_id is None:
            return
        logger.debug(f"Picked module {module_id}")
        self.module_picked.emit(module_id)
