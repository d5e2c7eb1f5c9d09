"""
Scene Reconciler (PyVista)
==========================
Keeps the plotter's actors in step with the module list.

Actors are keyed by the same module id the model uses. On every change the
reconciler removes actors whose ids disappeared and upserts the rest; a module
is only rebuilt when its geometry, color or selection state changed.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Optional, Sequence

import pyvista as pv

from shelfconfigurator.config import UNIT_SPACING
from shelfconfigurator.model.bounds import Spacing, compute_bounds, grid_spacing, module_center
from shelfconfigurator.model.catalog import FrontType
from shelfconfigurator.model.module import Module

logger = logging.getLogger(__name__)

FRAME_COLOR = "#D1D1CC"
SELECTED_FRAME_COLOR = "#FF8C00"
GLASS_COLOR = "#8CB8D1"
GLASS_OPACITY = 0.52
PANEL_INSET = 0.04
DIMENSION_LABEL = "dimensions"


@dataclass
class ModuleMeshes:
    panel: pv.PolyData
    frame: pv.PolyData


def build_module_meshes(
    module: Module,
    unit_spacing: Spacing = UNIT_SPACING,
    base_height: float = 0.0,
) -> ModuleMeshes:
    """Colored body (slightly inset) plus the chrome frame edges."""
    cx, cy, cz = module_center(module, unit_spacing=unit_spacing, base_height=base_height)
    hw, hh, hd = module.width / 2, module.height / 2, module.depth / 2

    frame_box = pv.Box(bounds=(cx - hw, cx + hw, cy - hh, cy + hh, cz - hd, cz + hd))
    # Inset never collapses the panel for the smallest modules
    inset = min(PANEL_INSET, hw / 2, hh / 2, hd / 2)
    panel = pv.Box(bounds=(
        cx - hw + inset, cx + hw - inset,
        cy - hh + inset, cy + hh - inset,
        cz - hd + inset, cz + hd - inset,
    ))
    return ModuleMeshes(panel=panel, frame=frame_box.extract_all_edges())


def _signature(module: Module, selected: bool, base_height: float, spacing: tuple) -> tuple:
    return (
        module.width, module.height, module.depth, module.color, str(module.front_type),
        module.grid_x, module.grid_y, module.grid_z, selected, base_height, spacing,
    )


class SceneReconciler:
    def __init__(self, plotter: Any) -> None:
        self.plotter = plotter
        self._signatures: dict[str, tuple] = {}
        self._actors: dict[str, list[Any]] = {}

    @staticmethod
    def _panel_name(module_id: str) -> str:
        return f"module-{module_id}"

    @staticmethod
    def _frame_name(module_id: str) -> str:
        return f"frame-{module_id}"

    @property
    def module_ids(self) -> set[str]:
        return set(self._signatures)

    def module_id_for_actor(self, actor: Any) -> Optional[str]:
        for module_id, actors in self._actors.items():
            if any(a is actor for a in actors):
                return module_id
        return None

    def reconcile(
        self,
        modules: Sequence[Module],
        selected_id: Optional[str] = None,
        base_height: float = 0.0,
    ) -> None:
        next_ids = {m.id for m in modules}
        # Cell pitch follows the largest module, so a resize can move every actor
        spacing = grid_spacing(modules)

        for module_id in self.module_ids - next_ids:
            self._remove(module_id)

        for module in modules:
            signature = _signature(module, module.id == selected_id, base_height, spacing)
            if self._signatures.get(module.id) == signature:
                continue
            self._upsert(module, module.id == selected_id, base_height, spacing)
            self._signatures[module.id] = signature

        self._update_dimension_label(modules, base_height, spacing)

    def _remove(self, module_id: str) -> None:
        self.plotter.remove_actor(self._panel_name(module_id))
        self.plotter.remove_actor(self._frame_name(module_id))
        self._signatures.pop(module_id, None)
        self._actors.pop(module_id, None)
        logger.debug(f"Removed actors for module {module_id}")

    def _upsert(self, module: Module, selected: bool, base_height: float, spacing: Spacing) -> None:
        meshes = build_module_meshes(module, unit_spacing=spacing, base_height=base_height)
        is_glass = module.front_type == FrontType.GLASS

        # add_mesh with an existing name replaces the previous actor
        panel_actor = self.plotter.add_mesh(
            meshes.panel,
            name=self._panel_name(module.id),
            color=GLASS_COLOR if is_glass else module.color,
            opacity=GLASS_OPACITY if is_glass else 1.0,
            smooth_shading=False,
            pickable=True,
        )
        frame_actor = self.plotter.add_mesh(
            meshes.frame,
            name=self._frame_name(module.id),
            color=SELECTED_FRAME_COLOR if selected else FRAME_COLOR,
            line_width=4 if selected else 2,
            render_lines_as_tubes=True,
            pickable=True,
        )
        self._actors[module.id] = [panel_actor, frame_actor]

    def _update_dimension_label(self, modules: Sequence[Module], base_height: float, spacing: Spacing) -> None:
        if not modules:
            self.plotter.remove_actor(DIMENSION_LABEL)
            return
        bounds = compute_bounds(modules, unit_spacing=spacing, base_height=base_height)
        self.plotter.add_text(bounds.label(), position="lower_left", font_size=10, name=DIMENSION_LABEL)
