"""
Configuration State (Data Model)
================================
This module defines the central data structure of the configurator.

Why is this file needed?
------------------------
1. State Management: It holds the ordered module list and its metadata in one
   place.
2. Persistence: This object is what gets serialized to local storage and to
   exported JSON.
3. Rules: Every edit goes through the placement validator before it is
   committed, so the grid invariants hold after each successful mutation.

Classes:
    Configuration: The module container with its editing operations.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Optional

from shelfconfigurator.config import DEFAULT_CONFIGURATION_NAME
from shelfconfigurator.model.bounds import Bounds, compute_bounds, grid_spacing
from shelfconfigurator.model.catalog import BASE_HEIGHTS, BaseType, FrontType, PRESETS
from shelfconfigurator.model.errors import ModuleNotFoundInConfiguration, PlacementError
from shelfconfigurator.model.module import Module, clamp_dimension, new_module_id
from shelfconfigurator.model.validator import next_free_slot, validate_move, validate_removal

logger = logging.getLogger(__name__)


@dataclass
class Configuration:
    """A named, ordered set of modules forming one shelving unit."""
    id: str = field(default_factory=new_module_id)
    name: str = DEFAULT_CONFIGURATION_NAME
    modules: list[Module] = field(default_factory=list)
    base_type: BaseType = BaseType.GLIDE

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    def get_module(self, module_id: str) -> Module:
        for module in self.modules:
            if module.id == module_id:
                return module
        raise ModuleNotFoundInConfiguration(module_id)

    def has_module(self, module_id: Optional[str]) -> bool:
        return any(m.id == module_id for m in self.modules)

    @property
    def base_height(self) -> float:
        return BASE_HEIGHTS[self.base_type]

    @property
    def spacing(self) -> tuple[float, float, float]:
        """Cell pitch shared by the dimension summary and the 3D preview."""
        return grid_spacing(self.modules)

    def bounds(self) -> Bounds:
        return compute_bounds(self.modules, unit_spacing=self.spacing, base_height=self.base_height)

    # ------------------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------------------

    def add_module(self, color: Optional[str] = None) -> Module:
        """Append a unit cube in the next free floor slot."""
        x, y, z = next_free_slot(self.modules)
        module = Module(grid_x=x, grid_y=y, grid_z=z)
        if color:
            module.color = color
        self.modules.append(module)
        logger.debug(f"Added module {module.id} at {module.cell}")
        return module

    def remove_module(self, module_id: str) -> Module:
        module = self.get_module(module_id)
        reason = validate_removal(module_id, self.modules)
        if reason is not None:
            raise PlacementError(reason, f"module {module_id}")
        self.modules.remove(module)
        logger.debug(f"Removed module {module_id}")
        return module

    def move_module(self, module_id: str, grid_x: int, grid_y: int, grid_z: int) -> Module:
        """Validate first, then commit. On rejection the module is untouched."""
        module = self.get_module(module_id)
        reason = validate_move(module_id, grid_x, grid_y, grid_z, self.modules)
        if reason is not None:
            logger.info(f"Move of {module_id} to {(grid_x, grid_y, grid_z)} rejected: {reason}")
            raise PlacementError(reason, f"target {(grid_x, grid_y, grid_z)}")
        module.grid_x, module.grid_y, module.grid_z = grid_x, grid_y, grid_z
        return module

    def update_module(
        self,
        module_id: str,
        *,
        width: Optional[float] = None,
        height: Optional[float] = None,
        depth: Optional[float] = None,
        color: Optional[str] = None,
        front_type: Optional[FrontType | str] = None,
    ) -> Module:
        """Edit presentational and size fields. Sizes are clamped to the minimum."""
        module = self.get_module(module_id)
        # Resolve before touching the module so a bad value changes nothing
        front = FrontType(front_type) if front_type is not None else module.front_type
        if width is not None:
            module.width = clamp_dimension(width)
        if height is not None:
            module.height = clamp_dimension(height)
        if depth is not None:
            module.depth = clamp_dimension(depth)
        if color:
            module.color = color
        module.front_type = front
        return module

    # ------------------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "baseType": str(self.base_type),
            "modules": [m.to_dict() for m in self.modules],
        }

    @staticmethod
    def from_preset(key: str) -> Configuration:
        """Build a configuration from a built-in preset, assigning fresh ids."""
        if key not in PRESETS:
            raise KeyError(f"Unknown preset '{key}'.")
        preset = PRESETS[key]
        return Configuration(
            id=preset.key,
            name=preset.name,
            modules=[Module.from_dict(m) for m in preset.modules],
            base_type=preset.base_type,
        )
