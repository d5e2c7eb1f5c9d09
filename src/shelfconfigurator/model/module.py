"""
Module Entity
=============
One rectangular block of the shelving system, placed on a discrete 3D grid.

Sizes are expressed in grid units (fractional values such as 1.5 are allowed).
Grid coordinates are integers; ``grid_y`` is the vertical axis.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import math
import uuid
from typing import Any, Mapping

from shelfconfigurator.config import DEFAULT_COLOR, DEFAULT_DIMENSION, MIN_DIMENSION
from shelfconfigurator.model.catalog import FrontType

Cell = tuple[int, int, int]


def new_module_id() -> str:
    return uuid.uuid4().hex


def clamp_dimension(value: Any) -> float:
    """
    Sanitise a size read from untrusted input.
    Non-numeric or non-finite values fall back to the default size,
    anything smaller than the minimum is raised to it.
    """
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_DIMENSION
    if not math.isfinite(number):
        return DEFAULT_DIMENSION
    return max(number, MIN_DIMENSION)


def _coerce_grid(value: Any) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(number):
        return 0
    return int(round(number))


def _coerce_front(value: Any) -> FrontType:
    try:
        return FrontType(value)
    except ValueError:
        return FrontType.OPEN


@dataclass
class Module:
    width: float = DEFAULT_DIMENSION
    height: float = DEFAULT_DIMENSION
    depth: float = DEFAULT_DIMENSION
    color: str = DEFAULT_COLOR
    front_type: FrontType = FrontType.OPEN
    grid_x: int = 0
    grid_y: int = 0
    grid_z: int = 0
    id: str = field(default_factory=new_module_id)

    @property
    def cell(self) -> Cell:
        return self.grid_x, self.grid_y, self.grid_z

    @property
    def volume_units(self) -> float:
        return self.width * self.height * self.depth

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "color": self.color,
            "frontType": str(self.front_type),
            "gridX": self.grid_x,
            "gridY": self.grid_y,
            "gridZ": self.grid_z,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Module:
        """
        The single decoding path for module records coming from presets,
        imports or local storage. Every absent field is set to its default,
        a missing id is generated.
        """
        module_id = data.get("id")
        if isinstance(module_id, int) and not isinstance(module_id, bool):
            module_id = str(module_id)
        if not isinstance(module_id, str) or not module_id:
            module_id = new_module_id()

        color = data.get("color")
        if not isinstance(color, str) or not color:
            color = DEFAULT_COLOR

        return Module(
            width=clamp_dimension(data.get("width", DEFAULT_DIMENSION)),
            height=clamp_dimension(data.get("height", DEFAULT_DIMENSION)),
            depth=clamp_dimension(data.get("depth", DEFAULT_DIMENSION)),
            color=color,
            front_type=_coerce_front(data.get("frontType", FrontType.OPEN)),
            grid_x=_coerce_grid(data.get("gridX", 0)),
            grid_y=_coerce_grid(data.get("gridY", 0)),
            grid_z=_coerce_grid(data.get("gridZ", 0)),
            id=module_id,
        )
