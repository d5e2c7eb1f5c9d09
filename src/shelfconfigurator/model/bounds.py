"""
Bounding Box Aggregator
=======================
Computes the overall envelope of a configuration for the dimension display.

Each module occupies a world-space axis-aligned box centred at
``(grid_x * sx, height / 2 + grid_y * sy + base, grid_z * sz)`` with half-extents
``(width / 2, height / 2, depth / 2)``. The spacing ``(sx, sy, sz)`` is either one
scalar for all axes or, for a configuration, the largest module size per axis
(see :func:`grid_spacing`), so neighbouring boxes never overlap.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, TYPE_CHECKING, Union

import numpy as np

from shelfconfigurator.config import GRID_UNIT_MM, UNIT_SPACING
from shelfconfigurator.model.module import Module, clamp_dimension

if TYPE_CHECKING:
    import numpy.typing as npt

# One value for every axis, or an (x, y, z) triple
Spacing = Union[float, Sequence[float]]


@dataclass(frozen=True)
class Bounds:
    width_units: float = 0.0
    height_units: float = 0.0
    depth_units: float = 0.0
    width_mm: float = 0.0
    height_mm: float = 0.0
    depth_mm: float = 0.0
    # World-space corners, (0, 0, 0) for an empty configuration
    minimum: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))
    maximum: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))

    @property
    def is_empty(self) -> bool:
        return self.width_units == 0.0 and self.height_units == 0.0 and self.depth_units == 0.0

    def label(self) -> str:
        return f"W {self.width_mm:.0f} mm × H {self.height_mm:.0f} mm × D {self.depth_mm:.0f} mm"


def _finite_or_zero(values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0, posinf=0.0, neginf=0.0)


def _dimension(module: Module, name: str) -> float:
    value = getattr(module, name, None)
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0


def _axis_spacing(unit_spacing: Spacing) -> npt.NDArray[np.float64]:
    return np.broadcast_to(np.asarray(unit_spacing, dtype=np.float64), (3,))


def grid_spacing(modules: Sequence[Module]) -> tuple[float, float, float]:
    """
    Distance between adjacent grid cells along x, y and z.

    Each axis uses the largest (clamped) module size on that axis, so modules
    in neighbouring cells touch at most. An empty list gives ``UNIT_SPACING``.
    """
    if not modules:
        return UNIT_SPACING, UNIT_SPACING, UNIT_SPACING
    sizes = np.array(
        [[clamp_dimension(_dimension(m, "width")),
          clamp_dimension(_dimension(m, "height")),
          clamp_dimension(_dimension(m, "depth"))] for m in modules],
        dtype=np.float64,
    )
    largest = sizes.max(axis=0)
    return float(largest[0]), float(largest[1]), float(largest[2])


def module_center(
    module: Module,
    unit_spacing: Spacing = UNIT_SPACING,
    base_height: float = 0.0,
) -> tuple[float, float, float]:
    """World position of a module's centre (shared with the 3D preview)."""
    sx, sy, sz = _axis_spacing(unit_spacing)
    height = float(_finite_or_zero(_dimension(module, "height")))
    return (
        float(module.grid_x * sx),
        float(height / 2 + module.grid_y * sy + base_height),
        float(module.grid_z * sz),
    )


def module_extents(
    modules: Sequence[Module],
    unit_spacing: Spacing = UNIT_SPACING,
    base_height: float = 0.0,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Per-module box corners.

    Returns:
        (mins, maxs) arrays of shape (N, 3).
    """
    sizes = _finite_or_zero(
        [[_dimension(m, "width"), _dimension(m, "height"), _dimension(m, "depth")] for m in modules]
    ).reshape(-1, 3)
    grid = np.array([[m.grid_x, m.grid_y, m.grid_z] for m in modules], dtype=np.float64).reshape(-1, 3)

    centers = grid * _axis_spacing(unit_spacing)
    centers[:, 1] += sizes[:, 1] / 2 + base_height

    half = sizes / 2
    return centers - half, centers + half


def compute_bounds(
    modules: Sequence[Module],
    grid_unit_to_mm: float = GRID_UNIT_MM,
    unit_spacing: Spacing = UNIT_SPACING,
    base_height: float = 0.0,
) -> Bounds:
    """Union of all module boxes, independently per axis."""
    if not modules:
        return Bounds()

    mins, maxs = module_extents(modules, unit_spacing=unit_spacing, base_height=base_height)
    lower = mins.min(axis=0)
    upper = maxs.max(axis=0)
    span = upper - lower

    return Bounds(
        width_units=float(span[0]),
        height_units=float(span[1]),
        depth_units=float(span[2]),
        width_mm=float(span[0] * grid_unit_to_mm),
        height_mm=float(span[1] * grid_unit_to_mm),
        depth_mm=float(span[2] * grid_unit_to_mm),
        minimum=(float(lower[0]), float(lower[1]), float(lower[2])),
        maximum=(float(upper[0]), float(upper[1]), float(upper[2])),
    )
