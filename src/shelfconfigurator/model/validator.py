"""
Grid Placement Validator
========================
Decides whether a proposed grid position is legal given the current modules.

Rules (checked in this order, the first failure is reported):
1. Floor: nothing below grid_y = 0.
2. Support: an elevated module needs another module directly underneath,
   at the same (grid_x, grid_z).
3. Occupancy: no two modules share a grid cell.
4. A module that another module rests on cannot leave its cell.

All functions are pure. The full module list is passed on every call; at the
expected scale (tens of modules) a linear scan is fine.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from shelfconfigurator.model.errors import RejectReason
from shelfconfigurator.model.module import Cell, Module


@dataclass(frozen=True)
class Conflict:
    """An invariant violation found by :func:`find_conflicts`."""
    module_id: str
    cell: Cell
    reason: RejectReason


def _occupied_by_other(cell: Cell, target_module_id: Optional[str], modules: Iterable[Module]) -> bool:
    return any(m.id != target_module_id and m.cell == cell for m in modules)


def validate_move(
    target_module_id: str,
    grid_x: int,
    grid_y: int,
    grid_z: int,
    modules: Sequence[Module],
) -> Optional[RejectReason]:
    """
    Check a move of ``target_module_id`` to ``(grid_x, grid_y, grid_z)``.

    Returns:
        None if the move is legal, otherwise the reason it was rejected.
        The caller applies the coordinate change itself.
    """
    if grid_y < 0:
        return RejectReason.BELOW_FLOOR

    if grid_y > 0 and not _occupied_by_other((grid_x, grid_y - 1, grid_z), target_module_id, modules):
        return RejectReason.UNSUPPORTED

    if _occupied_by_other((grid_x, grid_y, grid_z), target_module_id, modules):
        return RejectReason.OCCUPIED

    # Leaving a cell must not strand the module resting on it
    target = next((m for m in modules if m.id == target_module_id), None)
    if target is not None and target.cell != (grid_x, grid_y, grid_z):
        return validate_removal(target_module_id, modules)

    return None


def validate_removal(target_module_id: str, modules: Sequence[Module]) -> Optional[RejectReason]:
    """Refuse to delete a module that another module rests on."""
    target = next((m for m in modules if m.id == target_module_id), None)
    if target is None:
        return None

    above = (target.grid_x, target.grid_y + 1, target.grid_z)
    if not _occupied_by_other(above, target_module_id, modules):
        return None

    # Another module stacked in the same cell would keep supporting it
    if _occupied_by_other(target.cell, target_module_id, modules):
        return None
    return RejectReason.SUPPORTING


def find_conflicts(modules: Sequence[Module]) -> list[Conflict]:
    """Audit a whole module list (e.g. after import) without mutating it."""
    conflicts: list[Conflict] = []
    seen: dict[Cell, str] = {}
    cells = {m.cell for m in modules}

    for module in modules:
        x, y, z = module.cell
        if y < 0:
            conflicts.append(Conflict(module.id, module.cell, RejectReason.BELOW_FLOOR))
        elif y > 0 and (x, y - 1, z) not in cells:
            conflicts.append(Conflict(module.id, module.cell, RejectReason.UNSUPPORTED))

        if module.cell in seen:
            conflicts.append(Conflict(module.id, module.cell, RejectReason.OCCUPIED))
        else:
            seen[module.cell] = module.id

    return conflicts


def next_free_slot(modules: Sequence[Module]) -> Cell:
    """First unoccupied floor cell along +X in the front row."""
    cells = {m.cell for m in modules}
    x = 0
    while (x, 0, 0) in cells:
        x += 1
    return x, 0, 0
