"""Tests for the editor panel helpers that need no running window."""
import pytest

from shelfconfigurator.config import GRID_EDIT_LIMIT
from shelfconfigurator.model.module import Module
from shelfconfigurator.model.catalog import DEPTH_UNITS, WIDTH_UNITS
from shelfconfigurator.view.panels.configurator_panel import is_editable_position, size_label


class TestIsEditablePosition:
    @pytest.mark.parametrize("cell", [(0, 0, 0), (-GRID_EDIT_LIMIT, GRID_EDIT_LIMIT, GRID_EDIT_LIMIT)])
    def test_cells_inside_the_spin_box_range(self, cell) -> None:
        x, y, z = cell
        assert is_editable_position(Module(grid_x=x, grid_y=y, grid_z=z))

    @pytest.mark.parametrize("cell", [
        (GRID_EDIT_LIMIT + 1, 0, 0),
        (0, -1, 0),
        (0, GRID_EDIT_LIMIT + 1, 0),
        (0, 0, -(10 ** 12)),
    ])
    def test_imported_cells_beyond_the_range_are_flagged(self, cell) -> None:
        x, y, z = cell
        assert not is_editable_position(Module(grid_x=x, grid_y=y, grid_z=z))

    def test_custom_limit(self) -> None:
        assert not is_editable_position(Module(grid_x=80), limit=50)


class TestSizeLabel:
    def test_catalog_choices_show_millimetres(self) -> None:
        assert [size_label(u) for u in WIDTH_UNITS][:2] == ["1 u (250 mm)", "1.5 u (375 mm)"]
        assert size_label(DEPTH_UNITS[0]) == "0.75 u (188 mm)"
