"""Unit tests for the bounding box aggregator."""
import itertools
import math

import pytest

from shelfconfigurator.config import GRID_UNIT_MM
from shelfconfigurator.model.bounds import Bounds, compute_bounds, grid_spacing, module_center, module_extents
from shelfconfigurator.model.catalog import PRESETS
from shelfconfigurator.model.module import Module
from shelfconfigurator.model.state import Configuration


class TestComputeBounds:
    def test_empty_configuration_is_all_zero(self) -> None:
        bounds = compute_bounds([])
        assert bounds == Bounds()
        assert bounds.is_empty

    def test_single_unit_cube(self) -> None:
        bounds = compute_bounds([Module()])
        assert bounds.width_units == 1
        assert bounds.height_units == 1
        assert bounds.depth_units == 1
        assert bounds.width_mm == GRID_UNIT_MM
        assert bounds.minimum == (-0.5, 0.0, -0.5)
        assert bounds.maximum == (0.5, 1.0, 0.5)

    def test_union_of_sideboard_preset(self) -> None:
        configuration = Configuration.from_preset("sideboard")
        bounds = compute_bounds(configuration.modules, unit_spacing=configuration.spacing)
        # Three 1.5-wide modules one 1.5 pitch apart, centred at x = -1.5, 0, 1.5
        assert bounds.width_units == pytest.approx(4.5)
        # Two stacked rows of 1.5-high modules
        assert bounds.height_units == pytest.approx(3.0)
        assert bounds.depth_units == pytest.approx(1.0)
        assert bounds.width_mm == pytest.approx(1125)
        assert bounds.height_mm == pytest.approx(750)
        assert bounds.depth_mm == pytest.approx(250)

    def test_configuration_bounds_use_its_spacing(self) -> None:
        configuration = Configuration.from_preset("sideboard")
        assert configuration.bounds().width_mm == pytest.approx(1125)
        assert configuration.bounds().minimum[1] == pytest.approx(configuration.base_height)

    def test_per_axis_spacing(self) -> None:
        modules = [Module(grid_x=1, grid_y=1, grid_z=1)]
        assert module_center(modules[0], unit_spacing=(2.0, 3.0, 4.0)) == (2.0, 3.5, 4.0)
        bounds = compute_bounds(modules + [Module()], unit_spacing=(2.0, 3.0, 4.0))
        assert (bounds.width_units, bounds.height_units, bounds.depth_units) == (3.0, 4.0, 5.0)

    def test_custom_conversion_and_spacing(self) -> None:
        modules = [Module(grid_x=0), Module(grid_x=1)]
        bounds = compute_bounds(modules, grid_unit_to_mm=100, unit_spacing=2.0)
        assert bounds.width_units == pytest.approx(3.0)
        assert bounds.width_mm == pytest.approx(300)

    def test_base_height_shifts_but_does_not_stretch(self) -> None:
        bounds = compute_bounds([Module()], base_height=0.14)
        assert bounds.height_units == pytest.approx(1.0)
        assert bounds.minimum[1] == pytest.approx(0.14)

    def test_non_finite_dimensions_count_as_zero(self) -> None:
        broken = Module(width=math.nan, height=math.inf, depth=1.0)
        bounds = compute_bounds([broken])
        assert bounds.width_units == 0.0
        assert bounds.height_units == 0.0
        assert bounds.depth_units == 1.0

    @pytest.mark.parametrize("preset_key", list(PRESETS))
    def test_adding_a_module_never_shrinks_any_axis(self, preset_key: str) -> None:
        configuration = Configuration.from_preset(preset_key)
        before = compute_bounds(configuration.modules)
        configuration.add_module()
        after = compute_bounds(configuration.modules)
        assert after.width_units >= before.width_units
        assert after.height_units >= before.height_units
        assert after.depth_units >= before.depth_units


class TestModuleCenter:
    def test_placement_formula(self) -> None:
        module = Module(height=2.0, grid_x=2, grid_y=1, grid_z=-1)
        assert module_center(module, unit_spacing=1.0) == (2.0, 2.0, -1.0)

    def test_label_in_millimetres(self) -> None:
        assert compute_bounds([Module()]).label() == "W 250 mm × H 250 mm × D 250 mm"


class TestGridSpacing:
    def test_empty_list_uses_unit_spacing(self) -> None:
        assert grid_spacing([]) == (1.0, 1.0, 1.0)

    def test_largest_size_per_axis(self) -> None:
        modules = [Module(width=2.0, height=1.0, depth=0.75), Module(width=1.5, height=2.5, depth=1.25)]
        assert grid_spacing(modules) == (2.0, 2.5, 1.25)

    def test_unusable_sizes_count_as_default(self) -> None:
        assert grid_spacing([Module(width=math.nan, height=0.0)]) == (1.0, 0.1, 1.0)

    @pytest.mark.parametrize("preset_key", list(PRESETS))
    def test_preset_modules_never_overlap(self, preset_key: str) -> None:
        configuration = Configuration.from_preset(preset_key)
        mins, maxs = module_extents(configuration.modules, unit_spacing=configuration.spacing)
        tolerance = 1e-9
        for i, j in itertools.combinations(range(len(configuration.modules)), 2):
            overlaps = all(
                mins[i][axis] < maxs[j][axis] - tolerance and mins[j][axis] < maxs[i][axis] - tolerance
                for axis in range(3)
            )
            assert not overlaps, (configuration.modules[i].cell, configuration.modules[j].cell)
