"""Unit tests for the Module entity and its decoding constructor."""
import math

from shelfconfigurator.config import DEFAULT_COLOR, MIN_DIMENSION
from shelfconfigurator.model.catalog import FrontType
from shelfconfigurator.model.module import Module, clamp_dimension


class TestClampDimension:
    def test_keeps_valid_sizes(self) -> None:
        assert clamp_dimension(1.5) == 1.5
        assert clamp_dimension("2") == 2.0

    def test_raises_tiny_and_negative_sizes_to_minimum(self) -> None:
        assert clamp_dimension(0) == MIN_DIMENSION
        assert clamp_dimension(-3) == MIN_DIMENSION
        assert clamp_dimension(0.01) == MIN_DIMENSION

    def test_non_numeric_and_non_finite_fall_back_to_default(self) -> None:
        assert clamp_dimension(None) == 1.0
        assert clamp_dimension("wide") == 1.0
        assert clamp_dimension(math.nan) == 1.0
        assert clamp_dimension(math.inf) == 1.0


class TestModuleFromDict:
    def test_empty_record_gets_every_default(self) -> None:
        """A missing field is never left undefined."""
        module = Module.from_dict({})
        assert module.width == module.height == module.depth == 1.0
        assert module.color == DEFAULT_COLOR
        assert module.front_type == FrontType.OPEN
        assert module.cell == (0, 0, 0)
        assert module.id

    def test_missing_ids_are_generated_and_distinct(self) -> None:
        first = Module.from_dict({"width": 2})
        second = Module.from_dict({"width": 2})
        assert first.id != second.id

    def test_existing_id_is_kept(self) -> None:
        assert Module.from_dict({"id": "abc"}).id == "abc"
        assert Module.from_dict({"id": 7}).id == "7"

    def test_reads_camel_case_keys(self) -> None:
        module = Module.from_dict({
            "width": 1.5, "height": 2, "depth": 0.75, "color": "#FACC15",
            "frontType": "drawer", "gridX": -1, "gridY": 2, "gridZ": 3,
        })
        assert (module.width, module.height, module.depth) == (1.5, 2.0, 0.75)
        assert module.color == "#FACC15"
        assert module.front_type == FrontType.DRAWER
        assert module.cell == (-1, 2, 3)

    def test_sanitises_untrusted_values(self) -> None:
        module = Module.from_dict({
            "width": 0, "height": "NaN", "frontType": "trapdoor", "gridX": 1.6, "gridY": "up",
        })
        assert module.width == MIN_DIMENSION
        assert module.height == 1.0
        assert module.front_type == FrontType.OPEN
        assert module.grid_x == 2
        assert module.grid_y == 0

    def test_integers_too_large_for_a_float_fall_back_to_defaults(self) -> None:
        """JSON allows arbitrarily long integers; they must not escape as OverflowError."""
        huge = 10 ** 400
        assert clamp_dimension(huge) == 1.0
        module = Module.from_dict({"width": huge, "depth": -huge, "gridX": huge, "gridZ": -huge})
        assert module.width == 1.0
        assert module.depth == 1.0
        assert module.cell == (0, 0, 0)

    def test_to_dict_contains_all_fields(self) -> None:
        module = Module(width=2, color="#000000", grid_x=4, id="m1")
        assert module.to_dict() == {
            "id": "m1", "width": 2, "height": 1.0, "depth": 1.0, "color": "#000000",
            "frontType": "open", "gridX": 4, "gridY": 0, "gridZ": 0,
        }
