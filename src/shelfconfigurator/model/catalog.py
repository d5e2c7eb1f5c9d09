"""Modular Shelf Catalog - sizes, colors, fronts, bases and presets."""
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from shelfconfigurator.config import GRID_UNIT_MM


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class FrontType(StrEnum):
    """Accessory mounted on the front face of a module."""
    OPEN = "open"
    DOOR = "door"
    DRAWER = "drawer"
    GLASS = "glass"


class BaseType(StrEnum):
    """Foot mounted below every floor-level module."""
    GLIDE = "glide"
    CASTER = "caster"
    LEVELER = "leveler"
    NONE = "none"


FRONT_TYPE_LABELS: dict[FrontType, str] = {
    FrontType.OPEN: "Open",
    FrontType.DOOR: "Door",
    FrontType.DRAWER: "Drawer",
    FrontType.GLASS: "Glass",
}

BASE_TYPE_LABELS: dict[BaseType, str] = {
    BaseType.GLIDE: "Glide (fixed foot)",
    BaseType.CASTER: "Caster (wheel)",
    BaseType.LEVELER: "Leveler (adjustable)",
    BaseType.NONE: "None",
}

# Height of the foot in grid units; lifts the whole unit off the floor
BASE_HEIGHTS: dict[BaseType, float] = {
    BaseType.CASTER: 0.14,
    BaseType.GLIDE: 0.086,
    BaseType.LEVELER: 0.082,
    BaseType.NONE: 0.0,
}

# ------------------------------------------------------------------------------
# Sizes
# ------------------------------------------------------------------------------
WIDTH_UNITS: list[float] = [1, 1.5, 2, 2.5, 3]
HEIGHT_UNITS: list[float] = [1, 1.5, 2, 2.5, 3]
DEPTH_UNITS: list[float] = [0.75, 1, 1.25]


def units_to_mm(units: float) -> int:
    return round(units * GRID_UNIT_MM)


# ------------------------------------------------------------------------------
# Colors
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class PaletteColor:
    id: str
    label: str
    hex: str


PALETTE: list[PaletteColor] = [
    PaletteColor("pure_white", "Pure White (RAL 9010)", "#F4F4F4"),
    PaletteColor("light_gray", "Light Gray (RAL 7035)", "#8F8F8F"),
    PaletteColor("medium_gray", "Medium Gray", "#5C5C5C"),
    PaletteColor("anthracite_gray", "Anthracite Gray (RAL 7016)", "#293133"),
    PaletteColor("graphite_black", "Graphite Black (RAL 9011)", "#1F2933"),
    PaletteColor("steel_blue", "Steel Blue (RAL 5011)", "#0E4C92"),
    PaletteColor("gentian_blue", "Gentian Blue (RAL 5010)", "#2563EB"),
    PaletteColor("golden_yellow", "Golden Yellow (RAL 1004)", "#FACC15"),
    PaletteColor("pure_orange", "Pure Orange (RAL 2004)", "#E75B12"),
    PaletteColor("ruby_red", "Ruby Red", "#9B1B30"),
    PaletteColor("brown", "Brown", "#5D4037"),
    PaletteColor("beige", "Beige", "#C4A574"),
    PaletteColor("green", "Green", "#4CAF50"),
    PaletteColor("olive_green", "Olive Green (RAL 6003)", "#4A5D23"),
]

# ------------------------------------------------------------------------------
# Reference pricing (KRW)
# ------------------------------------------------------------------------------
PRICE_PER_UNIT_VOLUME: int = 80000

FRONT_PRICE_MULTIPLIER: dict[FrontType, float] = {
    FrontType.OPEN: 1.0,
    FrontType.DOOR: 1.15,
    FrontType.DRAWER: 1.2,
    FrontType.GLASS: 1.25,
}

# Added once per floor-level module
BASE_PRICE_ADDITION: dict[BaseType, int] = {
    BaseType.GLIDE: 0,
    BaseType.CASTER: 15000,
    BaseType.LEVELER: 10000,
    BaseType.NONE: 0,
}

# ------------------------------------------------------------------------------
# Presets
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Preset:
    """
    A ready-made arrangement. Module descriptors use the JSON interchange keys
    and carry no ids; loading assigns fresh ones.
    """
    key: str
    name: str
    modules: list[dict[str, Any]] = field(default_factory=list)
    base_type: BaseType = BaseType.GLIDE


def _row(y: int, colors: list[str], fronts: list[str], width: float = 1.5, height: float = 1.5,
         depth: float = 1.0, start_x: int = -1) -> list[dict[str, Any]]:
    return [
        {"width": width, "height": height, "depth": depth, "color": color, "frontType": front,
         "gridX": start_x + i, "gridY": y, "gridZ": 0}
        for i, (color, front) in enumerate(zip(colors, fronts))
    ]


PRESETS: dict[str, Preset] = {
    "sideboard": Preset(
        key="sideboard",
        name="Sideboard",
        modules=(
            _row(0, ["#F4F4F4", "#FACC15", "#2563EB"], ["door", "open", "drawer"])
            + _row(1, ["#1F2933", "#4CAF50", "#F4F4F4"], ["door", "glass", "open"])
        ),
    ),
    "media_storage": Preset(
        key="media_storage",
        name="Media Storage",
        modules=_row(0, ["#1F2933", "#4CAF50", "#F4F4F4"], ["door", "drawer", "open"]),
    ),
    "shelf": Preset(
        key="shelf",
        name="Shelf",
        modules=(
            _row(0, ["#F4F4F4"], ["open"], width=2, start_x=0)
            + _row(1, ["#FACC15"], ["open"], width=2, start_x=0)
        ),
    ),
    "tv_lowboard": Preset(
        key="tv_lowboard",
        name="TV Lowboard",
        modules=_row(0, ["#293133", "#293133", "#293133", "#293133"], ["drawer", "open", "open", "drawer"],
                     width=2, height=1, depth=1.25),
        base_type=BaseType.CASTER,
    ),
}
