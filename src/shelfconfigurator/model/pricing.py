"""Reference price estimate. Indicative only, the shop confirms real prices."""
from __future__ import annotations

from typing import TYPE_CHECKING

from shelfconfigurator.model.catalog import (
    BASE_PRICE_ADDITION, FRONT_PRICE_MULTIPLIER, PRICE_PER_UNIT_VOLUME
)

if TYPE_CHECKING:
    from shelfconfigurator.model.state import Configuration


def estimate_reference_price(configuration: Configuration) -> int:
    """
    Sum of the per-module prices (unit volume x front multiplier) plus one
    base surcharge for every module standing on the floor.
    """
    total = 0.0
    base_addition = BASE_PRICE_ADDITION[configuration.base_type]
    for module in configuration.modules:
        total += PRICE_PER_UNIT_VOLUME * module.volume_units * FRONT_PRICE_MULTIPLIER[module.front_type]
        if module.grid_y == 0:
            total += base_addition
    return round(total)
