"""
Error Taxonomy
==============
Every failure the configurator reports to the user is one of the reasons
below. Validation failures are decided before any mutation happens, so the
configuration is always left in its last-known-good state.
"""
from __future__ import annotations

from enum import StrEnum


class RejectReason(StrEnum):
    BELOW_FLOOR = "BELOW_FLOOR"
    UNSUPPORTED = "UNSUPPORTED"
    OCCUPIED = "OCCUPIED"
    SUPPORTING = "SUPPORTING"
    INVALID_FORMAT = "INVALID_FORMAT"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"

    @property
    def message(self) -> str:
        return REASON_MESSAGES[self]


REASON_MESSAGES: dict[RejectReason, str] = {
    RejectReason.BELOW_FLOOR: "A module cannot be placed below the floor.",
    RejectReason.UNSUPPORTED: "There is no module underneath this position.",
    RejectReason.OCCUPIED: "Another module already occupies this position.",
    RejectReason.SUPPORTING: "Another module rests on this module. Remove the upper module first.",
    RejectReason.INVALID_FORMAT: "The configuration text is not valid JSON or has no 'modules' list.",
    RejectReason.STORAGE_UNAVAILABLE: "Local storage is not available.",
}


class ConfiguratorError(ValueError):
    """Base class for errors surfaced to the initiating user action."""

    def __init__(self, reason: RejectReason, detail: str | None = None) -> None:
        self.reason = reason
        self.detail = detail
        text = reason.message if detail is None else f"{reason.message} ({detail})"
        super().__init__(text)


class PlacementError(ConfiguratorError):
    """A move or removal would break the floor, support or occupancy rules."""


class InvalidFormatError(ConfiguratorError):
    """Imported text could not be decoded into a configuration."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(RejectReason.INVALID_FORMAT, detail)


class ModuleNotFoundInConfiguration(KeyError):
    """Raised when an operation names a module id that does not exist."""

    def __init__(self, module_id: str) -> None:
        self.module_id = module_id
        super().__init__(f"Module '{module_id}' not found.")

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.args[0]
