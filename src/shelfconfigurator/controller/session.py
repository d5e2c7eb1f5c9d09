"""
Configurator Session
====================
The single writer of the configuration. Every user action is resolved here
synchronously: validated, committed, persisted, then broadcast.

Classes:
    ConfiguratorSession: Central store with signals for panel/preview sync.
"""
from __future__ import annotations

import copy
import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from shelfconfigurator.config import DEFAULT_PRESET
from shelfconfigurator.controller.storage import ConfigurationStorage
from shelfconfigurator.model.bounds import Bounds
from shelfconfigurator.model.catalog import BaseType, FrontType
from shelfconfigurator.model.errors import ConfiguratorError, ModuleNotFoundInConfiguration
from shelfconfigurator.model.io import deserialize, serialize
from shelfconfigurator.model.module import Module
from shelfconfigurator.model.pricing import estimate_reference_price
from shelfconfigurator.model.state import Configuration

logger = logging.getLogger(__name__)


class ConfiguratorSession(QObject):
    """Central state store with signals for panel/preview sync."""
    configuration_changed = Signal(object)
    # Empty string means nothing is selected
    selection_changed = Signal(str)
    error_occurred = Signal(str)

    def __init__(
        self,
        storage: Optional[ConfigurationStorage] = None,
        configuration: Optional[Configuration] = None,
    ) -> None:
        super().__init__()
        self.storage = storage
        self.configuration: Configuration = configuration or self._initial_configuration()
        self.selected_module_id: Optional[str] = self._first_module_id()

    def _initial_configuration(self) -> Configuration:
        if self.storage is not None:
            restored = self.storage.load()
            if restored is not None:
                return restored
        return Configuration.from_preset(DEFAULT_PRESET)

    def _first_module_id(self) -> Optional[str]:
        return self.configuration.modules[0].id if self.configuration.modules else None

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    @property
    def selected_module(self) -> Optional[Module]:
        if self.selected_module_id is None or not self.configuration.has_module(self.selected_module_id):
            return None
        return self.configuration.get_module(self.selected_module_id)

    def bounds(self) -> Bounds:
        return self.configuration.bounds()

    def reference_price(self) -> int:
        return estimate_reference_price(self.configuration)

    def export_json(self) -> str:
        return serialize(self.configuration)

    # ------------------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------------------

    def _commit(self) -> None:
        """Persist (best effort) and notify listeners."""
        if self.storage is not None:
            self.storage.save(self.configuration)
        self.configuration_changed.emit(self.configuration)

    def _report(self, error: Exception) -> None:
        self.error_occurred.emit(str(error))

    def select_module(self, module_id: Optional[str]) -> None:
        if module_id is not None and not self.configuration.has_module(module_id):
            module_id = None
        if module_id == self.selected_module_id:
            return
        self.selected_module_id = module_id
        self.selection_changed.emit(module_id or "")

    def add_module(self) -> Module:
        module = self.configuration.add_module()
        self._commit()
        self.select_module(module.id)
        return module

    def remove_module(self, module_id: str) -> None:
        try:
            self.configuration.remove_module(module_id)
        except (ConfiguratorError, ModuleNotFoundInConfiguration) as e:
            self._report(e)
            raise
        self._commit()
        if self.selected_module_id == module_id:
            self.select_module(self._first_module_id())

    def move_module(self, module_id: str, grid_x: int, grid_y: int, grid_z: int) -> None:
        try:
            self.configuration.move_module(module_id, grid_x, grid_y, grid_z)
        except (ConfiguratorError, ModuleNotFoundInConfiguration) as e:
            self._report(e)
            raise
        self._commit()

    def update_module(
        self,
        module_id: str,
        *,
        width: Optional[float] = None,
        height: Optional[float] = None,
        depth: Optional[float] = None,
        color: Optional[str] = None,
        front_type: Optional[FrontType | str] = None,
    ) -> None:
        try:
            self.configuration.update_module(
                module_id, width=width, height=height, depth=depth, color=color, front_type=front_type
            )
        except (ValueError, ModuleNotFoundInConfiguration) as e:
            self._report(e)
            raise
        self._commit()

    def set_base_type(self, base_type: BaseType | str) -> None:
        try:
            self.configuration.base_type = BaseType(base_type)
        except ValueError as e:
            self._report(e)
            raise
        self._commit()

    def rename(self, name: str) -> None:
        self.configuration.name = name
        self._commit()

    def load_configuration(self, configuration: Configuration) -> None:
        """Full replace of the module set; selection moves to the first module."""
        self.configuration = configuration
        self.selected_module_id = self._first_module_id()
        self._commit()
        self.selection_changed.emit(self.selected_module_id or "")

    def load_preset(self, key: str) -> None:
        logger.info(f"Loading preset '{key}'")
        self.load_configuration(Configuration.from_preset(key))

    def import_json(self, text: str) -> None:
        """
        Replace the configuration with imported text.

        Raises:
            InvalidFormatError: the current configuration is left untouched.
        """
        try:
            configuration = deserialize(text)
        except ConfiguratorError as e:
            logger.warning(f"Import rejected: {e}")
            self._report(e)
            raise
        logger.info(f"Imported configuration '{configuration.name}' ({len(configuration.modules)} modules)")
        self.load_configuration(configuration)

    def snapshot(self) -> Configuration:
        """Detached copy, e.g. for the renderer or for tests."""
        return copy.deepcopy(self.configuration)
