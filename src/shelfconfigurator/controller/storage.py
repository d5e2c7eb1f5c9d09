"""
Local Storage (QSettings)
=========================
Write-through persistence of the current configuration.

Why is this file needed?
------------------------
1. Durability: The configuration survives an application restart without the
   user having to export anything.
2. Isolation: Storage failures are swallowed here and never reach the model.
   The in-memory configuration stays the source of truth for the session.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QSettings

from shelfconfigurator.config import STORAGE_KEY
from shelfconfigurator.model.errors import ConfiguratorError, RejectReason
from shelfconfigurator.model.io import deserialize, serialize
from shelfconfigurator.model.state import Configuration

logger = logging.getLogger(__name__)


class ConfigurationStorage:
    def __init__(self, settings: Optional[QSettings] = None, key: str = STORAGE_KEY) -> None:
        # Default QSettings() picks up the organisation/application names set in create_app()
        self.settings: QSettings = settings if settings is not None else QSettings()
        self.key = key

    def save(self, configuration: Configuration) -> bool:
        """Fire-and-forget. Returns False (and logs) when the write failed."""
        try:
            self.settings.setValue(self.key, serialize(configuration, indent=None))
            self.settings.sync()
            status = self.settings.status()
        except (RuntimeError, OSError, TypeError) as e:
            logger.warning(f"{RejectReason.STORAGE_UNAVAILABLE}: could not save configuration: {e}")
            return False

        if status != QSettings.Status.NoError:
            logger.warning(f"{RejectReason.STORAGE_UNAVAILABLE}: settings backend reported {status}")
            return False
        return True

    def load(self) -> Optional[Configuration]:
        """Stored configuration, or None when nothing usable is stored."""
        try:
            text = self.settings.value(self.key, None)
        except (RuntimeError, OSError, TypeError) as e:
            logger.warning(f"{RejectReason.STORAGE_UNAVAILABLE}: could not read configuration: {e}")
            return None

        if not text:
            return None

        try:
            configuration = deserialize(str(text))
        except ConfiguratorError as e:
            logger.warning(f"Ignoring stored configuration: {e}")
            return None

        logger.info(f"Restored configuration '{configuration.name}' from local storage.")
        return configuration
