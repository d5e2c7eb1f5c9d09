"""
Input/Output Manager (JSON)
Converts a Configuration to and from its JSON interchange text and handles
export/import to files.
"""
import json
import logging
import os
from typing import Any

from shelfconfigurator.config import DEFAULT_CONFIGURATION_NAME
from shelfconfigurator.model.catalog import BaseType
from shelfconfigurator.model.errors import InvalidFormatError
from shelfconfigurator.model.module import Module, new_module_id
from shelfconfigurator.model.state import Configuration
from shelfconfigurator.model.validator import find_conflicts

logger = logging.getLogger(__name__)


def serialize(configuration: Configuration, indent: int | None = 2) -> str:
    """Emit ``{id, name, baseType, modules: [...]}``. Never fails for in-memory data."""
    return json.dumps(configuration.to_dict(), indent=indent, ensure_ascii=False)


def configuration_from_dict(data: Any) -> Configuration:
    """
    Decode an already parsed JSON value.

    Raises:
        InvalidFormatError: if the value is not an object, has no array-typed
            'modules' field, or a module entry is not an object.
    """
    if not isinstance(data, dict):
        raise InvalidFormatError("top level is not an object")

    raw_modules = data.get("modules")
    if not isinstance(raw_modules, list):
        raise InvalidFormatError("'modules' is missing or not a list")

    modules: list[Module] = []
    for index, raw in enumerate(raw_modules):
        if not isinstance(raw, dict):
            raise InvalidFormatError(f"module #{index} is not an object")
        modules.append(Module.from_dict(raw))

    config_id = data.get("id")
    if not isinstance(config_id, str) or not config_id:
        config_id = new_module_id()

    name = data.get("name")
    if not isinstance(name, str) or not name:
        name = DEFAULT_CONFIGURATION_NAME

    try:
        base_type = BaseType(data.get("baseType", BaseType.GLIDE))
    except ValueError:
        base_type = BaseType.GLIDE

    configuration = Configuration(id=config_id, name=name, modules=modules, base_type=base_type)

    # Imported arrangements may break the grid rules; they are kept as-is
    # until the next interactive edit.
    conflicts = find_conflicts(configuration.modules)
    if conflicts:
        details = ", ".join(f"{c.module_id}@{c.cell}:{c.reason}" for c in conflicts)
        logger.warning(f"Imported configuration has {len(conflicts)} placement conflict(s): {details}")

    return configuration


def deserialize(text: str) -> Configuration:
    """
    Parse JSON text into a Configuration.

    Raises:
        InvalidFormatError: if the text is not JSON or lacks a 'modules' list.
    """
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise InvalidFormatError(f"not valid JSON: {e}") from e
    return configuration_from_dict(data)


class IOManager:
    @staticmethod
    def save_configuration(configuration: Configuration, filepath: str) -> None:
        logger.info(f"Saving configuration to: {filepath}")
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(serialize(configuration))
        except OSError as e:
            logger.exception(f"Failed to save configuration: {e}")
            raise
        logger.info(f"Configuration '{configuration.name}' saved ({len(configuration.modules)} modules).")

    @staticmethod
    def load_configuration(filepath: str) -> Configuration:
        logger.info(f"Loading configuration from: {filepath}")
        if not os.path.exists(filepath):
            msg = f"File '{filepath}' does not exist."
            logger.error(msg)
            raise FileNotFoundError(msg)

        with open(filepath, "r", encoding="utf-8") as f:
            text = f.read()

        try:
            configuration = deserialize(text)
        except InvalidFormatError:
            logger.exception(f"File '{filepath}' is not a valid configuration.")
            raise

        logger.info(f"Configuration loaded from: {filepath}")
        return configuration
