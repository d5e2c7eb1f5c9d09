import pytest
from PySide6.QtCore import QCoreApplication, QSettings

from shelfconfigurator.controller.storage import ConfigurationStorage


@pytest.fixture(scope="session", autouse=True)
def qt_core_app() -> QCoreApplication:
    """One core application for the whole run (signals and QSettings only)."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def settings(tmp_path) -> QSettings:
    return QSettings(str(tmp_path / "configurator.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def storage(settings) -> ConfigurationStorage:
    return ConfigurationStorage(settings)
