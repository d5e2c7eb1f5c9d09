"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the local storage and the editing session (Model + Controller).
2. Instantiates the Main Window (View).
3. Passes the session into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys

from shelfconfigurator.application import create_app
from shelfconfigurator.controller.session import ConfiguratorSession
from shelfconfigurator.controller.storage import ConfigurationStorage
from shelfconfigurator.logging_config import setup_logging
from shelfconfigurator.view.main_window import MainWindow


def main() -> None:
    # Use logging.DEBUG to see everything during development
    setup_logging(level=logging.INFO)

    app = create_app()

    storage = ConfigurationStorage()
    session = ConfiguratorSession(storage=storage)

    window = MainWindow(session)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
