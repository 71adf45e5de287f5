"""
Application Initialization
==========================
This module constructs the model and the main window and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Data Model (ProjectState) with the start-up defaults.
2. Instantiates the Main Window (View) and passes the model into it.
3. Prevents circular import errors by being the orchestrator.
"""
import sys

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from coronaanalysis.config import VISIBLE_APP_NAME
from coronaanalysis.logging_config import setup_logging
from coronaanalysis.model.state import ProjectState
from coronaanalysis.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (level from CORONA_LOG_LEVEL, INFO by default)
    logger = setup_logging()
    logger.info(f"Starting {VISIBLE_APP_NAME}.")

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")
    pg.setConfigOptions(antialias=True)

    # 3. Initialize the Data Model
    project = ProjectState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(project)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
