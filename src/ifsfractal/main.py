"""
Application Initialization
==========================
This module wires the model, the store and the main window together and
starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the Fractal State and the Store around it.
3. Instantiates the Main Window (View) and passes the Store in.
4. Prevents circular import errors by being the orchestrator.
"""
import sys

from ifsfractal.logging_config import setup_logging


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # IFSFRACTAL_DEBUG=1 switches to DEBUG and also writes the log file.
    setup_logging()

    # Qt is imported after logging is configured.
    from ifsfractal.app.application import create_app
    from ifsfractal.app.state import FractalStore
    from ifsfractal.app.ui.main_window import MainWindow
    from ifsfractal.model.state import FractalState

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    store = FractalStore(FractalState())

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
