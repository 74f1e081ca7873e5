"""
Galaxy Adventure - Obstacle-avoidance arcade game

Entry point for the application.
"""

import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from config import init_config, init_logging, APP_NAME, APP_VERSION


def main() -> int:
    """Main entry point for Galaxy Adventure."""
    # Initialize configuration, directories and logging
    init_config()
    init_logging()

    # High DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    # Create the controller, show the window and start loading
    from app import GalaxyAdventureApp
    game_app = GalaxyAdventureApp()
    app.aboutToQuit.connect(game_app.stop)
    game_app.start()

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
