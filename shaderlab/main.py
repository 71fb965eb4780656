"""
ShaderLab — Main Entry Point

Run this to start the GUI application.
"""

import sys
from PySide6.QtWidgets import QApplication

from .oiio import OiioAdapter
from .processing import default_registry
from .processing.renderer import PreviewRenderer
from .services import Settings, ShaderState, load_catalog
from .ui.main_window import MainWindow
from .utils.logging import get_logger, set_level

logger = get_logger()


def main():
    """Launch the application."""
    settings = Settings()
    set_level(settings.get_log_level())
    logger.info("OpenImageIO version: %s", OiioAdapter.get_oiio_version())

    # Create Qt application
    app = QApplication(sys.argv)

    registry = default_registry()
    state = ShaderState(load_catalog(categories=settings.get_categories(), registry=registry))
    renderer = PreviewRenderer(settings.get_sample_image(), registry)

    # Create and show main window
    window = MainWindow(state, renderer)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
