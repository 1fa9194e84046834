# =============================================================================
# NAV INDEX (search these tags)
# [NAV-00] Imports / constants
# [NAV-90] Window bootstrap
# [NAV-99] main() entrypoint
# =============================================================================

# === [NAV-00] Imports / constants ============================================
from __future__ import annotations

import logging
import sys
from typing import List, Optional

from PyQt6 import QtWidgets

from diagnostics.crash_capture import install_fatal_hook
from diagnostics.logging_setup import configure_logging

from .canvas import PlotCanvas
from .config import DEFAULT_CONFIG, PlotConfig, load_plot_config

logger = logging.getLogger(__name__)


# === [NAV-90] Window bootstrap ================================================
def create_window(config: PlotConfig = DEFAULT_CONFIG) -> PlotCanvas:
    canvas = PlotCanvas(config)
    canvas.show()
    canvas.setFocus()
    canvas.start()
    logger.info(
        "viewer started title=%s surface=%dx%d zoom_range=%s",
        config.title,
        config.width,
        config.height,
        config.zoom_range,
    )
    return canvas


# === [NAV-99] main() entrypoint ===============================================
def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    install_fatal_hook()
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(list(argv or sys.argv))
    window = create_window(load_plot_config())
    code = app.exec()
    logger.info("viewer exited running=%s", window.controller.running)
    return code


if __name__ == "__main__":
    sys.exit(main())
