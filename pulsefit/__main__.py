"""Allow running PulseFit as a module: python -m pulsefit."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import PulseFitApp


def log_level(name: str | None) -> int:
    """Map a level name like ``"debug"`` to its number; unknown names give WARNING."""
    level = logging.getLevelName((name or "WARNING").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def main() -> None:
    logging.basicConfig(
        level=log_level(os.environ.get("PULSEFIT_LOG_LEVEL")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("PulseFit")
    app.setOrganizationName("PulseFit")

    window = PulseFitApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
