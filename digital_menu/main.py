"""Entry point for the digital menu Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from digital_menu.config import resolve_debug_log_path
from digital_menu.menu_app import MenuApp

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(path: str | None = None, level: int = logging.DEBUG) -> Path:
    """Send package logs to a file so they never draw over the terminal UI."""
    log_path = Path(path or resolve_debug_log_path())
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    package_logger = logging.getLogger("digital_menu")
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return log_path


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    MenuApp().run()


if __name__ == "__main__":
    main()
