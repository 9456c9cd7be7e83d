"""Logging setup for applications embedding viewbind.

Library modules only create loggers; call configure_logging() from the
application to send their output to the XDG state directory.
"""

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_log_path(app_name: str = "viewbind") -> Path:
    """Get the log file path under the XDG state directory."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / app_name
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"{app_name}.log"


def configure_logging(level: int = logging.DEBUG, log_path: Path | None = None) -> Path:
    """Attach a file handler to the root logger and return the log path."""
    path = log_path or get_log_path()
    handler = logging.FileHandler(path)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)
    return path
