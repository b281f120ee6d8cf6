from __future__ import annotations

import logging
from pathlib import Path

DEFAULT_LOG_PATH = "~/.kubeflow_setup.log"


def configure_logging(log_path: str = DEFAULT_LOG_PATH, level: int = logging.INFO) -> str:
    """Send everything to the per-user log file and progress lines to the console.

    The file keeps command output at DEBUG regardless of the console level, so a
    failed run can be diagnosed after the fact. Returns the resolved log path.
    """

    path = Path(log_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%dT%H:%M:%S%z")
    )

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

    # force=True replaces handlers left by an earlier call in the same process
    logging.basicConfig(level=logging.DEBUG, handlers=[file_handler, console], force=True)

    logging.getLogger(__name__).debug("Logging to %s", path)
    return str(path)
