"""Logging utilities.

We use Python's standard `logging` module with a single structured line format.

- Console logging always.
- File logging to `<log_dir>/<run_id>.log` when a log directory is given.
"""

from __future__ import annotations
import logging
import os
from typing import Optional

FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATEFMT = "%Y-%m-%dT%H:%M:%S"

def setup_logging(level: str = "INFO", log_dir: Optional[str] = None, run_id: Optional[str] = None) -> None:
    """
    Setup logging configuration.

    Args:
        level: Root log level name
        log_dir: Directory for the run log file (console only if None)
        run_id: Run identifier used as the log file name
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    fmt = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    # Console
    if not any(getattr(h, "_md_plaintext", False) for h in root.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(fmt)
        ch._md_plaintext = True
        root.addHandler(ch)

    # File
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, f"{run_id or 'md_plaintext'}.log")
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)
