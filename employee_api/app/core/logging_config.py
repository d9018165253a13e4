"""
Logging setup for the employee service.

Two sinks hang off the root logger: the console, and an append-only log
file (``server.log`` by default).  The request middleware in ``main``
writes exactly one ``Request: <METHOD> <URI>`` line per call through
these handlers; the store adds a line per mutation and the endpoints a
warning per rejected request.  The file is opened in append mode so
restarts never truncate earlier history.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_sink(logfile: str, formatter: logging.Formatter) -> logging.Handler:
    path = Path(logfile).resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the console and file sinks to the root logger.

    Does nothing if the root logger already has handlers, so calling
    ``create_app`` several times (or under a test runner that installs
    its own capture handlers) never duplicates request lines.

    Parameters
    ----------
    level : str
        Logging level name such as ``"DEBUG"`` or ``"INFO"``.  Unknown
        names fall back to ``INFO``, which is the level request lines
        are logged at.
    logfile : Optional[str]
        Request log path, relative to the working directory.  Missing
        parent directories are created.  ``None`` or ``""`` keeps
        logging on the console only.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        root.addHandler(_file_sink(logfile, formatter))
