"""
Logging for the research API.

Request logs come from the event loop, paper queries and inserts from
FastAPI's threadpool and registration attempts from a worker thread, so
every record carries the name of the thread that emitted it.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(threadName)s): %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send records to stderr and, when ``LOG_FILE`` is set, to that file too.

    ``level`` is a level name such as ``"DEBUG"``; unknown names fall back
    to INFO.  Does nothing when the root logger already has handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        # pytest or an earlier create_app call got here first.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # urllib3 logs every connection the directory client opens.
    logging.getLogger("urllib3").setLevel(max(numeric_level, logging.WARNING))
