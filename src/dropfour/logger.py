from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from dropfour.config import LOG_FILE, LOG_LEVEL

_sink_ids: list[int] = []


def configure_logging(level: str = LOG_LEVEL, log_file: str | Path | None = LOG_FILE) -> None:
    """
    Replace loguru's default sink with a stderr sink at `level`.
    Calling it again drops the sinks added by the previous call.
    """
    global _sink_ids
    if not _sink_ids:
        logger.remove()
    for sink_id in _sink_ids:
        logger.remove(sink_id)
    _sink_ids = [logger.add(sys.stderr, level=level.upper())]

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _sink_ids.append(logger.add(path, rotation="10 MB", level="DEBUG"))
