"""Diagnostic logging for aac_cli.

User-facing progress goes through ``click.echo``. Log records are for
``--verbose`` / ``AAC_LOG_LEVEL`` troubleshooting: which files were detected,
skipped, or written, and which docker commands ran. Records are tagged with
the directory being scaffolded.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


class _CurrentStderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time.

    Prompts and test runners swap ``sys.stderr`` between invocations.
    """

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


class DirectoryLoggerAdapter(logging.LoggerAdapter):
    """Prefixes each message with the target project directory."""

    def process(self, msg: str, kwargs):  # type: ignore[override]
        directory = self.extra.get("directory")
        if directory:
            msg = f"[{directory}] {msg}"
        return msg, kwargs


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Attach the aac_cli handler once and set its level.

    Unknown level names fall back to WARNING. Called on every CLI invocation;
    repeated calls only change the level.
    """

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    package_logger = logging.getLogger("aac_cli")
    if not any(isinstance(h, _CurrentStderrHandler) for h in package_logger.handlers):
        handler = _CurrentStderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def get_directory_logger(
    component: str, directory: Union[str, Path]
) -> DirectoryLoggerAdapter:
    """Logger for ``aac_cli.<component>`` scoped to one project directory."""

    logger = logging.getLogger(f"aac_cli.{component}")
    return DirectoryLoggerAdapter(logger, {"directory": str(directory)})
