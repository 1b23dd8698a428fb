"""Time-stamped INFO, WARNING and ERROR records written to a text stream."""

from __future__ import annotations

import sys
import time
from typing import TextIO

INFO_PREFIX = "\nINFO: "
WARNING_PREFIX = "\nWARNING: "
ERROR_PREFIX = "\nERROR: "


class Logger:
    """Writes one record per call, each preceded by a blank line and the time."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return sys.stdout if self._stream is None else self._stream

    def _write(self, prefix: str, value: str) -> None:
        record = f"{prefix}{time.strftime('%H:%M:%S')} {value}"
        if not record.endswith("\n"):
            record += "\n"
        self.stream.write(record)
        self.stream.flush()

    def info(self, value: str) -> None:
        self._write(INFO_PREFIX, value)

    def warn(self, value: str) -> None:
        self._write(WARNING_PREFIX, value)

    def error(self, err: BaseException | str | None) -> None:
        self._write(ERROR_PREFIX, "<nil>" if err is None else str(err))