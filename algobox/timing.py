"""Context manager reporting how long a block of code took."""

import sys
import time
from types import TracebackType
from typing import TextIO


class LogDuration:
    """Writes "<label>: <milliseconds> ms" to a stream when the block ends."""

    def __init__(self, label: str, stream: TextIO | None = None) -> None:
        self.label = label
        self.stream = stream if stream is not None else sys.stderr
        self._start = 0

    def __enter__(self) -> "LogDuration":
        self._start = time.monotonic_ns()
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> bool:
        elapsed_ms = (time.monotonic_ns() - self._start) // 1_000_000
        self.stream.write(f"{self.label}: {elapsed_ms} ms\n")
        self.stream.flush()
        return False