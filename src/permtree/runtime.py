import contextlib
import time
import types
import uuid
from typing import Optional, Type


def run_id():
    uuid4_head = next(iter(str(uuid.uuid4()).split("-")))
    timestamp = int(time.time())
    return f"{uuid4_head}-{timestamp}"


class Timer(contextlib.AbstractContextManager):
    """
    Measures the wall clock time spent inside a `with` block, in microseconds.
    """

    def __init__(self):
        self._start: Optional[float] = None
        self._elapsed: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._elapsed = None
        self._start = time.perf_counter()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[types.TracebackType],
    ) -> None:
        if self._start is None:
            raise RuntimeError("Timer was not started")
        self._elapsed = (time.perf_counter() - self._start) * 1e6
        super().__exit__(exc_type, exc_value, traceback)

    @property
    def elapsed_us(self) -> float:
        """
        Returns the time spent in the last completed block.
        """
        if self._elapsed is None:
            raise RuntimeError("Timer has not completed a measurement")
        return self._elapsed
