import time
from datetime import timedelta


class PerformanceTimer:
    """Context manager measuring wall clock duration of a code block with
    time.perf_counter().

    Example:
    >>> with PerformanceTimer() as timer:
    ...     build_tallies(schema, instances)
    >>> print(timer.timedelta)
    """

    def __init__(self) -> None:
        self._start: float = None
        self._elapsed: float = None

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args, **kwargs):
        self._elapsed = time.perf_counter() - self._start

    @property
    def timedelta(self) -> timedelta:
        return timedelta(seconds=self._elapsed)
