"""Logging setup and the optional performance timer."""

from __future__ import annotations

import logging
import time
from types import TracebackType

from mytube.core.config import settings

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

perf_logger = logging.getLogger("mytube.perf")


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger for console use."""

    logging.basicConfig(level=level or settings.log_level, format=LOG_FORMAT)


class PerfSwitch:
    """Process-wide toggle for performance measurements."""

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled


perf_switch = PerfSwitch(settings.perf_logging)


class PerfTimer:
    """Context manager that logs elapsed wall time in microseconds."""

    def __init__(self, operation: str, enabled: bool | None = None) -> None:
        self.operation = operation
        self.enabled = perf_switch.enabled if enabled is None else enabled
        self.elapsed_us: int | None = None
        self._start = 0.0

    def __enter__(self) -> PerfTimer:
        self._start = time.perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.elapsed_us = int((time.perf_counter() - self._start) * 1_000_000)
        if self.enabled:
            perf_logger.info("%s: %s us", self.operation, self.elapsed_us)
