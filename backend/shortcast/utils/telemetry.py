# backend/shortcast/utils/telemetry.py
import logging
import threading
from collections import Counter
from typing import Dict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op once root has handlers; the app logger still gets the level
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("shortcast").setLevel(level)


class StdlibLogger:
    """Logger protocol on top of `logging`; verbose maps to DEBUG."""

    def __init__(self, name: str = "shortcast"):
        self._log = logging.getLogger(name)

    def info(self, msg: str) -> None:
        self._log.info(msg)

    def error(self, msg: str) -> None:
        self._log.error(msg)

    def verbose(self, msg: str) -> None:
        self._log.debug(msg)


# -----------------------------
# In-process counters. Stand-in for Prometheus/DataDog; exposed on /health.
# -----------------------------
class InMemoryMetrics:
    def __init__(self, name: str = "shortcast.metrics"):
        self._counts: Counter = Counter()
        self._lock = threading.Lock()
        self._log = logging.getLogger(name)

    def uptick(self, metric_name: str) -> None:
        with self._lock:
            self._counts[metric_name] += 1
        self._log.debug(f"metric uptick for '{metric_name}'")

    def count(self, metric_name: str) -> int:
        with self._lock:
            return self._counts[metric_name]

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)
