import logging
import os
import time
from typing import Any, Dict

try:
    import psutil
except ImportError:
    psutil = None


class MetricsCollector:
    """
    Timing (and RSS, when psutil is present) for a single
    backend-bound operation such as one generation request.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.start_time = time.perf_counter()

    def collect(self) -> Dict[str, Any]:
        metrics: Dict[str, Any] = {
            "operation": self.operation,
            "duration_sec": round(time.perf_counter() - self.start_time, 3),
        }

        if psutil:
            process = psutil.Process(os.getpid())
            metrics["memory_mb"] = round(process.memory_info().rss / 1024 / 1024, 2)

        return metrics

    def log(self, logger: logging.Logger, status: str) -> Dict[str, Any]:
        metrics = self.collect()
        metrics["status"] = status
        logger.info(
            "%s finished (%s) in %.3fs",
            self.operation,
            status,
            metrics["duration_sec"],
        )
        return metrics
