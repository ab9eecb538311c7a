"""
Processing statistics tracker.

Stores the summary of the most recent analysis run for the /metrics endpoint.

Time Complexity: O(1) per operation
Memory: O(1)
"""

from typing import Any, Dict


class MetricsTracker:
    """Tracks analysis runs across API calls."""

    def __init__(self):
        self._last_metrics: Dict[str, Any] = {
            "status": "no_processing_yet",
            "total_runs": 0,
            "failed_runs": 0,
        }
        self._total_runs: int = 0
        self._failed_runs: int = 0

    def record(self, summary: Dict[str, Any]) -> None:
        """Record the summary of a successful run."""
        self._total_runs += 1
        self._last_metrics = {
            "status": "ready",
            "total_runs": self._total_runs,
            "failed_runs": self._failed_runs,
            "last_run": summary,
        }

    def record_failure(self, error: str) -> None:
        self._failed_runs += 1
        self._last_metrics = {
            **self._last_metrics,
            "failed_runs": self._failed_runs,
            "last_error": error,
        }

    def get_metrics(self) -> Dict[str, Any]:
        """Return the latest metrics."""
        return self._last_metrics
