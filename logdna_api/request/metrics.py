"""Metrics collection for LogDNA API requests."""

from dataclasses import dataclass, field
from typing import ClassVar

from logdna_api.request.errors import RequestErrorClass


@dataclass
class RequestMetrics:
    """Metrics for API request pipeline runs.

    Singleton class that tracks response status counts, failures per
    pipeline stage, bytes received and time spent.
    """

    http_requests_total: dict[int, int] = field(default_factory=dict)
    http_failures_total: dict[str, int] = field(default_factory=dict)
    http_bytes_total: int = 0
    http_duration_ms_total: float = 0.0
    http_request_count: int = 0

    _instance: ClassVar["RequestMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "RequestMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_response(self, status_code: int, bytes_received: int) -> None:
        """Record a received HTTP response.

        Args:
            status_code: HTTP status code.
            bytes_received: Number of body bytes read.
        """
        self.http_requests_total[status_code] = (
            self.http_requests_total.get(status_code, 0) + 1
        )
        self.http_bytes_total += bytes_received

    def record_failure(self, error_class: RequestErrorClass) -> None:
        """Record a pipeline failure.

        Args:
            error_class: Stage that failed.
        """
        key = error_class.value
        self.http_failures_total[key] = self.http_failures_total.get(key, 0) + 1

    def record_duration(self, duration_ms: float) -> None:
        """Record one pipeline run and its duration."""
        self.http_duration_ms_total += duration_ms
        self.http_request_count += 1

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "http_requests_total": dict(self.http_requests_total),
            "http_failures_total": dict(self.http_failures_total),
            "http_bytes_total": self.http_bytes_total,
            "http_duration_ms_total": self.http_duration_ms_total,
            "http_request_count": self.http_request_count,
        }

    @property
    def avg_duration_ms(self) -> float:
        """Calculate average pipeline duration in milliseconds."""
        if self.http_request_count == 0:
            return 0.0
        return self.http_duration_ms_total / self.http_request_count
