"""Liveness probe."""

from users_api.dto import HealthResponse


def health() -> HealthResponse:
    """Handle GET /health requests.

    Reports only that the process is serving; it does not touch the
    store or the cache.
    """
    return HealthResponse(status="ok")
