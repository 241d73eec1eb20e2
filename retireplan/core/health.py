"""Health-check payload used by the API."""

from retireplan import __version__


def get_health() -> dict:
    """Return the service status and version."""
    return {"status": "ok", "version": __version__}
