"""Transport config (read from settings). Read-only; no business logic."""

from esclient.config.settings import get_settings


def get_transport_config() -> dict:
    """Return transport parameters from settings for use by resources."""
    s = get_settings()
    return {
        "server": s.es_server,
        "timeout": s.es_timeout,
    }
