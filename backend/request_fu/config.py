"""Defaults shared by every request."""

VERSION = "0.1.0"
DEFAULT_TIMEOUT = 10
DEFAULT_PROTOCOL = "http"
USER_AGENT = f"request_fu/{VERSION}"

_BASE_HEADERS = {"User-Agent": USER_AGENT}
_global_headers: dict[str, str] = dict(_BASE_HEADERS)


def global_headers() -> dict[str, str]:
    """Headers sent with every request (copy, safe to mutate)."""
    return dict(_global_headers)


def set_global_header(name: str, value: str) -> None:
    _global_headers[name] = value


def clear_global_headers() -> None:
    """Reset to the defaults (User-Agent only)."""
    _global_headers.clear()
    _global_headers.update(_BASE_HEADERS)
