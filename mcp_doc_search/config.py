"""
Configuration

Environment-driven settings shared by the CLI, MCP and HTTP servers.
"""
import os

from .core.inputs import normalize_context_chars

DEFAULT_PORT = 5002
DEFAULT_HOST = "127.0.0.1"
DEFAULT_MAX_FILE_SIZE_MB = 128
DEFAULT_REPORT_TTL_SECONDS = 60 * 60
DEFAULT_MAX_WORKERS = 1


def _get_int(name: str, default: int) -> int:
    """Read an integer env var, raising with the variable name if malformed"""
    value = os.environ.get(name, str(default))
    try:
        return int(value)
    except ValueError:
        msg = f"Invalid {name} value: {value}"
        raise ValueError(msg) from None


def get_port() -> int:
    """Get server port from environment or use default"""
    return _get_int("PORT", DEFAULT_PORT)


def get_host() -> str:
    """Get bind host from environment or use default"""
    return os.environ.get("HOST", DEFAULT_HOST)


def get_context_chars() -> int:
    """Default context width; out-of-range values fall back to 240"""
    return normalize_context_chars(os.environ.get("CONTEXT_CHARS"))


def get_max_file_size() -> int:
    """Per-file upload limit in bytes"""
    return _get_int("MAX_FILE_SIZE_MB", DEFAULT_MAX_FILE_SIZE_MB) * 1024 * 1024


def get_report_ttl() -> int:
    """Seconds a rendered report stays downloadable"""
    return _get_int("REPORT_TTL_SECONDS", DEFAULT_REPORT_TTL_SECONDS)


def get_max_workers() -> int:
    """Threads used to extract documents (1 = sequential)"""
    return max(1, _get_int("MAX_WORKERS", DEFAULT_MAX_WORKERS))
