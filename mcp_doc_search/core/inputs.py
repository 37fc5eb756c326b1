"""
Caller-side input normalisation

Shared by the CLI, MCP and HTTP entry points so that all of them hand the
core the same kind of terms and context width.
"""
from typing import Any

DEFAULT_CONTEXT_CHARS = 240
MAX_CONTEXT_CHARS = 1000


def parse_search_terms(raw: str | None) -> list[str]:
    """Split a ';'-separated string into trimmed, non-empty terms.

    Order and duplicates are kept: "a; b;;a" -> ["a", "b", "a"]
    """
    if not raw:
        return []
    return [term.strip() for term in raw.split(";") if term.strip()]


def normalize_context_chars(value: Any) -> int:
    """Coerce a user-supplied context width into 0..1000, else the default"""
    try:
        chars = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_CONTEXT_CHARS

    if chars < 0 or chars > MAX_CONTEXT_CHARS:
        return DEFAULT_CONTEXT_CHARS
    return chars
