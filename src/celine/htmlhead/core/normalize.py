from __future__ import annotations


def trim_null_if_empty(raw: str | None) -> str | None:
    """Strip surrounding whitespace, mapping ``None`` and ``""`` to ``None``."""
    if raw is None:
        return None
    trimmed = raw.strip()
    return trimmed or None
