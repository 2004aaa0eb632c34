from __future__ import annotations


class HtmlHeadError(Exception):
    pass


class EmbeddingError(HtmlHeadError, ValueError):
    """Raised when a value cannot be represented in the target encoding."""

    def __init__(self, value: str, target: str, reason: str = ""):
        self.value = value
        self.target = target
        msg = f"Cannot embed value {value!r} as {target}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class SinkClosedError(HtmlHeadError, OSError):
    pass
