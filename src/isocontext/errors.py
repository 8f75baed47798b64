"""Error taxonomy for browsing contexts."""

from __future__ import annotations


class ValidationError(ValueError):
    """Caller-supplied data violates a local invariant.

    Raised before any backend call is made. ``code`` is stable and safe to
    match on; the message names the offending field and the violated rule.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class BackendError(Exception):
    """Failure surfaced by a backend (protocol error, engine rejection)."""

    def __init__(self, message: str, *, action: str | None = None) -> None:
        super().__init__(message)
        self.action = action


class BrowserClosedError(RuntimeError):
    """A context was requested from a browser that has been closed."""

    code = "browser_closed"

    def __init__(self, message: str = "Browser is closed") -> None:
        super().__init__(message)
