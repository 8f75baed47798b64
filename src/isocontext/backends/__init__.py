"""Browsing context backends."""

from isocontext.backends.base import ContextBackend, PageHandle
from isocontext.backends.playwright import (
    PlaywrightContextBackend,
    playwright_backend_factory,
)

__all__ = [
    "ContextBackend",
    "PageHandle",
    "PlaywrightContextBackend",
    "playwright_backend_factory",
]
