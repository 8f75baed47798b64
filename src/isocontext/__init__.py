"""Isolated browsing contexts.

Public API:
- BrowsingContext: one isolated profile, delegating to a backend
- Browser: creates, initializes and closes contexts via a backend factory

Types:
- ContextOptions, Viewport, Geolocation
- SetCookieParam, NetworkCookie
"""

from isocontext.browser import Browser
from isocontext.context import BrowsingContext
from isocontext.cookies import filter_cookies, rewrite_cookies
from isocontext.errors import BackendError, BrowserClosedError, ValidationError
from isocontext.geolocation import validate_geolocation
from isocontext.options import ContextOptions, Geolocation, Viewport
from isocontext.types import ContextPermission, NetworkCookie, SetCookieParam

__all__ = [
    "BackendError",
    "BrowserClosedError",
    "Browser",
    "BrowsingContext",
    "ContextOptions",
    "ContextPermission",
    "Geolocation",
    "NetworkCookie",
    "SetCookieParam",
    "ValidationError",
    "Viewport",
    "filter_cookies",
    "rewrite_cookies",
    "validate_geolocation",
]
