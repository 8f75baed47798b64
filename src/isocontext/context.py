"""Isolated browsing context."""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Mapping
from typing import Any

from isocontext.backends.base import ContextBackend, PageHandle
from isocontext.cookies import match_cookies, parse_urls, rewrite_cookies
from isocontext.errors import ValidationError
from isocontext.geolocation import validate_geolocation
from isocontext.options import ContextOptions, Geolocation, prepare_options
from isocontext.types import KNOWN_PERMISSIONS, NetworkCookie, SetCookieParam

logger = logging.getLogger(__name__)


class BrowsingContext:
    """One cookie/permission/geolocation-isolated profile in a browser.

    Validates and normalizes caller input, then delegates to the backend.
    Construction is synchronous; ``initialize()`` applies the permission
    grants and geolocation carried by the options.
    """

    def __init__(
        self,
        backend: ContextBackend,
        options: ContextOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self._options = prepare_options(options)
        self._backend = backend
        self._closed = False
        self._initialized = False
        self._close_lock = asyncio.Lock()
        self._init_lock = asyncio.Lock()
        self.id = uuid.uuid4().hex
        self._backend.bind(self)

    @property
    def options(self) -> ContextOptions:
        """Copy of the current options; change them through the setters."""
        return self._options.clone()

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> BrowsingContext:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def initialize(self) -> None:
        """Grant configured permissions, then push configured geolocation.

        Runs once; later calls return without touching the backend. Grants
        are issued concurrently and are not rolled back if one fails.
        """
        async with self._init_lock:
            if self._initialized:
                return
            if self._options.permissions:
                await asyncio.gather(
                    *(
                        self.set_permissions(origin, *permissions)
                        for origin, permissions in self._options.permissions.items()
                    )
                )
            if self._options.geolocation is not None:
                await self.set_geolocation(self._options.geolocation)
            self._initialized = True
        logger.debug(
            "browser_context_initialized",
            extra={
                "context.id": self.id,
                "context.permission_origins": len(self._options.permissions),
                "context.has_geolocation": self._options.geolocation is not None,
            },
        )

    async def new_page(self, url: str | None = None) -> PageHandle:
        page = await self._backend.new_page()
        if url:
            await page.goto(url)
        return page

    async def get_pages(self) -> list[PageHandle]:
        return await self._backend.get_pages()

    def get_existing_pages(self) -> list[PageHandle]:
        return self._backend.get_existing_pages()

    async def clear_cookies(self) -> None:
        await self._backend.clear_cookies()

    async def get_cookies(self, *urls: str) -> list[NetworkCookie]:
        """Return stored cookies, restricted to ``urls`` when any are given."""
        parsed_urls = parse_urls(urls)
        return match_cookies(await self._backend.get_cookies(), parsed_urls)

    async def set_cookies(self, *cookies: SetCookieParam) -> None:
        """Write cookies; nothing is written if any request is invalid."""
        await self._backend.set_cookies(rewrite_cookies(cookies))

    async def set_geolocation(self, geolocation: Geolocation | None = None) -> None:
        """Replace the emulated position, or clear it with ``None``."""
        if geolocation is not None:
            validate_geolocation(geolocation)
        self._options = self._options.model_copy(update={"geolocation": geolocation})
        await self._backend.set_geolocation(geolocation)

    async def clear_permissions(self) -> None:
        await self._backend.clear_permissions()

    async def set_permissions(self, origin: str, *permissions: str) -> None:
        if not origin:
            raise ValidationError(
                "missing_origin", "Permissions should be granted to an origin"
            )
        for permission in permissions:
            if permission not in KNOWN_PERMISSIONS:
                raise ValidationError(
                    "unknown_permission",
                    f"Unknown permission '{permission}' for origin '{origin}'",
                )
        await self._backend.set_permissions(origin, list(permissions))

    async def close(self) -> None:
        """Close the context. Only the first call reaches the backend."""
        if self._closed:
            return
        async with self._close_lock:
            if self._closed:
                return
            await self._backend.close()
            self._closed = True
        logger.debug("browser_context_closed", extra={"context.id": self.id})
