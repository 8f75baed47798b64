"""Backend interface for browsing contexts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

from isocontext.options import Geolocation
from isocontext.types import NetworkCookie, SetCookieParam

if TYPE_CHECKING:
    from isocontext.context import BrowsingContext


class PageHandle(Protocol):
    async def goto(self, url: str) -> Any: ...


class ContextBackend(Protocol):
    """Engine-specific operations behind a BrowsingContext.

    Every method is a round trip to the engine except
    ``get_existing_pages``, which answers from local state. Failures are
    raised as ``BackendError``.
    """

    def bind(self, context: BrowsingContext) -> None: ...

    async def clear_cookies(self) -> None: ...

    async def get_cookies(self) -> list[NetworkCookie]: ...

    async def set_cookies(self, cookies: Sequence[SetCookieParam]) -> None: ...

    async def new_page(self) -> PageHandle: ...

    async def get_pages(self) -> list[PageHandle]: ...

    def get_existing_pages(self) -> list[PageHandle]: ...

    async def set_geolocation(self, geolocation: Geolocation | None) -> None: ...

    async def clear_permissions(self) -> None: ...

    async def set_permissions(self, origin: str, permissions: Sequence[str]) -> None: ...

    async def close(self) -> None: ...
