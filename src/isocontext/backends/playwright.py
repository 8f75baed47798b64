"""Playwright browser context backend adapter."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from playwright.async_api import Browser as PlaywrightBrowser
from playwright.async_api import BrowserContext as PlaywrightContext
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from isocontext.errors import BackendError
from isocontext.options import ContextOptions, Geolocation
from isocontext.types import NetworkCookie, SetCookieParam

if TYPE_CHECKING:
    from isocontext.context import BrowsingContext

logger = logging.getLogger(__name__)

T = TypeVar("T")

BackendFactory = Callable[[ContextOptions], Awaitable["PlaywrightContextBackend"]]


class PlaywrightContextBackend:
    """Runs context operations against a Playwright ``BrowserContext``."""

    name = "playwright"

    def __init__(self, context: PlaywrightContext) -> None:
        self._context = context
        self._owner: BrowsingContext | None = None

    @property
    def owner(self) -> BrowsingContext | None:
        return self._owner

    def bind(self, context: BrowsingContext) -> None:
        self._owner = context

    async def _call(self, action: str, coro: Awaitable[T]) -> T:
        try:
            return await coro
        except PlaywrightError as e:
            logger.debug(
                "playwright_action_failed",
                extra={"browser.action": action, "error.message": e.message},
            )
            raise BackendError(
                f"playwright_{action}_failed: {e.message}", action=action
            ) from e

    async def clear_cookies(self) -> None:
        await self._call("clear_cookies", self._context.clear_cookies())

    async def get_cookies(self) -> list[NetworkCookie]:
        raw = await self._call("get_cookies", self._context.cookies())
        return [NetworkCookie.from_dict(dict(cookie)) for cookie in raw]

    async def set_cookies(self, cookies: Sequence[SetCookieParam]) -> None:
        payload: list[Any] = [cookie.to_dict() for cookie in cookies]
        await self._call("set_cookies", self._context.add_cookies(payload))

    async def new_page(self) -> Page:
        return await self._call("new_page", self._context.new_page())

    async def get_pages(self) -> list[Page]:
        return list(self._context.pages)

    def get_existing_pages(self) -> list[Page]:
        return list(self._context.pages)

    async def set_geolocation(self, geolocation: Geolocation | None) -> None:
        await self._call(
            "set_geolocation",
            self._context.set_geolocation(
                geolocation.model_dump() if geolocation is not None else None
            ),
        )

    async def clear_permissions(self) -> None:
        await self._call("clear_permissions", self._context.clear_permissions())

    async def set_permissions(self, origin: str, permissions: Sequence[str]) -> None:
        await self._call(
            "set_permissions",
            self._context.grant_permissions(list(permissions), origin=origin),
        )

    async def close(self) -> None:
        await self._call("close", self._context.close())


def context_kwargs(options: ContextOptions) -> dict[str, Any]:
    """Map engine-agnostic options to ``Browser.new_context`` arguments.

    Geolocation and permissions are left out; the browsing context applies
    them during ``initialize()``.
    """
    kwargs: dict[str, Any] = {
        "ignore_https_errors": options.ignore_https_errors,
        "java_script_enabled": options.java_script_enabled,
        "bypass_csp": options.bypass_csp,
        "offline": options.offline,
    }
    if options.viewport is not None:
        kwargs["viewport"] = options.viewport.model_dump()
    if options.user_agent:
        kwargs["user_agent"] = options.user_agent
    if options.locale:
        kwargs["locale"] = options.locale
    if options.timezone_id:
        kwargs["timezone_id"] = options.timezone_id
    if options.extra_http_headers:
        kwargs["extra_http_headers"] = dict(options.extra_http_headers)
    return kwargs


def playwright_backend_factory(browser: PlaywrightBrowser) -> BackendFactory:
    """Build a backend factory that opens a new context on ``browser``."""

    async def factory(options: ContextOptions) -> PlaywrightContextBackend:
        try:
            context = await browser.new_context(**context_kwargs(options))
        except PlaywrightError as e:
            raise BackendError(
                f"playwright_new_context_failed: {e.message}", action="new_context"
            ) from e
        return PlaywrightContextBackend(context)

    return factory
