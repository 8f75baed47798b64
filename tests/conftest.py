"""Shared test fixtures and fakes."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import pytest

from isocontext.options import ContextOptions, Geolocation
from isocontext.types import NetworkCookie, SetCookieParam


class FakePage:
    def __init__(self) -> None:
        self.visited: list[str] = []

    async def goto(self, url: str) -> None:
        self.visited.append(url)


class FakeBackend:
    """Records every call made by a BrowsingContext."""

    name = "fake"

    def __init__(self, cookies: list[NetworkCookie] | None = None) -> None:
        self.calls: list[str] = []
        self.bound = None
        self.cookies = list(cookies or [])
        self.written: list[SetCookieParam] = []
        self.geolocations: list[Geolocation | None] = []
        self.permissions: list[tuple[str, list[str]]] = []
        self.pages: list[FakePage] = []
        self.close_calls = 0

    def bind(self, context) -> None:
        self.calls.append("bind")
        self.bound = context

    async def clear_cookies(self) -> None:
        self.calls.append("clear_cookies")
        self.cookies.clear()

    async def get_cookies(self) -> list[NetworkCookie]:
        self.calls.append("get_cookies")
        return list(self.cookies)

    async def set_cookies(self, cookies: Sequence[SetCookieParam]) -> None:
        self.calls.append("set_cookies")
        self.written.extend(cookies)

    async def new_page(self) -> FakePage:
        self.calls.append("new_page")
        page = FakePage()
        self.pages.append(page)
        return page

    async def get_pages(self) -> list[FakePage]:
        self.calls.append("get_pages")
        return list(self.pages)

    def get_existing_pages(self) -> list[FakePage]:
        self.calls.append("get_existing_pages")
        return list(self.pages)

    async def set_geolocation(self, geolocation: Geolocation | None) -> None:
        self.calls.append("set_geolocation")
        self.geolocations.append(geolocation)

    async def clear_permissions(self) -> None:
        self.calls.append("clear_permissions")
        self.permissions.clear()

    async def set_permissions(self, origin: str, permissions: Sequence[str]) -> None:
        self.calls.append("set_permissions")
        await asyncio.sleep(0)
        self.permissions.append((origin, list(permissions)))

    async def close(self) -> None:
        self.calls.append("close")
        self.close_calls += 1
        await asyncio.sleep(0)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def geo_options() -> ContextOptions:
    return ContextOptions(
        geolocation=Geolocation(latitude=10, longitude=20, accuracy=5),
        permissions={
            "https://example.com": ["geolocation"],
            "https://other.test": ["notifications", "camera"],
        },
    )
