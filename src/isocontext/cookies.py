"""Cookie scoping: write-path normalization and read-path filtering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from urllib.parse import SplitResult, urlsplit

from isocontext.errors import ValidationError
from isocontext.types import NetworkCookie, SetCookieParam


def _parse_url(url: str) -> SplitResult:
    try:
        parsed = urlsplit(url)
    except ValueError as e:
        raise ValidationError("invalid_url", f"Invalid url '{url}': {e}") from e
    if not parsed.scheme or not parsed.hostname:
        raise ValidationError(
            "invalid_url",
            f"Invalid url '{url}': an absolute url with a host is required",
        )
    return parsed


def _is_secure(parsed: SplitResult) -> bool:
    return parsed.scheme.lower() == "https"


def rewrite_cookie(cookie: SetCookieParam) -> SetCookieParam:
    """Return the canonical write record for a single cookie request."""
    if not cookie.name:
        raise ValidationError("missing_name", "Cookie should have a name")
    if not cookie.value:
        raise ValidationError(
            "missing_value", f'Cookie "{cookie.name}" should have a value'
        )
    if not cookie.url and not (cookie.domain and cookie.path):
        raise ValidationError(
            "missing_scope",
            f'Cookie "{cookie.name}" should have a url or a domain/path pair',
        )
    if cookie.url and cookie.domain:
        raise ValidationError(
            "ambiguous_scope",
            f'Cookie "{cookie.name}" should have either url or domain, not both',
        )
    if cookie.url and cookie.path:
        raise ValidationError(
            "ambiguous_scope",
            f'Cookie "{cookie.name}" should have either url or path, not both',
        )

    if not cookie.url:
        return replace(cookie)

    if cookie.url == "about:blank":
        raise ValidationError(
            "blank_url", f'Blank page can not have cookie "{cookie.name}"'
        )
    if cookie.url.startswith("data:"):
        raise ValidationError(
            "data_url", f'Data URL page can not have cookie "{cookie.name}"'
        )

    parsed = _parse_url(cookie.url)
    path = parsed.path or "/"
    return replace(
        cookie,
        url=None,
        domain=parsed.hostname,
        path=path[: path.rfind("/") + 1],
        secure=_is_secure(parsed),
    )


def rewrite_cookies(cookies: Iterable[SetCookieParam]) -> list[SetCookieParam]:
    """Normalize cookie write requests, preserving order.

    Fails on the first invalid request; inputs are never mutated.
    """
    return [rewrite_cookie(cookie) for cookie in cookies]


def parse_urls(urls: Iterable[str]) -> list[SplitResult]:
    """Parse cookie filter urls, failing on the first malformed one."""
    return [_parse_url(url) for url in urls]


def match_cookies(
    cookies: Iterable[NetworkCookie], parsed_urls: Sequence[SplitResult]
) -> list[NetworkCookie]:
    """Select the cookies visible to any of the already parsed urls."""
    if not parsed_urls:
        return list(cookies)

    def _matches(cookie: NetworkCookie) -> bool:
        for parsed in parsed_urls:
            if parsed.hostname != cookie.domain:
                continue
            if not (parsed.path or "/").startswith(cookie.path):
                continue
            if _is_secure(parsed) != cookie.secure:
                continue
            return True
        return False

    return [cookie for cookie in cookies if _matches(cookie)]


def filter_cookies(
    cookies: Iterable[NetworkCookie], urls: Sequence[str] = ()
) -> list[NetworkCookie]:
    """Select the cookies visible to any of ``urls``.

    With no urls every cookie is returned. Matching is exact on host, prefix
    on path, and requires the url scheme's security to equal the cookie's
    ``secure`` flag.
    """
    return match_cookies(cookies, parse_urls(urls))
