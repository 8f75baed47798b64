"""Public types for cookies and permissions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, get_args

SameSite = Literal["Strict", "Lax", "None"]

ContextPermission = Literal[
    "geolocation",
    "midi",
    "midi-sysex",
    "notifications",
    "camera",
    "microphone",
    "background-sync",
    "ambient-light-sensor",
    "accelerometer",
    "gyroscope",
    "magnetometer",
    "accessibility-events",
    "clipboard-read",
    "clipboard-write",
    "payment-handler",
]

KNOWN_PERMISSIONS: frozenset[str] = frozenset(get_args(ContextPermission))


@dataclass(slots=True)
class SetCookieParam:
    """Cookie write request.

    Either ``url`` or the ``domain``/``path`` pair scopes the cookie. After
    normalization ``url`` is cleared and ``domain``, ``path`` and ``secure``
    are resolved; that form is what backends receive.
    """

    name: str
    value: str
    url: str | None = None
    domain: str | None = None
    path: str | None = None
    expires: float | None = None
    http_only: bool | None = None
    secure: bool | None = None
    same_site: SameSite | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.url:
            payload["url"] = self.url
        if self.domain:
            payload["domain"] = self.domain
        if self.path:
            payload["path"] = self.path
        if self.expires is not None:
            payload["expires"] = self.expires
        if self.http_only is not None:
            payload["httpOnly"] = self.http_only
        if self.secure is not None:
            payload["secure"] = self.secure
        if self.same_site is not None:
            payload["sameSite"] = self.same_site
        return payload


@dataclass(slots=True)
class NetworkCookie:
    """Cookie as stored by the browser engine."""

    name: str
    value: str
    domain: str
    path: str
    expires: float = -1
    http_only: bool = False
    secure: bool = False
    same_site: SameSite = "Lax"
    size: int | None = None
    session: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NetworkCookie:
        return cls(
            name=str(data.get("name") or ""),
            value=str(data.get("value") or ""),
            domain=str(data.get("domain") or ""),
            path=str(data.get("path") or "/"),
            expires=float(data.get("expires", -1)),
            http_only=bool(data.get("httpOnly", False)),
            secure=bool(data.get("secure", False)),
            same_site=data.get("sameSite") or "Lax",
            size=data.get("size"),
            session=data.get("session"),
        )
