"""Cookies sent with a request or received in a response."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import format_datetime

from reqkit.encoding import url_encode

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class Cookie:
    """A single cookie with the attributes a cookie jar keeps for it."""

    name: str = ""
    value: str = ""
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = field(default_factory=lambda: _EPOCH)

    def expires_string(self) -> str:
        """Return the expiry time as ``Thu, 01 Jan 1970 00:00:00 GMT``."""
        moment = self.expires
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


class Cookies:
    """An ordered collection of cookies.

    ``encode`` controls whether names and values are percent-encoded when
    rendered for a ``Cookie`` header.
    """

    def __init__(self, cookies: Cookie | Iterable[Cookie] = (), encode: bool = True) -> None:
        self.encode = encode
        if isinstance(cookies, Cookie):
            self._cookies: list[Cookie] = [cookies]
        else:
            self._cookies = list(cookies)

    def get_encoded(self) -> str:
        """Render the cookies as ``name=value; `` entries, one after another."""
        escape = url_encode if self.encode else str
        parts = []
        for cookie in self._cookies:
            value = cookie.value
            # Version 1 cookies are quoted and sent exactly as they are.
            if not (value and value[0] == '"' and value[-1] == '"'):
                value = escape(value)
            parts.append(f"{escape(cookie.name)}={value}; ")
        return "".join(parts)

    def append(self, cookie: Cookie) -> None:
        self._cookies.append(cookie)

    def pop(self) -> Cookie:
        """Remove and return the last cookie; IndexError if there is none."""
        return self._cookies.pop()

    def __getitem__(self, pos: int) -> Cookie:
        return self._cookies[pos]

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookies):
            return NotImplemented
        return self.encode == other.encode and self._cookies == other._cookies

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cookies!r}, encode={self.encode!r})"