"""The result of a transfer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from reqkit.cookies import Cookies
from reqkit.errors import Error
from reqkit.structures import CaseInsensitiveDict


class CertInfo:
    """The lines of information about one certificate in a chain."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def __getitem__(self, pos: int) -> str:
        return self._entries[pos]

    def __setitem__(self, pos: int, value: str) -> None:
        self._entries[pos] = value

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, entry: str) -> None:
        self._entries.append(entry)

    def pop(self) -> str:
        """Remove and return the last entry; IndexError if there is none."""
        return self._entries.pop()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CertInfo):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


@dataclass
class Response:
    """Everything learned from one request: status, body, headers and errors."""

    status_code: int = 0
    text: str = ""
    header: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    url: str = ""
    elapsed: float = 0.0
    cookies: Cookies = field(default_factory=Cookies)
    error: Error = field(default_factory=Error)
    raw_header: str = ""
    status_line: str = ""
    reason: str = ""
    uploaded_bytes: int = 0
    downloaded_bytes: int = 0
    redirect_count: int = 0
    cert_infos: list[CertInfo] = field(default_factory=list)