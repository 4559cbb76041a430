"""Credentials for servers and proxies."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from reqkit.encoding import url_encode


class Authentication:
    """Username and password for a server, with the mode to use them in."""

    def __init__(self, username: str, password: str, auth_mode: Any) -> None:
        self._auth_string = f"{username}:{password}"
        self._auth_mode = auth_mode

    @property
    def auth_string(self) -> str:
        """The credentials as ``username:password``."""
        return self._auth_string

    @property
    def auth_mode(self) -> Any:
        return self._auth_mode

    def __repr__(self) -> str:
        return f"{type(self).__name__}(auth_mode={self._auth_mode!r})"


class EncodedAuthentication:
    """Username and password stored percent-encoded."""

    def __init__(self, username: str = "", password: str = "") -> None:
        self._username = url_encode(username)
        self._password = url_encode(password)

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodedAuthentication):
            return NotImplemented
        return (self._username, self._password) == (other._username, other._password)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(username={self._username!r})"


class ProxyAuthentication:
    """Proxy credentials keyed by protocol."""

    def __init__(self, auths: Mapping[str, EncodedAuthentication] | None = None) -> None:
        self._auths: dict[str, EncodedAuthentication] = dict(auths or {})

    def has(self, protocol: str) -> bool:
        """Return True if credentials exist for ``protocol``."""
        return protocol in self._auths

    def get_username(self, protocol: str) -> str:
        """Return the encoded username for ``protocol``; KeyError if absent."""
        return self._auths[protocol].username

    def get_password(self, protocol: str) -> str:
        """Return the encoded password for ``protocol``; KeyError if absent."""
        return self._auths[protocol].password