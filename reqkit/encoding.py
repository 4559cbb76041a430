"""Percent-encoding of strings for URLs, query strings and form bodies."""

from __future__ import annotations

from urllib.parse import quote, unquote


def url_encode(s: str | bytes) -> str:
    """Percent-encode every byte except the unreserved characters.

    Letters, digits and ``-._~`` are kept; everything else, including ``/``
    and spaces, becomes ``%XX`` with upper-case hex digits. Text is encoded
    as UTF-8 first.
    """
    return quote(s, safe="")


def url_decode(s: str) -> str:
    """Decode ``%XX`` escapes, reading the result as UTF-8.

    A ``+`` is left as it is; malformed escapes are kept literally.
    """
    return unquote(s)