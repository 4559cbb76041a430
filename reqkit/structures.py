"""Case-insensitive comparison and a header mapping built on it."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(s: str) -> str:
    return s.translate(_ASCII_LOWER)


def case_insensitive_less(a: str, b: str) -> bool:
    """Return True if ``a`` sorts before ``b`` ignoring ASCII letter case."""
    return _fold(a) < _fold(b)


class CaseInsensitiveDict(MutableMapping):
    """A mapping whose string keys compare without regard to ASCII case.

    The spelling of a key is the one it was first stored with; later
    assignments under another spelling replace only the value. Keys are
    iterated in case-insensitive sorted order.
    """

    def __init__(self, data: Mapping[str, Any] | Iterable[tuple[str, Any]] = (), /, **kwargs: Any) -> None:
        self._store: dict[str, tuple[str, Any]] = {}
        self.update(data, **kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._store[_fold(key)][1]

    def __setitem__(self, key: str, value: Any) -> None:
        folded = _fold(key)
        existing = self._store.get(folded)
        original = existing[0] if existing is not None else key
        self._store[folded] = (original, value)

    def __delitem__(self, key: str) -> None:
        folded = _fold(key)
        if folded not in self._store:
            raise KeyError(key)
        self._store.pop(folded)

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._store):
            yield self._store[folded][0]

    def __len__(self) -> int:
        return len(self._store)

    def copy(self) -> CaseInsensitiveDict:
        return CaseInsensitiveDict(self.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"