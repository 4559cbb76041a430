"""Key/value containers rendered as query strings or form bodies."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from reqkit.encoding import url_encode


@dataclass
class Parameter:
    """A query-string parameter; an empty value renders as the bare key."""

    key: str
    value: str


@dataclass
class Pair:
    """A form field; only its value is ever percent-encoded."""

    key: str
    value: str


Item = Union[Parameter, Pair]


class CurlContainer:
    """An ordered list of key/value items joined with ``&``.

    ``encode`` controls whether keys and values are percent-encoded when
    the content is rendered.
    """

    _item_type: ClassVar[type | None] = None

    def __init__(self, items: Iterable[Any] = (), *, encode: bool = True) -> None:
        self.encode = encode
        self._items: list[Item] = []
        self.add(list(items))

    def _coerce(self, item: Any) -> Item:
        if isinstance(item, (Parameter, Pair)):
            return item
        if self._item_type is None:
            raise TypeError(f"cannot add {item!r}: expected a Parameter or Pair")
        key, value = item
        return self._item_type(key, value)

    def add(self, *args: Any) -> None:
        """Append items; each argument is an item, a (key, value) tuple or a list of them."""
        for arg in args:
            if isinstance(arg, list):
                self._items.extend(self._coerce(item) for item in arg)
            else:
                self._items.append(self._coerce(arg))

    def _render(self, item: Item) -> str:
        escape = url_encode if self.encode else str
        if isinstance(item, Parameter):
            key = escape(item.key)
            return f"{key}={escape(item.value)}" if item.value else key
        return f"{item.key}={escape(item.value)}"

    def get_content(self) -> str:
        """Render the items as ``key=value`` entries joined by ``&``."""
        return "&".join(self._render(item) for item in self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, encode={self.encode!r})"


class Parameters(CurlContainer):
    """Query-string parameters."""

    _item_type = Parameter


class Payload(CurlContainer):
    """URL-encoded form fields."""

    _item_type = Pair