"""The set of content encodings a client is willing to accept."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Union

DISABLED = "disabled"


def _name(method: Union[str, Enum]) -> str:
    return method.value if isinstance(method, Enum) else str(method)


class AcceptEncoding:
    """Accepted encodings, kept sorted and without duplicates.

    The special value ``disabled`` turns the header off and may not be
    combined with any other encoding.
    """

    def __init__(self, methods: Iterable[Union[str, Enum]] = ()) -> None:
        self._methods: set[str] = {_name(m) for m in methods}

    def empty(self) -> bool:
        return not self._methods

    def to_string(self) -> str:
        """Join the encodings in sorted order with ``, ``."""
        return ", ".join(sorted(self._methods))

    def disabled(self) -> bool:
        """Return True if ``disabled`` is set.

        Raises ValueError if ``disabled`` is set together with other encodings.
        """
        if DISABLED not in self._methods:
            return False
        if len(self._methods) != 1:
            raise ValueError(
                "AcceptEncoding does not accept any other values if 'disabled' is present. "
                f"You set the following encodings: {self.to_string()}"
            )
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._methods)!r})"