"""
Ordered request parameters.

Mastodon expects array values as repeated ``key[]`` entries, so parameters are
kept as an ordered list of pairs rather than a dict.
"""

from __future__ import annotations
from collections.abc import Iterable
from typing import List, Tuple, Union
from urllib.parse import quote_plus

Scalar = Union[str, int, float, bool]
Value = Union[Scalar, Iterable]


def _render(value: Scalar) -> str:
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Parameters:
    """
    Builder for query-string and form-body parameters.

    Example:
        ```python
        params = Parameters().append("status", "Hello").append("media_ids", ["1", "2"])
        params.build()  # 'status=Hello&media_ids[]=1&media_ids[]=2'
        ```
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[str, str]] = []

    def append(self, key: str, value: Value) -> Parameters:
        """
        Append one entry, or one ``key[]`` entry per element of any
        non-string iterable (lists, tuples, sets, generators).

        Appending the same key again adds another entry instead of replacing it.
        """
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            for element in value:
                self._entries.append((f"{key}[]", _render(element)))
        else:
            self._entries.append((key, _render(value)))
        return self

    def extend(self, other: Parameters) -> Parameters:
        """Append every entry of another builder, keeping its order."""
        self._entries.extend(other._entries)
        return self

    def to_list(self) -> List[Tuple[str, str]]:
        """Return the entries as ordered (key, value) pairs."""
        return list(self._entries)

    def build(self) -> str:
        """Render ``key=value`` pairs joined by ``&`` with URL-encoded values."""
        return "&".join(f"{key}={quote_plus(value)}" for key, value in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Parameters):
            return self._entries == other._entries
        return NotImplemented

    def __repr__(self) -> str:
        return f"Parameters({self._entries!r})"


__all__ = ["Parameters"]
