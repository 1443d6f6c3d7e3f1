"""
OAuth scopes.
"""

from __future__ import annotations
from enum import Enum


class Scope:
    """
    A set of OAuth scope names rendered space-separated.

    ``Scope()`` defaults to ``Scope.Name.ALL`` (``read write follow``).
    """

    class Name(str, Enum):
        READ = "read"
        WRITE = "write"
        FOLLOW = "follow"
        PUSH = "push"
        ALL = "read write follow"

    def __init__(self, *names: Scope.Name):
        self.names = tuple(names) or (Scope.Name.ALL,)

    def __str__(self) -> str:
        return " ".join(dict.fromkeys(name.value for name in self.names))

    def __repr__(self) -> str:
        return f"Scope({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Scope):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


__all__ = ["Scope"]
