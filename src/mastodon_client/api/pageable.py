"""
Link-header pagination.

Mastodon list endpoints return a ``Link`` header such as::

    <https://mastodon.example/api/v1/notifications?max_id=34>; rel="next",
    <https://mastodon.example/api/v1/notifications?min_id=56>; rel="prev"

The URLs' query parameters become the Range used to request the next or
previous page. Pages are never cached; iteration stops when a link is absent.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, Generic, Iterator, List, Mapping, Optional, Tuple, Type, TypeVar
from urllib.parse import parse_qs, urlparse
import re

import requests

from ..runtime.serializer import parse_list
from .range import Range

T = TypeVar("T")

_LINK_PATTERN = re.compile(r"<([^>]*)>([^<]*)")


def parse_link_header(header: Optional[str]) -> Dict[str, str]:
    """
    Parse a ``Link`` header into a mapping of relation to URL.

    Args:
        header: Raw header value, may be None or empty

    Returns:
        Mapping such as ``{"next": "https://...", "prev": "https://..."}``
    """
    links: Dict[str, str] = {}
    if not header:
        return links

    for url, params in _LINK_PATTERN.findall(header):
        for param in params.split(";"):
            name, sep, value = param.strip().strip(",").partition("=")
            if not sep or name.strip().lower() != "rel":
                continue
            for rel in value.strip().strip('"').split():
                links.setdefault(rel.lower(), url.strip())
    return links


def range_from_url(url: str) -> Range:
    """Extract max_id/min_id/since_id/limit from a page URL into a Range."""
    query = parse_qs(urlparse(url).query)

    def first(name: str) -> Optional[str]:
        values = query.get(name)
        return values[0] if values else None

    limit = first("limit")
    return Range(
        max_id=first("max_id"),
        min_id=first("min_id"),
        since_id=first("since_id"),
        limit=int(limit) if limit and limit.isdigit() and int(limit) > 0 else None,
    )


@dataclass(frozen=True)
class Pageable(Generic[T]):
    """
    One page of results with optional cursors to its neighbours.

    ``next`` points at older results, ``prev`` at newer ones, following the
    server's ``Link`` header.
    """
    parts: Tuple[T, ...]
    next: Optional[Range] = None
    prev: Optional[Range] = None
    links: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_response(cls, response: requests.Response, entity: Type[T],
                      on_json: Optional[Callable[[str], None]] = None) -> Pageable[T]:
        """
        Build a page from a list response and its Link header.

        Raises:
            MastodonRequestException: If the body is not a list of the entity
        """
        parts = parse_list(response.text, entity, on_json)
        links = parse_link_header(response.headers.get("Link"))
        return cls(
            parts=tuple(parts),
            next=range_from_url(links["next"]) if "next" in links else None,
            prev=range_from_url(links["prev"]) if "prev" in links else None,
            links=MappingProxyType(links),
        )

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_prev(self) -> bool:
        return self.prev is not None

    def to_list(self) -> List[T]:
        return list(self.parts)

    def __iter__(self) -> Iterator[T]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)


__all__ = ["Pageable", "parse_link_header", "range_from_url"]
