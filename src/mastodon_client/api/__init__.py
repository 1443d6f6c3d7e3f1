"""
Mastodon API surface: pagination types, scopes and entities.

Method groups live in ``mastodon_client.api.methods``.
"""

from .entities import *
from .entities import __all__ as _entity_names
from .pageable import Pageable, parse_link_header, range_from_url
from .range import Range
from .scope import Scope

__all__ = [
    "Pageable",
    "parse_link_header",
    "range_from_url",
    "Range",
    "Scope",
    *_entity_names,
]
