"""
Mastodon API entities.

Immutable pydantic models mirroring the JSON objects returned by the server.
Only commonly used fields are modelled; unknown fields are ignored so newer
server versions keep parsing.

Reference: https://docs.joinmastodon.org/entities/
"""

from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field as PydanticField


class Entity(BaseModel):
    """Base class for all entities."""

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}


# =============================================================================
# Accounts
# =============================================================================

class Emoji(Entity):
    """Custom emoji of an instance."""
    shortcode: str
    url: str = ""
    static_url: str = ""
    visible_in_picker: bool = True
    category: Optional[str] = None


class Field(Entity):
    """Profile metadata name/value pair."""
    name: str
    value: str
    verified_at: Optional[datetime] = None


class Account(Entity):
    """A user of Mastodon and their profile."""
    id: str
    username: str = ""
    acct: str = ""
    url: str = ""
    display_name: str = ""
    note: str = ""
    avatar: str = ""
    avatar_static: str = ""
    header: str = ""
    header_static: str = ""
    locked: bool = False
    bot: bool = False
    discoverable: Optional[bool] = None
    group: bool = False
    created_at: Optional[datetime] = None
    last_status_at: Optional[str] = None
    statuses_count: int = 0
    followers_count: int = 0
    following_count: int = 0
    emojis: List[Emoji] = PydanticField(default_factory=list)
    fields: List[Field] = PydanticField(default_factory=list)
    moved: Optional[Account] = None


class Relationship(Entity):
    """Relationship between the authenticated account and another account."""
    id: str
    following: bool = False
    showing_reblogs: bool = False
    notifying: bool = False
    followed_by: bool = False
    blocking: bool = False
    blocked_by: bool = False
    muting: bool = False
    muting_notifications: bool = False
    requested: bool = False
    domain_blocking: bool = False
    endorsed: bool = False
    note: str = ""


# =============================================================================
# Statuses
# =============================================================================

class Application(Entity):
    """An application registered with the instance, or the one that posted a status."""
    name: str
    website: Optional[str] = None
    vapid_key: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    redirect_uri: Optional[str] = None


class MediaAttachment(Entity):
    """A file or media attachment."""

    class Type(str, Enum):
        UNKNOWN = "unknown"
        IMAGE = "image"
        GIFV = "gifv"
        VIDEO = "video"
        AUDIO = "audio"

    id: str
    type: str = Type.UNKNOWN.value
    url: Optional[str] = None
    preview_url: Optional[str] = None
    remote_url: Optional[str] = None
    text_url: Optional[str] = None
    meta: Optional[Dict[str, object]] = None
    description: Optional[str] = None
    blurhash: Optional[str] = None


class Mention(Entity):
    id: str
    username: str
    url: str
    acct: str


class Tag(Entity):
    name: str
    url: str = ""
    following: Optional[bool] = None


class PollOption(Entity):
    title: str
    votes_count: Optional[int] = None


class Poll(Entity):
    id: str
    expires_at: Optional[datetime] = None
    expired: bool = False
    multiple: bool = False
    votes_count: int = 0
    voters_count: Optional[int] = None
    options: List[PollOption] = PydanticField(default_factory=list)
    voted: Optional[bool] = None
    own_votes: Optional[List[int]] = None


class Status(Entity):
    """A status posted by an account."""

    class Visibility(str, Enum):
        PUBLIC = "public"
        UNLISTED = "unlisted"
        PRIVATE = "private"
        DIRECT = "direct"

    id: str
    uri: str = ""
    url: Optional[str] = None
    created_at: Optional[datetime] = None
    account: Optional[Account] = None
    content: str = ""
    visibility: str = Visibility.PUBLIC.value
    sensitive: bool = False
    spoiler_text: str = ""
    in_reply_to_id: Optional[str] = None
    in_reply_to_account_id: Optional[str] = None
    reblog: Optional[Status] = None
    application: Optional[Application] = None
    media_attachments: List[MediaAttachment] = PydanticField(default_factory=list)
    mentions: List[Mention] = PydanticField(default_factory=list)
    tags: List[Tag] = PydanticField(default_factory=list)
    emojis: List[Emoji] = PydanticField(default_factory=list)
    poll: Optional[Poll] = None
    language: Optional[str] = None
    text: Optional[str] = None
    edited_at: Optional[datetime] = None
    reblogs_count: int = 0
    favourites_count: int = 0
    replies_count: int = 0
    favourited: Optional[bool] = None
    reblogged: Optional[bool] = None
    muted: Optional[bool] = None
    bookmarked: Optional[bool] = None
    pinned: Optional[bool] = None


class Context(Entity):
    """Ancestors and descendants of a status in its thread."""
    ancestors: List[Status] = PydanticField(default_factory=list)
    descendants: List[Status] = PydanticField(default_factory=list)


class StatusParams(Entity):
    """Parameters a scheduled status will be posted with."""
    text: str = ""
    poll: Optional[Dict[str, object]] = None
    media_ids: Optional[List[str]] = None
    sensitive: Optional[bool] = None
    spoiler_text: Optional[str] = None
    visibility: Optional[str] = None
    in_reply_to_id: Optional[str] = None
    language: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    application_id: Optional[int] = None


class ScheduledStatus(Entity):
    """A status that will be published at a future time."""
    id: str
    scheduled_at: Optional[datetime] = None
    params: StatusParams = PydanticField(default_factory=StatusParams)
    media_attachments: List[MediaAttachment] = PydanticField(default_factory=list)


class Translation(Entity):
    """Machine translation of a status."""
    content: str
    detected_source_language: str = ""
    provider: str = ""


# =============================================================================
# Notifications
# =============================================================================

class Notification(Entity):
    """Something that happened that the user should be notified about."""

    class Type(str, Enum):
        MENTION = "mention"
        STATUS = "status"
        REBLOG = "reblog"
        FOLLOW = "follow"
        FOLLOW_REQUEST = "follow_request"
        FAVOURITE = "favourite"
        POLL = "poll"
        UPDATE = "update"
        ADMIN_SIGN_UP = "admin.sign_up"
        ADMIN_REPORT = "admin.report"

    id: str
    type: str
    created_at: Optional[datetime] = None
    account: Optional[Account] = None
    status: Optional[Status] = None


# =============================================================================
# OAuth
# =============================================================================

class AccessToken(Entity):
    """Bearer token returned by the OAuth token endpoint."""
    access_token: str
    token_type: str = "Bearer"
    scope: str = ""
    created_at: int = 0


class Error(Entity):
    """Error body returned with non-success responses."""
    error: str
    error_description: Optional[str] = None


Account.model_rebuild()
Status.model_rebuild()


__all__ = [
    "Entity",
    "Emoji",
    "Field",
    "Account",
    "Relationship",
    "Application",
    "MediaAttachment",
    "Mention",
    "Tag",
    "PollOption",
    "Poll",
    "Status",
    "Context",
    "StatusParams",
    "ScheduledStatus",
    "Translation",
    "Notification",
    "AccessToken",
    "Error",
]
