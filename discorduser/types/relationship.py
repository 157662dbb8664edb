"""Relationships between users: friends, blocks, pending requests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .enums import RelationshipType
from .user import User, _parse_rfc3339


@dataclass
class Relationship:
    """A relationship between the current user and another user."""

    id: str
    relationship_type: RelationshipType
    user: User | None = None
    nickname: str | None = None
    since: datetime | None = None
    user_ignored: bool = False
    is_spam_request: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Relationship:
        """Build a relationship from its JSON object."""
        user = data.get("user")
        since = data.get("since")
        return cls(
            id=data["id"],
            relationship_type=RelationshipType(data["type"]),
            user=User.from_dict(user) if user is not None else None,
            nickname=data.get("nickname"),
            since=_parse_rfc3339(since) if since is not None else None,
            user_ignored=data.get("user_ignored", False),
            is_spam_request=data.get("is_spam_request", False),
        )

    def is_friend(self) -> bool:
        """True for a friend."""
        return self.relationship_type is RelationshipType.FRIEND

    def is_pending_incoming(self) -> bool:
        """True for a friend request received."""
        return self.relationship_type is RelationshipType.PENDING_INCOMING

    def is_pending_outgoing(self) -> bool:
        """True for a friend request sent."""
        return self.relationship_type is RelationshipType.PENDING_OUTGOING

    def is_blocked(self) -> bool:
        """True for a blocked user."""
        return self.relationship_type is RelationshipType.BLOCKED

    def user_id(self) -> str | None:
        """ID of the other user, if the user object is present."""
        return self.user.id if self.user is not None else None