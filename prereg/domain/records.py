"""
Record types - Reservation and notification entities.

Records are immutable dataclasses. Stores replace a record with an
updated copy instead of mutating it in place. Serialized form uses the
camelCase keys of the persisted slot format (``createdAt``, ``isRead``).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

NEW_REGISTRATION = "new_registration"


def ensure_aware(value: datetime) -> datetime:
    """Attach the local timezone to naive datetimes."""
    if value.tzinfo is None:
        return value.astimezone()
    return value


def _parse_timestamp(value: str) -> datetime:
    # JavaScript-style ISO strings end in "Z"
    return ensure_aware(datetime.fromisoformat(value.replace("Z", "+00:00")))


@dataclass(frozen=True)
class Reservation:
    """A submitted pre-registration."""

    id: str
    name: str
    email: str
    interests: tuple[str, ...]
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "interests": list(self.interests),
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Reservation":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            interests=tuple(data.get("interests", ())),
            created_at=_parse_timestamp(data["createdAt"]),
        )


@dataclass(frozen=True)
class Notification:
    """An admin-facing notification. ``is_read`` only ever moves to True."""

    id: str
    type: str
    title: str
    message: str
    is_read: bool
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "isRead": self.is_read,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Notification":
        return cls(
            id=str(data["id"]),
            type=data["type"],
            title=data["title"],
            message=data["message"],
            is_read=bool(data.get("isRead", False)),
            created_at=_parse_timestamp(data["createdAt"]),
        )
