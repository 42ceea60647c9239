import datetime
import os
import uuid
from dataclasses import dataclass, field
from enum import Enum

PREVIEW_CHARS = 50


class ClipKind(str, Enum):
    TEXT = "text"
    FILE = "file"
    IMAGE = "image"

    @classmethod
    def parse(cls, value):
        # Older saves stored arbitrary type strings; anything unknown reads as text.
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.TEXT


def _utcnow():
    return datetime.datetime.now(datetime.timezone.utc)


def _new_id():
    return str(uuid.uuid4())


@dataclass
class ClipItem:
    kind: ClipKind
    content: str
    id: str = field(default_factory=_new_id)
    captured_at: datetime.datetime = field(default_factory=_utcnow)
    is_favorite: bool = False

    @property
    def key(self):
        """Favorites membership key: content identity, not item identity."""
        return (self.kind.value, self.content)

    @property
    def preview(self):
        if self.kind is ClipKind.TEXT:
            if len(self.content) > PREVIEW_CHARS:
                return self.content[:PREVIEW_CHARS] + "..."
            return self.content
        return os.path.basename(self.content)

    def copy(self, **changes):
        data = {
            "kind": self.kind,
            "content": self.content,
            "id": self.id,
            "captured_at": self.captured_at,
            "is_favorite": self.is_favorite,
        }
        data.update(changes)
        return ClipItem(**data)

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.kind.value,
            "content": self.content,
            "timestamp": self.captured_at.isoformat(),
            "isFavorite": bool(self.is_favorite),
        }

    @classmethod
    def from_dict(cls, row):
        if not isinstance(row, dict):
            raise ValueError("clip record must be an object")
        item_id = row.get("id")
        content = row.get("content")
        stamp = row.get("timestamp")
        if not item_id or not isinstance(content, str) or not stamp:
            raise ValueError("clip record is missing id, content or timestamp")
        captured_at = datetime.datetime.fromisoformat(str(stamp))
        if captured_at.tzinfo is None:
            captured_at = captured_at.replace(tzinfo=datetime.timezone.utc)
        return cls(
            kind=ClipKind.parse(row.get("type")),
            content=content,
            id=str(item_id),
            captured_at=captured_at,
            is_favorite=bool(row.get("isFavorite", False)),
        )


def text_item(text):
    return ClipItem(kind=ClipKind.TEXT, content=text)


def file_item(path):
    return ClipItem(kind=ClipKind.FILE, content=str(path))


def image_item(path):
    return ClipItem(kind=ClipKind.IMAGE, content=str(path))
