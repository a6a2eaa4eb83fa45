"""Provider-neutral notification model shared by all senders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


class Format(str, Enum):
    """Text format of a notification body."""

    PLAIN = ""
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"

    def __str__(self) -> str:
        return self.value


class AttachmentKind(str, Enum):
    """Kind of file attached to a notification."""

    PHOTO = "photo"
    VIDEO = "video"
    AUDIO = "audio"
    VOICE = "voice"
    DOCUMENT = "document"
    ANIMATION = "animation"

    def __str__(self) -> str:
        return self.value


@dataclass
class Attachment:
    """A file sent with a notification.

    Exactly one source must be given: ``file_id``, ``url``, ``path`` or ``content``.
    ``name`` is required when ``content`` is given.
    """

    kind: AttachmentKind | str
    name: str = ""
    mime: str = ""
    caption: str = ""
    file_id: str = ""
    url: str = ""
    path: str = ""
    content: bytes | None = None


@dataclass
class Notification:
    """A message with an optional title, body and attachments."""

    title: str = ""
    body: str = ""
    format: Format | str = Format.PLAIN
    silent: bool = False
    protect_content: bool = False
    attachments: list[Attachment] = field(default_factory=list)


@dataclass
class Result:
    """What a provider returned for a sent notification."""

    provider: str
    message_ids: list[str] = field(default_factory=list)
    raw: bytes = b""


@runtime_checkable
class Sender(Protocol):
    """Anything that can deliver a notification."""

    def send(self, notification: Notification) -> Result: ...