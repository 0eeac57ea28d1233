"""Base event model shared by every OneBot event."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, model_validator


class PostType(str, Enum):
    """Top-level event category (``post_type`` on the wire)."""

    MESSAGE = "message"
    NOTICE = "notice"
    REQUEST = "request"
    META = "meta_event"


class EventName(str, Enum):
    """Canonical dotted event names."""

    MESSAGE = "message"
    PRIVATE_MESSAGE = "message.private"
    GROUP_MESSAGE = "message.group"
    NOTICE = "notice"
    GROUP_UPLOAD = "notice.group_upload"
    GROUP_ADMIN = "notice.group_admin"
    GROUP_DECREASE = "notice.group_decrease"
    GROUP_INCREASE = "notice.group_increase"
    GROUP_BAN = "notice.group_ban"
    FRIEND_ADD = "notice.friend_add"
    GROUP_RECALL = "notice.group_recall"
    FRIEND_RECALL = "notice.friend_recall"
    NOTIFY = "notice.notify"
    NOTIFY_POKE = "notice.notify.poke"
    NOTIFY_LUCKY_KING = "notice.notify.lucky_king"
    NOTIFY_HONOR = "notice.notify.honor"
    REQUEST = "request"
    FRIEND_REQUEST = "request.friend"
    GROUP_REQUEST = "request.group"
    META = "meta_event"
    META_LIFECYCLE = "meta_event.lifecycle"
    META_HEARTBEAT = "meta_event.heartbeat"


# Set by the enricher, never read from the wire.
DERIVED_FIELDS = frozenset({"event_name", "to_me"})


class WireModel(BaseModel):
    """Frozen model decoded from a loosely-typed JSON object.

    Unknown keys are ignored and ``null`` counts as absent, so the field
    keeps its zero value.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Event(WireModel):
    """Fields and capabilities common to all events."""

    time: StrictInt = 0  # platform timestamp
    self_id: StrictInt = 0  # bot account that received the event
    post_type: StrictStr = ""  # message, notice, request, meta_event

    event_name: StrictStr = ""  # e.g. notice.notify.poke
    to_me: StrictBool = False  # private message, @bot, bot kicked, poked...

    @property
    def description(self) -> str:
        """Human-readable one-liner for logs."""
        fields = ", ".join(
            f"{key}={value!r}"
            for key, value in self.model_dump(exclude=set(DERIVED_FIELDS)).items()
        )
        return f"[{self.event_name}]: {fields}"

    def is_message_event(self) -> bool:
        return self.post_type == PostType.MESSAGE.value

    def is_to_me(self) -> bool:
        return self.to_me

    def __str__(self) -> str:
        return self.description
