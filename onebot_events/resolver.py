"""Map a payload's type fields to its event class.

Most events have three type levels (``post_type``, ``<post_type>_type`` and
``sub_type``), but the third level rarely changes the payload's fields, so
the table is keyed on the first two and consults ``sub_type`` only for
entries registered with one (currently ``notice.notify``).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from onebot_events.errors import UnresolvableEventType
from onebot_events.events import (
    Event,
    FriendAddNoticeEvent,
    FriendRecallNoticeEvent,
    FriendRequestEvent,
    GroupAdminNoticeEvent,
    GroupBanNoticeEvent,
    GroupDecreaseNoticeEvent,
    GroupIncreaseNoticeEvent,
    GroupMessageEvent,
    GroupRecallNoticeEvent,
    GroupRequestEvent,
    GroupUploadNoticeEvent,
    HeartbeatMetaEvent,
    HonorNoticeEvent,
    LifecycleMetaEvent,
    LuckyKingNoticeEvent,
    PokeNoticeEvent,
    PrivateMessageEvent,
)

# (type_name, sub_type or None) -> event class. Read-only after import.
EVENT_TYPES: Mapping[tuple[str, str | None], type[Event]] = {
    ("message.private", None): PrivateMessageEvent,
    ("message.group", None): GroupMessageEvent,
    ("notice.group_upload", None): GroupUploadNoticeEvent,
    ("notice.group_admin", None): GroupAdminNoticeEvent,
    ("notice.group_decrease", None): GroupDecreaseNoticeEvent,
    ("notice.group_increase", None): GroupIncreaseNoticeEvent,
    ("notice.group_ban", None): GroupBanNoticeEvent,
    ("notice.friend_add", None): FriendAddNoticeEvent,
    ("notice.group_recall", None): GroupRecallNoticeEvent,
    ("notice.friend_recall", None): FriendRecallNoticeEvent,
    ("notice.notify", "poke"): PokeNoticeEvent,
    ("notice.notify", "lucky_king"): LuckyKingNoticeEvent,
    ("notice.notify", "honor"): HonorNoticeEvent,
    ("request.friend", None): FriendRequestEvent,
    ("request.group", None): GroupRequestEvent,
    ("meta_event.lifecycle", None): LifecycleMetaEvent,
    ("meta_event.heartbeat", None): HeartbeatMetaEvent,
}


@dataclass(frozen=True)
class ResolvedType:
    """Outcome of resolution: which class to decode into and under what name."""

    event_class: type[Event]
    type_name: str  # first two levels, e.g. notice.notify
    event_name: str  # all present levels, e.g. notice.notify.poke


def _read_type_field(payload: Mapping[str, Any], key: str, type_name: str | None = None) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        raise UnresolvableEventType(
            f"missing or non-string '{key}' field", payload=payload, type_name=type_name
        )
    return value


def resolve_event_type(payload: Mapping[str, Any]) -> ResolvedType:
    """Pick the event class for *payload* and build its full event name.

    Raises:
        UnresolvableEventType: If the type fields match no known event.
    """
    if not isinstance(payload, Mapping):
        raise UnresolvableEventType(
            f"payload must be a JSON object, got {type(payload).__name__}", payload=payload
        )

    post_type = _read_type_field(payload, "post_type")
    detail_type = _read_type_field(payload, f"{post_type}_type", type_name=post_type)
    type_name = f"{post_type}.{detail_type}"

    sub_type: str | None = None
    event_name = type_name
    # null sub_type counts as absent, like any other null field
    raw_sub_type = payload.get("sub_type")
    if raw_sub_type is not None:
        if not isinstance(raw_sub_type, str):
            raise UnresolvableEventType(
                "non-string 'sub_type' field", payload=payload, type_name=type_name
            )
        sub_type = raw_sub_type
        event_name = f"{type_name}.{sub_type}"

    event_class = EVENT_TYPES.get((type_name, sub_type)) or EVENT_TYPES.get((type_name, None))
    if event_class is None:
        raise UnresolvableEventType(
            f"unknown event type: {event_name}", payload=payload, type_name=type_name
        )

    return ResolvedType(event_class=event_class, type_name=type_name, event_name=event_name)


def supported_event_names() -> list[str]:
    """Every name the table can resolve, three-level entries included."""
    return [
        f"{type_name}.{sub_type}" if sub_type else type_name
        for type_name, sub_type in EVENT_TYPES
    ]
