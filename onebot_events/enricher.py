"""Fill in the fields no single event class can derive on its own."""

from typing import TypeVar

from onebot_events.events import (
    Event,
    FriendAddNoticeEvent,
    GroupDecreaseNoticeEvent,
    GroupMessageEvent,
    PokeNoticeEvent,
    PrivateMessageEvent,
    RequestEvent,
)

E = TypeVar("E", bound=Event)


def is_event_to_me(event: Event) -> bool:
    """Whether the event concerns the bot itself.

    True for private messages, group messages that @ or reply to the bot,
    the bot being removed from a group, the bot being poked, new friends,
    and every request.
    """
    if isinstance(event, PrivateMessageEvent):
        return True
    if isinstance(event, (FriendAddNoticeEvent, RequestEvent)):
        return True
    if not event.self_id:
        # 0 means the bot id is unknown
        return False
    if isinstance(event, GroupMessageEvent):
        return event.message.mentions(event.self_id) or event.message.replies_to(event.self_id)
    if isinstance(event, GroupDecreaseNoticeEvent):
        return event.user_id == event.self_id
    if isinstance(event, PokeNoticeEvent):
        return event.target_id == event.self_id
    return False


def enrich(event: E, event_name: str) -> E:
    """Return a copy of *event* with ``event_name`` and ``to_me`` set."""
    return event.model_copy(update={"event_name": event_name, "to_me": is_event_to_me(event)})
