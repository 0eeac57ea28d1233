"""Event models."""

from onebot_events.events.base import DERIVED_FIELDS, Event, EventName, PostType
from onebot_events.events.message import (
    Anonymous,
    GroupMessageEvent,
    GroupSender,
    MessageEvent,
    PrivateMessageEvent,
    Sender,
)
from onebot_events.events.meta import (
    HeartbeatMetaEvent,
    HeartbeatStatus,
    LifecycleMetaEvent,
    MetaEvent,
)
from onebot_events.events.notice import (
    FriendAddNoticeEvent,
    FriendRecallNoticeEvent,
    GroupAdminNoticeEvent,
    GroupBanNoticeEvent,
    GroupDecreaseNoticeEvent,
    GroupFile,
    GroupIncreaseNoticeEvent,
    GroupRecallNoticeEvent,
    GroupUploadNoticeEvent,
    HonorNoticeEvent,
    LuckyKingNoticeEvent,
    NoticeEvent,
    PokeNoticeEvent,
)
from onebot_events.events.request import FriendRequestEvent, GroupRequestEvent, RequestEvent

__all__ = [
    "DERIVED_FIELDS",
    "Anonymous",
    "Event",
    "EventName",
    "FriendAddNoticeEvent",
    "FriendRecallNoticeEvent",
    "FriendRequestEvent",
    "GroupAdminNoticeEvent",
    "GroupBanNoticeEvent",
    "GroupDecreaseNoticeEvent",
    "GroupFile",
    "GroupIncreaseNoticeEvent",
    "GroupMessageEvent",
    "GroupRecallNoticeEvent",
    "GroupRequestEvent",
    "GroupSender",
    "GroupUploadNoticeEvent",
    "HeartbeatMetaEvent",
    "HeartbeatStatus",
    "HonorNoticeEvent",
    "LifecycleMetaEvent",
    "LuckyKingNoticeEvent",
    "MessageEvent",
    "MetaEvent",
    "NoticeEvent",
    "PokeNoticeEvent",
    "PostType",
    "PrivateMessageEvent",
    "RequestEvent",
    "Sender",
]
