"""Notice events: group membership changes, recalls, notify sub-events."""

from pydantic import Field, StrictInt, StrictStr

from onebot_events.events.base import Event, WireModel


class NoticeEvent(Event):
    notice_type: StrictStr = ""


class GroupFile(WireModel):
    id: StrictStr = ""
    name: StrictStr = ""
    size: StrictInt = 0  # bytes
    busid: StrictInt = 0  # OneBot v11 wire name
    bus_id: StrictStr = ""  # string form sent by some implementations


class GroupUploadNoticeEvent(NoticeEvent):
    """Group file uploaded."""

    group_id: StrictInt = 0
    user_id: StrictInt = 0  # uploader
    file: GroupFile = Field(default_factory=GroupFile)


class GroupAdminNoticeEvent(NoticeEvent):
    """Group admin set or unset."""

    sub_type: StrictStr = ""  # set, unset
    group_id: StrictInt = 0
    user_id: StrictInt = 0  # admin


class GroupIncreaseNoticeEvent(NoticeEvent):
    """Member joined a group."""

    sub_type: StrictStr = ""  # approve, invite
    group_id: StrictInt = 0
    user_id: StrictInt = 0  # new member
    operator_id: StrictInt = 0


class GroupDecreaseNoticeEvent(NoticeEvent):
    """Member left or was removed from a group."""

    sub_type: StrictStr = ""  # leave, kick, kick_me
    group_id: StrictInt = 0
    user_id: StrictInt = 0  # member who left
    operator_id: StrictInt = 0


class GroupBanNoticeEvent(NoticeEvent):
    """Member muted or unmuted."""

    sub_type: StrictStr = ""  # ban, lift_ban
    group_id: StrictInt = 0
    user_id: StrictInt = 0  # muted member
    operator_id: StrictInt = 0
    duration: StrictInt = 0  # seconds


class FriendAddNoticeEvent(NoticeEvent):
    user_id: StrictInt = 0  # new friend


class GroupRecallNoticeEvent(NoticeEvent):
    group_id: StrictInt = 0
    user_id: StrictInt = 0  # original sender
    operator_id: StrictInt = 0
    message_id: StrictInt = 0


class FriendRecallNoticeEvent(NoticeEvent):
    user_id: StrictInt = 0
    message_id: StrictInt = 0


class PokeNoticeEvent(NoticeEvent):
    sub_type: StrictStr = ""  # poke
    group_id: StrictInt = 0
    user_id: StrictInt = 0  # who poked
    target_id: StrictInt = 0  # who got poked


class LuckyKingNoticeEvent(NoticeEvent):
    """Red packet lucky king announced."""

    sub_type: StrictStr = ""  # lucky_king
    group_id: StrictInt = 0
    user_id: StrictInt = 0  # red packet sender
    target_id: StrictInt = 0  # lucky king


class HonorNoticeEvent(NoticeEvent):
    """Group honor changed."""

    sub_type: StrictStr = ""  # honor
    group_id: StrictInt = 0
    user_id: StrictInt = 0
    honor_type: StrictStr = ""  # talkative, performer, emotion
