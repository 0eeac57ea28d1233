"""Message events: private and group chat messages."""

from typing import Any

from pydantic import Field, StrictInt, StrictStr, model_validator

from onebot_events.events.base import Event, WireModel
from onebot_events.message import Message
from onebot_events.utils.text import preview_text


class Sender(WireModel):
    """Sender profile attached to a message."""

    user_id: StrictInt = 0
    nickname: StrictStr = ""
    sex: StrictStr = ""  # male, female, unknown
    age: StrictInt = 0


class GroupSender(WireModel):
    """Sender profile inside a group: the base profile plus member info.

    The wire object is flat; the base profile keys are collected into
    ``profile`` on decode.
    """

    profile: Sender = Field(default_factory=Sender)
    card: StrictStr = ""  # group card / remark
    area: StrictStr = ""
    level: StrictStr = ""
    role: StrictStr = ""  # owner, admin, member
    title: StrictStr = ""  # special title

    @model_validator(mode="before")
    @classmethod
    def _collect_profile(cls, data: Any) -> Any:
        if isinstance(data, dict) and "profile" not in data:
            profile_keys = Sender.model_fields.keys()
            data = {key: value for key, value in data.items() if key not in profile_keys} | {
                "profile": {key: value for key, value in data.items() if key in profile_keys}
            }
        return data

    @property
    def user_id(self) -> int:
        return self.profile.user_id

    @property
    def nickname(self) -> str:
        return self.profile.nickname

    @property
    def sex(self) -> str:
        return self.profile.sex

    @property
    def age(self) -> int:
        return self.profile.age


class Anonymous(WireModel):
    """Anonymous group sender."""

    id: StrictInt = 0
    name: StrictStr = ""
    flag: StrictStr = ""  # needed by the ban-anonymous API call


class MessageEvent(Event):
    """Base for message events."""

    message_type: StrictStr = ""  # private, group
    sub_type: StrictStr = ""  # friend, group, other, normal, anonymous, notice
    message_id: StrictInt = 0
    user_id: StrictInt = 0
    message: Message = Field(default_factory=Message)
    raw_message: StrictStr = ""
    font: StrictInt = 0

    @property
    def session_id(self) -> str:
        """Key for per-conversation state."""
        return str(self.user_id)

    def extract_plain_text(self) -> str:
        return self.message.extract_plain_text()


class PrivateMessageEvent(MessageEvent):
    sender: Sender | None = None

    @property
    def description(self) -> str:
        return (
            f"[Private message](#{self.message_id} from {self.user_id}): "
            f"{preview_text(str(self.message))}"
        )


class GroupMessageEvent(MessageEvent):
    group_id: StrictInt = 0
    sender: GroupSender | None = None
    anonymous: Anonymous | None = None

    @property
    def session_id(self) -> str:
        """Same user in different groups gets different sessions."""
        return f"{self.user_id}@{self.group_id}"

    @property
    def description(self) -> str:
        return (
            f"[Group message](#{self.message_id} from {self.user_id}@group {self.group_id}): "
            f"{preview_text(str(self.message))}"
        )
