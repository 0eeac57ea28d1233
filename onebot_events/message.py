"""Message content: OneBot message segments and CQ-code text."""

import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

CQ_CODE_PATTERN = re.compile(
    r"\[CQ:(?P<type>[a-zA-Z0-9_.-]+)(?P<params>(?:,[a-zA-Z0-9_.-]+=[^,\]]*)*),?\]"
)


def escape_cq(text: str, escape_comma: bool = False) -> str:
    """Escape CQ-code special characters."""
    text = text.replace("&", "&amp;").replace("[", "&#91;").replace("]", "&#93;")
    if escape_comma:
        text = text.replace(",", "&#44;")
    return text


def unescape_cq(text: str) -> str:
    """Reverse escape_cq (``&amp;`` last so escaped entities survive)."""
    return (
        text.replace("&#44;", ",")
        .replace("&#91;", "[")
        .replace("&#93;", "]")
        .replace("&amp;", "&")
    )


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class MessageSegment:
    """One segment of a message, e.g. ``text`` or ``at``.

    ``data`` is a read-only view; nested objects and arrays are frozen too.
    """

    type: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _freeze(self.data))

    def __hash__(self) -> int:
        # data values may be unhashable; equal segments still hash equal
        return hash((self.type, tuple(sorted(self.data))))

    @classmethod
    def text(cls, text: str) -> "MessageSegment":
        return cls("text", {"text": text})

    @classmethod
    def at(cls, user_id: int | str) -> "MessageSegment":
        return cls("at", {"qq": str(user_id)})

    @classmethod
    def reply(cls, message_id: int | str, user_id: int | str | None = None) -> "MessageSegment":
        data = {"id": str(message_id)}
        if user_id is not None:
            data["qq"] = str(user_id)
        return cls("reply", data)

    @classmethod
    def from_dict(cls, obj: Any) -> "MessageSegment":
        """Build a segment from its wire form ``{"type": ..., "data": {...}}``."""
        if isinstance(obj, MessageSegment):
            return obj
        if not isinstance(obj, dict):
            raise ValueError(f"message segment must be an object, got {type(obj).__name__}")
        seg_type = obj.get("type")
        if not isinstance(seg_type, str) or not seg_type:
            raise ValueError("message segment is missing a string 'type'")
        data = obj.get("data")
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"data of '{seg_type}' segment must be an object")
        return cls(seg_type, dict(data))

    def is_text(self) -> bool:
        return self.type == "text"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "data": _thaw(self.data)}

    def __str__(self) -> str:
        if self.is_text():
            return escape_cq(str(self.data.get("text", "")))
        params = "".join(
            f",{key}={escape_cq(str(value), escape_comma=True)}"
            for key, value in self.data.items()
            if value is not None
        )
        return f"[CQ:{self.type}{params}]"


class Message(Sequence[MessageSegment]):
    """Immutable sequence of message segments.

    Accepts either wire form used by OneBot implementations: a CQ-code
    string or an array of segment objects.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Iterable[MessageSegment] = ()):
        self._segments: tuple[MessageSegment, ...] = tuple(segments)

    @classmethod
    def parse(cls, value: Any) -> "Message":
        """Build a Message from a CQ string, segment list or single segment.

        Raises:
            ValueError: If the value has neither wire form.
        """
        if isinstance(value, Message):
            return value
        if isinstance(value, str):
            return cls.from_cq_string(value)
        if isinstance(value, MessageSegment):
            return cls((value,))
        if isinstance(value, dict):
            return cls((MessageSegment.from_dict(value),))
        if isinstance(value, (list, tuple)):
            return cls(MessageSegment.from_dict(item) for item in value)
        raise ValueError(f"message must be a string or a segment list, got {type(value).__name__}")

    @classmethod
    def from_cq_string(cls, text: str) -> "Message":
        segments: list[MessageSegment] = []
        pos = 0
        for match in CQ_CODE_PATTERN.finditer(text):
            if match.start() > pos:
                segments.append(MessageSegment.text(unescape_cq(text[pos:match.start()])))
            data: dict[str, Any] = {}
            for param in match.group("params").lstrip(",").split(","):
                if not param:
                    continue
                key, _, value = param.partition("=")
                data[key] = unescape_cq(value)
            segments.append(MessageSegment(match.group("type"), data))
            pos = match.end()
        if pos < len(text):
            segments.append(MessageSegment.text(unescape_cq(text[pos:])))
        return cls(segments)

    def extract_plain_text(self) -> str:
        """Concatenate the text segments, dropping everything else."""
        return "".join(str(seg.data.get("text", "")) for seg in self._segments if seg.is_text())

    def mentions(self, user_id: int | str) -> bool:
        """Whether an ``at`` segment targets *user_id*."""
        return self._has_segment_for("at", user_id)

    def replies_to(self, user_id: int | str) -> bool:
        """Whether a ``reply`` segment quotes a message sent by *user_id*."""
        return self._has_segment_for("reply", user_id)

    def _has_segment_for(self, seg_type: str, user_id: int | str) -> bool:
        target = str(user_id)
        return any(
            seg.type == seg_type and str(seg.data.get("qq")) == target
            for seg in self._segments
        )

    def to_segments(self) -> list[dict[str, Any]]:
        return [seg.to_dict() for seg in self._segments]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Message(self._segments[index])
        return self._segments[index]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[MessageSegment]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Message):
            return self._segments == other._segments
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._segments)

    def __str__(self) -> str:
        return "".join(str(seg) for seg in self._segments)

    def __repr__(self) -> str:
        return f"Message({list(self._segments)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda message: message.to_segments()
            ),
        )
