"""Tests for payload decoding."""

import json

import pytest
from pydantic import ValidationError

from onebot_events.decoder import decode_event, decode_event_json, materialize
from onebot_events.errors import EventDecodeError, MalformedEventPayload, UnresolvableEventType
from onebot_events.events import (
    FriendRequestEvent,
    GroupBanNoticeEvent,
    GroupMessageEvent,
    GroupRequestEvent,
    GroupUploadNoticeEvent,
    HeartbeatMetaEvent,
    HonorNoticeEvent,
    LifecycleMetaEvent,
    PokeNoticeEvent,
    PrivateMessageEvent,
    Sender,
)
from onebot_events.message import Message
from onebot_events.resolver import resolve_event_type, supported_event_names


class TestExamples:
    def test_private_message(self, private_payload):
        event = decode_event(private_payload)
        assert isinstance(event, PrivateMessageEvent)
        assert event.event_name == "message.private"
        assert event.to_me is True
        assert event.session_id == "2"
        assert event.time == 100
        assert event.self_id == 1
        assert event.message_id == 5
        assert event.extract_plain_text() == "hi"

    def test_poke_targeting_self(self):
        event = decode_event({
            "post_type": "notice",
            "notice_type": "notify",
            "sub_type": "poke",
            "group_id": 10,
            "user_id": 2,
            "target_id": 1,
            "self_id": 1,
        })
        assert isinstance(event, PokeNoticeEvent)
        assert event.event_name == "notice.notify.poke"
        assert event.to_me is True
        assert event.sub_type == "poke"


class TestFields:
    def test_group_message(self, group_payload):
        event = decode_event(group_payload)
        assert isinstance(event, GroupMessageEvent)
        assert event.event_name == "message.group.normal"
        assert event.group_id == 10
        assert event.sender.card == "Alice"
        assert event.sender.profile == Sender(user_id=2, nickname="alice", sex="female", age=20)
        assert event.anonymous is None

    def test_anonymous_sender(self, group_payload):
        group_payload["sub_type"] = "anonymous"
        group_payload["anonymous"] = {"id": 7, "name": "ghost", "flag": "ghost|7"}
        event = decode_event(group_payload)
        assert event.anonymous.flag == "ghost|7"

    def test_segment_array_message(self, private_payload):
        private_payload["message"] = [
            {"type": "text", "data": {"text": "hi "}},
            {"type": "image", "data": {"file": "a.jpg"}},
        ]
        event = decode_event(private_payload)
        assert event.extract_plain_text() == "hi "
        assert str(event.message) == "hi [CQ:image,file=a.jpg]"

    def test_missing_optional_fields_take_zero_values(self):
        event = decode_event({"post_type": "message", "message_type": "private"})
        assert event.user_id == 0
        assert event.raw_message == ""
        assert event.sender is None
        assert event.message == Message()

    def test_null_counts_as_missing(self, group_payload):
        group_payload["group_id"] = None
        assert decode_event(group_payload).group_id == 0

    def test_unknown_fields_ignored(self, private_payload):
        private_payload["temp_source"] = 3
        private_payload["extra"] = {"nested": True}
        event = decode_event(private_payload)
        assert not hasattr(event, "extra")

    def test_group_upload(self):
        event = decode_event({
            "post_type": "notice", "notice_type": "group_upload", "self_id": 1,
            "group_id": 10, "user_id": 2,
            "file": {"id": "f1", "name": "a.zip", "size": 2048, "busid": 102, "bus_id": "86"},
        })
        assert isinstance(event, GroupUploadNoticeEvent)
        assert event.file.name == "a.zip"
        assert event.file.size == 2048
        assert event.file.busid == 102
        assert event.file.bus_id == "86"

    def test_group_ban(self):
        event = decode_event({
            "post_type": "notice", "notice_type": "group_ban", "sub_type": "ban",
            "self_id": 1, "group_id": 10, "user_id": 2, "operator_id": 3, "duration": 600,
        })
        assert isinstance(event, GroupBanNoticeEvent)
        assert event.duration == 600
        assert event.event_name == "notice.group_ban.ban"

    def test_honor(self):
        event = decode_event({
            "post_type": "notice", "notice_type": "notify", "sub_type": "honor",
            "self_id": 1, "group_id": 10, "user_id": 2, "honor_type": "talkative",
        })
        assert isinstance(event, HonorNoticeEvent)
        assert event.honor_type == "talkative"

    def test_requests_carry_flag(self):
        friend = decode_event({
            "post_type": "request", "request_type": "friend", "self_id": 1,
            "user_id": 2, "comment": "hey", "flag": "f-123",
        })
        group = decode_event({
            "post_type": "request", "request_type": "group", "sub_type": "invite",
            "self_id": 1, "user_id": 2, "group_id": 10, "comment": "", "flag": "g-456",
        })
        assert isinstance(friend, FriendRequestEvent)
        assert friend.flag == "f-123"
        assert isinstance(group, GroupRequestEvent)
        assert group.flag == "g-456"
        assert group.event_name == "request.group.invite"

    def test_heartbeat(self):
        event = decode_event({
            "post_type": "meta_event", "meta_event_type": "heartbeat", "self_id": 1,
            "status": {"online": True, "good": True}, "interval": 5000,
        })
        assert isinstance(event, HeartbeatMetaEvent)
        assert event.status.online is True
        assert event.interval == 5000
        assert event.event_name == "meta_event.heartbeat"

    def test_lifecycle(self):
        event = decode_event({
            "post_type": "meta_event", "meta_event_type": "lifecycle",
            "sub_type": "connect", "self_id": 1,
        })
        assert isinstance(event, LifecycleMetaEvent)
        assert event.event_name == "meta_event.lifecycle.connect"


class TestDerivedFields:
    def test_wire_values_overwritten(self, group_payload):
        group_payload["event_name"] = "bogus"
        group_payload["to_me"] = True
        event = decode_event(group_payload)
        assert event.event_name == "message.group.normal"
        assert event.to_me is False

    def test_materialize_leaves_derived_fields_unset(self, private_payload):
        resolved = resolve_event_type(private_payload)
        event = materialize(resolved, {**private_payload, "event_name": "bogus"})
        assert event.event_name == ""
        assert event.to_me is False

    @pytest.mark.parametrize("name", supported_event_names())
    def test_event_name_first_segment_is_post_type(self, name, make_payload):
        event = decode_event(make_payload(name))
        assert event.event_name == name
        assert event.event_name.split(".")[0] == event.post_type


class TestImmutability:
    def test_decoding_is_idempotent(self, group_payload):
        assert decode_event(group_payload) == decode_event(group_payload)

    def test_payload_not_mutated(self, group_payload):
        before = json.dumps(group_payload, sort_keys=True)
        decode_event({**group_payload, "event_name": "x"})
        decode_event(group_payload)
        assert json.dumps(group_payload, sort_keys=True) == before

    def test_event_is_frozen(self, private_payload):
        event = decode_event(private_payload)
        with pytest.raises(ValidationError):
            event.to_me = False

    def test_event_is_hashable(self, group_payload):
        first = decode_event(group_payload)
        second = decode_event(group_payload)
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_message_segments_are_read_only(self, private_payload):
        event = decode_event(private_payload)
        with pytest.raises(TypeError):
            event.message[0].data["text"] = "changed"
        assert event.extract_plain_text() == "hi"


class TestMalformed:
    def test_string_where_int_expected(self, private_payload):
        private_payload["user_id"] = "2"
        with pytest.raises(MalformedEventPayload, match="user_id") as exc_info:
            decode_event(private_payload)
        assert exc_info.value.type_name == "message.private"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_bad_message_value(self, private_payload):
        private_payload["message"] = 42
        with pytest.raises(MalformedEventPayload, match="message"):
            decode_event(private_payload)

    def test_bad_nested_field(self):
        with pytest.raises(MalformedEventPayload, match="status.online"):
            decode_event({
                "post_type": "meta_event", "meta_event_type": "heartbeat",
                "status": {"online": "yes"},
            })

    def test_sender_not_an_object(self, group_payload):
        group_payload["sender"] = "alice"
        with pytest.raises(MalformedEventPayload, match="sender"):
            decode_event(group_payload)

    def test_both_errors_share_a_base(self, private_payload):
        private_payload["message_id"] = "five"
        with pytest.raises(EventDecodeError):
            decode_event(private_payload)
        with pytest.raises(EventDecodeError):
            decode_event({"post_type": "oracle", "oracle_type": "x"})


class TestDecodeJson:
    def test_decodes_text(self, private_payload):
        event = decode_event_json(json.dumps(private_payload))
        assert event == decode_event(private_payload)

    def test_decodes_bytes(self, private_payload):
        event = decode_event_json(json.dumps(private_payload).encode())
        assert event.event_name == "message.private"

    def test_invalid_json(self):
        with pytest.raises(MalformedEventPayload, match="invalid JSON"):
            decode_event_json("{not json")

    def test_non_object(self):
        with pytest.raises(MalformedEventPayload, match="list"):
            decode_event_json("[1, 2]")

    def test_unknown_type(self):
        with pytest.raises(UnresolvableEventType):
            decode_event_json('{"post_type": "notice", "notice_type": "notify", "sub_type": "unknown_sub"}')

    def test_deeply_nested_json(self):
        with pytest.raises(MalformedEventPayload, match="nested too deeply"):
            decode_event_json("[" * 100000 + "]" * 100000)
