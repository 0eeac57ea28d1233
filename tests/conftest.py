"""Shared payload builders."""

import pytest


def payload_for(event_name: str, **fields) -> dict:
    """Minimal payload whose type fields spell *event_name*."""
    parts = event_name.split(".")
    post_type = parts[0]
    payload = {"post_type": post_type, f"{post_type}_type": parts[1], "time": 100, "self_id": 1}
    if len(parts) > 2:
        payload["sub_type"] = parts[2]
    payload.update(fields)
    return payload


@pytest.fixture
def make_payload():
    return payload_for


@pytest.fixture
def private_payload():
    return {
        "post_type": "message",
        "message_type": "private",
        "time": 100,
        "self_id": 1,
        "user_id": 2,
        "message_id": 5,
        "message": "hi",
    }


@pytest.fixture
def group_payload():
    return {
        "post_type": "message",
        "message_type": "group",
        "sub_type": "normal",
        "time": 100,
        "self_id": 1,
        "user_id": 2,
        "group_id": 10,
        "message_id": 6,
        "message": "hello everyone",
        "raw_message": "hello everyone",
        "font": 0,
        "sender": {
            "user_id": 2,
            "nickname": "alice",
            "sex": "female",
            "age": 20,
            "card": "Alice",
            "area": "",
            "level": "3",
            "role": "admin",
            "title": "",
        },
        "anonymous": None,
    }
