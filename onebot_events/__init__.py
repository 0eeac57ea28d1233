"""
onebot-events - typed decoding of OneBot gateway events
"""

__version__ = "0.1.0"
__logo__ = "🔔"

from onebot_events.decoder import decode_event, decode_event_json
from onebot_events.enricher import enrich, is_event_to_me
from onebot_events.errors import EventDecodeError, MalformedEventPayload, UnresolvableEventType
from onebot_events.events import Event, EventName, MessageEvent, PostType
from onebot_events.message import Message, MessageSegment
from onebot_events.resolver import resolve_event_type
from onebot_events.stream import DecodeDiagnostic, decode_lines, iter_events

__all__ = [
    "DecodeDiagnostic",
    "Event",
    "EventDecodeError",
    "EventName",
    "MalformedEventPayload",
    "Message",
    "MessageEvent",
    "MessageSegment",
    "PostType",
    "UnresolvableEventType",
    "decode_event",
    "decode_event_json",
    "decode_lines",
    "enrich",
    "is_event_to_me",
    "iter_events",
    "resolve_event_type",
]
