"""Turn raw OneBot payloads into typed, enriched events."""

import json
from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from onebot_events.enricher import enrich
from onebot_events.errors import MalformedEventPayload
from onebot_events.events import DERIVED_FIELDS, Event
from onebot_events.resolver import ResolvedType, resolve_event_type


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def materialize(resolved: ResolvedType, payload: Mapping[str, Any]) -> Event:
    """Decode *payload* into the resolved class, without derived fields.

    Raises:
        MalformedEventPayload: If a field has an incompatible type.
    """
    data = {key: value for key, value in payload.items() if key not in DERIVED_FIELDS}
    try:
        return resolved.event_class.model_validate(data)
    except ValidationError as e:
        raise MalformedEventPayload(
            f"cannot decode {resolved.event_name} as {resolved.event_class.__name__}: "
            f"{_format_validation_error(e)}",
            payload=payload,
            type_name=resolved.type_name,
        ) from e
    except RecursionError as e:
        raise MalformedEventPayload(
            f"cannot decode {resolved.event_name}: payload is nested too deeply",
            payload=payload,
            type_name=resolved.type_name,
        ) from e


def decode_event(payload: Mapping[str, Any]) -> Event:
    """Decode one gateway payload into its event.

    Raises:
        UnresolvableEventType: If the type fields match no known event.
        MalformedEventPayload: If the payload does not fit that event's shape.
    """
    resolved = resolve_event_type(payload)
    event = enrich(materialize(resolved, payload), resolved.event_name)
    logger.debug(f"Decoded {resolved.event_name} as {resolved.event_class.__name__}")
    return event


def decode_event_json(raw: str | bytes) -> Event:
    """Parse JSON text and decode it with decode_event."""
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedEventPayload(f"invalid JSON: {e}", payload=raw) from e
    except RecursionError as e:
        raise MalformedEventPayload("invalid JSON: nested too deeply", payload=raw) from e
    if not isinstance(payload, dict):
        raise MalformedEventPayload(
            f"payload must be a JSON object, got {type(payload).__name__}", payload=payload
        )
    return decode_event(payload)
