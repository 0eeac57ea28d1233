"""Decode a stream of payloads, dropping the ones that fail.

A failed payload is reported as a diagnostic and skipped; the rest of the
stream is still decoded.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator

from loguru import logger

from onebot_events.decoder import decode_event, decode_event_json
from onebot_events.errors import EventDecodeError
from onebot_events.events import Event

DiagnosticCallback = Callable[["DecodeDiagnostic"], None]


@dataclass
class DecodeDiagnostic:
    """A payload that could not be decoded, and why."""

    payload: Any
    reason: str
    error: EventDecodeError
    index: int | None = None  # position in the stream (or line number)

    @property
    def kind(self) -> str:
        return type(self.error).__name__

    def summary(self) -> str:
        where = f" #{self.index}" if self.index is not None else ""
        type_name = f" ({self.error.type_name})" if self.error.type_name else ""
        return f"{self.kind}{where}{type_name}: {self.reason}"


def _payload_preview(payload: Any) -> str:
    if isinstance(payload, (str, bytes)):
        text = payload if isinstance(payload, str) else payload.decode("utf-8", "replace")
    else:
        try:
            text = json.dumps(payload, ensure_ascii=False, default=str)
        except (TypeError, ValueError, RecursionError):
            text = repr(payload)
    return text if len(text) <= 200 else text[:200] + "..."


def _report(diagnostic: DecodeDiagnostic, on_error: DiagnosticCallback | None) -> None:
    logger.warning(
        f"Dropping event {diagnostic.summary()} | payload: {_payload_preview(diagnostic.payload)}"
    )
    if on_error:
        on_error(diagnostic)


def iter_events(
    payloads: Iterable[Any],
    on_error: DiagnosticCallback | None = None,
) -> Iterator[Event]:
    """Yield the decoded event for every payload that decodes.

    Args:
        payloads: Parsed JSON objects, or raw JSON strings/bytes.
        on_error: Called with a DecodeDiagnostic for each dropped payload.
    """
    for index, payload in enumerate(payloads):
        try:
            if isinstance(payload, (str, bytes)):
                yield decode_event_json(payload)
            else:
                yield decode_event(payload)
        except EventDecodeError as e:
            _report(
                DecodeDiagnostic(payload=payload, reason=e.reason, error=e, index=index),
                on_error,
            )


def decode_lines(
    lines: Iterable[str],
    on_error: DiagnosticCallback | None = None,
) -> Iterator[Event]:
    """Decode JSON-lines text; blank lines are skipped, indexes are line numbers."""
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield decode_event_json(line)
        except EventDecodeError as e:
            _report(
                DecodeDiagnostic(payload=line, reason=e.reason, error=e, index=lineno),
                on_error,
            )
