"""Text helpers for single-line log output."""

PREVIEW_HEAD = 50
PREVIEW_TAIL = 50


def escape_newlines(text: str) -> str:
    """Render embedded newlines as the two-character sequence ``\\n``."""
    return text.replace("\n", "\\n")


def preview_text(text: str, head: int = PREVIEW_HEAD, tail: int = PREVIEW_TAIL) -> str:
    """Bound *text* to a single-line preview.

    Text longer than ``head + tail`` characters keeps its first *head* and
    last *tail* characters around an elision marker with the omitted count.
    Shorter text is only newline-escaped.
    """
    if head < 0 or tail < 0:
        head, tail = max(head, 0), max(tail, 0)
    limit = head + tail
    if len(text) > limit:
        omitted = len(text) - limit
        end = text[len(text) - tail:] if tail else ""
        text = f"{text[:head]}...({omitted} chars omitted)...{end}"
    return escape_newlines(text)
