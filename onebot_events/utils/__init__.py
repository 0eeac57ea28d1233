"""Utility helpers."""

from onebot_events.utils.text import escape_newlines, preview_text

__all__ = ["escape_newlines", "preview_text"]
