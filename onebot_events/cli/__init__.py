"""CLI module for onebot-events."""
