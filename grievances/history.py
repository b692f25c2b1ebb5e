"""
Append-only status history kept on each submission.

Every state-affecting write adds one event; events are never edited,
reordered or removed.
"""

from datetime import datetime

RESPONSE_DELIMITER = "\n\n--- Official Response ---\n"


def format_timestamp(at: datetime) -> str:
    """ISO-8601 with a "Z" suffix for UTC, the way the API renders datetime columns."""
    value = at.isoformat()
    if value.endswith("+00:00"):
        value = value[:-6] + "Z"
    return value


def make_event(at: datetime, status: str, response: str | None = None) -> dict:
    """Build a history event dict as stored in the JSON column."""
    return {
        "timestamp": format_timestamp(at),
        "status": status,
        "response": response or None,
    }


def append_event(history, at: datetime, status: str, response: str | None = None) -> list:
    """Return a new ledger with one event added at the end."""
    return [*(history or []), make_event(at, status, response)]


def append_response(description: str, response: str | None) -> str:
    """Add an official response block to a description. Earlier blocks are kept."""
    if not response:
        return description
    return f"{description or ''}{RESPONSE_DELIMITER}{response}"
