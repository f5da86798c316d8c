"""
Decoding of `go test -json` log lines.
"""

import json
import re
from datetime import datetime
from typing import Any, Optional

from .exceptions import RecordDecodeError
from .models import RawEvent

# Lower-cased JSON key -> RawEvent attribute
STRING_FIELDS = {
    "action": "action",
    "package": "package",
    "test": "test",
    "output": "output",
}

RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$",
    re.ASCII,
)


class _Fields(list):
    """Key/value pairs of a JSON object in document order."""


def _reject_constant(name: str) -> Any:
    raise RecordDecodeError(f"malformed JSON: invalid literal {name}")


def _parse_time(value: Any) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp; None stands for the zero time."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise RecordDecodeError(f"Time must be a string, got {type(value).__name__}")
    if not RFC3339_PATTERN.fullmatch(value):
        raise RecordDecodeError(f"Time is not an RFC 3339 timestamp: '{value}'")
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise RecordDecodeError(f"Time is not an RFC 3339 timestamp: '{value}'")


def _parse_elapsed(value: Any) -> float:
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RecordDecodeError(f"Elapsed must be a number, got {type(value).__name__}")
    return float(value)


def parse_line(line: str) -> RawEvent:
    """
    Decode one log line into a RawEvent.

    Keys match case-insensitively and, when a field appears more than once,
    the last occurrence wins. Unknown fields are ignored, and missing or
    null fields keep their zero value.

    Args:
        line: A single line of JSON text

    Returns:
        RawEvent with the decoded fields

    Raises:
        RecordDecodeError: If the line is not a JSON object of the expected shape
    """
    try:
        data = json.loads(line, object_pairs_hook=_Fields, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise RecordDecodeError(f"malformed JSON: {e}")

    if data is None:
        return RawEvent()
    if not isinstance(data, _Fields):
        raise RecordDecodeError(f"expected a JSON object, got {type(data).__name__}")

    event = RawEvent()
    for key, value in data:
        # null leaves the field unchanged
        if value is None:
            continue
        name = key.lower()
        if name in STRING_FIELDS:
            if not isinstance(value, str):
                raise RecordDecodeError(f"{key} must be a string, got {type(value).__name__}")
            setattr(event, STRING_FIELDS[name], value)
        elif name == "time":
            event.time = _parse_time(value)
        elif name == "elapsed":
            event.elapsed = _parse_elapsed(value)
    return event
