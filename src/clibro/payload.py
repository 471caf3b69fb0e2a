"""Payload parsing and rendering.

Outgoing data arrives as JSON text from the command line. Incoming payloads
carry addressing fields (`_to`, `_from`) added by the connection, which are
stripped before the payload is shown.
"""

import json
from collections.abc import Mapping
from typing import Any

from clibro.exceptions import PayloadParseError

ENVELOPE_FIELDS = ("_to", "_from")
WRAPPED_MARKER = "_wrapped"
WRAPPED_FIELDS = frozenset({"data", WRAPPED_MARKER, *ENVELOPE_FIELDS})
UNKNOWN_SENDER = "unknown"
NO_DATA = "no data"


def parse_payload(data: str | None) -> Any:
    """Parse emit data, or return None when no data was given.

    Raises:
        PayloadParseError: If `data` is not valid JSON, or nests too deeply to decode
    """
    if data is None:
        return None
    try:
        return json.loads(data)
    except (json.JSONDecodeError, RecursionError) as e:
        raise PayloadParseError(data) from e


def describe_data(data: str | None) -> str:
    """Describe outgoing data the way emit logs it."""
    return f"data {data}" if data is not None else NO_DATA


def wrap_payload(payload: Any, sender: str) -> dict[str, Any]:
    """Add the addressing envelope to an outgoing payload.

    Mappings get the envelope fields merged in. Other values, and mappings
    that already use the wrapped marker key, are moved under a `data` key and
    flagged, so `split_envelope` can restore them unchanged.
    """
    envelope = {"_to": None, "_from": sender}
    if payload is None:
        return envelope
    if isinstance(payload, Mapping) and WRAPPED_MARKER not in payload:
        return {**payload, **envelope}
    return {"data": payload, WRAPPED_MARKER: True, **envelope}


def is_wrapped(payload: Mapping) -> bool:
    """True for payloads built by `wrap_payload` around a non-mapping value."""
    return payload.keys() == WRAPPED_FIELDS and payload[WRAPPED_MARKER] is True


def split_envelope(payload: Any) -> tuple[str, Any]:
    """Separate the sender from a received payload.

    Returns (sender, body). Mapping payloads lose their envelope fields and
    wrapped values are unwrapped; anything else is passed through with an
    unknown sender.
    """
    if not isinstance(payload, Mapping):
        return UNKNOWN_SENDER, payload

    sender = payload.get("_from")
    sender = str(sender) if sender is not None else UNKNOWN_SENDER
    if is_wrapped(payload):
        payload = payload["data"]
        if not isinstance(payload, Mapping):
            return sender, payload

    body = {key: value for key, value in payload.items() if key not in ENVELOPE_FIELDS}
    return sender, body


def render_body(body: Any) -> str:
    """Render a received body as compact JSON, or 'no data' when empty.

    Raises:
        TypeError: If the body holds values JSON cannot represent
        ValueError: If the body is circular
        RecursionError: If the body nests too deeply to encode
    """
    if body is None or (isinstance(body, Mapping) and not body):
        return NO_DATA
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)
