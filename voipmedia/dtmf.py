"""RFC 2833 telephone event codes for DTMF digits."""

from __future__ import annotations

_EVENT_CHARS = "0123456789*#ABCD!"

_CHAR_EVENTS = {ch: event for event, ch in enumerate(_EVENT_CHARS)}
_CHAR_EVENTS.update({ch.lower(): event for ch, event in _CHAR_EVENTS.items() if ch.isalpha()})


def dtmf_to_char(event: int) -> str:
    """Turn a telephone event number into its DTMF character."""
    if 0 <= event < len(_EVENT_CHARS):
        return _EVENT_CHARS[event]
    raise ValueError(f"bad tel event: {event}")


def char_to_dtmf(ch: str) -> int:
    """Turn a DTMF character into its telephone event number."""
    try:
        return _CHAR_EVENTS[ch]
    except KeyError:
        raise ValueError(f"bad dtmf char:{ch}") from None