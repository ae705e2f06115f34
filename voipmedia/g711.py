"""G.711 mu-law companding and saturating mixing of 16-bit PCM."""

from __future__ import annotations

from collections.abc import Sequence

_ULAW_BIAS = 0x84
_INT16_MAX = 32767
_INT16_MIN = -32768


def linear_to_ulaw(linear: int) -> int:
    """Compress a signed 16-bit PCM sample into a mu-law byte."""
    if linear >= 0:
        linear = _ULAW_BIAS + linear
        mask = 0xFF
    else:
        linear = _ULAW_BIAS - linear
        mask = 0x7F
    seg = (linear | 0xFF).bit_length() - 1 - 7
    if seg >= 8:
        return 0x7F ^ mask
    return ((seg << 4) | ((linear >> (seg + 3)) & 0x0F)) ^ mask


def ulaw_to_linear(ulaw: int) -> int:
    """Expand a mu-law byte back into a signed 16-bit PCM sample."""
    ulaw = ~ulaw & 0xFF
    t = (((ulaw & 0x0F) << 3) + _ULAW_BIAS) << ((ulaw & 0x70) >> 4)
    if ulaw & 0x80:
        return _ULAW_BIAS - t
    return t - _ULAW_BIAS


def mix_saturate(dst: Sequence[int], src: Sequence[int]) -> list[int]:
    """Add two frames sample by sample, clamping to the int16 range."""
    if len(dst) != len(src):
        raise ValueError("frames must have the same length")
    return [max(_INT16_MIN, min(_INT16_MAX, a + b)) for a, b in zip(dst, src)]