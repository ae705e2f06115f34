"""SDP codec descriptions and the IANA static payload type table."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Codec:
    """One codec offered on an SDP media line.

    ``pt`` is the 7-bit RTP payload type, ``rate`` the clock rate in hertz,
    ``param`` an optional extra (usually the channel count) and ``fmtp`` the
    format parameters, e.g. "0-16" for telephone events.
    """

    pt: int
    name: str
    rate: int
    param: str = ""
    fmtp: str = ""

    def format(self) -> str:
        """Render the ``a=rtpmap`` line and, if set, the ``a=fmtp`` line."""
        rtpmap = f"a=rtpmap:{self.pt} {self.name}/{self.rate}"
        if self.param:
            rtpmap += f"/{self.param}"
        lines = rtpmap + "\r\n"
        if self.fmtp:
            lines += f"a=fmtp:{self.pt} {self.fmtp}\r\n"
        return lines


ULAW_CODEC = Codec(pt=0, name="PCMU", rate=8000)
DTMF_CODEC = Codec(pt=101, name="telephone-event", rate=8000, fmtp="0-16")
OPUS = Codec(pt=111, name="opus", rate=48000, param="2")

# Payload types below 96 whose rtpmap may be omitted from an SDP.
STANDARD_CODECS: dict[int, Codec] = {
    codec.pt: codec
    for codec in (
        ULAW_CODEC,
        Codec(pt=3, name="GSM", rate=8000),
        Codec(pt=4, name="G723", rate=8000),
        Codec(pt=5, name="DVI4", rate=8000),
        Codec(pt=6, name="DVI4", rate=16000),
        Codec(pt=7, name="LPC", rate=8000),
        Codec(pt=8, name="PCMA", rate=8000),
        Codec(pt=9, name="G722", rate=8000),
        Codec(pt=10, name="L16", rate=44100, param="2"),
        Codec(pt=11, name="L16", rate=44100),
        Codec(pt=12, name="QCELP", rate=8000),
        Codec(pt=13, name="CN", rate=8000),
        Codec(pt=14, name="MPA", rate=90000),
        Codec(pt=15, name="G728", rate=8000),
        Codec(pt=16, name="DVI4", rate=11025),
        Codec(pt=17, name="DVI4", rate=22050),
        Codec(pt=18, name="G729", rate=8000),
        Codec(pt=25, name="CelB", rate=90000),
        Codec(pt=26, name="JPEG", rate=90000),
        Codec(pt=28, name="nv", rate=90000),
        Codec(pt=31, name="H261", rate=90000),
        Codec(pt=32, name="MPV", rate=90000),
        Codec(pt=33, name="MP2T", rate=90000),
        Codec(pt=34, name="H263", rate=90000),
    )
}