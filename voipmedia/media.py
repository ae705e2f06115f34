"""SDP media description (m= line plus its codec attributes)."""

from __future__ import annotations

from dataclasses import dataclass, field

from voipmedia.codec import Codec

DEFAULT_PROTO = "RTP/AVP"


@dataclass
class Media:
    """Transport, port and codecs for one kind of media (audio or video)."""

    proto: str = ""
    port: int = 0
    codecs: list[Codec] = field(default_factory=list)

    def format(self, kind: str) -> str:
        """Render the ``m=`` line for ``kind`` followed by each codec's lines."""
        proto = self.proto or DEFAULT_PROTO
        pts = "".join(f" {codec.pt}" for codec in self.codecs)
        head = f"m={kind} {self.port} {proto}{pts}\r\n"
        return head + "".join(codec.format() for codec in self.codecs)