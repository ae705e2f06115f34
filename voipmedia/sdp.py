"""Session Description Protocol payloads: parsing and formatting."""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass, field

from voipmedia.codec import STANDARD_CODECS, Codec
from voipmedia.media import Media
from voipmedia.origin import FALLBACK_ADDR, Origin, generate_origin_id, is_ipv6

log = logging.getLogger(__name__)

CONTENT_TYPE = "application/sdp"
MAX_LENGTH = 1450

DEFAULT_SESSION = "my people call themselves dark angels"
PARSED_SESSION = "pokémon"
DEFAULT_TIME = "0 0"

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"[0-9]+")


class SDPError(ValueError):
    """Raised when an SDP payload cannot be parsed."""


@dataclass
class SDP:
    """A session description as carried in a SIP message body.

    ``attrs`` holds ``a=`` lines that are not otherwise understood, as
    (name, value) pairs; ``other`` holds unknown ``x=`` lines likewise.
    """

    origin: Origin = field(default_factory=Origin)
    addr: str = ""
    audio: Media | None = None
    video: Media | None = None
    session: str = ""
    time: str = ""
    ptime: int = 0
    send_only: bool = False
    recv_only: bool = False
    attrs: list[tuple[str, str]] = field(default_factory=list)
    other: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def new(cls, addr: tuple[str, int], *args: Codec) -> "SDP":
        """Build an everyday audio SDP for ``addr`` (host, port) offering the given codecs."""
        host, port = addr[0], addr[1]
        origin_id = generate_origin_id()
        return cls(
            origin=Origin(id=origin_id, version=origin_id, addr=host),
            addr=host,
            audio=Media(proto="RTP/AVP", port=port, codecs=list(args)),
        )

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE

    def format(self) -> str:
        """Render the session description as text with CRLF line endings."""
        parts = ["v=0\r\n", self.origin.format()]
        parts.append(f"s={self.session or DEFAULT_SESSION}\r\n")
        net = "IP6" if is_ipv6(self.addr) else "IP4"
        parts.append(f"c=IN {net} {self.addr or FALLBACK_ADDR}\r\n")
        parts.append(f"t={self.time or DEFAULT_TIME}\r\n")
        if self.audio is not None:
            parts.append(self.audio.format("audio"))
        if self.video is not None:
            parts.append(self.video.format("video"))
        for name, value in self.attrs:
            parts.append(f"a={name}:{value}\r\n" if value else f"a={name}\r\n")
        if self.ptime > 0:
            parts.append(f"a=ptime:{self.ptime}\r\n")
        if self.send_only:
            parts.append("a=sendonly\r\n")
        elif self.recv_only:
            parts.append("a=recvonly\r\n")
        else:
            parts.append("a=sendrecv\r\n")
        for name, value in self.other:
            parts.append(f"{name}={value}\r\n")
        return "".join(parts)

    def data(self) -> bytes:
        """Return the formatted description encoded as UTF-8."""
        return self.format().encode("utf-8")

    def __str__(self) -> str:
        return self.format()


def _atoi(text: str) -> int:
    if not _SIGNED_INT.fullmatch(text):
        raise ValueError(text)
    return int(text)


def _parse_uint(text: str, limit: int) -> int:
    if not _UNSIGNED_INT.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if value > limit:
        raise ValueError(text)
    return value


def _parse_conn_line(line: str) -> str:
    toks = line[2:].split(" ")
    if len(toks) != 3:
        raise SDPError("invalid conn line")
    if toks[0] != "IN" or toks[1] not in ("IP4", "IP6"):
        raise SDPError("unsupported conn net type")
    addr = toks[2]
    if "/" in addr:
        raise SDPError("multicast address in c= line D:")
    return addr


def _parse_origin_line(line: str) -> Origin:
    toks = line[2:].split(" ")
    if len(toks) != 6:
        raise SDPError("invalid origin line")
    if toks[3] != "IN" or toks[4] not in ("IP4", "IP6"):
        raise SDPError("unsupported origin net type")
    if "/" in toks[5]:
        raise SDPError("multicast address in o= line D:")
    return Origin(user=toks[0], id=toks[1], version=toks[2], addr=toks[5])


def _parse_media_info(info: str) -> tuple[int, str, list[int]]:
    toks = info.split(" ")
    if len(toks) < 3:
        raise SDPError("invalid m= line")
    port_text = toks[0]
    slash = port_text.find("/")
    if slash > 0:
        port_text = port_text[:slash]
    try:
        port = _parse_uint(port_text, 0xFFFF)
    except ValueError:
        raise SDPError("invalid m= port") from None
    pts = []
    for tok in toks[2:]:
        try:
            pts.append(_parse_uint(tok, 0xFF))
        except ValueError:
            raise SDPError("invalid pt in m= line") from None
    return port, toks[1], pts


def _parse_rtpmap_info(pt: int, info: str) -> Codec:
    toks = info.split("/")
    if len(toks) < 2:
        raise SDPError("invalid rtpmap")
    try:
        rate = _atoi(toks[1])
    except ValueError:
        raise SDPError("invalid rtpmap rate") from None
    param = toks[2] if len(toks) >= 3 else ""
    return Codec(pt=pt, name=toks[0], rate=rate, param=param)


def _build_codecs(pts: list[int], rtpmaps: list[str], fmtps: list[str]) -> list[Codec]:
    codecs = []
    for pt in pts:
        prefix = f"{pt} "
        codec = Codec(pt=pt, name="", rate=0)
        rtpmap = next((r for r in rtpmaps if r.startswith(prefix)), None)
        if rtpmap is not None:
            codec = _parse_rtpmap_info(pt, rtpmap[len(prefix):])
        if not codec.name:
            if pt >= 96:
                raise SDPError("dynamic codec missing rtpmap")
            try:
                codec = STANDARD_CODECS[pt]
            except KeyError:
                raise SDPError(f"unknown iana codec id: {pt}") from None
        fmtp = next((f for f in fmtps if f.startswith(prefix)), None)
        if fmtp is not None:
            codec = dataclasses.replace(codec, fmtp=fmtp[len(prefix):])
        codecs.append(codec)
    return codecs


def _parse_media(info: str, rtpmaps: list[str], fmtps: list[str]) -> Media:
    port, proto, pts = _parse_media_info(info)
    return Media(proto=proto, port=port, codecs=_build_codecs(pts, rtpmaps, fmtps))


def _split_pair(line: str, sep: str, what: str) -> tuple[str, str] | None:
    n = line.find(sep)
    if n < 0:
        return (line, "")
    if n == 0:
        log.warning("Evil SDP %s: %s", what, line)
        return None
    return (line[:n], line[n + 1:])


def parse(s: str) -> SDP:
    """Parse SDP text into an :class:`SDP`; raises :class:`SDPError` if invalid."""
    result = SDP(session=PARSED_SESSION, time=DEFAULT_TIME)
    if not s.startswith("v=0\r\n"):
        raise SDPError("sdp must start with v=0\\r\\n")
    lines = s[5:].split("\r\n")
    if len(lines) < 2:
        raise SDPError("too few lines in sdp")

    audio_info = ""
    video_info = ""
    rtpmaps: list[str] = []
    fmtps: list[str] = []
    ok_origin = False
    ok_conn = False

    for line in lines:
        if line == "":
            continue
        if len(line) < 3 or line[1] != "=":
            log.warning("Bad line in SDP: %s", line)
            continue
        kind = line[0]
        if kind == "m":
            body = line[2:]
            if body.startswith("audio "):
                audio_info = body[6:]
            elif body.startswith("video "):
                video_info = body[6:]
            else:
                log.warning("Unsupported SDP media line: %s", body)
        elif kind == "s":
            result.session = line[2:]
        elif kind == "t":
            result.time = line[2:]
        elif kind == "c":
            if ok_conn:
                log.warning("Dropping extra c= line in sdp: %s", line)
                continue
            result.addr = _parse_conn_line(line)
            ok_conn = True
        elif kind == "o":
            result.origin = _parse_origin_line(line)
            ok_origin = True
        elif kind == "a":
            body = line[2:]
            if body.startswith("rtpmap:"):
                rtpmaps.append(body[7:])
            elif body.startswith("fmtp:"):
                fmtps.append(body[5:])
            elif body.startswith("ptime:"):
                text = body[6:]
                try:
                    ptime = _atoi(text)
                except ValueError:
                    ptime = 0
                if ptime > 0:
                    result.ptime = ptime
                else:
                    log.warning("Invalid SDP Ptime value %s", text)
            elif body == "sendrecv":
                pass
            elif body == "sendonly":
                result.send_only = True
            elif body == "recvonly":
                result.recv_only = True
            else:
                pair = _split_pair(body, ":", "attribute")
                if pair is not None:
                    result.attrs.append(pair)
        else:
            pair = _split_pair(line, "=", "field")
            if pair is not None:
                result.other.append(pair)

    if not ok_conn or not ok_origin:
        raise SDPError("sdp missing mandatory information")

    if audio_info:
        result.audio = _parse_media(audio_info, rtpmaps, fmtps)
    if video_info:
        result.video = _parse_media(video_info, rtpmaps, fmtps)
    if result.audio is None and result.video is None:
        raise SDPError("sdp has no audio or video information")
    return result