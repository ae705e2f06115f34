"""RTP mu-law media session over UDP (20 ms frames, no RTCP)."""

from __future__ import annotations

import errno
import logging
import random
import socket
import time
from collections.abc import Sequence

from voipmedia.codec import DTMF_CODEC, ULAW_CODEC
from voipmedia.dtmf import char_to_dtmf
from voipmedia.g711 import linear_to_ulaw, ulaw_to_linear
from voipmedia.rtp import HEADER_SIZE, EventHeader, Header, RTPError

log = logging.getLogger(__name__)

FRAME_SAMPLES = 160
BIND_MAX_ATTEMPTS = 10
BIND_PORT_MIN = 16384
BIND_PORT_MAX = 32768
DTMF_VOLUME = 6
DTMF_DURATION = 400
DTMF_INTERVAL = 100
_RECV_BUFFER = 2048


def _split_host_port(addr: str) -> tuple[str, int]:
    if addr.startswith("["):
        host, _, rest = addr[1:].partition("]")
        port = rest.removeprefix(":")
    else:
        host, _, port = addr.rpartition(":")
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"invalid address: {addr!r}") from None


def _bind(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_DGRAM)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def listen(host: str) -> socket.socket:
    """Bind a UDP socket for RTP.

    ``host`` may be "host:port"; otherwise a random even port between
    16384 and 32768 is chosen, retrying when the port is taken.
    """
    if ":" in host:
        return _bind(*_split_host_port(host))
    last_error: OSError | None = None
    for _ in range(BIND_MAX_ATTEMPTS):
        port = random.randint(BIND_PORT_MIN, BIND_PORT_MAX)
        port -= port % 2
        try:
            return _bind(host, port)
        except OSError as exc:
            if exc.errno != errno.EADDRINUSE:
                raise
            log.info("RTP listen congestion: %s:%d", host, port)
            last_error = exc
    assert last_error is not None
    raise last_error


class Session:
    """Sends and receives 160-sample linear frames encoded as mu-law RTP.

    ``peer`` is the remote (host, port); while it is None outgoing packets
    are silently dropped. ``header`` is mutated by every transmission.
    """

    def __init__(self, host: str = "") -> None:
        self.sock: socket.socket | None = listen(host)
        self.peer: tuple[str, int] | None = None
        self.header = Header(seq=666, ts=0, ssrc=random.getrandbits(32))

    def _ready(self) -> bool:
        return self.sock is not None and self.peer is not None

    def _advance(self, samples: int) -> None:
        self.header.ts = (self.header.ts + samples) & 0xFFFFFFFF
        self.header.seq = (self.header.seq + 1) & 0xFFFF

    def send(self, frame: Sequence[int]) -> None:
        """Encode a frame of 160 linear samples as mu-law and send it."""
        if len(frame) != FRAME_SAMPLES:
            raise ValueError(f"frame must hold {FRAME_SAMPLES} samples")
        if not self._ready():
            return
        self.header.pt = ULAW_CODEC.pt
        packet = self.header.to_bytes() + bytes(linear_to_ulaw(s) for s in frame)
        self._advance(FRAME_SAMPLES)
        self.sock.sendto(packet, self.peer)

    def send_raw(self, pt: int, data: bytes, samps: int) -> None:
        """Send an already encoded payload with payload type ``pt``."""
        if not self._ready():
            return
        self.header.pt = pt
        packet = self.header.to_bytes() + bytes(data)
        self._advance(samps)
        self.sock.sendto(packet, self.peer)

    def send_dtmf(self, digit: str) -> None:
        """Send a DTMF digit as a burst of RFC 2833 telephone events."""
        try:
            code = char_to_dtmf(digit)
        except ValueError:
            raise ValueError(f"Invalid DTMF digit: {digit}") from None
        if not self._ready():
            return
        self.header.pt = DTMF_CODEC.pt
        self.header.mark = True
        duration = 1
        while True:
            event = EventHeader(event=code, volume=DTMF_VOLUME, duration=duration)
            self.sock.sendto(self.header.to_bytes() + event.to_bytes(), self.peer)
            self.header.seq = (self.header.seq + 1) & 0xFFFF
            self.header.mark = False
            duration += DTMF_INTERVAL
            if duration >= DTMF_DURATION:
                break
        end = EventHeader(event=code, e=True, volume=DTMF_VOLUME, duration=DTMF_DURATION)
        for _ in range(3):
            self.sock.sendto(self.header.to_bytes() + end.to_bytes(), self.peer)
            self.header.seq = (self.header.seq + 1) & 0xFFFF

    def recv_frame(self, timeout: float | None = None) -> list[int]:
        """Wait for the next mu-law frame and return it as linear samples.

        Packets that are not valid 160-sample mu-law RTP are skipped.
        Raises TimeoutError if nothing suitable arrives within ``timeout``.
        """
        if self.sock is None:
            raise OSError("session is closed")
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if deadline is None:
                self.sock.settimeout(None)
            else:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("no RTP frame received")
                self.sock.settimeout(remaining)
            data, _ = self.sock.recvfrom(_RECV_BUFFER)
            try:
                header = Header.from_bytes(data)
            except RTPError:
                continue
            if header.pt != ULAW_CODEC.pt or len(data) != HEADER_SIZE + FRAME_SAMPLES:
                continue
            return [ulaw_to_linear(b) for b in data[HEADER_SIZE:]]

    def close(self) -> None:
        """Close the socket; further sends are dropped."""
        if self.sock is not None:
            self.sock.close()
            self.sock = None

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()