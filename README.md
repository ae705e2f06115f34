# voipmedia

The media side of a VoIP phone call, in plain Python with no dependencies:

- **SDP** (`voipmedia.sdp`, `voipmedia.media`, `voipmedia.origin`, `voipmedia.codec`):
  parse and format Session Description Protocol payloads. When an SDP leaves out the
  `rtpmap` for a codec that IANA has standardised, the codec is filled in from
  `voipmedia.codec.STANDARD_CODECS`.
- **RTP** (`voipmedia.rtp`): encode and decode RTP headers (`Header`) and RFC 2833
  telephone-event headers (`EventHeader`).
- **Media sessions** (`voipmedia.session`): a UDP session that sends and receives
  160-sample (20 ms at 8 kHz) mu-law frames and sends DTMF digits.
- **DSP** (`voipmedia.g711`, `voipmedia.awgn`): G.711 mu-law companding, saturating
  frame mixing, and a deterministic white-noise generator for comfort noise.
- **DTMF** (`voipmedia.dtmf`): conversion between DTMF characters and telephone-event codes.

## Installation

```
pip install .
```

## Parsing and formatting SDP

```python
from voipmedia.sdp import parse

text = (
    "v=0\r\n"
    "o=- 3366701332 3366701332 IN IP4 1.2.3.4\r\n"
    "s=-\r\n"
    "c=IN IP4 1.2.3.4\r\n"
    "t=0 0\r\n"
    "m=audio 32898 RTP/AVP 0 101\r\n"
    "a=rtpmap:101 telephone-event/8000\r\n"
    "a=ptime:20\r\n"
)
sdp = parse(text)
print(sdp.addr, sdp.audio.port, [c.name for c in sdp.audio.codecs])
print(str(sdp))          # formatted SDP text, CRLF line endings
payload = sdp.data()     # the same text encoded as UTF-8
sdp.content_type         # "application/sdp"
```

A malformed SDP makes `parse` raise `voipmedia.sdp.SDPError` (a `ValueError`).
Unrecognised `a=` lines are kept in `sdp.attrs` and unknown fields in `sdp.other`,
both as `(name, value)` pairs, and are written back out when formatting.

To build an SDP for an outgoing call, use `SDP.new` with a `(host, port)` pair and codecs:

```python
from voipmedia.codec import ULAW_CODEC, DTMF_CODEC
from voipmedia.sdp import SDP

offer = SDP.new(("192.0.2.10", 16384), ULAW_CODEC, DTMF_CODEC)
```

## RTP headers

```python
from voipmedia.rtp import Header, EventHeader

raw = Header(pt=0, seq=666, ts=160, ssrc=1234).to_bytes()   # 12 bytes
header = Header.from_bytes(raw)
event = EventHeader.from_bytes(EventHeader(event=5, volume=6, duration=400).to_bytes())
```

`Header.from_bytes` raises `BadVersionError` for a version other than 2,
`ExtendedHeadersNotSupportedError` when the extension flag is set, and `RTPError`
when the data is too short.

## RTP sessions

```python
from voipmedia.awgn import AWGN
from voipmedia.session import Session

noise = AWGN(-45.0)
with Session("127.0.0.1") as receiver, Session("127.0.0.1") as sender:
    sender.peer = ("127.0.0.1", receiver.sock.getsockname()[1])
    sender.send([noise.get() for _ in range(160)])
    samples = receiver.recv_frame(timeout=1.0)   # 160 linear samples
    sender.send_dtmf("5")
```

A session binds to a random even port between 16384 and 32768 (or to an explicit
`"host:port"`, see `voipmedia.session.listen`). Outgoing packets are dropped silently
until `peer` is set. `recv_frame` skips packets that are not 160-sample mu-law RTP and
raises `TimeoutError` if nothing suitable arrives in time. `send_dtmf` raises
`ValueError` for a character that is not a DTMF digit.

## G.711, mixing, noise and DTMF

```python
from voipmedia.g711 import linear_to_ulaw, ulaw_to_linear, mix_saturate
from voipmedia.dtmf import char_to_dtmf, dtmf_to_char
from voipmedia.awgn import AWGN

linear_to_ulaw(0)                 # 255
ulaw_to_linear(255)               # 0
mix_saturate([32000], [1000])     # [32767]
char_to_dtmf("#")                 # 11
dtmf_to_char(10)                  # "*"

noise = AWGN(-50.0)               # iterable: next(noise) is the same as noise.get()
```

## What this package does not do

It carries no call signalling: there is no SIP message handling, dialog or
transport here, so setting up a call and learning the peer's media address is up
to the caller. It does not open microphones or speakers, and it has no RTCP.

## Running the tests

```
pip install .[test]
pytest
```