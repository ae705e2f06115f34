import dataclasses

import pytest

from voipmedia.codec import DTMF_CODEC, OPUS, STANDARD_CODECS, ULAW_CODEC, Codec


def test_ulaw_format():
    assert ULAW_CODEC.format() == "a=rtpmap:0 PCMU/8000\r\n"


def test_dtmf_format_includes_fmtp():
    assert DTMF_CODEC.format() == (
        "a=rtpmap:101 telephone-event/8000\r\n" "a=fmtp:101 0-16\r\n"
    )


def test_param_is_appended():
    codec = Codec(pt=111, name="MP3", rate=44100, param="2")
    assert codec.format() == "a=rtpmap:111 MP3/44100/2\r\n"


def test_opus_has_channel_param():
    assert OPUS.format().startswith("a=rtpmap:111 opus/48000/2")


def test_standard_table_keys_match_payload_types():
    assert all(pt == codec.pt for pt, codec in STANDARD_CODECS.items())
    assert all(pt < 96 for pt in STANDARD_CODECS)


def test_standard_table_entries():
    assert STANDARD_CODECS[0] == ULAW_CODEC
    assert STANDARD_CODECS[18] == Codec(pt=18, name="G729", rate=8000)
    assert STANDARD_CODECS[34] == Codec(pt=34, name="H263", rate=90000)
    assert 2 not in STANDARD_CODECS


def test_codecs_are_immutable():
    codec = Codec(pt=0, name="PCMU", rate=8000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        codec.fmtp = "x"  # type: ignore[misc]
    assert codec.format() == "a=rtpmap:0 PCMU/8000\r\n"