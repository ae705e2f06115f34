from voipmedia.codec import DTMF_CODEC, ULAW_CODEC, Codec
from voipmedia.media import Media


def test_audio_media_format():
    media = Media(proto="RTP/AVP", port=30126, codecs=[ULAW_CODEC, DTMF_CODEC])
    assert media.format("audio") == (
        "m=audio 30126 RTP/AVP 0 101\r\n"
        "a=rtpmap:0 PCMU/8000\r\n"
        "a=rtpmap:101 telephone-event/8000\r\n"
        "a=fmtp:101 0-16\r\n"
    )


def test_default_proto():
    media = Media(port=32898, codecs=[ULAW_CODEC])
    assert media.format("audio").startswith("m=audio 32898 RTP/AVP 0\r\n")


def test_custom_proto():
    media = Media(
        proto="TCP/IP",
        port=80,
        codecs=[Codec(pt=111, name="MP3", rate=44100, param="2")],
    )
    assert media.format("audio") == (
        "m=audio 80 TCP/IP 111\r\n" "a=rtpmap:111 MP3/44100/2\r\n"
    )


def test_video_kind_and_codec_order():
    codecs = [Codec(pt=34, name="H263", rate=90000), ULAW_CODEC]
    out = Media(port=32900, codecs=codecs).format("video")
    first, *rest = out.split("\r\n")
    assert first == "m=video 32900 RTP/AVP 34 0"
    assert rest[0].startswith("a=rtpmap:34 ")
    assert rest[1].startswith("a=rtpmap:0 ")


def test_codec_list_not_shared():
    a = Media()
    b = Media()
    a.codecs.append(ULAW_CODEC)
    assert b.codecs == []