import pytest

from voipmedia.dtmf import char_to_dtmf, dtmf_to_char


@pytest.mark.parametrize(
    "ch, event",
    [("0", 0), ("9", 9), ("*", 10), ("#", 11), ("A", 12), ("D", 15), ("!", 16)],
)
def test_known_mappings(ch, event):
    assert char_to_dtmf(ch) == event
    assert dtmf_to_char(event) == ch


def test_lowercase_letters_accepted():
    for ch in "abcd":
        assert char_to_dtmf(ch) == char_to_dtmf(ch.upper())


@pytest.mark.parametrize("event", range(17))
def test_round_trip(event):
    assert char_to_dtmf(dtmf_to_char(event)) == event


@pytest.mark.parametrize("event", [17, 255, -1])
def test_bad_event(event):
    with pytest.raises(ValueError, match="bad tel event"):
        dtmf_to_char(event)


@pytest.mark.parametrize("ch", ["x", "E", " ", ""])
def test_bad_char(ch):
    with pytest.raises(ValueError, match="bad dtmf char"):
        char_to_dtmf(ch)