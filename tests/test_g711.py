import pytest

from voipmedia.g711 import linear_to_ulaw, mix_saturate, ulaw_to_linear


def test_linear_to_ulaw():
    assert linear_to_ulaw(0) == 255
    assert linear_to_ulaw(-100) == 114


@pytest.mark.parametrize(
    "code, linear",
    [
        (0, -32124),
        (16, -15996),
        (114, -104),
        (126, -8),
        (127, 0),
        (128, 32124),
        (255, 0),
    ],
)
def test_ulaw_to_linear_pinned_values(code, linear):
    assert ulaw_to_linear(code) == linear


@pytest.mark.parametrize("code", range(128))
def test_ulaw_to_linear_is_sign_symmetric(code):
    assert ulaw_to_linear(code + 128) == -ulaw_to_linear(code)


def test_ulaw_to_linear_is_monotonic_per_half():
    negative = [ulaw_to_linear(code) for code in range(128)]
    positive = [ulaw_to_linear(code) for code in range(128, 256)]
    assert negative == sorted(negative)
    assert positive == sorted(positive, reverse=True)


@pytest.mark.parametrize("code", range(256))
def test_linear_to_ulaw_to_linear(code):
    linear = ulaw_to_linear(code)
    assert ulaw_to_linear(linear_to_ulaw(linear)) == linear


def test_extremes_stay_in_range():
    for sample in (-32768, 32767):
        assert 0 <= linear_to_ulaw(sample) <= 255


def test_mix_saturate():
    x = list(range(160))
    y = [666] * 160
    mixed = mix_saturate(x, y)
    assert mixed == [n + 666 for n in range(160)]
    assert y == [666] * 160
    assert x == list(range(160))


def test_mix_saturate_clamps():
    assert mix_saturate([32000, -32000], [32000, -32000]) == [32767, -32768]


def test_mix_saturate_length_mismatch():
    with pytest.raises(ValueError):
        mix_saturate([1, 2], [1])