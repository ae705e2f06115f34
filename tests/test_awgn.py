import itertools

from voipmedia.awgn import AWGN, DEFAULT_SEED


def test_known_samples():
    awgn = AWGN(-50.0)
    assert [awgn.get() for _ in range(5)] == [64, -28, 1, 34, -73]


def test_iteration_matches_get():
    by_get = AWGN(-45.0)
    expected = [by_get.get() for _ in range(50)]
    assert list(itertools.islice(AWGN(-45.0), 50)) == expected


def test_dbm0_with_default_seed_matches_constructor():
    a = AWGN(-50.0)
    b = AWGN.dbm0(DEFAULT_SEED, -50.0)
    assert [a.get() for _ in range(20)] == [b.get() for _ in range(20)]


def test_negative_seed_same_as_positive():
    a = AWGN.dbov(1234, -30.0)
    b = AWGN.dbov(-1234, -30.0)
    assert [a.get() for _ in range(20)] == [b.get() for _ in range(20)]


def test_samples_within_int16_range():
    samples = list(itertools.islice(AWGN(-10.0), 1000))
    assert all(-32768 <= s <= 32767 for s in samples)


def test_very_loud_noise_saturates():
    samples = list(itertools.islice(AWGN.dbov(42, 60.0), 200))
    assert set(samples) <= {32767, -32768}
    assert 32767 in samples and -32768 in samples


def test_louder_noise_has_more_energy():
    quiet = list(itertools.islice(AWGN(-50.0), 2000))
    loud = list(itertools.islice(AWGN(-20.0), 2000))
    assert sum(s * s for s in loud) > sum(s * s for s in quiet)