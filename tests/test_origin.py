from voipmedia.origin import FALLBACK_ADDR, Origin, generate_origin_id, is_ipv6


def test_full_origin():
    origin = Origin(user="root", id="31589", version="31589", addr="10.0.0.38")
    assert origin.format() == "o=root 31589 31589 IN IP4 10.0.0.38\r\n"


def test_ipv6_origin():
    origin = Origin(user="-", id="3366701332", version="3366701332", addr="dead:beef::666")
    assert origin.format() == "o=- 3366701332 3366701332 IN IP6 dead:beef::666\r\n"


def test_blank_user_and_version():
    origin = Origin(id="3366701332", addr="1.2.3.4")
    assert origin.format() == "o=- 3366701332 3366701332 IN IP4 1.2.3.4\r\n"


def test_blank_id_is_generated_and_reused_for_version():
    line = Origin(addr="1.2.3.4").format()
    toks = line.rstrip("\r\n").split(" ")
    assert toks[1].isdigit()
    assert toks[1] == toks[2]


def test_blank_addr_uses_fallback():
    line = Origin(id="1").format()
    assert line.endswith(f"IN IP4 {FALLBACK_ADDR}\r\n")


def test_generate_origin_id_is_decimal_and_varies():
    ids = {generate_origin_id() for _ in range(20)}
    assert all(i.isdigit() for i in ids)
    assert len(ids) > 1


def test_is_ipv6():
    assert is_ipv6("dead:beef::666")
    assert is_ipv6("::1")
    assert not is_ipv6("10.0.0.38")
    assert not is_ipv6("")
    assert not is_ipv6("example.com")