import secrets

import pytest

from crc_tokens.codec import ALPHABET, base62_decode, base62_encode, generate_payload
from crc_tokens.errors import Base62ParseError, RandomSourceError


def test_base62_known_vector() -> None:
    assert base62_encode(b"This is 1 test string") == "NJaT6B7Ip2oLiysprlOr8RVjFRr1"
    assert base62_decode("NJaT6B7Ip2oLiysprlOr8RVjFRr1") == b"This is 1 test string"


def test_base62_digit_order() -> None:
    assert base62_encode(b"\x01") == "1"
    assert base62_encode(b"\x0a") == "a"
    assert base62_encode(b"\x24") == "A"
    assert base62_encode(b"\x3e") == "10"
    assert base62_decode("Z") == b"\x3d"


def test_base62_is_case_sensitive() -> None:
    assert base62_decode("a") == b"\x0a"
    assert base62_decode("A") == b"\x24"
    assert base62_encode(b"Hello") != base62_encode(b"Hello").swapcase()


def test_base62_zero_value() -> None:
    assert base62_encode(b"") == "0"
    assert base62_encode(b"\x00\x00") == "0"
    assert base62_decode("0") == b""


def test_base62_drops_leading_zero_bytes() -> None:
    encoded = base62_encode(b"\x00\x00\x01\x02")
    assert encoded == base62_encode(b"\x01\x02")
    assert base62_decode(encoded) == b"\x01\x02"


@pytest.mark.parametrize("value", ["", "abc$", "abc def", "ab-c", "é"])
def test_base62_rejects_characters_outside_alphabet(value: str) -> None:
    with pytest.raises(Base62ParseError) as excinfo:
        base62_decode(value)
    assert "cannot parse base62" in str(excinfo.value)
    assert excinfo.value.reason == "base62_parse_failed"


def test_generate_payload_uses_alphabet() -> None:
    payload = generate_payload(200)
    assert len(payload) == 200
    assert set(payload.decode("ascii")) <= set(ALPHABET)


def test_generate_payload_maps_bytes_modulo_62(monkeypatch) -> None:
    monkeypatch.setattr(secrets, "token_bytes", lambda n: bytes([0, 61, 62, 255])[:n])
    assert generate_payload(4) == b"0z07"


def test_generate_payload_reports_entropy_failure(monkeypatch) -> None:
    def unavailable(n: int) -> bytes:
        raise OSError("getrandom failed")

    monkeypatch.setattr(secrets, "token_bytes", unavailable)
    with pytest.raises(RandomSourceError) as excinfo:
        generate_payload(30)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_generate_payload_rejects_non_positive_length() -> None:
    with pytest.raises(ValueError):
        generate_payload(0)
