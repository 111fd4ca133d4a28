# tests/test_core.py
import pytest

from base32codec.core.types import Alphabet, RFC4648, RFC4648_PADDED, CROCKFORD
from base32codec.core.encoding import encode_bytes, decode_text
from base32codec.core.errors import DecodeError
from base32codec.core.canon import canonical_json, alphabets_json


RFC4648_VECTORS = [
    (b"", "", ""),
    (b"f", "MY======", "MY"),
    (b"fo", "MZXQ====", "MZXQ"),
    (b"foo", "MZXW6===", "MZXW6"),
    (b"foob", "MZXW6YQ=", "MZXW6YQ"),
    (b"fooba", "MZXW6YTB", "MZXW6YTB"),
    (b"foobar", "MZXW6YTBOI======", "MZXW6YTBOI"),
]

CROCKFORD_VECTORS = [
    (b"", ""),
    (b"f", "CR"),
    (b"fo", "CSQG"),
    (b"foo", "CSQPY"),
    (b"foobar", "CSQPYRK1E8"),
]


def test_alphabet_immutable():
    with pytest.raises(AttributeError):
        RFC4648.padding_enabled = True
    with pytest.raises(TypeError):
        CROCKFORD.reverse["U"] = 27


def test_alphabet_rejects_short_symbol_table():
    with pytest.raises(ValueError):
        Alphabet("RFC4648", "ABC", {})


def test_reverse_is_inverse_of_symbols():
    for alphabet in (RFC4648, CROCKFORD):
        for value, char in enumerate(alphabet.symbols):
            assert alphabet.reverse[char] == value
            assert alphabet.reverse[char.lower()] == value


def test_crockford_aliases():
    assert CROCKFORD.reverse["O"] == CROCKFORD.reverse["o"] == 0
    assert CROCKFORD.reverse["I"] == CROCKFORD.reverse["i"] == 1
    assert CROCKFORD.reverse["L"] == CROCKFORD.reverse["l"] == 1
    assert "U" not in CROCKFORD.reverse
    assert "=" not in CROCKFORD.reverse


@pytest.mark.parametrize("raw,padded,unpadded", RFC4648_VECTORS)
def test_encode_rfc4648_vectors(raw, padded, unpadded):
    assert encode_bytes(raw, RFC4648_PADDED) == padded
    assert encode_bytes(raw, RFC4648) == unpadded


@pytest.mark.parametrize("raw,expected", CROCKFORD_VECTORS)
def test_encode_crockford_vectors(raw, expected):
    assert encode_bytes(raw, CROCKFORD) == expected


def test_encode_output_length():
    for n in range(0, 21):
        data = bytes(range(n))
        assert len(encode_bytes(data, RFC4648)) == -(-n * 8 // 5)
        assert len(encode_bytes(data, RFC4648_PADDED)) % 8 == 0


def test_encode_accepts_bytearray_and_memoryview():
    assert encode_bytes(bytearray(b"foobar"), RFC4648) == "MZXW6YTBOI"
    assert encode_bytes(memoryview(b"foobar"), CROCKFORD) == "CSQPYRK1E8"


def test_encode_all_bits_set():
    assert encode_bytes(b"\xff" * 5, RFC4648) == "77777777"
    assert encode_bytes(b"\xff" * 5, CROCKFORD) == "ZZZZZZZZ"


@pytest.mark.parametrize("raw,padded,unpadded", RFC4648_VECTORS)
def test_decode_rfc4648_vectors(raw, padded, unpadded):
    assert decode_text(padded, RFC4648_PADDED) == raw
    assert decode_text(unpadded, RFC4648) == raw
    # Padding is optional on decode whatever the flag says
    assert decode_text(padded, RFC4648) == raw
    assert decode_text(unpadded, RFC4648_PADDED) == raw


@pytest.mark.parametrize("raw,expected", CROCKFORD_VECTORS)
def test_decode_crockford_vectors(raw, expected):
    assert decode_text(expected, CROCKFORD) == raw


def test_decode_rfc4648_any_trailing_padding():
    assert decode_text("MZXW6YTBOI=", RFC4648) == b"foobar"
    assert decode_text("MZXW6YTBOI==========", RFC4648) == b"foobar"
    assert decode_text("========", RFC4648) == b""


def test_decode_rfc4648_lowercase():
    assert decode_text("mzxw6ytboi", RFC4648) == b"foobar"


def test_decode_crockford_case_and_aliases():
    assert decode_text("csqpy", CROCKFORD) == decode_text("CSQPY", CROCKFORD)
    assert decode_text("OIL", CROCKFORD) == decode_text("011", CROCKFORD)
    assert decode_text("oil", CROCKFORD) == decode_text("011", CROCKFORD)


def test_decode_discards_leftover_bits():
    # "MZ" carries 10 bits; the last two are dropped, even when non-zero
    assert decode_text("MZ", RFC4648) == b"f"
    assert decode_text("M", RFC4648) == b""


@pytest.mark.parametrize("alphabet,text,char,position", [
    (RFC4648, "not_base32", "_", 3),
    (RFC4648, "MZXW1", "1", 4),
    (RFC4648, "MZ=XW", "=", 2),
    (RFC4648, "MZXW6é", "é", 5),
    (CROCKFORD, "CSQPY=", "=", 5),
    (CROCKFORD, "CU", "U", 1),
    (CROCKFORD, "C SQ", " ", 1),
])
def test_decode_rejects_invalid_characters(alphabet, text, char, position):
    with pytest.raises(DecodeError) as exc_info:
        decode_text(text, alphabet)
    assert exc_info.value.char == char
    assert exc_info.value.position == position
    assert "valid string for the selected base32 alphabet" in str(exc_info.value)


def test_roundtrip_all_byte_values():
    data = bytes(range(256))
    for alphabet in (RFC4648, RFC4648_PADDED, CROCKFORD):
        assert decode_text(encode_bytes(data, alphabet), alphabet) == data


def test_alphabet_canonical_json():
    canon = canonical_json(CROCKFORD.to_dict()).decode("utf-8")
    assert canon.startswith('{"aliases":{"I":1,"L":1,"O":0}')
    assert '"pad_char":null' in canon
    assert b'"padding_enabled":true' in canonical_json(RFC4648_PADDED.to_dict())


def test_alphabets_json_listing():
    listing = alphabets_json([("rfc4648", RFC4648), ("crockford", CROCKFORD)])
    assert listing.startswith("[{")
    assert listing.index('"variant":"rfc4648"') < listing.index('"variant":"crockford"')
    assert '"pad_char":"="' in listing
