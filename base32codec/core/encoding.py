# base32codec/core/encoding.py
from typing import Union

from base32codec.core.errors import DecodeError
from base32codec.core.types import Alphabet, BLOCK_LENGTH

BytesLike = Union[bytes, bytearray, memoryview]


def encode_bytes(data: BytesLike, alphabet: Alphabet) -> str:
    """Encode bytes to base32 text, five bits per symbol, most significant bit first."""
    symbols = alphabet.symbols
    out = []

    acc = 0
    acc_bits = 0
    for byte in bytes(data):
        acc = (acc << 8) | byte
        acc_bits += 8

        while acc_bits >= 5:
            acc_bits -= 5
            out.append(symbols[acc >> acc_bits])
            acc &= (1 << acc_bits) - 1

    # Right-fill the last group with zero bits
    if acc_bits:
        out.append(symbols[acc << (5 - acc_bits)])

    if alphabet.padding_enabled and out:
        out.append(alphabet.pad_char * (-len(out) % BLOCK_LENGTH))

    return "".join(out)


def decode_text(text: str, alphabet: Alphabet) -> bytes:
    """
    Decode base32 text back to bytes.

    Trailing pad characters are stripped for RFC4648 whatever the padding flag.
    Leftover bits that do not make a full byte are dropped without checking
    that they are zero.
    """
    if alphabet.strips_padding:
        text = text.rstrip(alphabet.pad_char)

    reverse = alphabet.reverse
    out = bytearray()

    acc = 0
    acc_bits = 0
    for position, char in enumerate(text):
        value = reverse.get(char)
        if value is None:
            raise DecodeError(char, position)

        acc = (acc << 5) | value
        acc_bits += 5

        if acc_bits >= 8:
            acc_bits -= 8
            out.append(acc >> acc_bits)
            acc &= (1 << acc_bits) - 1

    return bytes(out)
