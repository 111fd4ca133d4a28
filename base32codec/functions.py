# base32codec/functions.py
"""
Callable entry points with the same defaults as the database functions they mirror:
variant 'rfc4648', no padding.
"""

import logging
from typing import Union

from base32codec.core.alphabet import resolve_alphabet
from base32codec.core.encoding import encode_bytes, decode_text, BytesLike
from base32codec.core.errors import DecodeError

logger = logging.getLogger(__name__)


def encode(data: Union[BytesLike, str], variant: str = "rfc4648", padding: bool = False) -> str:
    """Encode bytes (or the UTF-8 bytes of a str) with the selected base32 alphabet.
    Anything else raises TypeError.
    """
    alphabet = resolve_alphabet(variant, padding)
    if isinstance(data, str):
        data = data.encode("utf-8")
    elif not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes-like object or str, not {type(data).__name__}")

    result = encode_bytes(data, alphabet)
    logger.debug("Encoded %d bytes to %d %s symbols", len(data), len(result), alphabet.tag)
    return result


def decode(data: str, variant: str = "rfc4648", padding: bool = False) -> bytes:
    """
    Decode base32 text with the selected alphabet.
    Raises DecodeError on any character the alphabet does not accept.
    """
    alphabet = resolve_alphabet(variant, padding)
    if not isinstance(data, str):
        raise DecodeError()

    result = decode_text(data, alphabet)
    logger.debug("Decoded %d %s symbols to %d bytes", len(data), alphabet.tag, len(result))
    return result
