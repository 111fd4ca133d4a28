# base32codec/core/alphabet.py
import logging

from base32codec.core.errors import InvalidVariant
from base32codec.core.types import Alphabet, RFC4648, RFC4648_PADDED, CROCKFORD

logger = logging.getLogger(__name__)

SUPPORTED_VARIANTS = ("rfc4648", "crockford")


def resolve_alphabet(variant: str, padding: bool = False) -> Alphabet:
    """
    Map a variant name (case-insensitive, exact) to its alphabet descriptor.
    The padding flag only applies to rfc4648 and is ignored for crockford.
    """
    if not isinstance(variant, str):
        raise InvalidVariant(variant)

    name = variant.lower()
    if name == "rfc4648":
        alphabet = RFC4648_PADDED if padding else RFC4648
    elif name == "crockford":
        alphabet = CROCKFORD
    else:
        raise InvalidVariant(variant)

    logger.debug("Resolved variant %r to %s (padding=%s)", variant, alphabet.tag, alphabet.padding_enabled)
    return alphabet
