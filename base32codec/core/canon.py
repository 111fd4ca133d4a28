# base32codec/core/canon.py
from typing import Iterable, Tuple

import jcs

from base32codec.core.types import Alphabet


def canonical_json(obj) -> bytes:
    """RFC 8785 (JSON Canonicalization Scheme) bytes, stable across runs and platforms."""
    return jcs.canonicalize(obj)


def alphabets_json(entries: Iterable[Tuple[str, Alphabet]]) -> str:
    """Canonical JSON array describing each (variant name, alphabet) pair."""
    listing = [{"variant": name, **alphabet.to_dict()} for name, alphabet in entries]
    return canonical_json(listing).decode("utf-8")
