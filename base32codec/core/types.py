# base32codec/core/types.py
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping, Optional

RFC4648_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
# No I, L, O or U
CROCKFORD_SYMBOLS = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
CROCKFORD_ALIASES = {"O": 0, "I": 1, "L": 1}

PAD_CHAR = "="
BLOCK_LENGTH = 8  # symbols per padded RFC4648 block


def build_reverse(symbols: str, aliases: Optional[Mapping[str, int]] = None) -> Mapping[str, int]:
    """Read-only char -> value table, accepting both letter cases."""
    table = {}
    for value, char in enumerate(symbols):
        table[char] = value
        table[char.lower()] = value
    for char, value in (aliases or {}).items():
        table[char] = value
        table[char.lower()] = value
    return MappingProxyType(table)


@dataclass(frozen=True)
class Alphabet:
    """Immutable base32 alphabet descriptor."""
    tag: Literal["RFC4648", "Crockford"]
    symbols: str
    reverse: Mapping[str, int] = field(repr=False, compare=False)
    padding_enabled: bool = False
    pad_char: str = PAD_CHAR

    def __post_init__(self):
        if len(self.symbols) != 32 or len(set(self.symbols)) != 32:
            raise ValueError(f"{self.tag} alphabet needs 32 distinct symbols")

    @property
    def strips_padding(self) -> bool:
        """Only RFC4648 knows about pad characters; Crockford rejects them."""
        return self.tag == "RFC4648"

    def to_dict(self) -> dict:
        """Helper for canonical JSON output."""
        aliases = {c: v for c, v in self.reverse.items()
                   if c.isupper() and c not in self.symbols}
        return {
            "tag": self.tag,
            "symbols": self.symbols,
            "aliases": aliases,
            "padding_enabled": self.padding_enabled,
            "pad_char": self.pad_char if self.strips_padding else None,
        }


_RFC4648_REVERSE = build_reverse(RFC4648_SYMBOLS)

RFC4648 = Alphabet("RFC4648", RFC4648_SYMBOLS, _RFC4648_REVERSE, padding_enabled=False)
RFC4648_PADDED = Alphabet("RFC4648", RFC4648_SYMBOLS, _RFC4648_REVERSE, padding_enabled=True)
CROCKFORD = Alphabet("Crockford", CROCKFORD_SYMBOLS, build_reverse(CROCKFORD_SYMBOLS, CROCKFORD_ALIASES))
