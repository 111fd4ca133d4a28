# base32codec/core/errors.py
from typing import Optional


class Base32Error(Exception):
    pass


class InvalidVariant(Base32Error, ValueError):
    """Raised when a variant name matches none of the supported alphabets."""

    def __init__(self, variant: object):
        self.variant = variant
        super().__init__("Invalid variant. Supported variants are 'rfc4648' and 'crockford'.")


class DecodeError(Base32Error, ValueError):
    """Raised on a character the selected alphabet does not accept.
    Nothing is decoded when this is raised.
    """

    def __init__(self, char: Optional[str] = None, position: Optional[int] = None):
        self.char = char
        self.position = position
        message = "Invalid input. Input must be a valid string for the selected base32 alphabet."
        if char is not None:
            message += f" Unexpected character {char!r} at position {position}."
        super().__init__(message)
