# base32codec/__init__.py
"""
base32codec — exact binary-to-text conversion with the RFC4648 and Crockford base32 alphabets.
Padding is optional for RFC4648 and never used by Crockford.
"""

__version__ = "0.1.0"

from base32codec.core.errors import Base32Error, InvalidVariant, DecodeError
from base32codec.functions import encode, decode

__all__ = ["encode", "decode", "Base32Error", "InvalidVariant", "DecodeError"]
