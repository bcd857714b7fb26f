from __future__ import annotations
from typing import Union

from .config import BOUNDARY_CHARS, TEXT_ENCODING

TextLike = Union[str, bytes, bytearray, memoryview]
UnitLike = Union[int, str, bytes]


def to_bytes(text: TextLike) -> bytes:
    """
    Return an owned bytes copy of the candidate text.
    Rules:
      * str is encoded with TEXT_ENCODING; multi-byte characters become
        several independent units
      * bytes-like input is copied so later caller mutation can't leak in
    """
    if isinstance(text, str):
        return text.encode(TEXT_ENCODING)
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"text must be str or bytes-like, not {type(text).__name__}")


def to_unit(k: UnitLike) -> int:
    """Coerce one pattern character into a byte value (0..255)."""
    if isinstance(k, bool):
        raise TypeError("pattern unit must be int, str or bytes, not bool")
    if isinstance(k, int):
        if not 0 <= k <= 255:
            raise ValueError(f"pattern unit out of byte range: {k}")
        return k
    if isinstance(k, str):
        k = k.encode(TEXT_ENCODING)
    if isinstance(k, bytes):
        if len(k) != 1:
            raise ValueError(f"pattern unit must be exactly one byte, got {k!r}")
        return k[0]
    raise TypeError(f"pattern unit must be int, str or bytes, not {type(k).__name__}")


def iter_units(pattern: TextLike):
    """Yield the byte units of a whole pattern, in typing order."""
    yield from to_bytes(pattern)


def is_word_boundary(text: bytes, i: int) -> bool:
    """
    True if 1-based position i of text starts a "word":
    the first byte, the last byte, or a byte right after a BOUNDARY_CHARS byte.
    """
    if i == 1 or i == len(text):
        return True
    return text[i - 2] in BOUNDARY_CHARS
