"""Digest source.

Turns an input string into the fixed-length byte sequence every later stage
consumes. MD5 is used purely as a stable, well distributed byte source;
changing the algorithm would change every identicon ever generated, so it is
fixed here rather than configurable.
"""

import hashlib
from typing import Union

from pyrsistent import pvector

from grid_identicon.types import Digest

DIGEST_SIZE = 16


def _to_bytes(string: Union[str, bytes]) -> bytes:
    if isinstance(string, bytes):
        return string
    return string.encode("utf-8")


def _md5(string: Union[str, bytes]) -> bytes:
    return hashlib.md5(_to_bytes(string), usedforsecurity=False).digest()


def bytes_list(string: Union[str, bytes]) -> Digest:
    """Return the MD5 digest of ``string`` as a vector of byte values.

    Example:
        >>> list(bytes_list("Timothy"))
        [130, 5, 44, 217, 64, 146, 195, 100, 255, 140, 88, 232, 60, 34, 6, 5]
    """
    return pvector(_md5(string))


def string_signature(string: Union[str, bytes]) -> str:
    """Return the upper-case base 16 MD5 signature of ``string``.

    Example:
        >>> string_signature("Timothy")
        '82052CD94092C364FF8C58E83C220605'
    """
    return _md5(string).hex().upper()
