import binascii
import re
import string

from projseed.errors import InvalidHexDigit, OddLength

_HEX_DIGITS = frozenset(string.hexdigits)
_PREFIXES = re.compile(r"^(?:0x)+")


def decode_hex(text: str) -> bytes:
    """Decode a hex string, dropping any leading run of ``0x`` prefixes.

    Raises:
        OddLength: If the digit count is odd
        InvalidHexDigit: If a character is not a hex digit
    """
    digits = _PREFIXES.sub("", text)
    if len(digits) % 2:
        raise OddLength(len(digits))
    for index, char in enumerate(digits):
        if char not in _HEX_DIGITS:
            raise InvalidHexDigit(char, index)
    return binascii.unhexlify(digits)
