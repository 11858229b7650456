"""Hashing utilities.

Note GUIDs and duplicate-detection checksums are pure functions of note
content, so the same field values always map to the same identifiers.
"""

import hashlib
import string

# Alphabet Anki uses for note GUIDs.
BASE91_TABLE = (
    string.ascii_lowercase
    + string.ascii_uppercase
    + string.digits
    + "!#$%&()*+,-./:;<=>?@[]^_`{|}~"
)

# Anki's field separator; it can never occur inside a stored field value.
FIELD_SEPARATOR = "\x1f"


def base91(value: int) -> str:
    """Encode a non-negative integer in Anki's base91 alphabet.

    Args:
        value: Integer to encode

    Returns:
        Encoded string, most significant digit first
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}")
    if value == 0:
        return BASE91_TABLE[0]

    digits = []
    base = len(BASE91_TABLE)
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(BASE91_TABLE[remainder])
    return "".join(reversed(digits))


def guid_for(*values: str) -> str:
    """Derive a stable note GUID from field values.

    The values are joined with the field separator, hashed with SHA-256 and
    the first 8 bytes of the digest are encoded with :func:`base91`.

    Args:
        *values: Field values in model order

    Returns:
        GUID string
    """
    joined = FIELD_SEPARATOR.join(str(value) for value in values)
    digest = hashlib.sha256(joined.encode("utf-8")).digest()
    return base91(int.from_bytes(digest[:8], "big"))


def field_checksum(text: str) -> int:
    """Checksum used by Anki's ``notes.csum`` duplicate index.

    First 8 hex digits of the SHA-1 of the text, as an integer.
    """
    return int(hashlib.sha1(text.encode("utf-8")).hexdigest()[:8], 16)
