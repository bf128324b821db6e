"""
String inspection and transformation helpers.

Every function takes text and returns new text, a bool, an int or a list of
text; inputs are never modified (Python strings are immutable anyway). Length
and index arguments count Unicode code points, not UTF-8 bytes, so helpers
such as reverse() and substring() never split a multi-byte character.

Degenerate inputs are accepted where a sensible result exists:
  - An empty needle, prefix or suffix always matches.
  - replace() with an empty pattern returns the input unchanged.
  - split() with an empty delimiter returns the input unsplit, as a
    single-element list (never a list of characters).
"""

import logging
from typing import Iterable, List

from src.utils.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_empty(s: str) -> bool:
    """Return True if `s` has zero length."""
    return len(s) == 0


def is_not_empty(s: str) -> bool:
    """Return True if `s` has at least one character."""
    return len(s) > 0


def is_blank(s: str) -> bool:
    """
    Return True if `s` is empty or contains only whitespace.

    Whitespace is what str.isspace() accepts (spaces, tabs, newlines and the
    Unicode space separators).
    """
    return s.strip() == ""


def to_uppercase(s: str) -> str:
    return s.upper()


def to_lowercase(s: str) -> str:
    return s.lower()


def trim(s: str) -> str:
    """Return a copy of `s` without leading and trailing whitespace."""
    return s.strip()


def trim_start(s: str) -> str:
    """Return a copy of `s` without leading whitespace."""
    return s.lstrip()


def trim_end(s: str) -> str:
    """Return a copy of `s` without trailing whitespace."""
    return s.rstrip()


def reverse(s: str) -> str:
    """
    Reverse `s` code point by code point.

    reverse(reverse(s)) == s holds for any text, including non-ASCII input
    such as "你好" -> "好你".
    """
    return s[::-1]


def contains(s: str, needle: str) -> bool:
    return needle in s


def starts_with(s: str, prefix: str) -> bool:
    return s.startswith(prefix)


def ends_with(s: str, suffix: str) -> bool:
    return s.endswith(suffix)


def length(s: str) -> int:
    """Number of code points in `s`."""
    return len(s)


def byte_length(s: str) -> int:
    """Number of bytes in the UTF-8 encoding of `s` ("你好" is 6)."""
    return len(s.encode("utf-8"))


def replace(s: str, from_: str, to: str) -> str:
    """
    Replace every non-overlapping occurrence of `from_` with `to`.

    Occurrences are matched left to right, so replace("aaa", "aa", "b")
    gives "ba". An empty `from_` leaves `s` unchanged; str.replace would
    otherwise insert `to` between every character.

    Args:
        s: Source text.
        from_: Pattern to replace (trailing underscore avoids the keyword).
        to: Replacement text.

    Returns:
        New string with replacements applied.
    """
    if from_ == "":
        logger.debug("replace() called with empty pattern; returning input unchanged")
        return s
    return s.replace(from_, to)


def split(s: str, delimiter: str) -> List[str]:
    """
    Split `s` on every occurrence of `delimiter`.

    **Functionally**:
    - split("a,b,c", ",") -> ["a", "b", "c"]
    - Adjacent delimiters produce empty parts: split("a,,b", ",") -> ["a", "", "b"]
    - No occurrence -> [s]; split("", ",") -> [""]
    - Empty delimiter -> [s] (the input is never exploded into characters)

    join(split(s, d), d) == s for every non-empty d.
    """
    if delimiter == "":
        logger.debug("split() called with empty delimiter; returning input unsplit")
        return [s]
    return s.split(delimiter)


def join(parts: Iterable[str], delimiter: str) -> str:
    """Concatenate `parts` with `delimiter` between neighbours; [] gives ""."""
    return delimiter.join(parts)


def repeat(s: str, n: int) -> str:
    """
    Return `s` concatenated with itself `n` times.

    Raises:
        InvalidArgumentError: If `n` is negative.
    """
    if n < 0:
        raise InvalidArgumentError(f"repeat count must be non-negative, got: {n}")
    return s * n


def substring(s: str, start: int, end: int) -> str:
    """
    Return the code points of `s` in the half-open range [start, end).

    Unlike slicing, out-of-range or reversed bounds are rejected rather than
    silently clipped.

    Raises:
        InvalidArgumentError: If start < 0, end > len(s) or start > end.
    """
    if start < 0 or end > len(s) or start > end:
        raise InvalidArgumentError(
            f"substring bounds [{start}, {end}) are invalid for text of length {len(s)}"
        )
    return s[start:end]


def hex_encode(s: str) -> str:
    """
    Encode `s` as lowercase hex of its UTF-8 bytes.

    hex_encode("hello, world!") == "68656c6c6f2c20776f726c6421"
    """
    return s.encode("utf-8").hex()


def hex_decode(h: str) -> str:
    """
    Decode text produced by hex_encode().

    Upper- and lowercase digits are both accepted; whitespace is not.

    Raises:
        InvalidArgumentError: On odd length, a non-hex character, or bytes
            that are not valid UTF-8.
    """
    if len(h) % 2 != 0:
        raise InvalidArgumentError(f"hex text must have even length, got {len(h)} characters")
    bad = [c for c in h if c not in _HEX_DIGITS]
    if bad:
        raise InvalidArgumentError(f"hex text contains non-hex character {bad[0]!r}")
    try:
        return bytes.fromhex(h).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidArgumentError(f"hex text does not decode to UTF-8: {e}") from e
