"""
Value normalisation
===================

Canonicalisation rules shared by every operand payload.

+----------------------------+------------------------+---------------+
| Payload                    | Example input          | Normalised    |
+============================+========================+===============+
| Address (size present)     | ``1234``, ``0x1234``   | ``0x001234``  |
+----------------------------+------------------------+---------------+
| Decimal literal            | ``100``                | ``0x000064``  |
+----------------------------+------------------------+---------------+
| Hex literal (``h`` / 0x)   | ``h5678``              | ``0x005678``  |
+----------------------------+------------------------+---------------+
| Symbolic constant          | ``n`` ``t`` ``true``   | unchanged     |
|                            | ``false`` ``lvlintro`` |               |
+----------------------------+------------------------+---------------+
| Negative decimal           | ``-100``               | unchanged     |
+----------------------------+------------------------+---------------+
| Float text (contains ``.``)| ``-1.5``               | unchanged     |
+----------------------------+------------------------+---------------+

Negative decimals are *not* hex-encoded while positive ones
are; existing condition strings are displayed that way.

Values wider than :data:`ADDRESS_WIDTH` digits are never truncated
(``4294967295`` becomes ``0xffffffff``).
"""
from __future__ import annotations

import re

ADDRESS_WIDTH = 6

SYMBOLIC_CONSTANTS = frozenset({"n", "t", "true", "false", "lvlintro"})

_DECIMAL_RE = re.compile(r"^\+?\d+$")


def _strip_hex_prefix(text: str) -> str:
    return text[2:] if text[:2].lower() == "0x" else text


def _pad(digits: str) -> str:
    return "0x" + digits.rjust(ADDRESS_WIDTH, "0")


def is_symbolic(text: str) -> bool:
    """Return True if *text* is one of the named constants (``n``, ``true``…)."""
    return text.lower() in SYMBOLIC_CONSTANTS


def hex_literal(value: int) -> str:
    """
    Render a non-negative integer in the canonical ``0x`` + hex form.

    >>> hex_literal(100)
    '0x000064'
    """
    if value < 0:
        raise ValueError(f"hex_literal() expects a non-negative value, got {value}")
    return _pad(format(value, "x"))


def normalize_address(text: str) -> str:
    """
    Canonicalise a memory address payload.

    The payload is taken as hex digits (as written after a size token), any
    ``0x`` prefix is dropped and the result is left-padded to six digits.
    The digits keep the case they were written in.  An empty payload stays
    empty.
    """
    if not text:
        return ""
    return _pad(_strip_hex_prefix(text))


def normalize_literal(text: str) -> str:
    """
    Canonicalise a literal payload (an operand with no size token).

    Decimal integers are converted to hex, ``0x`` literals are padded, and
    symbolic constants, negative decimals and float text pass through
    verbatim.  Anything else is padded as written.
    """
    if not text:
        return ""
    if is_symbolic(text) or "." in text or text.startswith("-"):
        return text
    if text[:2].lower() == "0x":
        return normalize_address(text)
    if _DECIMAL_RE.match(text):
        return hex_literal(int(text))
    return _pad(text)

