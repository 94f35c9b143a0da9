"""
Core data models for the Mem parser.

A Mem string is split into *groups* (one Core Group followed by any number
of Alt Groups), each holding an ordered list of :class:`Requirement`
objects.  Every requirement compares (or accumulates) two :class:`Operand`
values.

The flag / operand-kind / size tags are closed enums validated once by the
grammar; display names live in :mod:`memaddr_parser.output.formatter`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------


class Flag(Enum):
    """Requirement behaviour, keyed by the letter used before ``:``."""

    NONE = ""
    PAUSE_IF = "P"
    RESET_IF = "R"
    ADD_SOURCE = "A"
    SUB_SOURCE = "B"
    ADD_HITS = "C"
    SUB_HITS = "D"
    AND_NEXT = "N"
    OR_NEXT = "O"
    MEASURED = "M"
    MEASURED_IF = "Q"
    ADD_ADDRESS = "I"
    TRIGGER = "T"
    RESET_NEXT_IF = "Z"
    MEASURED_PERCENT = "G"
    REMEMBER = "K"

    @classmethod
    def from_letter(cls, letter: Optional[str]) -> "Flag":
        return cls(letter.upper()) if letter else cls.NONE

    @property
    def is_scalable(self) -> bool:
        """Flags that accumulate into a running value instead of triggering."""
        return self in _SCALABLE_FLAGS


_SCALABLE_FLAGS = frozenset(
    {Flag.ADD_SOURCE, Flag.SUB_SOURCE, Flag.ADD_ADDRESS, Flag.REMEMBER}
)


# ---------------------------------------------------------------------------
# Operand kinds and memory sizes
# ---------------------------------------------------------------------------


class OperandKind(Enum):
    MEM = "mem"
    DELTA = "delta"
    PRIOR = "prior"
    BCD = "bcd"
    INVERTED = "inverted"
    FLOAT = "float"
    VALUE = "value"
    RECALL = "recall"
    VARIABLE = "variable"


# Kinds whose payload is a memory address (a FLOAT without a size is a literal)
MEMORY_KINDS = frozenset(
    {
        OperandKind.MEM,
        OperandKind.DELTA,
        OperandKind.PRIOR,
        OperandKind.BCD,
        OperandKind.INVERTED,
        OperandKind.FLOAT,
    }
)


class SizeCode(Enum):
    """Memory read size, valued by its canonical token."""

    BIT0 = "0xM"
    BIT1 = "0xN"
    BIT2 = "0xO"
    BIT3 = "0xP"
    BIT4 = "0xQ"
    BIT5 = "0xR"
    BIT6 = "0xS"
    BIT7 = "0xT"
    BITCOUNT = "0xK"
    LOWER4 = "0xL"
    UPPER4 = "0xU"
    BIT8 = "0xH"
    BIT16 = "0x"
    BIT24 = "0xW"
    BIT32 = "0xX"
    BIT16_BE = "0xI"
    BIT24_BE = "0xJ"
    BIT32_BE = "0xG"
    FLOAT = "fF"
    FLOAT_BE = "fB"
    DOUBLE32 = "fH"
    DOUBLE32_BE = "fI"
    MBF32 = "fM"
    MBF32_LE = "fL"

    @classmethod
    def from_token(cls, token: str) -> "SizeCode":
        """
        Resolve a size token as written in a Mem string.

        Matching is case-insensitive; ``"0x "`` (explicit space) and ``"0x"``
        both denote the 16-bit size.
        """
        try:
            return _SIZE_TOKENS[token.lower()]
        except KeyError:
            raise ValueError(f"Unknown size token: {token!r}") from None

    @property
    def is_float(self) -> bool:
        return self.value.startswith("f")


_SIZE_TOKENS: Dict[str, SizeCode] = {s.value.lower(): s for s in SizeCode}
_SIZE_TOKENS["0x "] = SizeCode.BIT16


# ---------------------------------------------------------------------------
# Comparators
# ---------------------------------------------------------------------------


class Comparator(Enum):
    EQ = "="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    MUL = "*"
    DIV = "/"
    AND = "&"
    ADD = "+"
    SUB = "-"
    XOR = "^"
    MOD = "%"

    @classmethod
    def from_token(cls, token: Optional[str]) -> "Comparator":
        if not token:
            return cls.EQ
        if token == "==":
            return cls.EQ
        return cls(token)

    @property
    def is_arithmetic(self) -> bool:
        """True for the accumulation operators used by scalable flags."""
        return self in _ARITHMETIC


_ARITHMETIC = frozenset(
    {
        Comparator.MUL,
        Comparator.DIV,
        Comparator.AND,
        Comparator.ADD,
        Comparator.SUB,
        Comparator.XOR,
        Comparator.MOD,
    }
)


# ---------------------------------------------------------------------------
# Operand
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Operand:
    """
    One side of a requirement.

    ``value`` holds the canonical payload: the ``0x``-prefixed address for
    memory references, the normalized literal for ``VALUE``, the verbatim
    decimal text for float literals, the name for ``VARIABLE`` and the empty
    string for ``RECALL``.
    """

    kind: OperandKind
    size: Optional[SizeCode] = None
    value: str = ""

    @property
    def is_float_literal(self) -> bool:
        return self.kind is OperandKind.FLOAT and self.size is None

    @property
    def is_memory_reference(self) -> bool:
        return self.kind in MEMORY_KINDS and not self.is_float_literal

    @property
    def address(self) -> Optional[str]:
        """Canonical address for memory references, ``None`` otherwise."""
        if self.is_memory_reference and self.value:
            return self.value
        return None

    @property
    def name(self) -> Optional[str]:
        return self.value if self.kind is OperandKind.VARIABLE else None

    def __repr__(self) -> str:
        size = f", size={self.size.value!r}" if self.size else ""
        return f"Operand({self.kind.name}{size}, value={self.value!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "size": self.size.value if self.size else None,
            "value": self.value,
        }


# ---------------------------------------------------------------------------
# Requirement
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Requirement:
    """A single ``[flag:]left[cmp right][hits]`` condition."""

    flag: Flag
    left: Operand
    comparator: Comparator
    right: Operand
    hits: Optional[int] = 0

    @classmethod
    def placeholder(cls) -> "Requirement":
        """The stand-in requirement used for a syntactically empty group."""
        return cls(
            flag=Flag.NONE,
            left=Operand(OperandKind.VALUE),
            comparator=Comparator.EQ,
            right=Operand(OperandKind.VALUE),
            hits=0,
        )

    @property
    def shows_comparison(self) -> bool:
        """
        Whether the comparator / right side is part of the rendered line.

        Scalable flags only carry a right side when it is the source
        modification amount (an arithmetic operator).
        """
        return not self.flag.is_scalable or self.comparator.is_arithmetic

    def __repr__(self) -> str:
        return (
            f"Requirement(flag={self.flag.name}, left={self.left!r}, "
            f"cmp={self.comparator.value!r}, right={self.right!r}, "
            f"hits={self.hits!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "flag": self.flag.value,
            "left": self.left.to_dict(),
            "comparator": self.comparator.value,
            "right": self.right.to_dict(),
            "hits": self.hits,
        }


# ---------------------------------------------------------------------------
# ParseResult – the final output unit
# ---------------------------------------------------------------------------

Group = Tuple[Requirement, ...]


@dataclass(frozen=True)
class ParseResult:
    """
    The parsed form of one Mem string.

    ``groups[0]`` is the Core Group, ``groups[1:]`` the Alt Groups.
    ``addresses`` lists every referenced memory address once, in the order
    it was first seen, using the same canonical text as the requirements.
    """

    groups: Tuple[Group, ...]
    addresses: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def core(self) -> Group:
        return self.groups[0]

    @property
    def alts(self) -> Tuple[Group, ...]:
        return self.groups[1:]

    def __repr__(self) -> str:
        return (
            f"ParseResult(groups={[len(g) for g in self.groups]}, "
            f"addresses={list(self.addresses)})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "groups": [[r.to_dict() for r in group] for group in self.groups],
            "addresses": list(self.addresses),
        }


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class GrammarError(ValueError):
    """
    Raised when a requirement segment matches no recognised shape.

    ``segment`` holds the offending text so callers can show it back to the
    user.
    """

    def __init__(self, segment: str, message: str = 'Invalid "Mem" string') -> None:
        super().__init__(f"{message}. Failed to parse: {segment}")
        self.segment = segment
