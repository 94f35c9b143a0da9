"""
Mem Parser
==========

A Python parser for "Mem" strings, the compact condition language used by
RetroAchievements to describe achievement and leaderboard logic.

A Mem string is decoded into requirement groups (one Core Group plus any
number of Alt Groups) and can be rendered as an aligned, human-readable
table.

Quick start
-----------
>>> from memaddr_parser import parse, format
>>> result = parse("R:0xH00175b=73_0xH0081f9=0S0xH00b241=164.40.")
>>> len(result.groups), result.addresses[:2]
(2, ('0x00175b', '0x0081f9'))
>>> print(format(result.groups))  # doctest: +SKIP
"""

from typing import Iterable, Sequence

from .models import (
    Comparator,
    Flag,
    GrammarError,
    Operand,
    OperandKind,
    ParseResult,
    Requirement,
    SizeCode,
)
from .output.formatter import MemFormatter
from .pipeline.mem_analysis import MemAnalysis

__version__ = "0.1.0"
__all__ = [
    "Comparator",
    "Flag",
    "GrammarError",
    "Operand",
    "OperandKind",
    "ParseResult",
    "Requirement",
    "SizeCode",
    "MemAnalysis",
    "MemFormatter",
    "parse",
    "format",
]


def parse(text: str) -> ParseResult:
    """Parse a Mem string.  Raises :class:`GrammarError` on invalid input."""
    return MemAnalysis().parse(text)


def format(groups: Iterable[Sequence[Requirement]]) -> str:  # noqa: A001
    """Render parsed groups with the default markdown formatter."""
    return MemFormatter().format(groups)
