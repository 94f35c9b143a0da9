"""
OperandParser
=============

Parses one side of a requirement into an :class:`~memaddr_parser.models.Operand`.

Operand forms:

+------------------------+-------------------------------------------------+
| Form                   | Examples                                        |
+========================+=================================================+
| Recall                 | ``{recall}``                                    |
+------------------------+-------------------------------------------------+
| Variable               | ``{myvar}`` (alphanumeric names only)           |
+------------------------+-------------------------------------------------+
| Memory reference       | ``0xH1234``  ``0x 1234``  ``0xS1234``           |
|                        | ``fF1234`` (float encodings)                    |
+------------------------+-------------------------------------------------+
| Modified reference     | ``d0xH1234`` (delta)  ``p0xH1234`` (prior)      |
|                        | ``b0xH1234`` (BCD)  ``~0xH1234`` (inverted)     |
+------------------------+-------------------------------------------------+
| Literal                | ``5``  ``-1``  ``h1F``  ``v100``  ``true``      |
+------------------------+-------------------------------------------------+
| Float literal          | ``f1.5``  ``f-.5``  ``f100``                    |
+------------------------+-------------------------------------------------+

A size token makes the operand a memory reference; without one the payload
is a literal.  Degenerate operands such as ``0x``, ``d0x`` or ``~`` are
accepted and produce operands with an empty payload.

The pattern is exposed through :func:`operand_pattern` so that
:class:`~memaddr_parser.parser.requirement_parser.RequirementParser` can
embed it twice (left and right side) in a single requirement expression.
"""
from __future__ import annotations

import re
from typing import Dict, Optional

from ..models import GrammarError, Operand, OperandKind, SizeCode
from .normalizer import normalize_address, normalize_literal

# ---------------------------------------------------------------------------
# Token tables
# ---------------------------------------------------------------------------

_MODIFIER_KINDS: Dict[str, OperandKind] = {
    "d": OperandKind.DELTA,
    "p": OperandKind.PRIOR,
    "b": OperandKind.BCD,
    "~": OperandKind.INVERTED,
    "f": OperandKind.FLOAT,
}

# Longest tokens first: "0xH" must win over the bare 16-bit "0x".
_SIZE_PATTERN = r"f[fbhilm]|0x[hwxlumnopqrstkijg]|0x\x20|0x|h"

# "f" only acts as a modifier when it does not start a float size token.
_MODIFIER_PATTERN = r"[dpb~v]|f(?![fbhilm])"

_CONSTANT_PATTERN = r"true|false|lvlintro|n|t"


def operand_pattern(prefix: str = "") -> str:
    """
    Return the operand regex with every named group prefixed by *prefix*.

    Groups: ``recall``, ``var``, ``const``, ``mod``, ``size``, ``val``.
    Compile with :data:`re.IGNORECASE` and :data:`re.ASCII`.
    """
    p = prefix
    return (
        rf"(?:\{{(?P<{p}recall>recall)\}}"
        rf"|\{{(?P<{p}var>[0-9a-z]+)\}}"
        rf"|(?P<{p}const>{_CONSTANT_PATTERN})(?![0-9a-z])"
        rf"|(?P<{p}mod>{_MODIFIER_PATTERN})?"
        rf"(?P<{p}size>{_SIZE_PATTERN})?"
        rf"(?P<{p}val>[+\-]?[0-9a-z]*(?:\.[0-9a-z]*)?))"
    )


_OPERAND_RE = re.compile(operand_pattern(), re.IGNORECASE | re.ASCII)


# ---------------------------------------------------------------------------
# Parser class
# ---------------------------------------------------------------------------


class OperandParser:
    """Stateless parser for a single operand."""

    def parse(self, text: str) -> Operand:
        """
        Parse *text* as a complete operand.

        Raises
        ------
        GrammarError
            If *text* is not a recognised operand shape.
        """
        match = _OPERAND_RE.fullmatch(text)
        if match is None:
            raise GrammarError(text)
        return self.from_match(match)

    def from_match(self, match: re.Match, prefix: str = "") -> Operand:
        """Build an operand from the groups of an :func:`operand_pattern` match."""

        def group(name: str) -> str:
            return match.group(prefix + name) or ""

        if group("recall"):
            return Operand(OperandKind.RECALL)

        name = group("var")
        if name:
            return Operand(OperandKind.VARIABLE, value=name)

        constant = group("const")
        if constant:
            return Operand(OperandKind.VALUE, value=constant)

        return self._build(group("mod").lower(), group("size"), group("val"))

    # ------------------------------------------------------------------

    @staticmethod
    def _build(modifier: str, size_token: str, payload: str) -> Operand:
        # Legacy hex literal: h1F
        if size_token.lower() == "h":
            return Operand(OperandKind.VALUE, value=normalize_address(payload))

        size: Optional[SizeCode] = (
            SizeCode.from_token(size_token) if size_token else None
        )

        # Legacy decimal literal: v100
        if modifier == "v":
            value = normalize_address(payload) if size else normalize_literal(payload)
            return Operand(OperandKind.VALUE, value=value)

        # Float literal: f1.5, f-.5, f100
        if modifier == "f" and size is None:
            return Operand(OperandKind.FLOAT, value=payload)

        kind = _MODIFIER_KINDS.get(modifier)
        if kind is None:
            if size is None:
                return Operand(OperandKind.VALUE, value=normalize_literal(payload))
            kind = OperandKind.FLOAT if size.is_float else OperandKind.MEM

        if size is None:
            # Modifier without a size token (``~``, ``d5``): kept leniently.
            return Operand(kind, value=normalize_literal(payload))
        return Operand(kind, size, normalize_address(payload))
