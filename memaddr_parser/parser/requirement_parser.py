"""
RequirementParser
=================

Parses requirement text into :class:`~memaddr_parser.models.Requirement`
objects.

Requirement format::

    [flag:]left[comparator right][hits]

* ``flag``       – one letter from ``PRABCDNOMQITZGK`` (case-insensitive).
* ``left`` / ``right`` – operands, see
  :mod:`~memaddr_parser.parser.operand_parser`.
* ``comparator`` – ``= == != < <= > >=`` or, for accumulation,
  ``* / & + - ^ %``.  ``==`` is normalised to ``=``; a missing comparator
  reads as ``=`` with an empty right-hand value.
* ``hits``       – ``.N.`` or ``(N)``.

Scalable flags (Add Source, Sub Source, Add Address, Remember) never carry
a hit count, whatever the text says.

A *group* is a ``_``-separated list of requirements.  Empty segments are
skipped; a group with no requirements at all is represented by
:meth:`Requirement.placeholder` so that group numbering is preserved.
"""
from __future__ import annotations

import logging
import re
from typing import List

from ..models import Comparator, Flag, GrammarError, Requirement
from .operand_parser import OperandParser, operand_pattern

logger = logging.getLogger(__name__)

_FLAG_PATTERN = r"(?:(?P<flag>[PRABCDNOMQITZGK]):)?"
_COMPARATOR_PATTERN = r"(?P<cmp><=|>=|!=|==|<|>|=|\*|/|&|\+|-|\^|%)"
_HITS_PATTERN = r"(?:[.(](?P<hits>\d+)[.)\]])?"

_REQUIREMENT_RE = re.compile(
    _FLAG_PATTERN
    + operand_pattern("l_")
    + "(?:" + _COMPARATOR_PATTERN + operand_pattern("r_") + ")?"
    + _HITS_PATTERN,
    re.IGNORECASE | re.ASCII,
)

REQUIREMENT_SEPARATOR = "_"


class RequirementParser:
    """Stateless parser for requirements and requirement groups."""

    def __init__(self) -> None:
        self._operands = OperandParser()

    def parse_group(self, text: str) -> List[Requirement]:
        """
        Parse one group (the text between ``S`` separators).

        Returns
        -------
        List[Requirement]
            Never empty; an empty group yields the placeholder requirement.

        Raises
        ------
        GrammarError
            On the first segment that does not parse.
        """
        segments = [s for s in text.split(REQUIREMENT_SEPARATOR) if s]
        if not segments:
            logger.debug("Empty group %r, using placeholder requirement", text)
            return [Requirement.placeholder()]
        return [self.parse(segment) for segment in segments]

    def parse(self, segment: str) -> Requirement:
        """Parse a single requirement segment."""
        match = _REQUIREMENT_RE.fullmatch(segment)
        if match is None:
            logger.warning("No requirement shape matches %r", segment)
            raise GrammarError(segment)

        flag = Flag.from_letter(match.group("flag"))
        left = self._operands.from_match(match, "l_")
        comparator = Comparator.from_token(match.group("cmp"))
        right = self._operands.from_match(match, "r_")

        if flag.is_scalable:
            hits = None
        else:
            hits = int(match.group("hits") or 0)

        requirement = Requirement(
            flag=flag,
            left=left,
            comparator=comparator,
            right=right,
            hits=hits,
        )
        logger.debug("Parsed %r -> %r", segment, requirement)
        return requirement
