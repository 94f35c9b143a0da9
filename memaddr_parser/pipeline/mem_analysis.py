"""
MemAnalysis
===========

Full Mem-string parsing pipeline.

Stages:

1. :class:`~memaddr_parser.passes.group_split.GroupSplitPass`
   – Split the string into Core / Alt groups.
2. :class:`~memaddr_parser.parser.requirement_parser.RequirementParser`
   – Parse every group into requirements.
3. Address collection – every memory address referenced by any
   requirement, de-duplicated in first-seen order.

Parsing is all-or-nothing: a single unparseable requirement raises
:class:`~memaddr_parser.models.GrammarError` and no partial result is
returned.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from ..models import ParseResult, Requirement
from ..parser.requirement_parser import RequirementParser
from ..passes.group_split import GroupSplitPass

logger = logging.getLogger(__name__)


class MemAnalysis:
    """High-level facade turning a Mem string into a :class:`ParseResult`."""

    def __init__(self) -> None:
        self._splitter = GroupSplitPass()
        self._parser = RequirementParser()

    def parse(self, text: str) -> ParseResult:
        """
        Parse a complete Mem string.

        Parameters
        ----------
        text:
            The raw condition string, e.g.
            ``"R:0xH00175b=73_0xH0081f9=0S0xH00b241=164.40."``

        Returns
        -------
        ParseResult

        Raises
        ------
        GrammarError
            If any requirement segment cannot be parsed.
        """
        groups = [self._parser.parse_group(g) for g in self._splitter.run(text)]
        addresses = collect_addresses(groups)

        logger.info(
            "Parsed Mem string into %d group(s), %d requirement(s), %d address(es)",
            len(groups),
            sum(len(g) for g in groups),
            len(addresses),
        )
        return ParseResult(
            groups=tuple(tuple(g) for g in groups),
            addresses=tuple(addresses),
        )


def collect_addresses(groups: Iterable[Iterable[Requirement]]) -> List[str]:
    """Return every referenced memory address once, in first-seen order."""
    seen: Dict[str, None] = {}
    for group in groups:
        for req in group:
            for operand in (req.left, req.right):
                if operand.address:
                    seen.setdefault(operand.address, None)
    return list(seen)
