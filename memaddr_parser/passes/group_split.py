"""
GroupSplitPass
==============

Splits a raw Mem string into its requirement groups.

Groups are separated by the letter ``S``.  The one exception is the bit-6
size token ``0xS``: an ``S`` immediately preceded by ``0x`` (or ``0X``)
belongs to an address and is not a separator.

The first group is the *Core Group*; every following group is an *Alt
Group*.  Empty groups are kept so that numbering matches the source string::

    "0xH1234=5S0xH5678=10"  ->  ["0xH1234=5", "0xH5678=10"]
    "0xS1234=5"             ->  ["0xS1234=5"]
    "SSS"                   ->  ["", "", "", ""]
"""
from __future__ import annotations

import re
from typing import List

_GROUP_SEPARATOR_RE = re.compile(r"(?<!0[xX])S")


class GroupSplitPass:
    """Splits a Mem string into Core / Alt group substrings."""

    def run(self, text: str) -> List[str]:
        """
        Apply the pass to a raw Mem string.

        Returns
        -------
        List[str]
            Group substrings in source order; always at least one entry.
        """
        return _GROUP_SEPARATOR_RE.split(text)
