"""
MemFormatter
============

Renders parsed requirement groups as fixed-width text blocks.

Each group becomes a header followed by a fenced code block with one line
per requirement::

    __**Core Group**__:```
     1:ResetIf     Mem   8-bit  0x00175b =  Value        0x000049  (0)
     2:            Mem   8-bit  0x0081f9 =  Value        0x000000  (0)```

Column layout of a requirement line:

+---------------+-------+--------------------------------------------+
| Column        | Width | Notes                                      |
+===============+=======+============================================+
| index         | 2     | 1-based, right-justified, followed by ``:``|
+---------------+-------+--------------------------------------------+
| flag          | 12    |                                            |
+---------------+-------+--------------------------------------------+
| left type     | 6     |                                            |
+---------------+-------+--------------------------------------------+
| left size     | 7     |                                            |
+---------------+-------+--------------------------------------------+
| left value    | 9     |                                            |
+---------------+-------+--------------------------------------------+
| comparator    | 3     | omitted with the rest of the line for      |
+---------------+-------+ scalable flags, unless the comparator is an |
| right type    | 6     | arithmetic operator                        |
+---------------+-------+                                            |
| right size    | 7     |                                            |
+---------------+-------+                                            |
| right value   | 10    |                                            |
+---------------+-------+--------------------------------------------+
| hits          |       | ``(N)``, never shown for scalable flags    |
+---------------+-------+--------------------------------------------+

Names longer than their column are not truncated.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence

from ..models import Flag, Operand, OperandKind, Requirement, SizeCode

# ---------------------------------------------------------------------------
# Display names
# ---------------------------------------------------------------------------

FLAG_NAMES: Mapping[Flag, str] = MappingProxyType(
    {
        Flag.NONE: "",
        Flag.PAUSE_IF: "Pause If",
        Flag.RESET_IF: "ResetIf",
        Flag.ADD_SOURCE: "AddSource",
        Flag.SUB_SOURCE: "SubSource",
        Flag.ADD_HITS: "AddHits",
        Flag.SUB_HITS: "SubHits",
        Flag.AND_NEXT: "AndNext",
        Flag.OR_NEXT: "OrNext",
        Flag.MEASURED: "Measured",
        Flag.MEASURED_IF: "MeasuredIf",
        Flag.ADD_ADDRESS: "AddAddress",
        Flag.TRIGGER: "Trigger",
        Flag.RESET_NEXT_IF: "ResetNextIf",
        Flag.MEASURED_PERCENT: "Measured%",
        Flag.REMEMBER: "Remember",
    }
)

KIND_NAMES: Mapping[OperandKind, str] = MappingProxyType(
    {
        OperandKind.MEM: "Mem",
        OperandKind.DELTA: "Delta",
        OperandKind.PRIOR: "Prior",
        OperandKind.BCD: "BCD",
        OperandKind.INVERTED: "Inverted",
        OperandKind.FLOAT: "Float",
        OperandKind.VALUE: "Value",
        OperandKind.RECALL: "Recall",
        OperandKind.VARIABLE: "Variable",
    }
)

SIZE_NAMES: Mapping[SizeCode, str] = MappingProxyType(
    {
        SizeCode.BIT0: "Bit0",
        SizeCode.BIT1: "Bit1",
        SizeCode.BIT2: "Bit2",
        SizeCode.BIT3: "Bit3",
        SizeCode.BIT4: "Bit4",
        SizeCode.BIT5: "Bit5",
        SizeCode.BIT6: "Bit6",
        SizeCode.BIT7: "Bit7",
        SizeCode.BITCOUNT: "BitCount",
        SizeCode.LOWER4: "Lower4",
        SizeCode.UPPER4: "Upper4",
        SizeCode.BIT8: "8-bit",
        SizeCode.BIT16: "16-bit",
        SizeCode.BIT24: "24-bit",
        SizeCode.BIT32: "32-bit",
        SizeCode.BIT16_BE: "16-bit BE",
        SizeCode.BIT24_BE: "24-bit BE",
        SizeCode.BIT32_BE: "32-bit BE",
        SizeCode.FLOAT: "Float",
        SizeCode.FLOAT_BE: "Float BE",
        SizeCode.DOUBLE32: "Double32",
        SizeCode.DOUBLE32_BE: "Double32 BE",
        SizeCode.MBF32: "MBF32",
        SizeCode.MBF32_LE: "MBF32 LE",
    }
)

CODE_FENCE = "```"


class MemFormatter:
    """
    Renders requirement groups as aligned text.

    Parameters
    ----------
    markdown:
        Wrap headers in bold/underline markup and requirement lines in code
        fences (default).  When ``False`` plain ``Core Group:`` /
        ``Alt Group N:`` headers are used and lines are not fenced.
    """

    def __init__(self, markdown: bool = True) -> None:
        self.markdown = markdown

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def format(self, groups: Iterable[Sequence[Requirement]]) -> str:
        """Render every group, each block preceded by a newline."""
        return "".join(
            "\n" + self._format_group(i, group) for i, group in enumerate(groups)
        )

    def format_requirement(self, req: Requirement, index: int) -> str:
        """Render one requirement line; *index* is 0-based."""
        line = f"{index + 1:>2}:"
        line += f"{FLAG_NAMES[req.flag]:<12}"
        line += self._operand_columns(req.left, value_width=9)

        if req.shows_comparison:
            line += f"{req.comparator.value:<3}"
            line += self._operand_columns(req.right, value_width=10)
            if not req.flag.is_scalable and req.hits is not None:
                line += f"({req.hits})"

        return line

    # ------------------------------------------------------------------

    def _format_group(self, index: int, group: Sequence[Requirement]) -> str:
        title = "Core Group" if index == 0 else f"Alt Group {index}"
        lines: List[str] = [
            self.format_requirement(req, j) for j, req in enumerate(group)
        ]
        if not self.markdown:
            return f"{title}:" + "".join("\n" + line for line in lines)
        body = "".join("\n" + line for line in lines)
        return f"__**{title}**__:{CODE_FENCE}{body}{CODE_FENCE}"

    @staticmethod
    def _operand_columns(operand: Operand, value_width: int) -> str:
        size = SIZE_NAMES[operand.size] if operand.size else ""
        return (
            f"{KIND_NAMES[operand.kind]:<6}"
            f"{size:<7}"
            f"{operand.value:<{value_width}}"
        )
