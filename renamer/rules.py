"""
Deterministic renaming rules.

This file exists to make the case grid explicit and its order enforceable.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

# Priority order used by detection: the first one present in a name wins.
SEPARATORS: Tuple[str, ...] = (" ", "_", "-", ".", "/")

TEXT_ENCODING = "utf-8"


class CaseStyle(str, Enum):
    CAPITALIZE = "capitalize"  # My Project
    UPPER = "upper"  # MY PROJECT
    LOWER = "lower"  # my project


STYLES: Tuple[CaseStyle, ...] = (CaseStyle.CAPITALIZE, CaseStyle.UPPER, CaseStyle.LOWER)


def case_grid() -> List[Tuple[Optional[str], CaseStyle]]:
    """
    The 18 (separator, style) pairs in replacement order.

    Style is the outer loop, separator the inner one, starting with no
    separator (mumble case). transform_text applies them in exactly this order.
    """
    grid: List[Tuple[Optional[str], CaseStyle]] = []
    for style in STYLES:
        grid.append((None, style))
        for sep in SEPARATORS:
            grid.append((sep, style))
    return grid
