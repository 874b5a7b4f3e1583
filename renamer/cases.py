"""
Case detection and conversion.

A name is split into lowercase parts (NormalizedName) plus the way it was
written (CaseInfo). Any NormalizedName can then be rendered under each of
the 18 combinations in rules.case_grid(), which is what transform_text uses
to find and replace every known spelling of a project name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .rules import SEPARATORS, CaseStyle, case_grid


class InvalidName(ValueError):
    """Raised for names that cannot be detected or rendered."""


@dataclass(frozen=True)
class NormalizedName:
    """Lowercase parts of a name, as built by detect(). Parts may be empty;
    validate_name() rejects those before rendering or replacing."""

    parts: Tuple[str, ...]

    def __str__(self) -> str:
        return " ".join(self.parts)


@dataclass(frozen=True)
class CaseInfo:
    separator: Optional[str]
    style: CaseStyle

    @classmethod
    def detect(cls, name: str) -> Tuple["CaseInfo", NormalizedName]:
        return detect(name)

    def render(self, name: NormalizedName) -> str:
        return render(self, name)


def all_cases() -> List[CaseInfo]:
    return [CaseInfo(separator=sep, style=style) for sep, style in case_grid()]


def detect(name: str) -> Tuple[CaseInfo, NormalizedName]:
    """
    Infer separator, style and parts of a literal name.

    Rules:
    - Separator is the first of SEPARATORS (in priority order) found anywhere
      in the name; with none found the whole name is a single part.
    - Style is UPPER if no part changes under upper(), else LOWER if no part
      changes under lower(), else CAPITALIZE. Characters without case are
      neutral, so a name with no letters at all is UPPER.
    """
    if not name:
        raise InvalidName("name must not be empty")

    separator = next((sep for sep in SEPARATORS if sep in name), None)
    raw_parts = name.split(separator) if separator is not None else [name]

    if all(p == p.upper() for p in raw_parts):
        style = CaseStyle.UPPER
    elif all(p == p.lower() for p in raw_parts):
        style = CaseStyle.LOWER
    else:
        style = CaseStyle.CAPITALIZE

    return (
        CaseInfo(separator=separator, style=style),
        NormalizedName(parts=tuple(p.lower() for p in raw_parts)),
    )


def _render_part(part: str, style: CaseStyle) -> str:
    if style is CaseStyle.UPPER:
        return part.upper()
    if style is CaseStyle.LOWER:
        return part.lower()
    if not part:
        raise InvalidName("cannot capitalize an empty name part")
    return part[0].upper() + part[1:].lower()


def render(case_info: CaseInfo, name: NormalizedName) -> str:
    sep = case_info.separator or ""
    return sep.join(_render_part(p, case_info.style) for p in name.parts)


def validate_name(name: NormalizedName) -> None:
    """Fail early for names transform_text would choke on halfway through."""
    if not name.parts or any(not p for p in name.parts):
        raise InvalidName(f"name has an empty part: {list(name.parts)!r}")


def transform_text(text: str, old: NormalizedName, new: NormalizedName) -> str:
    """
    Replace every rendering of `old` with the same rendering of `new`.

    Passes run in case_grid() order and each one works on the output of the
    previous pass. A replacement can therefore be matched again by a later
    pass; this is a known limitation and the order is kept stable so the
    output is reproducible.
    """
    validate_name(old)
    out = text
    for case_info in all_cases():
        search_for = render(case_info, old)
        replace_with = render(case_info, new)
        out = out.replace(search_for, replace_with)
    return out
