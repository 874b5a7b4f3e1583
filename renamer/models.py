from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .rules import CaseStyle


class RenameOptions(BaseModel):
    dry_run: bool = False
    overwrite: bool = False
    detect_encoding: bool = False


class EntryAction(str, Enum):
    MKDIR = "mkdir"
    REWRITTEN = "rewritten"
    UNCHANGED = "unchanged"
    COPIED_BINARY = "copied_binary"
    SKIPPED_EXISTING = "skipped_existing"


class ReportItem(BaseModel):
    source: str
    target: str
    action: EntryAction
    encoding: Optional[str] = None


class RenameReport(BaseModel):
    old_name: List[str]
    new_name: List[str]
    output: str
    dry_run: bool = False
    items: List[ReportItem] = Field(default_factory=list)

    @property
    def counts(self) -> Dict[str, int]:
        out = {action.value: 0 for action in EntryAction}
        for item in self.items:
            out[item.action.value] += 1
        return out


class DetectRequest(BaseModel):
    name: str


class DetectResponse(BaseModel):
    separator: Optional[str] = Field(default=None, examples=["_"])
    style: CaseStyle
    parts: List[str]


class CaseRendering(BaseModel):
    separator: Optional[str] = None
    style: CaseStyle
    value: str


class CasesResponse(BaseModel):
    parts: List[str]
    cases: List[CaseRendering]


class TransformRequest(BaseModel):
    text: str
    old_name: str
    new_name: str


class TransformResponse(BaseModel):
    text: str
    changed: bool


class TransformedFile(BaseModel):
    filename: str
    sha256: str
    content_b64: str
    rewritten: bool = False


class HealthResponse(BaseModel):
    ok: bool = True
