"""
Directory copy + rename.

Responsibilities:
- walk the input tree in a stable order
- rename every file and directory entry
- rewrite text file contents, copy everything else byte for byte
- report what was done (or would be done, for dry runs)
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional, Tuple, Union

from charset_normalizer import from_bytes

from .cases import NormalizedName, detect, transform_text, validate_name
from .models import EntryAction, RenameOptions, RenameReport, ReportItem
from .rules import TEXT_ENCODING

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class RenameError(Exception):
    """Raised when the input or output location cannot be used."""


def decode_content(raw: bytes, detect_encoding: bool = False) -> Tuple[Optional[str], Optional[str]]:
    """
    Decode file bytes for rewriting.

    Rules:
    - UTF-8 content is always treated as text.
    - Anything else is binary, unless detect_encoding is set: then the best
      charset-normalizer guess is used, and the content is written back in
      that same encoding, or copied verbatim if the new name does not fit it.
    - Returns (None, None) for binary content.
    """
    try:
        return raw.decode(TEXT_ENCODING), TEXT_ENCODING
    except UnicodeDecodeError:
        if not detect_encoding:
            return None, None

    match = from_bytes(raw).best()
    if match is None:
        return None, None

    try:
        return raw.decode(match.encoding), match.encoding
    except (UnicodeDecodeError, LookupError):
        return None, None


def rename_project(
    input_dir: PathLike,
    new_name: str,
    output_dir: Optional[PathLike] = None,
    options: Optional[RenameOptions] = None,
) -> RenameReport:
    """
    Copy `input_dir` to `output_dir` (default: a sibling named `new_name`),
    renaming the project on the way. The old name is the input's basename.
    """
    options = options or RenameOptions()
    source = Path(input_dir).resolve()
    if not source.is_dir():
        raise RenameError(f"input is not a directory: {input_dir}")

    _, old = detect(source.name)
    _, new = detect(new_name)
    validate_name(old)
    validate_name(new)

    target = Path(output_dir).resolve() if output_dir is not None else source.parent / new_name
    if target == source or source in target.parents:
        raise RenameError(f"output {target} must not be inside input {source}")

    logger.info("Renaming project %s -> %s (%s)", old, new, target)
    report = RenameReport(
        old_name=list(old.parts),
        new_name=list(new.parts),
        output=str(target),
        dry_run=options.dry_run,
    )
    _walk(source, target, old, new, options, report)
    return report


def _walk(
    src: Path,
    dst: Path,
    old: NormalizedName,
    new: NormalizedName,
    options: RenameOptions,
    report: RenameReport,
) -> None:
    if not src.is_dir():
        _rename_file(src, dst, old, new, options, report)
        return

    if not dst.exists():
        logger.info("Creating directory: %s", dst)
        report.items.append(ReportItem(source=str(src), target=str(dst), action=EntryAction.MKDIR))
        if not options.dry_run:
            dst.mkdir(parents=True, exist_ok=True)

    for entry in sorted(src.iterdir(), key=lambda p: p.name):
        _walk(entry, dst / transform_text(entry.name, old, new), old, new, options, report)


def _rename_file(
    src: Path,
    dst: Path,
    old: NormalizedName,
    new: NormalizedName,
    options: RenameOptions,
    report: RenameReport,
) -> None:
    if dst.exists() and not options.overwrite:
        logger.warning("Output exists, skipping: %s", dst)
        report.items.append(
            ReportItem(source=str(src), target=str(dst), action=EntryAction.SKIPPED_EXISTING)
        )
        return

    raw = src.read_bytes()
    text, encoding = decode_content(raw, options.detect_encoding)

    out = None
    if text is not None:
        new_text = transform_text(text, old, new)
        try:
            out = new_text.encode(encoding)
        except UnicodeEncodeError:
            logger.warning("New name cannot be written as %s, doing a simple copy: %s", encoding, src)

    if out is None:
        logger.info("Failed to read file, doing a simple copy: %s", src)
        if not options.dry_run:
            shutil.copy2(src, dst)
        report.items.append(ReportItem(source=str(src), target=str(dst), action=EntryAction.COPIED_BINARY))
        return

    logger.info("Renaming content of file: %s", src)
    action = EntryAction.REWRITTEN if new_text != text else EntryAction.UNCHANGED
    if not options.dry_run:
        logger.debug("Creating file: %s", dst)
        dst.write_bytes(out)
        shutil.copymode(src, dst)
    report.items.append(ReportItem(source=str(src), target=str(dst), action=action, encoding=encoding))
