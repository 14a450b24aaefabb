"""
Intake: turns files on disk into FileDescriptor objects for the engine.

Plays the role of the browser upload widget: the engine only sees the file's
base name, byte size and declared MIME type, never its bytes.

=== MIME types ===
The upload picker accepts .pdf, .doc, .docx, .png, .jpg, .jpeg, .tiff and
.bmp. Those extensions map to the MIME type a browser reports for them, so
seeds are stable across platforms whose ``mimetypes`` registries differ.
Any other extension falls back to ``mimetypes.guess_type`` and finally to an
empty string (an unknown type, like ``File.type``).
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import List, Union

from forensix import FileDescriptor

logger = logging.getLogger("forensix.intake")
if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("[intake] %(message)s"))
    logger.addHandler(_handler)


PathLike = Union[str, Path]

BROWSER_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".tiff": "image/tiff",
    ".bmp": "image/bmp",
}
ACCEPTED_EXTENSIONS = frozenset(BROWSER_MIME_TYPES)


class IntakeError(ValueError):
    """Raised when a path cannot be turned into a FileDescriptor."""


def is_accepted(path: PathLike) -> bool:
    return Path(path).suffix.lower() in ACCEPTED_EXTENSIONS


def guess_mime_type(path: PathLike) -> str:
    suffix = Path(path).suffix.lower()
    if suffix in BROWSER_MIME_TYPES:
        return BROWSER_MIME_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(Path(path).name)
    return guessed or ""


def describe_file(path: PathLike) -> FileDescriptor:
    """Build a FileDescriptor from a regular file.

    Raises:
        IntakeError: the path does not exist or is not a regular file.
    """
    p = Path(path)
    if not p.exists():
        raise IntakeError(f"File not found: {p}")
    if not p.is_file():
        raise IntakeError(f"Not a regular file: {p}")

    descriptor = FileDescriptor(
        name=p.name,
        size_bytes=p.stat().st_size,
        mime_type=guess_mime_type(p),
    )
    if not is_accepted(p):
        logger.warning("%s is not an accepted upload type; analysing anyway.", p.name)
    return descriptor


def collect_files(root: PathLike, recursive: bool = True) -> List[Path]:
    """Accepted files under ``root``, sorted by path."""
    base = Path(root)
    if not base.is_dir():
        raise IntakeError(f"Not a directory: {base}")
    candidates = base.rglob("*") if recursive else base.iterdir()
    files = sorted(p for p in candidates if p.is_file() and is_accepted(p))
    logger.info("Found %d accepted file(s) under %s", len(files), base)
    return files
