"""Reading and writing scoped documents on disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from quill.config import get_config

logger = logging.getLogger(__name__)

CRLF = "\r\n"
LF = "\n"


@dataclass
class LoadedDocument:
    """Document text with ``\\n`` line endings plus how it was stored on disk."""

    text: str
    path: Path
    newline: str = LF
    encoding: str = "utf-8"


def detect_newline(raw: str) -> str:
    """Return ``\\r\\n`` when the first line ending of the text is CRLF.

    Only the first line ending is inspected. A file with mixed endings is
    treated as all one style, so writing it back converts every line ending
    to the detected one.
    """
    index = raw.find(LF)
    if index > 0 and raw[index - 1] == "\r":
        return CRLF
    return LF


def normalize_newlines(raw: str) -> str:
    return raw.replace(CRLF, LF)


def restore_newlines(text: str, newline: str) -> str:
    """Convert ``\\n`` line endings back to the given newline style."""
    if newline == LF:
        return text
    return text.replace(LF, newline)


def read_document(path: Path, encoding: str | None = None) -> LoadedDocument:
    """Read a document, trying fallback encodings if the primary one fails.

    Raises:
        UnicodeDecodeError: If the file cannot be decoded with any configured encoding.
        OSError: If the file cannot be read.
    """
    io_config = get_config().io
    candidates = [encoding or io_config.encoding, *io_config.fallback_encodings]

    data = path.read_bytes()
    for candidate in candidates:
        try:
            raw = data.decode(candidate)
            break
        except (UnicodeDecodeError, LookupError):
            logger.debug("Could not decode %s as %s", path, candidate)
            continue
    else:
        raise UnicodeDecodeError(
            candidates[0],
            data,
            0,
            len(data),
            f"Unable to decode {path} with {', '.join(candidates)}",
        )

    newline = detect_newline(raw)
    return LoadedDocument(
        text=normalize_newlines(raw),
        path=path,
        newline=newline,
        encoding=candidate,
    )


def write_document(path: Path, text: str, newline: str = LF, encoding: str = "utf-8") -> None:
    """Write extracted text, restoring the newline style when configured."""
    if get_config().io.preserve_newlines:
        text = restore_newlines(text, newline)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode(encoding))
