"""Line classification for scope markers.

A line is a scope header only when, once trimmed, every whitespace-separated
token is ``@`` followed by a valid scope name:

    @dev
    @dev @test

Anything else (blank lines, ``@`` with a bad name, markers mixed with other
text) is content and is kept verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from quill.scope import is_valid_scope_name

MARKER_PREFIX = "@"


@dataclass(frozen=True)
class SourceLine:
    """A single line of the input document (without its terminator)."""

    number: int  # 1-based
    text: str


@dataclass(frozen=True)
class Header:
    """A pure scope declaration line."""

    tags: tuple[str, ...]


@dataclass(frozen=True)
class Content:
    """Any line that is not a scope header."""

    text: str


LineKind = Union[Header, Content]


def parse_marker_token(token: str) -> str | None:
    """Return the scope name of an ``@name`` token, or None if it is not one."""
    if not token.startswith(MARKER_PREFIX):
        return None
    name = token[len(MARKER_PREFIX) :]
    if not is_valid_scope_name(name):
        return None
    return name


def classify(line: str) -> LineKind:
    """Classify a line as a scope header or content.

    Examples:
        >>> classify("@dev @test")
        Header(tags=('dev', 'test'))
        >>> classify("debug = true")
        Content(text='debug = true')
        >>> classify("@dev # comment")
        Content(text='@dev # comment')
    """
    tokens = line.split()
    if not tokens:
        return Content(line)

    tags: list[str] = []
    for token in tokens:
        name = parse_marker_token(token)
        if name is None:
            return Content(line)
        if name not in tags:
            tags.append(name)

    return Header(tuple(tags))


def split_lines(document: str) -> list[SourceLine]:
    """Split a document on ``\\n`` into numbered source lines.

    A trailing newline produces a final empty line so that joining the lines
    back with ``\\n`` reproduces the document.
    """
    return [SourceLine(number=i, text=text) for i, text in enumerate(document.split("\n"), start=1)]
