"""Diagnostics for scope markers that were not recognized as headers.

Malformed markers never fail extraction; the line is simply kept as content.
Linting reports them so authors can find typos such as ``@dev.local`` or
``@prod # live`` that silently leak content into the global scope.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from quill.errors import SCOPE_NAME_RULE
from quill.extract.classifier import MARKER_PREFIX, Content, classify, parse_marker_token, split_lines

TOKEN_PATTERN = re.compile(r"\S+")


@dataclass(frozen=True)
class MarkerIssue:
    """A line that looks like a scope header but is treated as content."""

    code: str
    line: int
    column: int
    token: str
    message: str


def lint_markers(document: str) -> list[MarkerIssue]:
    """Find content lines starting with ``@`` that are not valid scope headers.

    Lines and columns are 1-based; the column points at the offending token.
    """
    issues: list[MarkerIssue] = []
    for source in split_lines(document):
        if not source.text.strip().startswith(MARKER_PREFIX):
            continue
        if not isinstance(classify(source.text), Content):
            continue
        issues.extend(_lint_line(source.number, source.text))
    return issues


def _lint_line(number: int, text: str) -> list[MarkerIssue]:
    issues: list[MarkerIssue] = []
    stray: re.Match[str] | None = None

    for match in TOKEN_PATTERN.finditer(text):
        token = match.group(0)
        if not token.startswith(MARKER_PREFIX):
            stray = stray or match
            continue
        if parse_marker_token(token) is None:
            scope = token[len(MARKER_PREFIX) :]
            issues.append(
                MarkerIssue(
                    code="invalid_scope_name",
                    line=number,
                    column=match.start() + 1,
                    token=token,
                    message=f"Invalid scope name '{scope}'. {SCOPE_NAME_RULE}",
                )
            )

    if not issues and stray is not None:
        issues.append(
            MarkerIssue(
                code="mixed_content",
                line=number,
                column=stray.start() + 1,
                token=stray.group(0),
                message=(
                    f"Unexpected text '{stray.group(0)}' on a scope header line; "
                    "the line is kept as content and its scopes are ignored."
                ),
            )
        )
    return issues
