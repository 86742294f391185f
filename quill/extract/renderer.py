"""Scope extraction.

Blanks every line that does not belong to the requested scope while keeping
line positions intact, so locations reported by a downstream TOML parser still
point at the right line of the original file.
"""

from __future__ import annotations

import logging
from collections import Counter

from quill.errors import InvalidScopeIdentifierError, ScopeNotFoundError
from quill.extract.classifier import Content, Header, LineKind, classify, split_lines
from quill.extract.tracker import ScopeContext, track_scopes
from quill.scope import GLOBAL_SCOPE, RequestedScope, coerce_scope, is_valid_scope_name

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


def _classify_document(document: str) -> list[LineKind]:
    return [classify(line.text) for line in split_lines(document)]


def _collect_tags(kinds: list[LineKind]) -> list[str]:
    """Distinct header tags in order of first appearance, without ``global``."""
    seen: dict[str, None] = {}
    for kind in kinds:
        if isinstance(kind, Header):
            for tag in kind.tags:
                if tag != GLOBAL_SCOPE:
                    seen.setdefault(tag, None)
    return list(seen)


def declared_scopes(document: str) -> list[str]:
    """List the named scopes a document declares, in order of first appearance.

    Examples:
        >>> declared_scopes("a = 1\\n@dev @test\\nb = 2\\n@prod\\n@dev")
        ['dev', 'test', 'prod']
    """
    return _collect_tags(_classify_document(document))


def render_line(kind: LineKind, context: ScopeContext | None, requested: RequestedScope) -> str:
    """Text emitted for one line under the requested scope."""
    if not isinstance(kind, Content) or context is None:
        return ""
    if context.is_global:
        return kind.text
    if requested.name is not None and context.includes(requested.name):
        return kind.text
    return ""


def extract_scope(document: str, scope: str | RequestedScope | None = None) -> str:
    """Extract a scope from a document.

    Header lines are always blanked. Global content is kept for every request;
    named content is kept only when its header lists the requested scope.
    Requesting the global scope keeps global content only. The result has the
    same number of lines as the input.

    Args:
        document: Full document text, lines separated by ``\\n``.
        scope: Scope name, RequestedScope, or None for the global scope.

    Returns:
        The document with every line outside the scope replaced by an empty line.

    Raises:
        InvalidScopeIdentifierError: If the requested name is not a valid scope name.
        ScopeNotFoundError: If no header in the document declares the requested scope.
    """
    requested = coerce_scope(scope)
    if requested.name is not None and not is_valid_scope_name(requested.name):
        raise InvalidScopeIdentifierError(requested.name)

    kinds = _classify_document(document)
    contexts = track_scopes(kinds)

    if requested.name is not None and requested.name not in _collect_tags(kinds):
        raise ScopeNotFoundError(requested.name)

    rendered = [render_line(kind, context, requested) for kind, context in zip(kinds, contexts)]

    logger.debug(
        "Extracted scope %s: %d of %d lines non-empty",
        requested,
        sum(1 for line in rendered if line),
        len(rendered),
    )
    return LINE_SEPARATOR.join(rendered)


def count_scope_lines(document: str) -> dict[str, int]:
    """Count non-blank content lines attributed to each scope.

    Global content is counted under ``global``; a line under a multi-tag header
    counts once for every tag.
    """
    kinds = _classify_document(document)
    counts: Counter[str] = Counter()
    for kind, context in zip(kinds, track_scopes(kinds)):
        if context is None or not isinstance(kind, Content) or not kind.text.strip():
            continue
        if context.is_global:
            counts[GLOBAL_SCOPE] += 1
        else:
            for tag in context.tags or ():
                counts[tag] += 1

    result = {GLOBAL_SCOPE: counts[GLOBAL_SCOPE]}
    for tag in _collect_tags(kinds):
        result[tag] = counts[tag]
    return result
