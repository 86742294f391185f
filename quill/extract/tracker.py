"""Scope context tracking across a document."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from quill.extract.classifier import Header, LineKind
from quill.scope import GLOBAL_SCOPE


@dataclass(frozen=True)
class ScopeContext:
    """The scope attribution for content lines.

    ``tags`` is None for the global context, otherwise the non-empty set of
    tags declared by the most recent header.
    """

    tags: frozenset[str] | None = None

    @property
    def is_global(self) -> bool:
        return self.tags is None

    def includes(self, name: str) -> bool:
        """Check whether content under this context belongs to a named scope."""
        return self.tags is not None and name in self.tags


GLOBAL_CONTEXT = ScopeContext()


def context_for_header(header: Header) -> ScopeContext:
    """Context that a header switches to; ``@global`` wins over other tags."""
    if GLOBAL_SCOPE in header.tags:
        return GLOBAL_CONTEXT
    return ScopeContext(frozenset(header.tags))


def advance(context: ScopeContext, kind: LineKind) -> ScopeContext:
    """Context in effect after visiting a line; content lines leave it unchanged."""
    if isinstance(kind, Header):
        return context_for_header(kind)
    return context


def track_scopes(kinds: Iterable[LineKind]) -> list[ScopeContext | None]:
    """Attribute every line to the context in effect when it is reached.

    Header lines get None since they never carry content; their context
    applies from the next line on.
    """
    context = GLOBAL_CONTEXT
    attributed: list[ScopeContext | None] = []
    for kind in kinds:
        attributed.append(None if isinstance(kind, Header) else context)
        context = advance(context, kind)
    return attributed
