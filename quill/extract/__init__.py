"""Extract module: classify lines, track scope context, render a scope."""

from quill.extract.classifier import Content, Header, LineKind, SourceLine, classify, split_lines
from quill.extract.renderer import count_scope_lines, declared_scopes, extract_scope
from quill.extract.tracker import GLOBAL_CONTEXT, ScopeContext, track_scopes

__all__ = [
    "Content",
    "GLOBAL_CONTEXT",
    "Header",
    "LineKind",
    "ScopeContext",
    "SourceLine",
    "classify",
    "count_scope_lines",
    "declared_scopes",
    "extract_scope",
    "split_lines",
    "track_scopes",
]
