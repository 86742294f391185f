"""Quill - scoped sections for TOML and other line-based documents."""

from quill.errors import InvalidScopeIdentifierError, QuillError, ScopeNotFoundError
from quill.extract import declared_scopes, extract_scope
from quill.lint import MarkerIssue, lint_markers
from quill.scope import GLOBAL_SCOPE, RequestedScope

__version__ = "0.1.0"

__all__ = [
    "GLOBAL_SCOPE",
    "InvalidScopeIdentifierError",
    "MarkerIssue",
    "QuillError",
    "RequestedScope",
    "ScopeNotFoundError",
    "__version__",
    "declared_scopes",
    "extract_scope",
    "lint_markers",
]
