"""Errors raised by scope extraction."""

from __future__ import annotations

SCOPE_NAME_RULE = (
    "Scope names may only contain ASCII letters, ASCII digits, underscores, and dashes."
)


class QuillError(Exception):
    """Base class for all Quill errors."""


class ScopeNotFoundError(QuillError):
    """The requested scope is never declared by any header in the document."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"Scope '{scope}' is not declared in the document.")


class InvalidScopeIdentifierError(QuillError):
    """The requested scope name is not a valid scope identifier."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"Invalid scope name '{scope}'. {SCOPE_NAME_RULE}")
