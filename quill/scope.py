"""Scope identifiers and scope requests."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

GLOBAL_SCOPE = "global"

SCOPE_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def is_valid_scope_name(name: str) -> bool:
    """Check that a name only contains ASCII letters, digits, underscores and dashes.

    Examples:
        >>> is_valid_scope_name("dev-1")
        True
        >>> is_valid_scope_name("")
        False
        >>> is_valid_scope_name("dév")
        False
    """
    return SCOPE_NAME_PATTERN.fullmatch(name) is not None


@dataclass(frozen=True)
class RequestedScope:
    """The scope a caller asks to extract.

    ``name`` is None for the global scope, otherwise the requested tag.
    """

    name: str | None = None

    GLOBAL: ClassVar[RequestedScope]

    def __post_init__(self) -> None:
        # The reserved name always means the global scope
        if self.name == GLOBAL_SCOPE:
            object.__setattr__(self, "name", None)

    @classmethod
    def named(cls, name: str) -> RequestedScope:
        """Request a scope by name; the reserved ``global`` maps to the global scope."""
        if name == GLOBAL_SCOPE:
            return cls.GLOBAL
        return cls(name=name)

    @property
    def is_global(self) -> bool:
        return self.name is None

    def __str__(self) -> str:
        return GLOBAL_SCOPE if self.name is None else self.name


RequestedScope.GLOBAL = RequestedScope()


def coerce_scope(value: str | RequestedScope | None) -> RequestedScope:
    """Normalize caller input into a RequestedScope (None means global)."""
    if value is None:
        return RequestedScope.GLOBAL
    if isinstance(value, RequestedScope):
        return value
    return RequestedScope.named(value)
