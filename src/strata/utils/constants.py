"""Shared constants for Strata."""

from __future__ import annotations

# Placeholder inside a stored section that a later capture of the same
# section is substituted into.
PARENT_MARKER = "@parent"

# Names bound into every template body's namespace.
CONTEXT_NAME = "ctx"
HANDLE_NAME = "view"
PRIMITIVE_NAMES: frozenset[str] = frozenset(
    {
        "echo",
        "end",
        "extend",
        "include",
        "partial",
        "section",
        "show",
        "stop",
    }
)
