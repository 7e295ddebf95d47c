"""Exceptions for the Strata renderer.

Exception Hierarchy:
TemplateError (base)
├── TemplateNotFoundError     # Template path does not exist
└── TemplateSyntaxError       # Template body failed to compile

Only `TemplateNotFoundError` is raised by the composition core itself.
Misuse of the section primitives (opening a section inside another,
closing a section that was never opened, showing a section that was never
captured, extending twice) is benign and never raises.

Exceptions raised by a template body while it executes are not wrapped;
they propagate to the caller of `Renderer.render()` unchanged.

Example:
    ```
    STRATA-TPL-001: Template 'pages/missing.py' not found: /srv/views/pages/missing.py
    ```

"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Searchable error codes for Strata template errors.

    Format: STRATA-{CATEGORY}-{NUMBER}

    Example:
        >>> ErrorCode.TEMPLATE_NOT_FOUND.value
        'STRATA-TPL-001'
    """

    # Template loading errors (STRATA-TPL-xxx)
    TEMPLATE_NOT_FOUND = "STRATA-TPL-001"
    SYNTAX_ERROR = "STRATA-TPL-002"


class TemplateError(Exception):
    """Base exception for all Strata template errors.

    Enables broad exception handling around a render:

        >>> try:
        ...     renderer.render("page.py", title="Home")
        ... except TemplateError as e:
        ...     log.error(e.format_compact())

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short, human-readable diagnostic.

        Returns:
            The message, prefixed with the error code when there is one.
        """
        header = str(self)
        if self.code:
            code_str = self.code.value
            if code_str not in header:
                header = f"{code_str}: {header}"
        return header


class TemplateNotFoundError(TemplateError):
    """The resolved template path does not exist.

    Carries the template name as requested and the path the loader tried,
    so callers can report exactly which file was missing.

    Example:
            >>> renderer.render("nonexistent.py")
        TemplateNotFoundError: Template 'nonexistent.py' not found: /srv/views/nonexistent.py

    Attributes:
        name: Template name as passed to load/render
        path: Resolved path (or in-memory identifier) that was looked up
    """

    code: ErrorCode | None = ErrorCode.TEMPLATE_NOT_FOUND

    def __init__(self, name: str, path: str | None = None, message: str | None = None):
        self.name = name
        self.path = path
        if message is None:
            message = f"Template '{name}' not found"
            if path:
                message += f": {path}"
        super().__init__(message)


class TemplateSyntaxError(TemplateError):
    """A template body could not be compiled.

    Wraps the `SyntaxError` raised by `compile()` and includes the offending
    source line when available.
    """

    code: ErrorCode | None = ErrorCode.SYNTAX_ERROR

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        name: str | None = None,
        filename: str | None = None,
        source: str | None = None,
        col_offset: int | None = None,
    ):
        self.message = message
        self.lineno = lineno
        self.name = name
        self.filename = filename
        self.source = source
        self.col_offset = col_offset
        super().__init__(self._format_message())

    @classmethod
    def from_syntax_error(
        cls, exc: SyntaxError, name: str, filename: str | None, source: str
    ) -> TemplateSyntaxError:
        """Build from the SyntaxError raised while compiling a template body."""
        # SyntaxError.offset is 1-based
        col = exc.offset - 1 if exc.offset else None
        return cls(
            exc.msg,
            lineno=exc.lineno,
            name=name,
            filename=filename,
            source=source,
            col_offset=col,
        )

    def _location(self) -> str:
        location = self.filename or self.name or "<template>"
        if self.lineno:
            location += f":{self.lineno}"
        return location

    def _snippet(self) -> list[str]:
        if not (self.source and self.lineno):
            return []
        lines = self.source.splitlines()
        if not 0 < self.lineno <= len(lines):
            return []
        parts = ["   |", f"{self.lineno:>3} | {lines[self.lineno - 1]}"]
        if self.col_offset is not None:
            parts.append(f"   | {' ' * self.col_offset}^")
        return parts

    def _format_message(self) -> str:
        header = f"Syntax Error: {self.message}\n  --> {self._location()}"
        snippet = self._snippet()
        if snippet:
            return header + "\n" + "\n".join(snippet)
        return header

    def format_compact(self) -> str:
        """Format syntax error as structured terminal diagnostic."""
        code_prefix = f"{self.code.value}: " if self.code else ""
        parts = [f"{code_prefix}{self.message}", f"  --> {self._location()}"]

        snippet = self._snippet()
        if snippet:
            parts.extend(snippet)
            parts.append("   |")

        return "\n".join(parts)
