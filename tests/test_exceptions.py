"""Tests for error types, codes and compact formatting."""

import pytest

from strata import (
    ErrorCode,
    TemplateError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)
from strata.template import compile_template


class TestErrorCode:
    def test_codes_are_namespaced(self) -> None:
        assert ErrorCode.TEMPLATE_NOT_FOUND.value == "STRATA-TPL-001"
        assert ErrorCode.SYNTAX_ERROR.value == "STRATA-TPL-002"


class TestTemplateNotFoundError:
    def test_is_template_error(self) -> None:
        assert issubclass(TemplateNotFoundError, TemplateError)

    def test_message_includes_path(self) -> None:
        error = TemplateNotFoundError("page.py", "/srv/views/page.py")
        assert str(error) == "Template 'page.py' not found: /srv/views/page.py"
        assert error.name == "page.py"
        assert error.path == "/srv/views/page.py"

    def test_custom_message(self) -> None:
        error = TemplateNotFoundError("x", message="custom")
        assert str(error) == "custom"
        assert error.path is None

    def test_format_compact(self) -> None:
        compact = TemplateNotFoundError("page.py", "/v/page.py").format_compact()
        assert compact.startswith("STRATA-TPL-001: Template 'page.py' not found")


class TestTemplateSyntaxError:
    def test_from_compile(self) -> None:
        with pytest.raises(TemplateSyntaxError) as exc_info:
            compile_template("echo('a')\nif True\n", "bad.py", "/v/bad.py")
        error = exc_info.value
        assert error.lineno == 2
        assert error.filename == "/v/bad.py"
        assert isinstance(error.__cause__, SyntaxError)
        assert "/v/bad.py:2" in str(error)
        assert "  2 | if True" in str(error)

    def test_format_compact(self) -> None:
        error = TemplateSyntaxError("invalid syntax", lineno=1, name="t.py", source="if True")
        compact = error.format_compact()
        assert compact.startswith("STRATA-TPL-002: invalid syntax")
        assert "--> t.py:1" in compact

    def test_without_source(self) -> None:
        error = TemplateSyntaxError("invalid syntax")
        assert str(error) == "Syntax Error: invalid syntax\n  --> <template>"
