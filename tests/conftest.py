"""Pytest configuration and fixtures for Strata tests."""

from pathlib import Path

import pytest

from strata import DictLoader, Renderer

LAYOUT = """\
echo("<html><head><title>")
show("title")
echo("</title></head><body>")
section("content")
echo("<p>Default content</p>")
end()
echo("</body></html>")
"""


def make_renderer(templates: dict[str, str], **kwargs) -> Renderer:
    """Build a Renderer over in-memory templates."""
    return Renderer(loader=DictLoader(templates), **kwargs)


@pytest.fixture
def renderer_with_loader() -> Renderer:
    """Create a Renderer with a DictLoader and a small inheritance tree."""
    return make_renderer(
        {
            "base.py": LAYOUT,
            "child.py": (
                'extend("base.py")\n'
                'echo("top-level text")\n'
                'section("title")\n'
                'echo(ctx["title"])\n'
                "end()\n"
                'section("content")\n'
                'echo("<p>Child</p>")\n'
                "end()\n"
            ),
            "append.py": (
                'extend("base.py")\n'
                'section("content")\n'
                'echo("@parent<p>Extra</p>")\n'
                "end()\n"
            ),
            "partial.py": 'echo("<p>Partial content</p>")',
        }
    )


@pytest.fixture
def views(tmp_path: Path) -> Path:
    """Template directory on disk with a layout, a page and a nested partial."""
    root = tmp_path / "views"
    (root / "partials").mkdir(parents=True)
    (root / "layout.py").write_text(LAYOUT)
    (root / "page.py").write_text(
        'extend("layout.py")\n'
        'section("title")\n'
        'echo(ctx["title"])\n'
        "end()\n"
        'section("content")\n'
        'include("partials/nav.py")\n'
        'echo("<p>", ctx["body"], "</p>")\n'
        "end()\n"
    )
    (root / "partials" / "nav.py").write_text('echo("<nav>", " | ".join(ctx["links"]), "</nav>")')
    return root


def assert_contains(result: str, *expected_parts: str) -> None:
    """Assert rendered output contains all expected parts.

    Args:
        result: The actual rendering result.
        expected_parts: Strings that should all be present in the result.
    """
    for part in expected_parts:
        assert part in result, (
            f"Rendered output missing expected content:\n"
            f"  Missing: {part!r}\n"
            f"  Actual: {result!r}"
        )
