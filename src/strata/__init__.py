"""Strata — a minimal template-inheritance renderer.

Templates are plain Python files. A template can declare a parent with
``extend()``, capture named sections with ``section()``/``end()``, and the
parent splices those sections into its own markup with ``show()``.

Quickstart:
    >>> from strata import Renderer
    >>> renderer = Renderer("views/")
    >>> renderer.render("page.py", {"title": "Home"})

views/layout.py:
    ```python
    echo("<html><head><title>")
    show("title")
    echo("</title></head><body>")
    show("content")
    echo("</body></html>")
    ```

views/page.py:
    ```python
    extend("layout.py")

    section("title")
    echo(ctx["title"])
    end()

    section("content")
    include("partials/nav.py")
    echo("<p>Welcome</p>")
    end()
    ```

Template primitives:
- ``extend(name)``: render ``name`` instead, once this template finishes
- ``section(name)`` / ``end()``: capture a named section
- ``show(name)``: write a captured section (nothing if absent)
- ``partial(name)``: return another template's output
- ``include(name)``: write another template's output
- ``echo(*values)``: write values
- ``ctx``: read-only mapping of the render data

Section Layering:
The first capture of a section wins; later captures of the same name are
substituted into its ``@parent`` marker. A child can therefore override a
parent's section outright, or keep the parent's content with ``@parent``.

Thread-Safety:
Per-render state lives in a ContextVar. One Renderer can be used from many
threads or async tasks at once without sharing sections between renders.

"""

from strata.environment import (
    DictLoader,
    ErrorCode,
    FileSystemLoader,
    Loader,
    TemplateError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)
from strata.render_context import (
    CaptureStack,
    FrameKind,
    RenderState,
    get_render_state,
    get_render_state_required,
    render_state,
)
from strata.renderer import Renderer
from strata.template import TemplateHandle

__version__ = "0.1.0"

__all__ = [
    "CaptureStack",
    "DictLoader",
    "ErrorCode",
    "FileSystemLoader",
    "FrameKind",
    "Loader",
    "RenderState",
    "Renderer",
    "TemplateError",
    "TemplateHandle",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "__version__",
    "get_render_state",
    "get_render_state_required",
    "render_state",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'strata' has no attribute {name!r}")
