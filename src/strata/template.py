"""Template bodies — compilation, namespace and the primitives handle.

A Strata template is a Python source file. It is compiled with
``compile(source, filename, "exec")`` and executed in a fresh namespace
holding:

- ``ctx``: read-only mapping of the data passed to ``render()``
- ``view``: the `TemplateHandle` for the active render
- the primitives, as plain names bound to that handle:
  ``extend``, ``partial``, ``include``, ``section``, ``end``/``stop``,
  ``show`` and ``echo``

Example template (``page.py``):
    ```python
    extend("layout.py")

    section("title")
    echo(ctx["title"])
    end()

    section("scripts")
    echo("@parent")
    echo('<script src="/page.js"></script>')
    end()
    ```

Anything a body echoes outside a section goes to the output of the
template being loaded.

"""

from __future__ import annotations

import builtins
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from strata.environment.exceptions import TemplateSyntaxError
from strata.utils.constants import CONTEXT_NAME, HANDLE_NAME, PRIMITIVE_NAMES

if TYPE_CHECKING:
    import types

    from strata.renderer import Renderer


class TemplateHandle:
    """The capability set handed to a template body.

    Thin wrappers around the `Renderer` primitives. The ones a template
    uses for output (``end``, ``show``, ``include``, ``echo``) write into
    the current capture frame instead of returning text.

    Thread-Safety:
        Holds no render state of its own; every call resolves the active
        render through the Renderer's ContextVar.
    """

    __slots__ = ("_renderer",)

    def __init__(self, renderer: Renderer):
        self._renderer = renderer

    def extend(self, name: str) -> None:
        """Declare ``name`` as this template's parent."""
        self._renderer.extend(name)

    def partial(self, name: str) -> str:
        """Render ``name`` and return its output."""
        return self._renderer.partial(name)

    def include(self, name: str) -> None:
        """Render ``name`` and write its output here."""
        self.echo(self._renderer.partial(name))

    def section(self, name: str) -> None:
        """Start capturing section ``name``."""
        self._renderer.section(name)

    def end(self) -> None:
        """Close the open section and write its composed content here."""
        self.echo(self._renderer.stop())

    stop = end

    def show(self, name: str) -> None:
        """Write the content of section ``name``; nothing if it was never captured."""
        self.echo(self._renderer.show(name))

    def echo(self, *values: Any) -> None:
        """Write values to the current capture frame. ``None`` writes nothing."""
        for value in values:
            if value is not None:
                self._renderer.write(str(value))

    def namespace(self, data: Mapping[str, Any], filename: str | None) -> dict[str, Any]:
        """Build the globals a template body executes with."""
        namespace: dict[str, Any] = {name: getattr(self, name) for name in PRIMITIVE_NAMES}
        namespace.update(
            {
                "__name__": "__strata_template__",
                "__file__": filename,
                "__builtins__": builtins,
                CONTEXT_NAME: data,
                HANDLE_NAME: self,
            }
        )
        return namespace


def compile_template(source: str, name: str, filename: str | None) -> types.CodeType:
    """Compile a template body.

    Raises:
        TemplateSyntaxError: If the source is not valid Python
    """
    try:
        return compile(source, filename or f"<{name}>", "exec")
    except SyntaxError as e:
        raise TemplateSyntaxError.from_syntax_error(e, name, filename, source) from e
