"""Strata Renderer — template loading, inheritance and sections.

The Renderer executes template bodies and lets a child template and its
parent cooperate through named sections.

Render Flow:
    ```
    render("page.py", data)
    ├── load("page.py")          # child: captures sections, calls extend()
    │   └── section()/stop()     # fills the shared section store
    └── load("layout.py")        # only if extend() was called
        └── show()/section()     # splices the child's sections in
    ```

State machine per render:
    Idle → ChildExecuting → (ExtendedPending → ParentExecuting → Done) | Done

Section Composition:
The first capture of a section name is stored verbatim. Every later
capture of the same name is substituted into the stored content's
``@parent`` marker:

    child:   section("nav"); echo("@parent<a href='/x'>X</a>"); end()
    parent:  section("nav"); echo("<a href='/'>Home</a>"); end()
    result:  <a href='/'>Home</a><a href='/x'>X</a>

Inheritance is single level: the extends flag is checked once, after the
initially named template finishes. A parent's own ``extend()`` is recorded
but not followed.

Thread-Safety:
The Renderer holds only immutable configuration. Per-render state lives
in a ContextVar (see `strata.render_context`), so one Renderer can be
shared by concurrent threads and async tasks.

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from strata.environment.loaders import FileSystemLoader, Loader
from strata.render_context import (
    FrameKind,
    get_render_state,
    get_render_state_required,
    render_state,
)
from strata.template import TemplateHandle, compile_template
from strata.utils.constants import PARENT_MARKER

logger = logging.getLogger(__name__)


class Renderer:
    """Render templates with single-level inheritance and named sections.

    Attributes:
        loader: Template loader (a FileSystemLoader when built from ``root``)
        parent_marker: Placeholder substituted by later captures of a section

    Example:
            >>> renderer = Renderer("views/")
            >>> renderer.render("page.py", {"title": "Home"})
            '<html><title>Home</title>...</html>'

            >>> renderer = Renderer(loader=DictLoader({
            ...     "hello.py": "echo('Hello, ', ctx['name'], '!')",
            ... }))
            >>> renderer.render("hello.py", name="World")
            'Hello, World!'

    """

    __slots__ = ("loader", "parent_marker")

    def __init__(
        self,
        root: str | Path | None = None,
        *,
        loader: Loader | None = None,
        encoding: str = "utf-8",
        parent_marker: str = PARENT_MARKER,
    ):
        if (root is None) == (loader is None):
            raise TypeError("Renderer() takes exactly one of 'root' or 'loader'")
        self.loader: Loader = loader if loader is not None else FileSystemLoader(root, encoding)
        self.parent_marker = parent_marker

    def render(
        self, name: str, data: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> str:
        """Render a template, following its ``extend()`` if it made one.

        Args:
            name: Template name, relative to the loader root
            data: Bindings exposed to every template body as ``ctx``
            **kwargs: Extra bindings (override keys in ``data``)

        Returns:
            The parent's output if the template extended one, otherwise the
            template's own output.

        Raises:
            TemplateNotFoundError: If this template or any template it loads
                does not exist
        """
        bindings = {**(data or {}), **kwargs}
        with render_state(bindings) as state:
            logger.debug("Rendering %r", name)
            output = self.load(name)

            parent = state.extended_template
            if parent is None:
                return output

            # The child's own top-level output is discarded.
            logger.debug("Template %r extends %r", name, parent)
            state.extended_template = None
            output = self.load(parent)
            if state.extended_template is not None:
                logger.debug(
                    "Parent %r extends %r; only one level of inheritance is followed",
                    parent,
                    state.extended_template,
                )
            return output

    def load(self, name: str) -> str:
        """Execute a template body and return everything it wrote.

        Called outside of ``render()``, the body runs in a throwaway render
        state with no data.

        Raises:
            TemplateNotFoundError: If the template does not exist
            TemplateSyntaxError: If the template body is not valid Python
        """
        state = get_render_state()
        if state is None:
            with render_state():
                return self.load(name)

        source, filename = self.loader.get_source(name)
        code = compile_template(source, name, filename)
        handle = TemplateHandle(self)

        capture = state.capture
        # Sections opened by this body must not rename the caller's open section.
        outer_section = state.open_section
        index = capture.push(FrameKind.TEMPLATE, name)
        state.template_stack.append(name)
        logger.debug("Loading %r from %s", name, filename)
        try:
            exec(code, handle.namespace(state.data, filename))
            folded = capture.fold_above(index)
            if folded:
                logger.warning(
                    "Template %r finished with unclosed section(s): %s",
                    name,
                    ", ".join(folded),
                )
            return capture.pop()
        finally:
            capture.truncate(index)
            state.template_stack.pop()
            state.open_section = outer_section

    def partial(self, name: str) -> str:
        """Render ``name`` inline and return its output."""
        return self.load(name)

    def extend(self, name: str) -> None:
        """Record ``name`` as the parent template. Last call wins."""
        state = get_render_state_required()
        if state.extended_template is not None and state.extended_template != name:
            logger.debug(
                "extend(%r) replaces earlier extend(%r)", name, state.extended_template
            )
        state.extended_template = name

    def section(self, name: str) -> None:
        """Open section ``name`` and start capturing into it.

        Sections do not nest within one template body. Opening one while
        another is open makes the new name the open section; the next
        ``stop()`` stores under it. A partial's sections never change the
        caller's open section.
        """
        state = get_render_state_required()
        if state.capture.top_kind is FrameKind.SECTION:
            logger.warning(
                "section(%r) opened in %r while section %r is still open",
                name,
                state.current_template,
                state.open_section,
            )
        state.open_section = name
        state.capture.push(FrameKind.SECTION, name)

    def stop(self) -> str:
        """Close the open section and store its capture.

        The first capture of a name is stored as-is. A later capture of the
        same name replaces the parent marker inside the stored content.

        Returns:
            The stored content of the section after this capture, or ``""``
            if no section was open.
        """
        state = get_render_state_required()
        if state.capture.top_kind is not FrameKind.SECTION:
            logger.warning(
                "stop() called in %r with no open section", state.current_template
            )
            return ""

        buffer = state.capture.pop()
        name = cast(str, state.open_section)
        existing = state.sections.get(name)
        if existing is None:
            state.sections[name] = buffer
        else:
            state.sections[name] = existing.replace(self.parent_marker, buffer)
        logger.debug("Section %r closed (%d chars)", name, len(state.sections[name]))
        return state.sections[name]

    def show(self, name: str) -> str | None:
        """Return the content of section ``name``, or None if never captured."""
        return get_render_state_required().sections.get(name)

    def write(self, text: str) -> None:
        """Append text to the current capture frame."""
        get_render_state_required().capture.write(text)
