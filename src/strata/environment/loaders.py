"""Template loaders for the Strata renderer.

Loaders turn a template name into template source. They implement
`get_source(name)` returning `(source, filename)`.

Built-in Loaders:
- `FileSystemLoader`: Load from a single root directory
- `DictLoader`: Load from an in-memory dictionary (testing/embedded)

Custom Loaders:
Implement the Loader protocol:
    ```python
    class DatabaseLoader:
        def get_source(self, name: str) -> tuple[str, str | None]:
            row = db.query("SELECT source FROM views WHERE name = ?", name)
            if not row:
                raise TemplateNotFoundError(name, f"db://{name}")
            return row.source, f"db://{name}"
    ```

Thread-Safety:
Both built-in loaders are safe for concurrent `get_source()` calls
(FileSystemLoader reads files atomically, DictLoader only does dict lookups).

"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from strata.environment.exceptions import TemplateNotFoundError


class Loader(Protocol):
    """Anything that can map a template name to `(source, filename)`."""

    def get_source(self, name: str) -> tuple[str, str | None]: ...


class FileSystemLoader:
    """Load templates from one root directory.

    The root is resolved to an absolute, canonical path once, at
    construction. Every lookup is `root / name`; `name` may contain
    sub-directory segments.

    Names that resolve outside the root (``../secret.py``, absolute paths,
    symlinks pointing elsewhere) are reported as missing templates rather
    than read.

    Example:
            >>> loader = FileSystemLoader("views/")
            >>> source, filename = loader.get_source("pages/about.py")
            >>> print(filename)
            '/srv/app/views/pages/about.py'

    Raises:
        TemplateNotFoundError: If the resolved path is not an existing file

    """

    __slots__ = ("_encoding", "_root")

    def __init__(self, root: str | Path, encoding: str = "utf-8"):
        self._root = Path(root).resolve()
        self._encoding = encoding

    @property
    def root(self) -> Path:
        """Absolute template root."""
        return self._root

    def resolve(self, name: str) -> Path:
        """Return the absolute path `name` maps to (which may not exist)."""
        return (self._root / name).resolve()

    def get_source(self, name: str) -> tuple[str, str]:
        """Load template source from the root directory."""
        path = self.resolve(name)
        if not path.is_relative_to(self._root) or not path.is_file():
            raise TemplateNotFoundError(name, str(path))
        return path.read_text(self._encoding), str(path)


class DictLoader:
    """Load templates from an in-memory dictionary.

    Maps template names to source strings. Useful for testing and for
    embedding a handful of templates in an application.

    Note:
        Filenames are reported as ``<name>`` since templates are not
        file-backed.

    Example:
            >>> loader = DictLoader({
            ...     "base.py": "echo('<html>'); show('body'); echo('</html>')",
            ...     "page.py": "extend('base.py'); section('body'); echo('Hi'); end()",
            ... })
            >>> Renderer(loader=loader).render("page.py")
            '<html>Hi</html>'

    Raises:
        TemplateNotFoundError: If template name not in mapping

    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: dict[str, str]):
        self._mapping = mapping

    def get_source(self, name: str) -> tuple[str, str]:
        if name not in self._mapping:
            from difflib import get_close_matches

            available = sorted(self._mapping.keys())
            msg = f"Template '{name}' not found"
            matches = get_close_matches(name, available, n=1, cutoff=0.6)
            if matches:
                msg += f". Did you mean '{matches[0]}'?"
            elif available:
                msg += f". Available: {', '.join(available[:10])}"
                if len(available) > 10:
                    msg += f" ... ({len(available)} total)"
            raise TemplateNotFoundError(name, f"<{name}>", message=msg)
        return self._mapping[name], f"<{name}>"
