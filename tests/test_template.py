"""Tests for the template namespace and TemplateHandle."""

from types import MappingProxyType

from strata import TemplateHandle
from strata.utils.constants import PRIMITIVE_NAMES

from .conftest import make_renderer


class TestNamespace:
    def test_primitives_bound(self) -> None:
        handle = TemplateHandle(make_renderer({}))
        namespace = handle.namespace(MappingProxyType({"a": 1}), "/v/t.py")
        for name in PRIMITIVE_NAMES:
            assert callable(namespace[name])
        assert namespace["view"] is handle
        assert namespace["ctx"]["a"] == 1
        assert namespace["__file__"] == "/v/t.py"

    def test_data_not_injected_as_names(self) -> None:
        renderer = make_renderer({"t.py": "echo('title' in globals())"})
        assert renderer.render("t.py", title="x") == "False"

    def test_file_available_to_body(self) -> None:
        renderer = make_renderer({"t.py": "echo(__file__)"})
        assert renderer.render("t.py") == "<t.py>"

    def test_stop_is_end(self) -> None:
        renderer = make_renderer({"t.py": "section('s'); echo('x'); stop()"})
        assert renderer.render("t.py") == "x"

    def test_bodies_do_not_share_globals(self) -> None:
        renderer = make_renderer(
            {
                "a.py": "leaked = 1",
                "b.py": "include('a.py'); echo('leaked' in globals())",
            }
        )
        assert renderer.render("b.py") == "False"
