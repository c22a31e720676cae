from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from hypothesis import strategies as st
from hypothesis.strategies import composite

from revql.loader import introspect_sdl, load_document
from revql.schema import Type, type_map


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    BLOG: Path = TESTS_DATA_DIR / "blog.json"
    RELAY_SDL: Path = TESTS_DATA_DIR / "relay.graphql"
    EMPTY: Path = TESTS_DATA_DIR / "empty.json"
    INVALID: Path = TESTS_DATA_DIR / "invalid.json"
    WRONG_SHAPE: Path = TESTS_DATA_DIR / "wrong_shape.json"
    UNNAMED_FIELD: Path = TESTS_DATA_DIR / "unnamed_field.json"
    CONFIG: Path = TESTS_DATA_DIR / "config.yaml"


def make_type_map(sdl: str) -> dict[str, Type]:
    root = introspect_sdl(sdl)
    assert root.data is not None
    return type_map(root.data.schema)


def object_ref(name: str) -> dict[str, Any]:
    return {"kind": "OBJECT", "name": name, "ofType": None}


def object_type(name: str, fields: dict[str, str]) -> dict[str, Any]:
    """Build an introspection OBJECT type whose fields all reference object types."""
    return {
        "kind": "OBJECT",
        "name": name,
        "fields": [{"name": field_name, "type": object_ref(target)} for field_name, target in fields.items()],
    }


@pytest.fixture(scope="module")
def blog_types() -> dict[str, Type]:
    assert TestSchemaData.BLOG.exists(), f"Missing test file: {TestSchemaData.BLOG}"
    root = load_document(TestSchemaData.BLOG)
    assert root.data is not None
    return type_map(root.data.schema)


@pytest.fixture(scope="module")
def relay_types() -> dict[str, Type]:
    assert TestSchemaData.RELAY_SDL.exists(), f"Missing test file: {TestSchemaData.RELAY_SDL}"
    root = load_document(TestSchemaData.RELAY_SDL)
    assert root.data is not None
    return type_map(root.data.schema)


@pytest.fixture
def sdl_types() -> Callable[[str], dict[str, Type]]:
    return make_type_map


TYPE_NAMES = [f"T{i}" for i in range(8)]


@composite
def object_graphs(draw: st.DrawFn) -> list[dict[str, Any]]:
    """Random object graphs over a fixed set of type names, cycles included.

    Each type gets up to four fields named `f0`, `f1`, ... pointing at any
    type of the graph (itself included).
    """
    graph = []
    for name in TYPE_NAMES:
        targets = draw(st.lists(st.sampled_from(TYPE_NAMES), max_size=4))
        graph.append(object_type(name, {f"f{i}": target for i, target in enumerate(targets)}))
    return graph
