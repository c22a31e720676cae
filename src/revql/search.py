"""
Reachability search over the object graph of an introspected schema.

Object types are the nodes and fields whose unwrapped type is an object are
the edges. For every matching target the shortest field chain is computed
from each field of every root operation type.
"""

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from revql import log
from revql.schema import OBJECT_KIND, Type, filter_type_map

DEFAULT_ROOT_TYPES = ("Query", "Mutation")

TypeMap = Mapping[str, Type]


class SearchMode(str, Enum):
    ALL = "all"
    TYPE = "type"
    FIELD = "field"


@dataclass(frozen=True)
class TypeField:
    """A hop in a path: a type and, optionally, the field taken from it."""

    type_name: str
    field_name: str | None = None

    def __str__(self) -> str:
        if self.field_name is not None:
            return f"{self.type_name}.{self.field_name}"
        return self.type_name


@dataclass(frozen=True)
class PathResult:
    """A chain of hops from a root operation type to a search target."""

    root: str
    target: TypeField
    hops: list[TypeField] = field(default_factory=list)


def search(start_type: str, end_type: str, type_map: TypeMap) -> list[TypeField]:
    """
    Find the shortest field chain from `start_type` to `end_type`.

    Breadth-first search where fields are expanded in declaration order, so
    among equally short chains the one using earlier declared fields wins.
    Each type is expanded at most once, which makes cyclic schemas safe.

    Args:
        start_type: Name of the type to start from
        end_type: Name of the type to reach
        type_map: All schema types keyed by name

    Returns:
        The hops leading to `end_type` (empty if unreachable). When both
        names are equal the result is the single hop `[TypeField(start_type)]`.
    """
    if start_type == end_type:
        return [TypeField(start_type)]

    visited = {start_type}
    queue = deque([start_type])
    predecessors: dict[str, TypeField | None] = {start_type: None}

    while queue:
        current = queue.popleft()
        current_type = type_map.get(current)
        if current_type is None:
            continue

        if current_type.name == end_type:
            path: list[TypeField] = []
            hop = predecessors[end_type]
            while hop is not None:
                path.append(hop)
                hop = predecessors[hop.type_name]
            path.reverse()
            return path

        for field_name, gql_field in current_type.field_map().items():
            type_ref = gql_field.type.deepest()
            if not type_ref.is_object() or type_ref.name is None:
                continue
            if type_ref.name in visited:
                continue
            visited.add(type_ref.name)
            queue.append(type_ref.name)
            predecessors[type_ref.name] = TypeField(current, field_name)

    return []


def search_from_root(root_type_name: str, target: TypeField, type_map: TypeMap) -> list[list[TypeField]]:
    """
    Find a path to `target` through every field of a root operation type.

    Root types missing from the schema (e.g. no Mutation) give no paths.
    """
    root_type = type_map.get(root_type_name)
    if root_type is None:
        return []

    paths = []
    for gql_field in root_type.field_map().values():
        path = search(gql_field.type_name(), target.type_name, type_map)
        if path:
            paths.append([TypeField(root_type_name, gql_field.name), *path])
    return paths


def search_target(
    target: TypeField,
    type_map: TypeMap,
    root_types: Sequence[str] = DEFAULT_ROOT_TYPES,
) -> list[PathResult]:
    """Collect the paths to `target` from each root type, in root order."""
    results = []
    for root_type_name in root_types:
        for path in search_from_root(root_type_name, target, type_map):
            results.append(PathResult(root=root_type_name, target=target, hops=path))
    return results


def _is_hidden_relay(type_name: str, show_relay: bool, type_map: TypeMap) -> bool:
    return not show_relay and type_map[type_name].is_relay()


def search_by_type(
    query: str,
    containing: bool,
    show_relay: bool,
    type_map: TypeMap,
    root_types: Sequence[str] = DEFAULT_ROOT_TYPES,
) -> list[PathResult]:
    """
    Find paths to the type named `query`.

    With `containing`, every type whose name contains `query` is a target,
    visited in name order. Relay types are skipped unless `show_relay`.
    """
    if containing:
        candidates: Iterable[str] = sorted(name for name in type_map if query in name)
    else:
        candidates = [query]

    results = []
    for name in candidates:
        if name not in type_map or _is_hidden_relay(name, show_relay, type_map):
            log.debug(f"Skipping type candidate '{name}'")
            continue
        results.extend(search_target(TypeField(name), type_map, root_types))
    return results


def search_by_field(
    query: str,
    containing: bool,
    show_relay: bool,
    type_map: TypeMap,
    root_types: Sequence[str] = DEFAULT_ROOT_TYPES,
) -> list[PathResult]:
    """
    Find paths to fields named `query` on any object type.

    Object types are visited in name order; each contributes at most one
    field (the first match). Relay types are skipped unless `show_relay`.
    """
    results = []
    for name in sorted(filter_type_map(type_map, OBJECT_KIND)):
        if _is_hidden_relay(name, show_relay, type_map):
            continue
        gql_field = type_map[name].get_field(query, containing)
        if gql_field is None:
            continue
        results.extend(search_target(TypeField(name, gql_field.name), type_map, root_types))
    return results


def run_search(
    query: str,
    type_map: TypeMap,
    mode: SearchMode = SearchMode.ALL,
    containing: bool = False,
    show_relay: bool = False,
    root_types: Sequence[str] = DEFAULT_ROOT_TYPES,
) -> list[PathResult]:
    """Run the type search, the field search, or both (types first)."""
    results = []
    if mode in (SearchMode.ALL, SearchMode.TYPE):
        results.extend(search_by_type(query, containing, show_relay, type_map, root_types))
    if mode in (SearchMode.ALL, SearchMode.FIELD):
        results.extend(search_by_field(query, containing, show_relay, type_map, root_types))
    log.debug(f"Found {len(results)} path(s) for '{query}' ({mode.value} search)")
    return results
