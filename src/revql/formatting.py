"""Display records for search results.

Relay scaffolding hops are elided from the printed chain unless relay types
are requested; the remaining hops are still joined into one chain.
"""

from collections.abc import Iterable
from typing import Any

from revql.config import ColorConfig
from revql.search import PathResult, TypeField, TypeMap


def is_relay_hop(hop: TypeField, type_map: TypeMap) -> bool:
    hop_type = type_map.get(hop.type_name)
    return hop_type is not None and hop_type.is_relay()


def visible_hops(hops: Iterable[TypeField], type_map: TypeMap, show_relay: bool) -> list[TypeField]:
    if show_relay:
        return list(hops)
    return [hop for hop in hops if not is_relay_hop(hop, type_map)]


def format_path(result: PathResult, type_map: TypeMap, show_relay: bool = False) -> str:
    hops = visible_hops(result.hops, type_map, show_relay)
    return f"{result.target}: " + " -> ".join(str(hop) for hop in hops)


def colorize(type_field: TypeField, type_style: str, field_style: str) -> str:
    """Render a hop with Rich markup, the type and the field styled separately."""
    rendered = f"[{type_style}]{type_field.type_name}[/{type_style}]"
    if type_field.field_name is not None:
        rendered += f".[{field_style}]{type_field.field_name}[/{field_style}]"
    return rendered


def render_path(
    result: PathResult,
    type_map: TypeMap,
    show_relay: bool = False,
    colors: ColorConfig | None = None,
) -> str:
    colors = colors or ColorConfig()
    hops = visible_hops(result.hops, type_map, show_relay)
    target = colorize(result.target, colors.target, colors.target)
    return f"{target}: " + " -> ".join(colorize(hop, colors.type, colors.field) for hop in hops)


def path_to_dict(result: PathResult, type_map: TypeMap, show_relay: bool = False) -> dict[str, Any]:
    hops = visible_hops(result.hops, type_map, show_relay)
    return {
        "root": result.root,
        "target": str(result.target),
        "path": [str(hop) for hop in hops],
        "relay_hidden": len(result.hops) - len(hops),
    }
