"""Build a Graphviz graph of the teleport connections between maps."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def map_filename(map_id: int) -> str:
    """Return the lower-case file name of a map, e.g. ``map0001.lmu``."""
    if map_id < 10:
        pad = "000"
    elif map_id < 100:
        pad = "00"
    elif map_id < 1000:
        pad = "0"
    else:
        pad = ""
    return f"map{pad}{map_id}.lmu"


def reachable_maps(
    edges: Iterable[tuple[int, int]],
    start: int,
    depth_limit: int | None = None,
) -> dict[int, int]:
    """Return the maps reachable from ``start`` with their smallest depth.

    Maps further than ``depth_limit`` teleports away are left out; ``None``
    or a negative limit means no limit. ``start`` itself has depth 0.
    """
    if depth_limit is not None and depth_limit < 0:
        depth_limit = None

    targets: dict[int, list[int]] = {}
    for source, target in edges:
        targets.setdefault(source, []).append(target)

    depths = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        depth = depths[node] + 1
        if depth_limit is not None and depth > depth_limit:
            continue
        for target in targets.get(node, ()):
            if target not in depths:
                depths[target] = depth
                queue.append(target)
    return depths


def _unique_adjacent(items: list[tuple[int, int]]) -> list[tuple[int, int]]:
    result: list[tuple[int, int]] = []
    for item in items:
        if not result or result[-1] != item:
            result.append(item)
    return result


def render_dot(
    maps: Iterable[tuple[int, str]],
    edges: Iterable[tuple[int, int]],
    start_map_id: int,
    depth_limit: int | None = None,
    remove_unreachable: bool = False,
) -> str:
    """Render maps and teleport edges as a strict directed dot graph.

    The start map is drawn as a filled box. Edges in both directions are
    drawn once with ``dir=both``. With ``remove_unreachable`` only maps
    reachable from the start map within ``depth_limit`` are kept.
    """
    sorted_maps = sorted(maps)
    sorted_edges = _unique_adjacent(sorted(edges, key=lambda edge: edge[0]))

    visited = (
        reachable_maps(sorted_edges, start_map_id, depth_limit)
        if remove_unreachable
        else {}
    )

    lines = ["strict digraph G {"]
    for map_id, name in sorted_maps:
        if remove_unreachable and map_id not in visited:
            continue
        style = " shape=box style=filled fillcolor=gray" if map_id == start_map_id else ""
        lines.append(f'{map_id} [label="{name}"{style}];')

    pending_reverse: list[tuple[int, int]] = []
    for source, target in sorted_edges:
        if remove_unreachable and (source not in visited or target not in visited):
            continue
        if (source, target) in pending_reverse:
            continue

        both = (target, source) in sorted_edges
        if both:
            pending_reverse.append((target, source))
        lines.append(f"{source} -> {target}{' [dir=both]' if both else ''};")
    lines.append("}")
    return "\n".join(lines) + "\n"