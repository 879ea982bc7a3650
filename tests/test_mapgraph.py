import pytest

from lcftools.mapgraph import map_filename, reachable_maps, render_dot


@pytest.mark.parametrize(
    "map_id, expected",
    [
        (1, "map0001.lmu"),
        (42, "map0042.lmu"),
        (123, "map0123.lmu"),
        (1234, "map1234.lmu"),
    ],
)
def test_map_filename(map_id, expected):
    assert map_filename(map_id) == expected


def test_reachable_maps_unlimited():
    edges = [(1, 2), (2, 3), (4, 1)]
    assert reachable_maps(edges, 1) == {1: 0, 2: 1, 3: 2}


def test_reachable_maps_respects_depth_limit():
    edges = [(1, 2), (2, 3), (3, 4)]
    assert reachable_maps(edges, 1, 1) == {1: 0, 2: 1}
    assert reachable_maps(edges, 1, 0) == {1: 0}


def test_reachable_maps_negative_limit_means_unlimited():
    edges = [(1, 2), (2, 3)]
    assert reachable_maps(edges, 1, -1) == reachable_maps(edges, 1, None)


def test_reachable_maps_keeps_shortest_depth():
    edges = [(1, 2), (2, 3), (1, 3)]
    depths = reachable_maps(edges, 1)
    assert depths[3] == 1


def test_render_dot_bidirectional_and_start_node():
    dot = render_dot([(2, "Cave"), (1, "Town")], [(2, 1), (1, 2)], 1)
    assert dot == (
        "strict digraph G {\n"
        '1 [label="Town" shape=box style=filled fillcolor=gray];\n'
        '2 [label="Cave"];\n'
        "1 -> 2 [dir=both];\n"
        "}\n"
    )


def test_render_dot_removes_unreachable_nodes():
    maps = [(1, "A"), (2, "B"), (3, "C")]
    edges = [(1, 2), (3, 1)]
    dot = render_dot(maps, edges, 1, remove_unreachable=True)
    assert '3 [label="C"];' not in dot
    assert "3 -> 1" not in dot
    assert "1 -> 2;" in dot


def test_render_dot_keeps_all_nodes_by_default():
    maps = [(1, "A"), (2, "B"), (3, "C")]
    dot = render_dot(maps, [(1, 2)], 1)
    assert '3 [label="C"];' in dot


def test_render_dot_depth_limit_with_removal():
    maps = [(1, "A"), (2, "B"), (3, "C")]
    edges = [(1, 2), (2, 3)]
    dot = render_dot(maps, edges, 1, depth_limit=1, remove_unreachable=True)
    assert '2 [label="B"];' in dot
    assert '3 [label="C"];' not in dot
    assert "2 -> 3" not in dot


def test_render_dot_drops_adjacent_duplicate_edges():
    dot = render_dot([(1, "A"), (2, "B")], [(1, 2), (1, 2)], 5)
    assert dot.count("1 -> 2;") == 1
    assert "shape=box" not in dot