import pytest

from simcg.node import Node, NodeKind

SOURCE = b"actions=a\nactions+=/buff.x.up\nend"


def _span(word: bytes, kind: NodeKind = NodeKind.ID) -> Node:
    start = SOURCE.index(word)
    return Node(kind=kind, pos_start=start, pos_stop=start + len(word), source=SOURCE)


def test_kind_numbering_starts_at_one():
    assert Node().kind == NodeKind.NONE == 0
    assert Node(kind=NodeKind.APL).kind == 1
    assert max(NodeKind) is NodeKind.BASE


def test_value_and_text():
    node = _span(b"buff")
    assert node.value() == b"buff"
    assert node.text() == "buff"


def test_value_without_source_is_empty():
    node = Node(kind=NodeKind.ID, pos_start=2, pos_stop=5)
    assert node.value() == b""
    assert node.text() == ""


def test_source_line_middle():
    assert _span(b"buff").source_line() == b"actions+=/buff.x.up"


def test_source_line_first_and_last():
    first = Node(kind=NodeKind.ID, pos_start=8, pos_stop=9, source=SOURCE)
    assert first.source_line() == b"actions=a"
    assert _span(b"end").source_line() == b"end"


def test_source_line_without_source():
    assert Node(kind=NodeKind.ID).source_line() == b""


def test_push_skips_none_kind_and_sets_parent():
    root = Node(kind=NodeKind.APL)
    a = Node(kind=NodeKind.ID)
    b = Node(kind=NodeKind.NUM)
    root.push(a, Node(), b)
    assert [c.kind for c in root.children] == [NodeKind.ID, NodeKind.NUM]
    assert a.parent is root and b.parent is root


def test_iteration_yields_children():
    root = Node(kind=NodeKind.APL)
    kids = [Node(kind=NodeKind.ID), Node(kind=NodeKind.NUM)]
    root.push(*kids)
    assert list(root) == kids


@pytest.mark.parametrize("count", [0, 1, 3])
def test_render_has_one_row_per_node(count):
    root = Node(kind=NodeKind.APL)
    root.push(*(_span(b"buff") for _ in range(count)))
    lines = root.render().splitlines()
    assert len(lines) == count + 2
    assert lines[0].split() == ["KIND", "VALUE", "SX", "SY"]


def test_render_rows_show_depth_kind_and_value():
    root = Node(kind=NodeKind.APL)
    leaf = _span(b"buff")
    root.push(leaf)
    lines = root.render().splitlines()
    assert lines[1].split()[:2] == ["0", "APL"]
    assert lines[2].split()[:3] == ["1", "ID", "buff"]
    assert str(root) == root.render()


def test_equality_ignores_parent():
    one = Node(kind=NodeKind.APL)
    two = Node(kind=NodeKind.APL)
    child_a = Node(kind=NodeKind.ID)
    child_b = Node(kind=NodeKind.ID)
    one.push(child_a)
    two.push(child_b)
    assert one == two
    assert child_a == child_b