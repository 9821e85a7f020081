import pytest

from dockable.indices import TabIndex
from dockable.node import (
    EmptyNode,
    HorizontalNode,
    LeafNode,
    VerticalNode,
    leaf,
    leaf_with,
)
from dockable.split import Split
from dockable.window_state import Pos2, Rect, Vec2


def test_leaf_constructors():
    single = leaf("a")
    assert single.tabs == ["a"]
    assert single.active == TabIndex(0)
    assert single.get_rect() == Rect.NOTHING
    many = leaf_with(["a", "b", "c"])
    assert list(many.iter_tabs()) == ["a", "b", "c"]
    assert many.tabs_count() == 3


def test_kind_predicates():
    assert EmptyNode().is_empty() and not EmptyNode().is_leaf()
    assert leaf(1).is_leaf() and not leaf(1).is_parent()
    h = HorizontalNode()
    v = VerticalNode()
    assert h.is_horizontal() and h.is_parent() and not h.is_vertical()
    assert v.is_vertical() and v.is_parent() and not v.is_horizontal()
    assert h != v


def test_tabs_of_non_leaf_are_empty():
    assert list(EmptyNode().iter_tabs()) == []
    assert HorizontalNode().tabs_count() == 0
    assert EmptyNode().remove_tab(TabIndex(0)) is None


def test_append_sets_active():
    node = leaf_with(["a tab"])
    assert node.tabs_count() == 1
    node.append_tab("another tab")
    assert node.tabs_count() == 2
    assert node.active == TabIndex(1)


def test_append_to_non_leaf_raises():
    with pytest.raises(TypeError):
        EmptyNode().append_tab("x")
    with pytest.raises(TypeError):
        VerticalNode().insert_tab(TabIndex(0), "x")


def test_insert_tab():
    node = leaf_with(["a", "c"])
    node.insert_tab(TabIndex(1), "b")
    assert node.tabs == ["a", "b", "c"]
    assert node.active == TabIndex(1)
    node.insert_tab(TabIndex(3), "d")
    assert node.tabs == ["a", "b", "c", "d"]
    with pytest.raises(IndexError):
        node.insert_tab(TabIndex(10), "z")


def test_remove_tab_adjusts_active():
    node = leaf_with(["a", "b", "c"])
    node.active = TabIndex(2)
    assert node.remove_tab(TabIndex(0)) == "a"
    assert node.active == TabIndex(1)
    assert node.tabs == ["b", "c"]
    assert node.remove_tab(TabIndex(1)) == "c"
    assert node.active == TabIndex(0)
    assert node.remove_tab(TabIndex(0)) == "b"
    assert node.active == TabIndex(0)
    assert node.tabs_count() == 0


def test_remove_tab_after_active_keeps_active():
    node = leaf_with(["a", "b", "c"])
    assert node.remove_tab(TabIndex(2)) == "c"
    assert node.active == TabIndex(0)


def test_remove_tab_out_of_range():
    with pytest.raises(IndexError):
        leaf("a").remove_tab(TabIndex(1))


def test_collapsed_state():
    node = leaf("a")
    assert node.collapsed_leaf_count() == 0
    node.set_collapsed(True)
    assert node.is_collapsed()
    assert node.collapsed_leaf_count() == 1
    parent = HorizontalNode()
    parent.set_collapsed(True)
    parent.set_collapsed_leaf_count(3)
    assert parent.is_collapsed()
    assert parent.collapsed_leaf_count() == 3


def test_collapsed_errors():
    with pytest.raises(TypeError):
        EmptyNode().set_collapsed(True)
    with pytest.raises(TypeError):
        leaf("a").set_collapsed_leaf_count(1)
    assert EmptyNode().is_collapsed() is False
    assert EmptyNode().collapsed_leaf_count() == 0


def test_rect_accessors():
    rect = Rect.from_min_size(Pos2(1.0, 2.0), Vec2(3.0, 4.0))
    node = leaf("a")
    node.set_rect(rect)
    assert node.get_rect() == rect
    parent = VerticalNode()
    parent.set_rect(rect)
    assert parent.get_rect() == rect
    empty = EmptyNode()
    empty.set_rect(rect)
    assert empty.get_rect() is None


@pytest.mark.parametrize(
    "direction, kind",
    [
        (Split.LEFT, HorizontalNode),
        (Split.RIGHT, HorizontalNode),
        (Split.ABOVE, VerticalNode),
        (Split.BELOW, VerticalNode),
    ],
)
def test_split_kind(direction, kind):
    node = leaf("a")
    parent = node.split(direction, 0.3)
    assert type(parent) is kind
    assert parent.fraction == 0.3
    assert parent.get_rect() == Rect.NOTHING
    assert node.tabs == ["a"]


def test_split_inherits_collapse():
    node = leaf("a")
    node.set_collapsed(True)
    parent = node.split(Split.BELOW, 0.5)
    assert parent.is_collapsed()
    assert parent.collapsed_leaf_count() == node.collapsed_leaf_count()


@pytest.mark.parametrize("fraction", [-0.1, 1.5])
def test_split_rejects_bad_fraction(fraction):
    with pytest.raises(ValueError):
        leaf("a").split(Split.LEFT, fraction)


def test_filter_map_tabs():
    node = leaf_with([1, 2, 3])
    node.scroll = 5.0
    mapped = node.filter_map_tabs(lambda t: str(t) if t % 2 == 1 else None)
    assert mapped.tabs == ["1", "3"]
    assert mapped.scroll == 5.0
    assert node.tabs == [1, 2, 3]
    assert node.filter_map_tabs(lambda t: None) == EmptyNode()


def test_map_tabs():
    node = leaf_with([1, 2, 3])
    assert node.map_tabs(str).tabs == ["1", "2", "3"]
    assert leaf_with([]).map_tabs(str) == EmptyNode()


def test_filter_tabs():
    node = leaf_with(["tab1", "tab2", "outlier"])
    filtered = node.filter_tabs(lambda t: t.startswith("tab"))
    assert filtered.tabs == ["tab1", "tab2"]
    assert node.tabs_count() == 3


def test_parent_copies_are_independent():
    parent = HorizontalNode(fraction=0.25)
    copied = parent.map_tabs(str)
    assert copied == parent
    assert copied is not parent
    assert EmptyNode().filter_map_tabs(str) == EmptyNode()


def test_retain_tabs():
    node = leaf_with(["tab1", "tab2", "outlier"])
    result = node.retain_tabs(lambda t: t.startswith("tab"))
    assert result is node
    assert node.tabs == ["tab1", "tab2"]
    assert node.retain_tabs(lambda t: False) == EmptyNode()
    parent = VerticalNode()
    assert parent.retain_tabs(lambda t: False) is parent