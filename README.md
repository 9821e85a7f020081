# dockable

`dockable` is the data model behind a docking user interface. It records
where tabs live and how an area is split. It draws nothing, so you can use it
with any toolkit.

The building blocks are:

- `dockable.tree.Tree` is a binary tree of nodes kept in a flat list. The root
  is at index 0. The children of node *n* are at *2n + 1* (left or top) and
  *2n + 2* (right or bottom).
- `dockable.node` holds the node kinds:
  - `LeafNode` holds tabs and the index of the active one.
  - `HorizontalNode` and `VerticalNode` split their area between two children.
    The `fraction` attribute is the share taken by the left or top child.
  - `EmptyNode` marks an unused slot.
- `dockable.surface` holds the areas a tree is laid out in: `MainSurface`,
  `WindowSurface` (a tree plus a `WindowState`) and `EmptySurface`.
- `dockable.indices` holds the index types `SurfaceIndex`, `NodeIndex` and
  `TabIndex`.
- `dockable.window_state` holds the geometry types `Pos2`, `Vec2` and `Rect`,
  and `WindowState`.
- `dockable.translations` holds the text that a front end shows on its
  buttons and tooltips.

A tab can be any Python object.

## Installation

```
pip install dockable
```

## Building a layout

```python
from dockable.indices import NodeIndex
from dockable.tree import Tree

tree = Tree(["tab1", "tab2"])

# Put "tab3" to the left of the root; the old content keeps 30% of the width.
old, new = tree.split_left(NodeIndex.root(), 0.3, ["tab3"])
tree.split_below(new, 0.5, ["tab4"])

print(tree.num_tabs())        # 4
print(list(tree.tabs()))      # ['tab1', 'tab2', 'tab3', 'tab4']
print(tree.find_tab("tab4"))  # (NodeIndex(value=4), TabIndex(value=0))
```

Each split method returns the indices of the old node and the new node. The
methods are `split_left`, `split_right`, `split_above`, `split_below`,
`split_tabs` and the general `split`, which takes a `dockable.split.Split`
direction and a node. `fraction` must lie in `0..=1`. If it does not, a
`ValueError` is raised. A `ValueError` is also raised when you split an empty
node or pass a new node that has no tabs.

## Adding and removing tabs

- `push_to_focused_leaf` adds a tab to the focused leaf. If no leaf is
  focused, it adds the tab to the first leaf. If the tree has no leaf, it
  creates one.
- `push_to_first_leaf` always adds to the first leaf.
- `remove_tab((node, tab))` returns the removed tab. If the leaf is left
  without tabs, the leaf is removed and its sibling moves up into the parent's
  place.
- `remove_leaf` removes a leaf directly.

If you remove the root leaf, the tree has no nodes left.

## Transforming tabs

- `map_tabs` and `filter_map_tabs` build a new tree with the tabs changed.
  `filter_map_tabs` drops every tab for which the function returns `None`.
- `filter_tabs` builds a new tree that keeps only some of the tabs.
- `retain_tabs` removes tabs in place.

In every case, leaves that end up with no tabs are removed and the tree is
rebalanced.

```python
numbers = Tree([1, 2, 3])
odd = numbers.filter_map_tabs(lambda t: str(t) if t % 2 else None)
print(list(odd.tabs()))   # ['1', '3']
```

## Surfaces and windows

```python
from dockable.surface import MainSurface, WindowSurface
from dockable.tree import Tree
from dockable.window_state import Pos2, Vec2, WindowState

main = MainSurface(Tree(["editor"]))
window = WindowSurface(Tree(["floating tab"]), WindowState())
window.state.set_position(Pos2(0.0, 0.0)).set_size(Vec2(100.0, 100.0))

window = window.retain_tabs(lambda tab: tab != "floating tab")
print(window.is_empty())  # True
```

The surface methods `map_tabs`, `filter_map_tabs` and `filter_tabs` return new
surfaces. A window whose tree ends up with no nodes becomes an
`EmptySurface`. `retain_tabs` changes the surface in place and returns the
surface that should take its place. `iter_all_tabs` yields `(NodeIndex, tab)`
pairs.

## Translations

`Translations.english()` gives the default English labels for:

- the tab context menu (`TabContextMenuTranslations`);
- the leaf buttons and tooltips (`LeafTranslations`).

Every field is a plain string that you can replace.

## What this package does not do

This package has no object that holds a main surface together with a set of
window surfaces. That means:

- Nothing here adds or removes windows.
- Nothing here tracks focus across surfaces.
- Nothing here moves a tab from one surface to another.

The destination types in `dockable.split` describe where a moved tab should
go:

- `NodeDestination`, together with `TabInsertSplit`, `TabInsertAt` or
  `TabAppend`;
- `WindowDestination`;
- `EmptySurfaceDestination`.

No code in this package carries such a move out. It also contains no
rendering and no input handling.

## Running the tests

```
pip install -e .[test]
pytest
```