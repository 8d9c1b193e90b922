import pytest

from dsakit.complete_tree import CompleteBinaryTree, Node


def _shape_is_complete(tree: CompleteBinaryTree) -> bool:
    """Level order with None gaps must have no value after the first gap."""
    if tree.root is None:
        return True
    slots = [tree.root]
    index = 0
    while index < len(slots):
        node = slots[index]
        index += 1
        if node is not None:
            slots.append(node.left)
            slots.append(node.right)
    seen_gap = False
    for node in slots:
        if node is None:
            seen_gap = True
        elif seen_gap:
            return False
    return True


@pytest.mark.parametrize("count", [0, 1, 2, 5, 7, 8, 20])
def test_level_order_follows_insertion(count):
    values = list(range(100, 100 + count))
    tree = CompleteBinaryTree(values)
    assert tree.level_order() == values
    assert len(tree) == count
    assert _shape_is_complete(tree)


def test_insert_returns_node():
    tree = CompleteBinaryTree()
    node = tree.insert(5)
    assert isinstance(node, Node)
    assert node.data == 5
    assert tree.root is node


def test_children_positions():
    tree = CompleteBinaryTree([1, 2, 3, 4])
    assert tree.root.left.data == 2
    assert tree.root.right.data == 3
    assert tree.root.left.left.data == 4
    assert tree.root.left.right is None


def test_search():
    tree = CompleteBinaryTree([10, 20, 30, 40])
    found = tree.search(30)
    assert found is tree.root.right
    assert tree.search(99) is None


def test_search_empty():
    assert CompleteBinaryTree().search(1) is None


def test_delete_replaces_with_deepest():
    tree = CompleteBinaryTree([1, 2, 3, 4, 5])
    tree.delete(2)
    assert tree.level_order() == [1, 5, 3, 4]
    assert len(tree) == 4


def test_delete_deepest_itself():
    tree = CompleteBinaryTree([1, 2, 3, 4])
    tree.delete(4)
    assert tree.level_order() == [1, 2, 3]
    assert _shape_is_complete(tree)


def test_delete_root_of_single_node():
    tree = CompleteBinaryTree([7])
    tree.delete(7)
    assert tree.root is None
    assert tree.level_order() == []
    assert len(tree) == 0


def test_delete_missing():
    tree = CompleteBinaryTree([1, 2, 3])
    with pytest.raises(KeyError):
        tree.delete(9)
    assert tree.level_order() == [1, 2, 3]


def test_delete_from_empty():
    with pytest.raises(KeyError):
        CompleteBinaryTree().delete(1)


@pytest.mark.parametrize("count", [2, 3, 6, 9, 15])
def test_delete_keeps_tree_complete(count):
    values = list(range(count))
    tree = CompleteBinaryTree(values)
    tree.delete(0)
    remaining = tree.level_order()
    assert len(remaining) == count - 1
    assert 0 not in remaining
    assert sorted(remaining) == values[1:]
    assert _shape_is_complete(tree)


def test_insert_after_delete_fills_freed_spot():
    tree = CompleteBinaryTree([1, 2, 3, 4, 5, 6])
    tree.delete(2)
    before = tree.level_order()
    tree.insert(42)
    assert tree.level_order() == before + [42]
    assert _shape_is_complete(tree)
    assert len(tree) == 6


def test_insert_after_emptying():
    tree = CompleteBinaryTree([1])
    tree.delete(1)
    tree.insert(2)
    tree.insert(3)
    assert tree.level_order() == [2, 3]