from dataclasses import dataclass

import pytest

from creaturetracker.bs_tree import BSTree, EmptyCollectionError


@dataclass
class Item:
    key: str
    value: int = 0

    def __lt__(self, other):
        return self.key < other.key

    def __gt__(self, other):
        return self.key > other.key

    def __eq__(self, other):
        return self.key == other.key

    def __str__(self):
        return self.key


def build(*keys):
    tree = BSTree()
    for k in keys:
        tree.insert(Item(k))
    return tree


def keys(items):
    return [item.key for item in items]


def test_empty_tree():
    tree = BSTree()
    assert len(tree) == 0
    assert list(tree) == []
    assert str(tree) == "Empty tree\n"


def test_find_min_max_empty_raises():
    tree = BSTree()
    with pytest.raises(EmptyCollectionError, match="Collection is empty."):
        tree.find_min()
    with pytest.raises(EmptyCollectionError):
        tree.find_max()


def test_inorder_is_sorted():
    tree = build("m", "c", "x", "a", "e", "q", "z")
    assert keys(tree) == sorted(["m", "c", "x", "a", "e", "q", "z"])
    assert len(tree) == 7


def test_preorder_and_postorder():
    tree = build("b", "a", "c")
    assert keys(tree.preorder()) == ["b", "a", "c"]
    assert keys(tree.postorder()) == ["a", "c", "b"]
    assert keys(tree.inorder()) == ["a", "b", "c"]


def test_format_functions():
    tree = build("b", "a", "c")
    assert tree.format_inorder() == "a b c "
    assert tree.format_preorder() == "b a c "
    assert tree.format_postorder() == "a c b "
    assert str(tree) == "a b c "


def test_duplicate_replaces_without_growing():
    tree = build("b", "a")
    tree.insert(Item("a", 42))
    assert len(tree) == 2
    assert tree.find("a").value == 42


def test_contains_and_find():
    tree = build("d", "b", "f")
    assert "b" in tree
    assert "z" not in tree
    assert tree.find("f").key == "f"
    assert tree.find("z") is None


def test_find_min_max():
    tree = build("d", "b", "f", "a", "g")
    assert tree.find_min().key == "a"
    assert tree.find_max().key == "g"


def test_remove_missing_is_noop():
    tree = build("b", "a", "c")
    tree.remove("z")
    assert len(tree) == 3
    assert keys(tree) == ["a", "b", "c"]


@pytest.mark.parametrize("victim", ["m", "c", "x", "a", "e", "q", "z"])
def test_remove_each_node(victim):
    all_keys = ["m", "c", "x", "a", "e", "q", "z"]
    tree = build(*all_keys)
    tree.remove(victim)
    assert victim not in tree
    assert len(tree) == 6
    assert keys(tree) == sorted(k for k in all_keys if k != victim)


def test_remove_root_with_single_child():
    tree = build("a", "b", "c")
    tree.remove("a")
    assert keys(tree) == ["b", "c"]
    tree.remove("b")
    assert keys(tree) == ["c"]
    tree.remove("c")
    assert len(tree) == 0
    assert str(tree) == "Empty tree\n"


def test_remove_two_children_deep_successor():
    all_keys = ["m", "c", "t", "p", "w", "n", "r"]
    tree = build(*all_keys)
    tree.remove("m")
    assert keys(tree.preorder())[0] == "n"
    assert keys(tree) == sorted(k for k in all_keys if k != "m")


def test_clear():
    tree = build("b", "a", "c")
    tree.clear()
    assert len(tree) == 0
    assert "a" not in tree
    with pytest.raises(EmptyCollectionError):
        tree.find_min()


def test_degenerate_tree_does_not_overflow():
    names = [f"k{i:05d}" for i in range(5000)]
    tree = build(*names)
    assert len(tree) == 5000
    assert keys(tree) == names
    assert keys(tree.postorder())[-1] == names[0]
    for name in names[::2]:
        tree.remove(name)
    assert keys(tree) == names[1::2]


def test_traversals_visit_same_items():
    all_keys = ["h", "d", "l", "b", "f", "j", "n", "a"]
    tree = build(*all_keys)
    assert sorted(keys(tree.preorder())) == sorted(all_keys)
    assert sorted(keys(tree.postorder())) == sorted(all_keys)