"""
Tests for the index-based binary tree.
"""
from algokit.trees import NIL, BinaryTree


def _sample():
    #        5
    #      /   \
    #     4     8
    #    /     / \
    #   11    13  4
    #  /  \      / \
    # 7    2    5   1
    return BinaryTree.from_level_order([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, 5, 1])


class TestConstruction:
    """Level-order round trip"""

    def test_round_trip(self):
        items = [5, 4, 8, 11, None, 13, 4, 7, 2, None, None, 5, 1]
        assert _sample().to_level_order() == items

    def test_sparse_listing(self):
        tree = BinaryTree.from_level_order([1, None, 2, 3])
        assert tree.inorder() == [1, 3, 2]
        assert tree.left[0] == NIL

    def test_empty(self):
        tree = BinaryTree.from_level_order([])
        assert len(tree) == 0
        assert tree.preorder() == []
        assert tree.max_depth() == 0
        assert tree.diameter() == 0
        assert not tree.has_path_sum(0)


class TestTraversals:
    """Iterative traversals"""

    def test_orders(self):
        tree = BinaryTree.from_level_order([1, 2, 3, 4, 5])
        assert tree.preorder() == [1, 2, 4, 5, 3]
        assert tree.inorder() == [4, 2, 5, 1, 3]
        assert tree.postorder() == [4, 5, 2, 3, 1]
        assert tree.level_order() == [[1], [2, 3], [4, 5]]
        assert tree.max_depth() == 3

    def test_deep_tree(self):
        """A degenerate chain deeper than the recursion limit"""
        n = 5000
        items = [0]
        for i in range(1, n):
            items.extend([None, i])
        tree = BinaryTree.from_level_order(items)
        assert tree.inorder() == list(range(n))
        assert tree.max_depth() == n


class TestQueries:
    """Inversion, path sums, BST check, LCA and diameter"""

    def test_invert(self):
        tree = BinaryTree.from_level_order([4, 2, 7, 1, 3, 6, 9])
        assert tree.invert().to_level_order() == [4, 7, 2, 9, 6, 3, 1]

    def test_path_sums(self):
        tree = _sample()
        assert tree.has_path_sum(22)
        assert not tree.has_path_sum(100)
        assert tree.path_sums(22) == [[5, 4, 11, 2], [5, 8, 4, 5]]

    def test_is_bst(self):
        assert BinaryTree.from_level_order([2, 1, 3]).is_bst()
        assert not BinaryTree.from_level_order([5, 1, 4, None, None, 3, 6]).is_bst()

    def test_lowest_common_ancestor(self):
        tree = BinaryTree.from_level_order([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])
        assert tree.lowest_common_ancestor(5, 1) == 3
        assert tree.lowest_common_ancestor(5, 4) == 5
        assert tree.lowest_common_ancestor(7, 4) == 2
        assert tree.lowest_common_ancestor(5, 99) is None

    def test_diameter(self):
        assert BinaryTree.from_level_order([1, 2, 3, 4, 5]).diameter() == 3
        assert BinaryTree.from_level_order([1]).diameter() == 0
