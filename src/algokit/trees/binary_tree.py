"""
Binary Tree (index-based)
=========================
A binary tree whose nodes are integer ids.

Why index-based?
----------------
Node ``i`` stores its payload in ``values[i]`` and its children in
``left[i]`` / ``right[i]`` (``NIL`` = no child). The tree owns every node;
there are no node objects to keep alive and traversals carry plain
integers on explicit stacks and queues, so depth never touches the
interpreter's recursion limit.
"""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Sequence

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

NIL = -1


class BinaryTree:
    """
    Binary tree over parallel arrays.
    """
    def __init__(
        self,
        values: list[Any],
        left: npt.NDArray[np.int64],
        right: npt.NDArray[np.int64],
        root: int = 0,
    ) -> None:
        """
        Args:
            values: Payload of each node.
            left: (n, ) left child id of each node, ``NIL`` if none.
            right: (n, ) right child id of each node, ``NIL`` if none.
            root: Id of the root, ``NIL`` for an empty tree.
        """
        self.values = values
        self.left = np.asarray(left, dtype=np.int64)
        self.right = np.asarray(right, dtype=np.int64)
        self.root = root if values else NIL

    @classmethod
    def from_level_order(cls, items: Sequence[Any]) -> BinaryTree:
        """
        Build from a level-order listing with ``None`` for missing children.

        Children are listed only for present nodes, e.g.
        ``[1, None, 2, 3]`` is ``1 -> right 2 -> left 3``.
        """
        if not items or items[0] is None:
            return cls([], np.empty(0, dtype=np.int64), np.empty(0, dtype=np.int64), NIL)
        values = [items[0]]
        left = [NIL]
        right = [NIL]
        queue = deque([0])
        i = 1
        while queue and i < len(items):
            node = queue.popleft()
            for side in (left, right):
                if i < len(items) and items[i] is not None:
                    values.append(items[i])
                    left.append(NIL)
                    right.append(NIL)
                    side[node] = len(values) - 1
                    queue.append(len(values) - 1)
                i += 1
        return cls(values, np.array(left, dtype=np.int64), np.array(right, dtype=np.int64), 0)

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_level_order()!r})"

    def to_level_order(self) -> list[Any]:
        """Level-order listing with ``None`` gaps, trailing ``None`` trimmed."""
        if self.root == NIL:
            return []
        out: list[Any] = []
        queue: deque[int] = deque([self.root])
        while queue:
            node = queue.popleft()
            if node == NIL:
                out.append(None)
                continue
            out.append(self.values[node])
            queue.append(int(self.left[node]))
            queue.append(int(self.right[node]))
        while out and out[-1] is None:
            out.pop()
        return out

    def preorder(self) -> list[Any]:
        out: list[Any] = []
        stack = [self.root] if self.root != NIL else []
        while stack:
            node = stack.pop()
            out.append(self.values[node])
            if self.right[node] != NIL:
                stack.append(int(self.right[node]))
            if self.left[node] != NIL:
                stack.append(int(self.left[node]))
        return out

    def inorder(self) -> list[Any]:
        out: list[Any] = []
        stack: list[int] = []
        node = self.root
        while stack or node != NIL:
            while node != NIL:
                stack.append(node)
                node = int(self.left[node])
            node = stack.pop()
            out.append(self.values[node])
            node = int(self.right[node])
        return out

    def postorder(self) -> list[Any]:
        # root-right-left preorder, reversed
        out: list[Any] = []
        stack = [self.root] if self.root != NIL else []
        while stack:
            node = stack.pop()
            out.append(self.values[node])
            if self.left[node] != NIL:
                stack.append(int(self.left[node]))
            if self.right[node] != NIL:
                stack.append(int(self.right[node]))
        out.reverse()
        return out

    def level_order(self) -> list[list[Any]]:
        """Values grouped by depth."""
        levels: list[list[Any]] = []
        frontier = [self.root] if self.root != NIL else []
        while frontier:
            levels.append([self.values[n] for n in frontier])
            frontier = [
                int(child)
                for n in frontier
                for child in (self.left[n], self.right[n])
                if child != NIL
            ]
        return levels

    def max_depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return len(self.level_order())

    def invert(self) -> BinaryTree:
        """
        Mirror the tree in place and return it.

        Swapping the child arrays swaps the children of every node at once.
        """
        self.left, self.right = self.right, self.left
        return self

    def _is_leaf(self, node: int) -> bool:
        return self.left[node] == NIL and self.right[node] == NIL

    def has_path_sum(self, target: float) -> bool:
        """True if some root-to-leaf path sums to `target`."""
        if self.root == NIL:
            return False
        stack = [(self.root, self.values[self.root])]
        while stack:
            node, total = stack.pop()
            if self._is_leaf(node) and total == target:
                return True
            for child in (self.right[node], self.left[node]):
                if child != NIL:
                    stack.append((int(child), total + self.values[child]))
        return False

    def path_sums(self, target: float) -> list[list[Any]]:
        """All root-to-leaf value paths summing to `target`, left to right."""
        if self.root == NIL:
            return []
        paths: list[list[Any]] = []
        stack = [(self.root, self.values[self.root], [self.values[self.root]])]
        while stack:
            node, total, path = stack.pop()
            if self._is_leaf(node):
                if total == target:
                    paths.append(path)
                continue
            for child in (self.right[node], self.left[node]):
                if child != NIL:
                    value = self.values[child]
                    stack.append((int(child), total + value, path + [value]))
        return paths

    def is_bst(self) -> bool:
        """True if the in-order sequence is strictly increasing."""
        values = self.inorder()
        return all(a < b for a, b in zip(values, values[1:]))

    def _parents(self) -> npt.NDArray[np.int64]:
        parent = np.full(len(self.values), NIL, dtype=np.int64)
        children = np.arange(len(self.values))
        has_left = self.left != NIL
        has_right = self.right != NIL
        parent[self.left[has_left]] = children[has_left]
        parent[self.right[has_right]] = children[has_right]
        return parent

    def _find(self, value: Any) -> int:
        """Id of the first node in level order holding `value`, or NIL."""
        queue = deque([self.root] if self.root != NIL else [])
        while queue:
            node = queue.popleft()
            if self.values[node] == value:
                return node
            for child in (self.left[node], self.right[node]):
                if child != NIL:
                    queue.append(int(child))
        return NIL

    def lowest_common_ancestor(self, a: Any, b: Any) -> Any | None:
        """
        Value of the deepest node that is an ancestor of both values.

        Returns:
            The LCA's value, or None if either value is missing.
        """
        na, nb = self._find(a), self._find(b)
        if na == NIL or nb == NIL:
            return None
        parent = self._parents()
        ancestors = set()
        node = na
        while node != NIL:
            ancestors.add(node)
            node = int(parent[node])
        node = nb
        while node not in ancestors:
            node = int(parent[node])
        return self.values[node]

    def diameter(self) -> int:
        """Longest path between any two nodes, counted in edges."""
        if self.root == NIL:
            return 0
        height = np.zeros(len(self.values), dtype=np.int64)
        best = 0
        # children are finished before their parent in reverse preorder
        order: list[int] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            order.append(node)
            for child in (self.left[node], self.right[node]):
                if child != NIL:
                    stack.append(int(child))
        for node in reversed(order):
            hl = height[self.left[node]] if self.left[node] != NIL else 0
            hr = height[self.right[node]] if self.right[node] != NIL else 0
            best = max(best, int(hl + hr))
            height[node] = max(hl, hr) + 1
        return best
