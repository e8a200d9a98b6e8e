from typing import Iterable, Iterator, List, Optional, Tuple


class BinarySearchTree:
    """Unbalanced binary search tree of distinct integers.

    Shape depends only on insertion order. All walks use an explicit stack,
    so a degenerate (sorted-input) tree never hits the recursion limit.
    """

    class Node:
        def __init__(self, value: int) -> None:
            self.value: int = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

        def is_leaf(self) -> bool:
            return self.left is None and self.right is None

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    def insert(self, value: int) -> None:
        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BinarySearchTree.Node(value)
                    self._size += 1
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BinarySearchTree.Node(value)
                    self._size += 1
                    return
                node = node.right
            else:
                return

    def insert_all(self, values: Iterable[int]) -> int:
        """Insert values in order. Returns how many were actually stored."""
        before = self._size
        for value in values:
            self.insert(value)
        return self._size - before

    def contains(self, value: int) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def root(self) -> Optional[int]:
        return None if self._root is None else self._root.value

    def min(self) -> int:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> int:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Number of levels: 0 for an empty tree, 1 for a lone root."""
        if self._root is None:
            return 0
        deepest = 0
        stack: List[Tuple[BinarySearchTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > deepest:
                deepest = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return deepest

    def count(self) -> int:
        """Count nodes by walking the graph (size() returns the cached total)."""
        total = 0
        stack: List[BinarySearchTree.Node] = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            total += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return total

    def leaf_count(self) -> int:
        leaves = 0
        stack: List[BinarySearchTree.Node] = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                leaves += 1
                continue
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return leaves

    def balance_factor(self) -> Optional[float]:
        # Display-only metric: count / height.
        levels = self.height()
        if levels == 0:
            return None
        return self.count() / levels

    def release(self) -> int:
        """Tear the tree down children-first and leave it empty.

        Each node's child links are cut only after both of its subtrees have
        been released. Returns the number of nodes visited.
        """
        released = 0
        if self._root is None:
            return released

        stack: List[Tuple[BinarySearchTree.Node, bool]] = [(self._root, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                node.left = None
                node.right = None
                released += 1
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

        self._root = None
        self._size = 0
        return released

    def in_order(self) -> List[int]:
        result: List[int] = []
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[int]:
        result: List[int] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[int]:
        # Node-right-left, reversed.
        result: List[int] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def copy(self) -> 'BinarySearchTree':
        clone = BinarySearchTree()
        clone.insert_all(self.pre_order())
        return clone

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[int]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size}, height={self.height()})"
