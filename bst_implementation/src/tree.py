import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from bst_implementation.src.base.node import BTreeNode, Key
from bst_implementation.src.utils import is_finite_key


@dataclass(frozen=True)
class DeepestResult:
    depth: int
    values: list[Key] = field(default_factory=list)


def inorder_keys(root: BTreeNode | None) -> list[Key]:
    """Iterative left, node, right walk. No recursion."""
    results: list[Key] = []
    stack: list[BTreeNode] = []
    curr = root

    while curr is not None or stack:
        # run down to the leftmost node, stacking everything on the way
        while curr is not None:
            stack.append(curr)
            curr = curr.left

        curr = stack.pop()
        results.append(curr.key)

        # as far left as we can go, switch to the right side
        curr = curr.right

    return results


def postorder_keys(root: BTreeNode | None) -> list[Key]:
    """
    Same walk as inorder_keys with the directions swapped: stack down the
    right side first, visit, then go left. Root of every subtree comes out
    after its right side and before its left side.
    """
    results: list[Key] = []
    stack: list[BTreeNode] = []
    curr = root

    while curr is not None or stack:
        while curr is not None:
            stack.append(curr)
            curr = curr.right

        curr = stack.pop()
        results.append(curr.key)

        curr = curr.left

    return results


class BinarySearchTree:
    def __init__(self, keys: Iterable[Key] | None = None) -> None:
        self._root: BTreeNode | None = None
        if keys is not None:
            self.insert(*keys)

    @property
    def root(self) -> BTreeNode | None:
        """Read only, callers inspect the shape through it but never mutate it."""
        return self._root

    def insert(self, *keys: Key) -> None:
        for key in keys:
            self._insert(BTreeNode(key))

    def _insert(self, new_node: BTreeNode) -> None:
        if self._root is None:
            self._root = new_node
            return

        curr = self._root
        while True:
            if new_node.key == curr.key:
                logging.debug(f"dropping duplicate {new_node.key = }")
                return
            if new_node.key < curr.key:
                if curr.left is None:
                    curr.left = new_node
                    return
                curr = curr.left
            else:
                if curr.right is None:
                    curr.right = new_node
                    return
                curr = curr.right

    def remove(self, key: Key) -> None:
        if self._root is None:
            return

        curr = self._root
        prev: BTreeNode | None = None
        while curr is not None and curr.key != key:
            prev = curr
            curr = curr.left if key < curr.key else curr.right

        if curr is None:
            logging.debug(f"nothing to remove for {key = }")
            return

        if curr.left is None or curr.right is None:
            self._splice_out(curr, prev)
        else:
            self._replace_with_successor(curr)

    def _splice_out(self, node: BTreeNode, parent: BTreeNode | None) -> None:
        """Removes a node with at most one child by linking that child upward."""
        child = node.right if node.left is None else node.left

        if parent is None:
            self._root = child
        elif node is parent.left:
            parent.left = child
        else:
            parent.right = child

    def _replace_with_successor(self, node: BTreeNode) -> None:
        successor = node.right
        assert successor is not None, "Two child removal needs a right subtree"

        successor_parent: BTreeNode | None = None
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left

        logging.debug(f"replacing {node.key = } with {successor.key = }")

        # the successor is reached by left steps only so it is always the
        # left child of its parent, unless it is node's direct right child
        if successor_parent is not None:
            successor_parent.left = successor.right
        else:
            node.right = successor.right

        node.key = successor.key
        successor.right = None

    def find(self, key: Key) -> BTreeNode | None:
        curr = self._root
        while curr is not None and curr.key != key:
            curr = curr.left if key < curr.key else curr.right
        return curr

    def inorder(self) -> list[Key]:
        return inorder_keys(self._root)

    def postorder(self) -> list[Key]:
        return postorder_keys(self._root)

    def find_deepest(self) -> DeepestResult:
        if self._root is None:
            return DeepestResult(0, [])

        depth = 0
        values: list[Key] = []
        search: deque[tuple[int, BTreeNode]] = deque([(0, self._root)])

        while search:
            node_depth, node = search.popleft()

            if node_depth > depth:
                depth = node_depth
                values = [node.key]
            elif node_depth == depth:
                values.append(node.key)

            if node.left is not None:
                search.append((node_depth + 1, node.left))
            if node.right is not None:
                search.append((node_depth + 1, node.right))

        return DeepestResult(depth, [value for value in values if is_finite_key(value)])

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()})"
