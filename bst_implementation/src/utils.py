import math

from bst_implementation.src.base.node import BTreeNode, Key


def is_finite_key(key: Key) -> bool:
    return math.isfinite(key)


def mirrored(node: BTreeNode | None) -> BTreeNode | None:
    """
    Copy of the subtree under node with every left and right swapped. Used to
    check that postorder_keys on a tree matches inorder_keys on its mirror.
    Walks with an explicit stack of (original, copy) pairs so depth is not
    bounded by the recursion limit.
    """
    if node is None:
        return None

    head = BTreeNode(node.key)
    stack = [(node, head)]
    while stack:
        original, copy = stack.pop()
        if original.left is not None:
            copy.right = BTreeNode(original.left.key)
            stack.append((original.left, copy.right))
        if original.right is not None:
            copy.left = BTreeNode(original.right.key)
            stack.append((original.right, copy.left))
    return head
