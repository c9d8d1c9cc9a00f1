from dataclasses import dataclass
from typing import TypeAlias


Key: TypeAlias = int | float


@dataclass(eq=False)
class BTreeNode:
    """
    Basic node of the tree. Owns its children, keeps no reference to a parent.
    Anything that needs the parent tracks it while descending.
    """

    key: Key
    left: "BTreeNode | None" = None
    right: "BTreeNode | None" = None

    @property
    def has_children(self) -> bool:
        return self.left is not None or self.right is not None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BTreeNode(key={self.key})"
