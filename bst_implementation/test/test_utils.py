import unittest

from bst_implementation.src.base.node import BTreeNode
from bst_implementation.src.utils import is_finite_key, mirrored


class TestIsFiniteKey(unittest.TestCase):
    def test_is_finite_key(self):
        self.assertTrue(is_finite_key(0))
        self.assertTrue(is_finite_key(-12))
        self.assertTrue(is_finite_key(3.5))
        self.assertFalse(is_finite_key(float("inf")))
        self.assertFalse(is_finite_key(float("-inf")))
        self.assertFalse(is_finite_key(float("nan")))


class TestMirrored(unittest.TestCase):
    def test_none(self):
        self.assertIsNone(mirrored(None))

    def test_swaps_every_level(self):
        #     2            2
        #    / \          / \
        #   1   4   ->   4   1
        #      /          \
        #     3            3
        original = BTreeNode(2, BTreeNode(1), BTreeNode(4, left=BTreeNode(3)))
        mirror = mirrored(original)

        assert mirror is not None and mirror is not original
        self.assertEqual(mirror.key, 2)
        assert mirror.left is not None and mirror.right is not None
        self.assertEqual(mirror.left.key, 4)
        self.assertEqual(mirror.right.key, 1)
        assert mirror.left.left is None
        assert mirror.left.right is not None
        self.assertEqual(mirror.left.right.key, 3)

    def test_original_untouched(self):
        original = BTreeNode(2, BTreeNode(1), BTreeNode(3))
        mirrored(original)
        assert original.left is not None and original.left.key == 1
        assert original.right is not None and original.right.key == 3

    def test_deep_chain(self):
        head = BTreeNode(0)
        curr = head
        for key in range(1, 5000):
            curr.right = BTreeNode(key)
            curr = curr.right

        mirror = mirrored(head)
        depth = 0
        while mirror is not None:
            assert mirror.right is None
            depth += 1
            mirror = mirror.left
        self.assertEqual(depth, 5000)
