from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterable, Optional

if TYPE_CHECKING:
    from balancedtree.tree.avl_tree import AVLTreeNode

# The AVL worst case height is about log_phi(n) = 1.44 * log_2(n).
AVL_HEIGHT_FACTOR = 1.44


class Helper:
    @staticmethod
    def format_key_list(keys: Iterable[Any]) -> str:
        """Render the keys as a comma separated bracketed list, e.g. "[1, 2, 3]"."""
        return "[" + ", ".join(str(key) for key in keys) + "]"

    @staticmethod
    def max_avl_height(num_data: int) -> int:
        """
        Compute the largest height an AVL tree holding num_data keys may reach.

        :param num_data: The number of keys stored in the tree.
        :return: ceil(1.44 * log2(num_data + 2)), or 0 for an empty tree.
        """
        if num_data < 0:
            raise ValueError("The number of data must be non-negative.")
        if num_data == 0:
            return 0

        return math.ceil(AVL_HEIGHT_FACTOR * math.log(num_data + 2, 2))

    @staticmethod
    def compute_height(node: Optional[AVLTreeNode]) -> int:
        """Compute the height of the subtree from scratch, without trusting the cached heights."""
        if node is None:
            return 0
        return 1 + max(Helper.compute_height(node.left_node), Helper.compute_height(node.right_node))

    @staticmethod
    def is_bst(node: Optional[AVLTreeNode], lower: Any = None, upper: Any = None) -> bool:
        """
        Check that every key of the subtree lies strictly between its ancestors' keys.

        :param node: The root of the subtree to check.
        :param lower: Every key must be greater than this one; None means unbounded.
        :param upper: Every key must be smaller than this one; None means unbounded.
        :return: True if the subtree is a valid binary search tree without duplicates.
        """
        if node is None:
            return True
        if lower is not None and not lower < node.key:
            return False
        if upper is not None and not node.key < upper:
            return False

        return Helper.is_bst(node.left_node, lower, node.key) and Helper.is_bst(node.right_node, node.key, upper)

    @staticmethod
    def is_balanced(node: Optional[AVLTreeNode]) -> bool:
        """Check the balance factor and the cached height of every node in the subtree."""
        if node is None:
            return True

        left_height = Helper.compute_height(node.left_node)
        right_height = Helper.compute_height(node.right_node)

        # The cached height has to agree with the children.
        if node.height != 1 + max(left_height, right_height):
            return False
        if abs(left_height - right_height) > 1:
            return False

        return Helper.is_balanced(node.left_node) and Helper.is_balanced(node.right_node)
