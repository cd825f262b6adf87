"""Defines the AVL tree over unique keys; inserting a key that already exists leaves the tree unchanged."""
from __future__ import annotations

import logging
import sys
from collections import deque
from typing import Iterable, Iterator, Optional, TextIO

from balancedtree.tree.helper import Helper
from balancedtree.tree.types import (
    IN_ORDER,
    LEVEL_ORDER,
    POST_ORDER,
    PRE_ORDER,
    TRAVERSAL_LABELS,
    UNKNOWN_ORDER_NOTICE,
    Key,
    KeyList,
)

logger = logging.getLogger(__name__)


class AVLTreeNode:
    def __init__(self, key: Key):
        """
        Given a key, create a new leaf node.

        A node exclusively owns its two children; the tree never keeps references back to a parent.
        :param key: The key stored in this node.
        """
        self.key: Key = key
        self.height: int = 1
        self.left_node: Optional[AVLTreeNode] = None
        self.right_node: Optional[AVLTreeNode] = None

    def __repr__(self) -> str:
        return f"AVLTreeNode(key={self.key!r}, height={self.height})"


class BalancedTree:
    """
    Defines the self-balancing binary search tree.

    The tree owns the root node; every public mutation leaves the tree ordered, balanced and with consistent heights.
    """

    def __init__(self, keys: Optional[Iterable[Key]] = None):
        """
        Create an empty tree, optionally followed by inserting the provided keys in order.

        :param keys: An optional iterable of keys to insert.
        """
        self.__root: Optional[AVLTreeNode] = None
        self.__size: int = 0

        if keys is not None:
            for key in keys:
                self.insert(key=key)

    def __len__(self) -> int:
        return self.__size

    def __contains__(self, key: Key) -> bool:
        return self.contains(key=key)

    def __iter__(self) -> Iterator[Key]:
        # Iterates over a snapshot, the tree may change during the loop.
        return iter(self.to_in_order_list())

    def __repr__(self) -> str:
        return f"BalancedTree({self.to_in_order_list()!r})"

    @property
    def root(self) -> Optional[AVLTreeNode]:
        """Get the root node of the tree, None when the tree is empty."""
        return self.__root

    @property
    def height(self) -> int:
        """Get the height of the tree; an empty tree has height 0."""
        return self.__get_height(self.__root)

    @staticmethod
    def __get_height(node: Optional[AVLTreeNode]) -> int:
        """Get the height of the input node."""
        # If the node is empty, the height would be 0; otherwise return height.
        return node.height if node else 0

    @staticmethod
    def __get_balance(node: Optional[AVLTreeNode]) -> int:
        """Get balance of the input node."""
        # If the node is empty, the balance would be 0; otherwise compute the balance.
        return BalancedTree.__get_height(node.left_node) - BalancedTree.__get_height(node.right_node) if node else 0

    def __update_height(self, node: AVLTreeNode) -> None:
        """Update the height of the input node."""
        node.height = 1 + max(self.__get_height(node.left_node), self.__get_height(node.right_node))

    def __rotate_left(self, in_node: AVLTreeNode) -> AVLTreeNode:
        """
        Perform a left rotation at the provided input node.

        :param in_node: Some AVLTreeNode to rotate.
        :return: The parent node of the rotated node.
        """
        # Save the right child of the input node as the parent node.
        p_node = in_node.right_node
        # The input node becomes the left child of the parent node, so the old left child moves over.
        tmp_node = p_node.left_node

        p_node.left_node = in_node
        in_node.right_node = tmp_node

        # Only these two nodes changed children; the lower one goes first.
        self.__update_height(in_node)
        self.__update_height(p_node)

        logger.debug("Rotated left at key %r, new subtree root %r.", in_node.key, p_node.key)
        return p_node

    def __rotate_right(self, in_node: AVLTreeNode) -> AVLTreeNode:
        """
        Perform a right rotation at the provided input node.

        :param in_node: Some AVLTreeNode to rotate.
        :return: The parent node of the rotated node.
        """
        # Save the left child of the input node as the parent node.
        p_node = in_node.left_node
        # The input node becomes the right child of the parent node, so the old right child moves over.
        tmp_node = p_node.right_node

        p_node.right_node = in_node
        in_node.left_node = tmp_node

        # Only these two nodes changed children; the lower one goes first.
        self.__update_height(in_node)
        self.__update_height(p_node)

        logger.debug("Rotated right at key %r, new subtree root %r.", in_node.key, p_node.key)
        return p_node

    def __balance(self, node: AVLTreeNode) -> AVLTreeNode:
        """Re-balance a node if it is unbalanced and return the root of the resulting subtree."""
        # Update the height of the node.
        self.__update_height(node)
        # Get the balance factor.
        balance = self.__get_balance(node)

        # Left heavy subtree rotation.
        if balance > 1:
            # The left-left case, a child with balance 0 also takes the single rotation.
            if self.__get_balance(node.left_node) >= 0:
                return self.__rotate_right(node)
            # The left-right case.
            node.left_node = self.__rotate_left(node.left_node)
            return self.__rotate_right(node)

        # Right heavy subtree rotation.
        if balance < -1:
            # The right-right case.
            if self.__get_balance(node.right_node) <= 0:
                return self.__rotate_left(node)
            # The right-left case.
            node.right_node = self.__rotate_right(node.right_node)
            return self.__rotate_left(node)

        return node

    def __insert(self, node: Optional[AVLTreeNode], key: Key) -> AVLTreeNode:
        """
        Insert the key into the subtree rooted at the provided node.

        :param node: The root of the subtree, None for an empty subtree.
        :param key: The key to insert.
        :return: The root of the subtree after insertion and re-balancing.
        """
        # When we reach an empty subtree, create a new node to hold the key.
        if node is None:
            self.__size += 1
            return AVLTreeNode(key)

        if key < node.key:
            node.left_node = self.__insert(node=node.left_node, key=key)
        elif key > node.key:
            node.right_node = self.__insert(node=node.right_node, key=key)
        else:
            # The key is already stored; nothing below this node changed.
            return node

        return self.__balance(node)

    @staticmethod
    def __find_min(node: AVLTreeNode) -> AVLTreeNode:
        """Find the node holding the smallest key of the subtree."""
        while node.left_node:
            node = node.left_node
        return node

    def __remove(self, node: Optional[AVLTreeNode], key: Key) -> Optional[AVLTreeNode]:
        """
        Remove the key from the subtree rooted at the provided node.

        :param node: The root of the subtree, None for an empty subtree.
        :param key: The key to remove.
        :return: The root of the subtree after removal and re-balancing, None if the subtree became empty.
        """
        # The key is not in the tree.
        if node is None:
            return None

        if key < node.key:
            node.left_node = self.__remove(node=node.left_node, key=key)
        elif key > node.key:
            node.right_node = self.__remove(node=node.right_node, key=key)
        elif node.left_node is None or node.right_node is None:
            # Zero or one child, the child (possibly None) takes the place of this node.
            self.__size -= 1
            child = node.left_node if node.left_node else node.right_node
            logger.debug("Removed key %r.", key)
            return child
        else:
            # Two children, only the key of the in-order successor is copied over.
            successor = self.__find_min(node.right_node)
            node.key = successor.key
            node.right_node = self.__remove(node=node.right_node, key=successor.key)

        return self.__balance(node)

    def insert(self, key: Key) -> None:
        """
        Insert a key into the tree; inserting a key that is already present is a no-op.

        :param key: The key to insert.
        """
        self.__root = self.__insert(node=self.__root, key=key)

    def remove(self, key: Key) -> None:
        """
        Remove a key from the tree; removing a key that is not present is a no-op.

        :param key: The key to remove.
        """
        self.__root = self.__remove(node=self.__root, key=key)

    def contains(self, key: Key) -> bool:
        """
        Check whether the key is stored in the tree.

        :param key: The key to search for.
        :return: True if the key is found, otherwise False.
        """
        node = self.__root
        while node:
            if key < node.key:
                node = node.left_node
            elif key > node.key:
                node = node.right_node
            else:
                return True

        # If never found, return False.
        return False

    def clear(self) -> None:
        """Drop every node of the tree."""
        self.__root = None
        self.__size = 0

    @staticmethod
    def __in_order(node: Optional[AVLTreeNode], result: KeyList) -> None:
        if node:
            BalancedTree.__in_order(node.left_node, result)
            result.append(node.key)
            BalancedTree.__in_order(node.right_node, result)

    @staticmethod
    def __pre_order(node: Optional[AVLTreeNode], result: KeyList) -> None:
        if node:
            result.append(node.key)
            BalancedTree.__pre_order(node.left_node, result)
            BalancedTree.__pre_order(node.right_node, result)

    @staticmethod
    def __post_order(node: Optional[AVLTreeNode], result: KeyList) -> None:
        if node:
            BalancedTree.__post_order(node.left_node, result)
            BalancedTree.__post_order(node.right_node, result)
            result.append(node.key)

    def to_in_order_list(self) -> KeyList:
        """Get the keys in ascending order."""
        result = []
        self.__in_order(self.__root, result)
        return result

    def to_pre_order_list(self) -> KeyList:
        """Get the keys visiting each node before its left and right subtrees."""
        result = []
        self.__pre_order(self.__root, result)
        return result

    def to_post_order_list(self) -> KeyList:
        """Get the keys visiting each node after its left and right subtrees."""
        result = []
        self.__post_order(self.__root, result)
        return result

    def to_level_order_list(self) -> KeyList:
        """Get the keys depth by depth, from left to right within each depth."""
        result = []
        if self.__root is None:
            return result

        # Subtrees waiting to be visited, oldest first.
        queue = deque([self.__root])
        while queue:
            node = queue.popleft()
            result.append(node.key)

            if node.left_node:
                queue.append(node.left_node)
            if node.right_node:
                queue.append(node.right_node)

        return result

    def print_as_list(self, order: str = IN_ORDER, file: Optional[TextIO] = None) -> None:
        """
        Print the keys of the tree as a bracketed list, e.g. "Pre-order traversal: [2, 1, 3]".

        :param order: One of "inorder", "preorder", "postorder" and "levelorder".
        :param file: The stream to write to, sys.stdout when not provided.
        """
        file = sys.stdout if file is None else file

        traversals = {
            IN_ORDER: self.to_in_order_list,
            PRE_ORDER: self.to_pre_order_list,
            POST_ORDER: self.to_post_order_list,
            LEVEL_ORDER: self.to_level_order_list,
        }

        # An unknown order is reported to the reader and rendered in-order.
        if order not in traversals:
            logger.debug("Unknown traversal order %r, falling back to %r.", order, IN_ORDER)
            print(UNKNOWN_ORDER_NOTICE, file=file)
            order = IN_ORDER

        print(f"{TRAVERSAL_LABELS[order]}: {Helper.format_key_list(traversals[order]())}", file=file)
