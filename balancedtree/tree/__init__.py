from balancedtree.tree.helper import Helper
from balancedtree.tree.types import (
    IN_ORDER,
    LEVEL_ORDER,
    POST_ORDER,
    PRE_ORDER,
    TRAVERSAL_LABELS,
    TRAVERSAL_ORDERS,
    UNKNOWN_ORDER_NOTICE,
    Key,
    KeyList,
)
from balancedtree.tree.avl_tree import AVLTreeNode, BalancedTree
