from balancedtree.tree import (
    IN_ORDER,
    LEVEL_ORDER,
    POST_ORDER,
    PRE_ORDER,
    TRAVERSAL_ORDERS,
    AVLTreeNode,
    BalancedTree,
    Helper,
)

__version__ = "0.1.0"
