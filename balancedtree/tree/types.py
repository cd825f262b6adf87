from typing import Any, Dict, List

# A key only needs to be totally ordered against the other keys in the same tree.
Key = Any
KeyList = List[Key]

# Traversal orders
IN_ORDER = "inorder"
PRE_ORDER = "preorder"
POST_ORDER = "postorder"
LEVEL_ORDER = "levelorder"

TRAVERSAL_ORDERS = (IN_ORDER, PRE_ORDER, POST_ORDER, LEVEL_ORDER)

# The label printed in front of each rendered traversal.
TRAVERSAL_LABELS: Dict[str, str] = {
    IN_ORDER: "In-order traversal (sorted)",
    PRE_ORDER: "Pre-order traversal",
    POST_ORDER: "Post-order traversal",
    LEVEL_ORDER: "Level-order traversal",
}

UNKNOWN_ORDER_NOTICE = "Unknown traversal type. Using inorder by default."
