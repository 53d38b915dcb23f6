from collections import deque
from typing import Any

DEFAULT_MAX_DEPTH = 64


def _children(node: Any):
    if isinstance(node, dict):
        return node.items()
    if isinstance(node, (list, tuple)):
        return enumerate(node)
    return ()


def find_key(key: str, root: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """
    Finds the value of the first property named `key` anywhere in `root`.

    The walk is breadth-first: a match closer to the root always wins, and
    matches at the same depth are resolved in dict insertion / list order.
    Lists are walked like dicts keyed by index. Containers nested deeper than
    `max_depth` are not entered.

    Returns an empty dict when there is no match.
    """
    queue = deque([(root, 0)])
    while queue:
        node, depth = queue.popleft()
        for name, value in _children(node):
            if name == key and isinstance(node, dict):
                return value
            if isinstance(value, (dict, list, tuple)) and depth < max_depth:
                queue.append((value, depth + 1))
    return {}
