"""
Top-K selection - partition-exchange ordering shared by the stores
"""
from typing import Any, Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def _partition(items: List[T], keys: List[Any], left: int, right: int) -> int:
    """Hoare-style exchange scan around the middle element, larger keys first"""
    pivot = keys[(left + right) // 2]
    i, j = left, right

    while i <= j:
        while keys[i] > pivot:
            i += 1
        while keys[j] < pivot:
            j -= 1
        if i <= j:
            items[i], items[j] = items[j], items[i]
            keys[i], keys[j] = keys[j], keys[i]
            i += 1
            j -= 1
    return i


def select_top(
    items: Sequence[T],
    key: Callable[[T], Any],
    limit: Optional[int] = None,
) -> List[T]:
    """
    Order items by key, largest first, optionally keeping only the first few.

    Args:
        items: Items to order; never modified
        key: Extracts the comparable sort key of an item
        limit: Keep only this many leading items; ranges that lie entirely
            past the limit are left unsorted

    Returns:
        New list ordered descending by key. The ordering is not stable.
    """
    result = list(items)
    if limit is not None and limit <= 0:
        return []
    if len(result) < 2:
        return result

    bound = len(result) if limit is None else min(limit, len(result))
    keys = [key(item) for item in result]

    pending = [(0, len(result) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right or left >= bound:
            continue
        index = _partition(result, keys, left, right)
        if left < index - 1:
            pending.append((left, index - 1))
        if index < right:
            pending.append((index, right))

    return result[:bound]
