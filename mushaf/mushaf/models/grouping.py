"""
Grouping and counting helpers shared by every result type.

All helpers preserve first-seen order, so results built from them follow
mushaf order when the input does.
"""

from collections.abc import Callable, Hashable, Iterable
from typing import Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """
    Group items by a key, keeping first-seen key order.

    Args:
        items: Items to group
        key: Function returning the group key of an item

    Returns:
        Dict mapping each key to the items that produced it, in input order
    """
    grouped: dict[K, list[T]] = {}
    for item in items:
        grouped.setdefault(key(item), []).append(item)
    return grouped


def frequency(items: Iterable[T], key: Callable[[T], K]) -> dict[K, int]:
    """Count items per key, keeping first-seen key order."""
    counts: dict[K, int] = {}
    for item in items:
        k = key(item)
        counts[k] = counts.get(k, 0) + 1
    return counts


def most_frequent(counts: dict[K, int]) -> Optional[tuple[K, int]]:
    """
    Entry with the highest count.

    Ties go to the key seen first, so the answer is stable for a given
    input order.

    Returns:
        (key, count), or None if counts is empty
    """
    best: Optional[tuple[K, int]] = None
    for k, count in counts.items():
        if best is None or count > best[1]:
            best = (k, count)
    return best


def percentage(part: float, whole: float) -> float:
    """part as a percentage of whole; 0.0 when whole is zero."""
    if not whole:
        return 0.0
    return part / whole * 100


def median(values: Iterable[int]) -> float:
    """
    Median of a collection of integers.

    For an even count the two middle values are averaged; for an odd
    count the middle value is returned.
    """
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return 0.0
    mid = n // 2
    if n % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return float(ordered[mid])
