"""Comparison and distribution sorting algorithms.

The comparison sorts work in place on a mutable sequence and return None,
like ``list.sort``. ``counting_sort`` builds and returns a new list.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, Protocol, TypeVar


class _Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=_Comparable)
H = TypeVar("H", bound=_Comparable)


def bubble_sort(arr: MutableSequence[T]) -> None:
    """Sort ``arr`` in place by repeatedly swapping adjacent out-of-order items."""
    n = len(arr)
    for _ in range(n):
        swapped = False
        for i in range(n - 1):
            if arr[i] > arr[i + 1]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
        if not swapped:
            break


def bucket_sort(arr: MutableSequence[T], hasher: Callable[[T], H]) -> None:
    """Sort ``arr`` in place by grouping items into buckets ordered by ``hasher``.

    ``hasher`` must be monotone: items in a bucket with a smaller hash must
    never be greater than items in a bucket with a larger hash. Each bucket
    is sorted on its own and the buckets are concatenated in hash order.
    """
    hashes: list[H] = []
    buckets: list[list[T]] = []
    for value in arr:
        key = hasher(value)
        index = bisect_left(hashes, key)
        if index < len(hashes) and not (hashes[index] < key or key < hashes[index]):
            buckets[index].append(value)
        else:
            hashes.insert(index, key)
            buckets.insert(index, [value])
    arr[:] = [value for bucket in buckets for value in sorted(bucket)]


def counting_sort(arr: Iterable[int], lower_bound: int, upper_bound: int) -> list[int]:
    """Return the integers of ``arr`` sorted, all lying in ``[lower_bound, upper_bound)``."""
    if upper_bound < lower_bound:
        raise ValueError("upper_bound must not be below lower_bound")
    counts = [0] * (upper_bound - lower_bound)
    for value in arr:
        if not lower_bound <= value < upper_bound:
            raise ValueError(
                f"value {value} outside the range [{lower_bound}, {upper_bound})"
            )
        counts[value - lower_bound] += 1
    return [
        value
        for value, count in enumerate(counts, start=lower_bound)
        for _ in range(count)
    ]


def insertion_sort(arr: MutableSequence[T]) -> None:
    """Sort ``arr`` in place by sinking each item into the sorted prefix."""
    for i in range(1, len(arr)):
        j = i
        while j > 0 and arr[j - 1] > arr[j]:
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            j -= 1


def _merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: list[T]) -> list[T]:
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return _merge(_merge_sorted(items[:middle]), _merge_sorted(items[middle:]))


def merge_sort(arr: MutableSequence[T]) -> None:
    """Sort ``arr`` in place by recursively merging sorted halves."""
    arr[:] = _merge_sorted(list(arr))


def _partition(arr: MutableSequence[T], low: int, high: int) -> int:
    """Partition ``arr[low:high + 1]`` around its last item and return its final index."""
    pivot = arr[high]
    store = low
    for i in range(low, high):
        if arr[i] < pivot:
            arr[i], arr[store] = arr[store], arr[i]
            store += 1
    arr[store], arr[high] = arr[high], arr[store]
    return store


def quick_sort(arr: MutableSequence[T]) -> None:
    """Sort ``arr`` in place by quicksort with the last item of a range as pivot."""
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        p = _partition(arr, low, high)
        pending.append((low, p - 1))
        pending.append((p + 1, high))


def selection_sort(arr: MutableSequence[T]) -> None:
    """Sort ``arr`` in place by moving the first minimum of the rest to the front."""
    n = len(arr)
    for i in range(n):
        smallest = min(range(i, n), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]