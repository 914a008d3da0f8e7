"""Classic sorting algorithms over lists of integers.

The top-level sorts return a new sorted list and leave their input untouched.
The heap and partition helpers work in place on the list they are given.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, swapping adjacent out-of-order pairs."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, moving the largest remaining value to the end."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        largest = max(range(end + 1), key=result.__getitem__)
        result[end], result[largest] = result[largest], result[end]
    return result


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, inserting each value after every value not larger."""
    result: list[int] = []
    for value in values:
        position = len(result)
        while position > 0 and result[position - 1] > value:
            position -= 1
        result.insert(position, value)
    return result


def counting_sort(values: Iterable[int], maximum: int) -> list[int]:
    """Return a sorted copy of values that all lie in the range 0..maximum."""
    if maximum < 0:
        raise ValueError("maximum must not be negative")
    counts = [0] * (maximum + 1)
    for value in values:
        if not 0 <= value <= maximum:
            raise ValueError(f"value {value} outside 0..{maximum}")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def max_heapify(heap: MutableSequence[int], index: int, length: int) -> None:
    """Sift heap[index] down within the 1-based heap heap[1..length]."""
    while True:
        left, right = 2 * index, 2 * index + 1
        if right <= length:
            child = right if heap[left] < heap[right] else left
        elif left <= length:
            child = left
        else:
            return
        if heap[index] > heap[child]:
            return
        heap[index], heap[child] = heap[child], heap[index]
        index = child


def build_max_heap(heap: MutableSequence[int], length: int) -> None:
    """Arrange heap[1..length] into a max-heap; heap[0] is not used."""
    for index in range(length // 2, 0, -1):
        max_heapify(heap, index, length)


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using an in-place max-heap."""
    heap = [0, *values]
    length = len(heap) - 1
    build_max_heap(heap, length)
    for last in range(length, 1, -1):
        heap[1], heap[last] = heap[last], heap[1]
        max_heapify(heap, 1, last - 1)
    return heap[1:]


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy by recursive halving and stable merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition_last(values: MutableSequence[int], left: int, right: int) -> int:
    """Partition values[left..right] around its last element; return its new index."""
    pivot = values[right]
    boundary = left
    for i in range(left, right):
        if values[i] < pivot:
            values[i], values[boundary] = values[boundary], values[i]
            boundary += 1
    values[right] = values[boundary]
    values[boundary] = pivot
    return boundary


def partition_first(values: MutableSequence[int], left: int, right: int) -> int:
    """Partition values[left..right] around its first element; return its new index."""
    pivot = values[left]
    low = left
    for high in range(left + 1, right + 1):
        if values[high] < pivot:
            low += 1
            values[high], values[low] = values[low], values[high]
    values[left] = values[low]
    values[low] = pivot
    return low


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using quicksort with the last element as pivot."""
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        mid = partition_last(result, left, right)
        pending.append((left, mid - 1))
        pending.append((mid + 1, right))
    return result


def radix_passes(values: Iterable[int], max_digits: int) -> Iterator[list[int]]:
    """Yield the list after each least-significant-digit bucket pass."""
    current = list(values)
    if any(value < 0 for value in current):
        raise ValueError("radix sort needs non-negative values")
    digit = 1
    for _ in range(max_digits):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in current:
            buckets[value // digit % 10].append(value)
        current = [value for bucket in buckets for value in bucket]
        yield list(current)
        digit *= 10


def radix_sort(values: Iterable[int], max_digits: int) -> list[int]:
    """Return the values after max_digits radix passes."""
    result = list(values)
    for result in radix_passes(result, max_digits):
        pass
    return result