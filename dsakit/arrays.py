"""Array problems: pair sums, permutations, products, spirals and rotations."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Sequence
from itertools import accumulate


def has_pair_with_sum(values: Iterable[int], target: int) -> bool:
    """Return True if two distinct elements of ``values`` add up to ``target``."""
    ordered = sorted(values)
    front, end = 0, len(ordered) - 1
    while front < end:
        total = ordered[front] + ordered[end]
        if total == target:
            return True
        if total > target:
            end -= 1
        else:
            front += 1
    return False


def inc_dec_permutation(pattern: str) -> list[int]:
    """Build a permutation of 1..len(pattern)+1 following an I/D pattern.

    ``'I'`` means the next number is larger, any other character means smaller.
    """
    low, high = 1, len(pattern) + 1
    result: list[int] = []
    for step in pattern:
        if step == "I":
            result.append(low)
            low += 1
        else:
            result.append(high)
            high -= 1
    result.append(low)
    return result


def first_missing_positive(values: Iterable[int]) -> int:
    """Return the smallest positive integer absent from ``values``."""
    slots = list(values)
    n = len(slots)
    i = 0
    while i < n:
        value = slots[i]
        if 0 < value <= n and value != i + 1:
            occupant = slots[value - 1]
            if occupant == value:
                slots[i] = 0
            elif not 0 < occupant <= n:
                slots[value - 1] = value
            else:
                slots[i], slots[value - 1] = occupant, value
                continue
        i += 1
    return next((pos + 1 for pos, value in enumerate(slots) if value != pos + 1), n + 1)


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(reversed(matrix[bottom][left:right + 1]))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def next_permutation(values: Iterable) -> list:
    """Return the next lexicographic permutation, wrapping to the first one."""
    items = list(values)
    i = len(items) - 2
    while i >= 0 and items[i] >= items[i + 1]:
        i -= 1
    if i < 0:
        return items[::-1]
    j = len(items) - 1
    while items[j] <= items[i]:
        j -= 1
    items[i], items[j] = items[j], items[i]
    items[i + 1:] = reversed(items[i + 1:])
    return items


def previous_permutation(values: Iterable) -> list:
    """Return the previous lexicographic permutation, wrapping to the last one."""
    items = list(values)
    i = len(items) - 2
    while i >= 0 and items[i] <= items[i + 1]:
        i -= 1
    if i < 0:
        return items[::-1]
    j = len(items) - 1
    while items[j] >= items[i]:
        j -= 1
    items[i], items[j] = items[j], items[i]
    items[i + 1:] = reversed(items[i + 1:])
    return items


def product_except_self(values: Sequence[int]) -> list[int]:
    """Product of all other elements at each index, computed by division.

    Raises ZeroDivisionError if any element is zero.
    """
    total = math.prod(values)
    return [total // value for value in values]


def product_except_self_no_division(values: Sequence[int]) -> list[int]:
    """Product of all other elements at each index, using prefix and suffix products."""
    items = list(values)
    if not items:
        return []
    prefix = list(accumulate(items[:-1], operator.mul, initial=1))
    suffix = list(accumulate(reversed(items[1:]), operator.mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def push_zeroes_to_end(values: list) -> None:
    """Move every zero to the end of ``values`` in place, keeping the order of the rest."""
    nonzero = [value for value in values if value]
    zeroes = [value for value in values if not value]
    values[:] = nonzero + zeroes


def rotate_clockwise(matrix: Sequence[Sequence]) -> list[list]:
    """Return ``matrix`` rotated 90 degrees clockwise."""
    return [list(row) for row in zip(*reversed(matrix))]