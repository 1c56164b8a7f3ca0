"""Assorted algorithms: modular powers, LIS, permutations, Hanoi, length sorting."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator

MOD = 10**9 + 7


def power_mod(base: int, exponent: int, modulus: int = MOD) -> int:
    """``base ** exponent % modulus`` by iterative squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result % modulus * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def power_mod_recursive(base: int, exponent: int, modulus: int = MOD) -> int:
    """``base ** exponent % modulus`` by recursive squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    half = power_mod_recursive(base, exponent // 2, modulus) % modulus
    squared = half * half % modulus
    if exponent & 1:
        return squared * (base % modulus) % modulus
    return squared


def longest_increasing_subsequence(values: Iterable) -> list:
    """One longest strictly increasing subsequence of ``values``."""
    items = list(values)
    tails: list = []
    tail_index: list[int] = []
    previous: list[int | None] = [None] * len(items)
    for i, value in enumerate(items):
        j = bisect_right(tails, value)
        if j and tails[j - 1] == value:
            continue
        previous[i] = tail_index[j - 1] if j else None
        if j == len(tails):
            tails.append(value)
            tail_index.append(i)
        else:
            tails[j] = value
            tail_index[j] = i
    result = []
    k = tail_index[-1] if tail_index else None
    while k is not None:
        result.append(items[k])
        k = previous[k]
    return result[::-1]


def next_lexicographic_permutation(values: Iterable) -> list | None:
    """Next lexicographic permutation, or None if ``values`` is the greatest one."""
    items = list(values)
    fall = len(items) - 2
    while fall >= 0 and items[fall] >= items[fall + 1]:
        fall -= 1
    if fall < 0:
        return None
    replace = len(items) - 1
    while items[replace] <= items[fall]:
        replace -= 1
    items[fall], items[replace] = items[replace], items[fall]
    items[fall + 1:] = reversed(items[fall + 1:])
    return items


def hanoi_moves(
    disks: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moves solving the Tower of Hanoi."""
    if disks <= 0:
        return
    yield from hanoi_moves(disks - 1, source, auxiliary, target)
    yield (disks, source, target)
    yield from hanoi_moves(disks - 1, auxiliary, target, source)


def sort_by_length(strings: Iterable[str]) -> list[str]:
    """Strings ordered by length, shortest first; equal lengths keep their order."""
    return sorted(strings, key=len)