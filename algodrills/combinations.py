"""Enumerating combinations and permutations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """List the multisets of ``candidates`` summing to ``target``, reuse allowed.

    Each combination lists candidates in their input order.
    """
    if any(candidate <= 0 for candidate in candidates):
        raise ValueError("candidates must be positive")

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if remaining < 0 or start >= len(candidates):
            return
        chosen.append(candidates[start])
        yield from search(start, remaining - candidates[start], chosen)
        chosen.pop()
        yield from search(start + 1, remaining, chosen)

    return list(search(0, target, []))


def permute(nums: Sequence[int]) -> list[list[int]]:
    """List every ordering of ``nums``, generated by successive swaps."""
    work = list(nums)

    def arrange(begin: int) -> Iterator[list[int]]:
        if begin >= len(work):
            yield list(work)
            return
        for i in range(begin, len(work)):
            work[begin], work[i] = work[i], work[begin]
            yield from arrange(begin + 1)
            work[begin], work[i] = work[i], work[begin]

    return list(arrange(0))