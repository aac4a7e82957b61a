"""Puzzles over integer arrays."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from itertools import groupby


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return the indices of two elements summing to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def _pair_sums(values: Sequence[int], low: int, goal: int) -> Iterator[tuple[int, int]]:
    """Yield distinct pairs from sorted ``values[low:]`` that sum to ``goal``."""
    high = len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total < goal:
            low += 1
        elif total > goal:
            high -= 1
        else:
            low_value, high_value = values[low], values[high]
            yield low_value, high_value
            while low < high and values[low] == low_value:
                low += 1
            while low < high and values[high] == high_value:
                high -= 1


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """List the distinct sorted triplets of ``nums`` that sum to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for index, first in enumerate(values):
        if index > 0 and first == values[index - 1]:
            continue
        result.extend(
            [first, second, third]
            for second, third in _pair_sums(values, index + 1, -first)
        )
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """List the distinct sorted quadruplets of ``nums`` that sum to ``target``."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i in range(size - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            goal = target - values[i] - values[j]
            result.extend(
                [values[i], values[j], low, high]
                for low, high in _pair_sums(values, j + 1, goal)
            )
    return result


def two_out_of_three(
    nums1: Iterable[int], nums2: Iterable[int], nums3: Iterable[int]
) -> list[int]:
    """Return, in ascending order, the values present in at least two inputs."""
    first, second, third = set(nums1), set(nums2), set(nums3)
    return sorted((first & second) | (first & third) | (second & third))


def divide_array(nums: Iterable[int]) -> bool:
    """Tell whether the sorted values pair up into equal neighbours."""
    values = sorted(nums)
    return all(a == b for a, b in zip(values[0::2], values[1::2]))


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    result: list[int] = []
    running = 1
    for value in nums:
        result.append(running)
        running *= value
    running = 1
    for index in reversed(range(len(nums))):
        result[index] *= running
        running *= nums[index]
    return result


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of each window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    window: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(nums):
        while window and window[-1] < value:
            window.pop()
        window.append(value)
        if index >= k and nums[index - k] == window[0]:
            window.popleft()
        if index >= k - 1:
            result.append(window[0])
    return result


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Move the distinct values of a sorted list to its front; return their count."""
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move the elements other than ``val`` to the front; return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def min_operations(nums: Sequence[int], k: int) -> int:
    """Count removals from the end needed to collect every value 1..k."""
    needed = set(range(1, k + 1))
    for operations, value in enumerate(reversed(nums), start=1):
        needed.discard(value)
        if not needed:
            return operations
    return len(nums)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    if not nums or target > nums[-1]:
        return len(nums)
    low, high = 0, len(nums)
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if target < nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return low


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the common elements with multiplicity, in the order of ``nums2``."""
    available = Counter(nums1)
    result: list[int] = []
    for value in nums2:
        if available[value] > 0:
            result.append(value)
            available[value] -= 1
    return result


def find_median_sorted_arrays(nums1: Iterable[int], nums2: Iterable[int]) -> float:
    """Return the median of the two inputs taken together."""
    values = sorted([*nums1, *nums2])
    if not values:
        raise ValueError("median of empty input")
    middle = len(values) // 2
    if len(values) % 2 == 0:
        return (values[middle - 1] + values[middle]) / 2
    return float(values[middle])


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_sub_array of empty input")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def _truncated_remainder(value: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(value) % abs(divisor)
    return -remainder if value < 0 else remainder


def check_subarray_sum(nums: Iterable[int], k: int) -> bool:
    """Tell whether a subarray of length two or more sums to a multiple of ``k``."""
    if k == 0:
        raise ValueError("k must be non-zero")
    first_seen = {0: -1}
    total = 0
    for index, value in enumerate(nums):
        total += value
        remainder = _truncated_remainder(total, k)
        if remainder in first_seen:
            if index - first_seen[remainder] >= 2:
                return True
        else:
            first_seen[remainder] = index
    return False


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number held as most-significant-first decimal digits."""
    if not digits:
        return []
    result: list[int] = []
    carry = 1
    for digit in reversed(digits):
        carry, digit = divmod(digit + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return result[::-1]


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Place the first ``n`` of ``nums2`` after the first ``m`` of ``nums1`` and sort."""
    if len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold m + n slots and nums2 at least n values")
    nums1[m : m + n] = nums2[:n]
    nums1.sort()


def min_sub_array_len(target: int, nums: Sequence[int]) -> int:
    """Return the shortest contiguous length summing to ``target`` or more; 0 if none."""
    if target <= 0:
        raise ValueError(f"target must be positive, got {target}")
    best = len(nums) + 1
    start = 0
    total = 0
    for end, value in enumerate(nums):
        total += value
        while total >= target:
            best = min(best, end - start + 1)
            total -= nums[start]
            start += 1
    return 0 if best > len(nums) else best