"""Bit manipulation and integer puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate, combinations, zip_longest
from operator import or_, xor

_UINT32 = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
# Bit i is set when i is a prime number (2, 3, 5, 7, 11, 13, 17, 19).
_PRIME_COUNTS_MASK = 665772


def _popcount(n: int) -> int:
    """Count the set bits of a positive number; zero and negatives give 0."""
    return bin(n).count("1") if n > 0 else 0


def _to_int32(value: int) -> int:
    """Read the low 32 bits of ``value`` as a signed 32-bit integer."""
    value &= _UINT32
    return value - (1 << 32) if value & _INT32_SIGN else value


def _complement_mask(n: int) -> int:
    return (1 << n.bit_length()) - 1 if n > 0 else 0


def bitwise_complement(n: int) -> int:
    """Flip every bit of ``n`` below its highest set bit; 0 gives 1."""
    if n == 0:
        return 1
    return n ^ _complement_mask(n)


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` below its highest set bit; 0 gives 0."""
    return num ^ _complement_mask(num)


def prefixes_div_by_5(nums: Iterable[int]) -> list[bool]:
    """For each binary prefix of ``nums``, tell whether its value is divisible by 5."""
    remainder = 0
    result: list[bool] = []
    for bit in nums:
        remainder = ((remainder << 1) | bit) % 5
        result.append(remainder == 0)
    return result


def add_negabinary(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two base -2 numbers given as most-significant-first digit lists."""
    digits: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        carry += x + y
        digits.append(carry & 1)
        carry = -(carry >> 1)
    while carry:
        digits.append(carry & 1)
        carry = -(carry >> 1)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits[::-1]


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def single_number_thrice(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears three times."""
    ones = twos = 0
    for num in nums:
        ones = (ones ^ num) & ~twos
        twos = (twos ^ num) & ~ones
    return ones


def number_of_steps(num: int) -> int:
    """Count halvings of even values and decrements of odd ones to reach zero."""
    steps = 0
    while num > 0:
        num = num // 2 if num % 2 == 0 else num - 1
        steps += 1
    return steps


def sort_by_bits(arr: Iterable[int]) -> list[int]:
    """Sort by number of set bits, then by value."""
    return sorted(arr, key=lambda value: (_popcount(value), value))


def xor_operation(n: int, start: int) -> int:
    """XOR together ``start + 2*i`` for ``i`` in ``range(n)``."""
    return reduce(xor, range(start, start + 2 * n, 2), 0)


def decode(encoded: Iterable[int], first: int) -> list[int]:
    """Rebuild an array from the XORs of its neighbours and its first element."""
    return list(accumulate(encoded, xor, initial=first))


def reverse_bits(n: int) -> int:
    """Reverse the order of the 32 bits of an unsigned integer."""
    return int(format(n & _UINT32, "032b")[::-1], 2)


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n``; zero and negatives give 0."""
    return _popcount(n)


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Sum the XOR totals of every subset of ``nums``, the empty one included."""
    return sum(
        reduce(xor, subset, 0)
        for size in range(len(nums) + 1)
        for subset in combinations(nums, size)
    )


def range_bitwise_and(left: int, right: int) -> int:
    """AND together every integer from ``left`` to ``right`` inclusive."""
    shift = 0
    while left < right:
        left >>= 1
        right >>= 1
        shift += 1
    return left << shift


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits reaches 1."""
    while True:
        if n in (1, 7):
            return True
        if n < 10:
            return False
        n = sum(int(digit) ** 2 for digit in str(n))


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and not n & (n - 1)


def min_bit_flips(start: int, goal: int) -> int:
    """Count the bit positions in which ``start`` and ``goal`` differ."""
    return _popcount(start ^ goal)


def hamming_distance(x: int, y: int) -> int:
    """Count the bit positions in which ``x`` and ``y`` differ."""
    return _popcount(x ^ y)


def similar_pairs(words: Iterable[str]) -> int:
    """Count pairs of lowercase words built from the same set of letters."""
    seen: Counter[int] = Counter()
    pairs = 0
    for word in words:
        mask = reduce(or_, (1 << (ord(char) - ord("a")) for char in word), 0)
        pairs += seen[mask]
        seen[mask] += 1
    return pairs


def even_odd_bit(n: int) -> list[int]:
    """Return the counts of set bits at even and at odd positions, from bit 0."""
    bits = format(n, "b")[::-1] if n > 0 else ""
    return [bits[0::2].count("1"), bits[1::2].count("1")]


def missing_number(nums: Sequence[int]) -> int:
    """Return the value of ``0..len(nums)`` that is absent from ``nums``."""
    return reduce(xor, nums, reduce(xor, range(len(nums) + 1), 0))


def sum_indices_with_k_set_bits(nums: Iterable[int], k: int) -> int:
    """Sum the elements whose index has exactly ``k`` set bits."""
    return sum(value for index, value in enumerate(nums) if _popcount(index) == k)


def find_k_or(nums: Sequence[int], k: int) -> int:
    """Set each of 32 bits that is set in at least ``k`` of ``nums``."""
    result = 0
    for bit in range(32):
        if sum(1 for num in nums if (num & _UINT32) >> bit & 1) >= k:
            result |= 1 << bit
    return _to_int32(result)


def maximum_strong_pair_xor(nums: Sequence[int]) -> int:
    """Return the largest XOR of two elements ``a, b`` with ``|a - b| <= min(a, b)``."""
    return max(
        [0, *(a ^ b for a, b in combinations(nums, 2) if abs(a - b) <= min(a, b))]
    )


def has_trailing_zeros(nums: Iterable[int]) -> bool:
    """Tell whether two elements have an OR with a trailing zero bit."""
    return sum(1 for num in nums if num & 1 == 0) >= 2


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of each integer from 0 to ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    counts = [0]
    for i in range(1, n + 1):
        counts.append(counts[i >> 1] + (i & 1))
    return counts


def is_power_of_four(n: int) -> bool:
    """Tell whether ``n`` is a positive power of four."""
    return is_power_of_two(n) and (n.bit_length() - 1) % 2 == 0


def duplicate_numbers_xor(nums: Iterable[int]) -> int:
    """XOR together the values that occur exactly twice."""
    return reduce(xor, (value for value, count in Counter(nums).items() if count == 2), 0)


def get_sum(a: int, b: int) -> int:
    """Add two 32-bit integers with bit operations, wrapping on overflow."""
    a &= _UINT32
    b &= _UINT32
    while b:
        a, b = (a ^ b) & _UINT32, ((a & b) << 1) & _UINT32
    return _to_int32(a)


def to_hex(num: int) -> str:
    """Write ``num`` as lowercase hex; negatives use 32-bit two's complement."""
    return format(num & _UINT32, "x")


def find_error_nums(nums: Sequence[int]) -> list[int]:
    """Return ``[duplicated, missing]`` for a 1..n array with one value replaced."""
    counts = Counter(nums)
    size = len(nums)
    duplicated = [value for value, count in counts.items() if count == 2]
    missing = [value for value in range(1, size + 1) if value not in counts]
    if len(duplicated) != 1 or len(missing) != 1 or len(counts) != size - 1:
        raise ValueError("expected 1..n with exactly one value duplicated")
    return [duplicated[0], missing[0]]


def has_alternating_bits(n: int) -> bool:
    """Tell whether every pair of adjacent bits of ``n`` differ."""
    bits = format(n, "b") if n > 0 else ""
    return all(a != b for a, b in zip(bits, bits[1:]))


def count_prime_set_bits(left: int, right: int) -> int:
    """Count integers in ``left..right`` whose number of set bits is prime."""
    return sum(
        1
        for value in range(left, right + 1)
        if _PRIME_COUNTS_MASK >> _popcount(value) & 1
    )


def binary_gap(n: int) -> int:
    """Return the longest distance between two adjacent set bits of ``n``."""
    if n <= 0:
        return 0
    positions = [i for i, bit in enumerate(format(n, "b")) if bit == "1"]
    return max((b - a for a, b in zip(positions, positions[1:])), default=0)