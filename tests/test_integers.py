from functools import reduce
from itertools import pairwise
from math import comb
from operator import and_, or_

import pytest

from algodrills.integers import (
    add_negabinary,
    binary_gap,
    bitwise_complement,
    count_bits,
    count_prime_set_bits,
    decode,
    duplicate_numbers_xor,
    even_odd_bit,
    find_complement,
    find_error_nums,
    find_k_or,
    get_sum,
    hamming_distance,
    hamming_weight,
    has_alternating_bits,
    has_trailing_zeros,
    is_happy,
    is_power_of_four,
    is_power_of_two,
    maximum_strong_pair_xor,
    min_bit_flips,
    missing_number,
    number_of_steps,
    prefixes_div_by_5,
    range_bitwise_and,
    reverse_bits,
    similar_pairs,
    single_number,
    single_number_thrice,
    sort_by_bits,
    subset_xor_sum,
    sum_indices_with_k_set_bits,
    to_hex,
    xor_operation,
)


def _negabinary_value(digits):
    return sum(d * (-2) ** i for i, d in enumerate(reversed(digits)))


def test_bitwise_complement_of_zero():
    assert bitwise_complement(0) == 1


@pytest.mark.parametrize("n", [1, 5, 7, 10, 1000, 123456])
def test_complement_invariants(n):
    c = bitwise_complement(n)
    assert n & c == 0
    assert is_power_of_two((n | c) + 1)
    assert (n | c).bit_length() == n.bit_length()
    assert find_complement(n) == c


def test_find_complement_of_zero():
    assert find_complement(0) == 0


@pytest.mark.parametrize("nums", [[0, 1, 1], [1, 1, 1], [1, 0, 1, 0, 0, 1, 1, 1, 0, 1], [0]])
def test_prefixes_div_by_5_matches_prefix_values(nums):
    expected = [
        int("".join(map(str, nums[: i + 1])), 2) % 5 == 0 for i in range(len(nums))
    ]
    assert prefixes_div_by_5(nums) == expected


def test_prefixes_div_by_5_empty():
    assert prefixes_div_by_5([]) == []


@pytest.mark.parametrize(
    "a, b",
    [([1, 1, 1, 1, 1], [1, 0, 1]), ([1], [1]), ([1, 1], [1]), ([1, 0], [1, 1, 0])],
)
def test_add_negabinary_adds_values(a, b):
    result = add_negabinary(a, b)
    assert _negabinary_value(result) == _negabinary_value(a) + _negabinary_value(b)
    assert result == [0] or result[0] == 1


def test_add_negabinary_zero():
    assert add_negabinary([0], [0]) == [0]


def test_single_number():
    assert single_number([4, 1, 2, 1, 2]) == 4
    assert single_number([-3, 7, 7]) == -3


def test_single_number_thrice():
    assert single_number_thrice([2, 2, 3, 2]) == 3
    assert single_number_thrice([0, 1, 0, 1, 0, 1, 99]) == 99
    assert single_number_thrice([-2, -2, -2, -7]) == -7


@pytest.mark.parametrize("n", [1, 3, 14, 123, 1000])
def test_number_of_steps_recurrence(n):
    assert number_of_steps(2 * n) == number_of_steps(n) + 1
    assert number_of_steps(2 * n + 1) == number_of_steps(2 * n) + 1


def test_number_of_steps_zero():
    assert number_of_steps(0) == 0


def test_sort_by_bits_orders_by_count_then_value():
    arr = [0, 1, 2, 3, 4, 5, 6, 7, 8, 1024, 512, 255]
    result = sort_by_bits(arr)
    assert sorted(result) == sorted(arr)
    keys = [(hamming_weight(v), v) for v in result]
    assert keys == sorted(keys)


@pytest.mark.parametrize("start", [0, 3, 10])
def test_xor_operation_recurrence(start):
    assert xor_operation(1, start) == start
    for n in range(1, 8):
        assert xor_operation(n + 1, start) == xor_operation(n, start) ^ (start + 2 * n)


def test_decode_round_trip():
    original = [4, 2, 0, 7, 4]
    encoded = [a ^ b for a, b in pairwise(original)]
    assert decode(encoded, original[0]) == original


def test_reverse_bits_pinned():
    assert reverse_bits(0xFFFF0000) == 0x0000FFFF


@pytest.mark.parametrize("n", [0, 1, 43261596, 0xF0F0F0F0, 0xAAAAAAAA, 12345])
def test_reverse_bits_involution(n):
    assert reverse_bits(reverse_bits(n)) == n
    assert hamming_weight(reverse_bits(n)) == hamming_weight(n)


def test_hamming_weight_disjoint_union():
    a, b = 0b1011000, 0b0000111
    assert hamming_weight(a | b) == hamming_weight(a) + hamming_weight(b)
    assert hamming_weight(1) == 1
    assert hamming_weight(0) == 0


@pytest.mark.parametrize("nums", [[1, 3], [5, 1, 6], [3, 4, 5, 6, 7, 8]])
def test_subset_xor_sum_identity(nums):
    assert subset_xor_sum(nums) == reduce(or_, nums) << (len(nums) - 1)


def test_subset_xor_sum_empty():
    assert subset_xor_sum([]) == 0


@pytest.mark.parametrize("left, right", [(5, 7), (12, 15), (1, 1), (26, 30)])
def test_range_bitwise_and_is_common_subset(left, right):
    result = range_bitwise_and(left, right)
    assert result <= left
    assert all(value & result == result for value in range(left, right + 1))
    assert result == reduce(and_, range(left, right + 1))


def test_is_happy():
    assert is_happy(1)
    assert is_happy(7)
    assert is_happy(19)
    assert not is_happy(2)
    assert not is_happy(4)


@pytest.mark.parametrize("n", [19, 2, 100, 1111, 68])
def test_is_happy_follows_digit_square_sum(n):
    assert is_happy(n) == is_happy(sum(int(d) ** 2 for d in str(n)))


def test_is_power_of_two():
    assert all(is_power_of_two(1 << k) for k in range(40))
    assert not is_power_of_two(0)
    assert not is_power_of_two(-8)
    assert not is_power_of_two(6)


@pytest.mark.parametrize("a, b", [(10, 7), (3, 4), (0, 255), (1, 1)])
def test_bit_flips_and_distance_agree(a, b):
    assert min_bit_flips(a, b) == hamming_distance(a, b) == hamming_weight(a ^ b)
    assert hamming_distance(a, b) == hamming_distance(b, a)


def test_similar_pairs_all_similar():
    words = ["ab", "ba", "aabb", "bbba"]
    assert similar_pairs(words) == comb(len(words), 2)


def test_similar_pairs_none_similar():
    assert similar_pairs(["a", "b", "c"]) == similar_pairs([])


@pytest.mark.parametrize("n", [1, 2, 17, 50, 1023])
def test_even_odd_bit(n):
    even, odd = even_odd_bit(n)
    assert even + odd == hamming_weight(n)
    assert even_odd_bit(n << 1) == [odd, even]


@pytest.mark.parametrize("k", [0, 3, 9])
def test_missing_number(k):
    nums = [v for v in range(9, -1, -1) if v != k]
    assert missing_number(nums) == k


def test_sum_indices_with_k_set_bits():
    nums = [5, 10, 1, 5, 2, 8, 13]
    assert sum_indices_with_k_set_bits(nums, 0) == nums[0]
    assert sum(sum_indices_with_k_set_bits(nums, k) for k in range(4)) == sum(nums)


def test_find_k_or_extremes():
    nums = [7, 12, 9, 8, 9, 15]
    assert find_k_or(nums, 1) == reduce(or_, nums)
    assert find_k_or(nums, len(nums)) == reduce(and_, nums)


def test_maximum_strong_pair_xor():
    assert maximum_strong_pair_xor([1, 2, 3, 4, 5]) == 7
    assert maximum_strong_pair_xor([10, 100]) == maximum_strong_pair_xor([])


def test_has_trailing_zeros():
    assert has_trailing_zeros([2, 4])
    assert has_trailing_zeros([1, 3, 6, 8])
    assert not has_trailing_zeros([1, 2])
    assert not has_trailing_zeros([2])


def test_count_bits_matches_hamming_weight():
    counts = count_bits(64)
    assert len(counts) == 65
    assert counts == [hamming_weight(i) for i in range(65)]


def test_count_bits_negative():
    with pytest.raises(ValueError):
        count_bits(-1)


def test_is_power_of_four():
    assert all(is_power_of_four(4 ** k) for k in range(20))
    assert not is_power_of_four(2)
    assert not is_power_of_four(8)
    assert not is_power_of_four(0)
    assert not is_power_of_four(-4)


def test_duplicate_numbers_xor():
    assert duplicate_numbers_xor([1, 2, 1, 3]) == 1
    assert duplicate_numbers_xor([1, 2, 2, 1]) == 1 ^ 2
    assert duplicate_numbers_xor([5, 5, 5, 2, 2]) == 2


@pytest.mark.parametrize("a, b", [(1, 2), (-5, 3), (-7, -9), (0, 0), (1000, -1000)])
def test_get_sum(a, b):
    assert get_sum(a, b) == a + b


@pytest.mark.parametrize("n", [0, 26, 255, 4096, 2**31 - 1])
def test_to_hex_round_trip(n):
    assert int(to_hex(n), 16) == n


def test_to_hex_negative():
    assert to_hex(-1) == "f" * 8
    assert int(to_hex(-26), 16) + 26 == 1 << 32


@pytest.mark.parametrize("size, dup, missing", [(4, 2, 3), (2, 1, 2), (6, 6, 1)])
def test_find_error_nums(size, dup, missing):
    nums = [dup if v == missing else v for v in range(1, size + 1)]
    assert find_error_nums(nums) == [dup, missing]


def test_find_error_nums_invalid():
    with pytest.raises(ValueError):
        find_error_nums([1, 2, 3])


def test_has_alternating_bits():
    assert has_alternating_bits(5)
    assert has_alternating_bits(10)
    assert has_alternating_bits(1)
    assert not has_alternating_bits(7)
    assert not has_alternating_bits(11)


def test_count_prime_set_bits_is_additive():
    assert count_prime_set_bits(6, 10) == sum(
        count_prime_set_bits(i, i) for i in range(6, 11)
    )
    assert count_prime_set_bits(3, 3) == count_prime_set_bits(5, 5)
    assert count_prime_set_bits(1, 1) == count_prime_set_bits(4, 4)
    assert count_prime_set_bits(1, 1) < count_prime_set_bits(3, 3)


@pytest.mark.parametrize("k", [1, 2, 5, 12])
def test_binary_gap(k):
    assert binary_gap((1 << k) | 1) == k
    assert binary_gap(((1 << k) | 1) << 3) == k
    assert binary_gap(1 << k) == binary_gap(0)