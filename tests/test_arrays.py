import pytest

from algodrills.arrays import (
    is_sorted,
    largest_element,
    linear_search,
    missing_number,
    missing_number_brute,
    missing_number_hash,
    missing_number_xor,
    second_largest,
    second_largest_single_pass,
    second_largest_sorted,
)


def test_largest_element_example():
    assert largest_element([1, 5, 4, 7, 9, 3]) == 9


@pytest.mark.parametrize("values", [[3], [-4, -1, -7], [2, 8, 8, 1]])
def test_largest_element_matches_builtin(values):
    assert largest_element(values) == max(values)


def test_largest_element_empty():
    with pytest.raises(ValueError):
        largest_element([])


@pytest.mark.parametrize(
    "values, expected",
    [
        ([35, 76, 96, 45, 34], 76),
        ([24, 45, 8, 36, 8], 36),
        ([23, 56, 78, 43, 55], 56),
        ([-5, -2, -9], -5),
        ([96, 96, 76], 76),
    ],
)
def test_second_largest_examples(values, expected):
    assert second_largest(values) == expected
    assert second_largest_sorted(values) == expected
    assert second_largest_single_pass(values) == expected


@pytest.mark.parametrize("values", [[7], [7, 7, 7]])
def test_second_largest_absent(values):
    assert second_largest(values) is None
    assert second_largest_sorted(values) is None
    assert second_largest_single_pass(values) is None


def test_second_largest_empty():
    with pytest.raises(ValueError):
        second_largest([])
    with pytest.raises(ValueError):
        second_largest_sorted([])
    with pytest.raises(ValueError):
        second_largest_single_pass([])


def test_second_largest_sorted_leaves_input_alone():
    values = [24, 45, 8, 36, 8]
    second_largest_sorted(values)
    assert values == [24, 45, 8, 36, 8]


@pytest.mark.parametrize("values", [[4, 1, 9, 9, 3], [0, -3, 12, 5], [2, 2, 1]])
def test_second_largest_variants_agree(values):
    first = second_largest(values)
    assert second_largest_sorted(values) == first
    assert second_largest_single_pass(values) == first


def test_is_sorted():
    assert is_sorted([1, 2, 8, 4, 5]) is False
    assert is_sorted([1, 2, 2, 3]) is True
    assert is_sorted([]) is True
    assert is_sorted([4]) is True


def test_linear_search_found():
    values = [1, 3, 5, 6, 7]
    index = linear_search(values, 3)
    assert values[index] == 3


def test_linear_search_first_occurrence():
    values = [5, 2, 5]
    assert linear_search(values, 5) == 0


def test_linear_search_absent():
    assert linear_search([1, 3, 5], 4) is None


def test_missing_number_example():
    assert missing_number([1, 2, 4, 5], 5) == 3
    assert missing_number_brute([1, 2, 4, 5], 5) == 3
    assert missing_number_hash([1, 2, 4, 5], 5) == 3
    assert missing_number_xor([1, 2, 4, 5], 5) == 3


@pytest.mark.parametrize("n", [1, 2, 6, 10])
def test_missing_number_every_gap(n):
    for gap in range(1, n + 1):
        values = [v for v in range(n, 0, -1) if v != gap]
        assert missing_number(values, n) == gap
        assert missing_number_brute(values, n) == gap
        assert missing_number_hash(values, n) == gap
        assert missing_number_xor(values, n) == gap


def test_missing_number_invalid_n():
    with pytest.raises(ValueError):
        missing_number([], 0)
    with pytest.raises(ValueError):
        missing_number_brute([], 0)
    with pytest.raises(ValueError):
        missing_number_hash([], 0)
    with pytest.raises(ValueError):
        missing_number_xor([], 0)


def test_missing_number_too_few_values():
    with pytest.raises(ValueError):
        missing_number([1, 2], 5)
    with pytest.raises(ValueError):
        missing_number_brute([1, 2], 5)
    with pytest.raises(ValueError):
        missing_number_hash([1, 2], 5)
    with pytest.raises(ValueError):
        missing_number_xor([1, 2], 5)


def test_missing_number_hash_out_of_range():
    with pytest.raises(ValueError):
        missing_number_hash([1, 9], 3)