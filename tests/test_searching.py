import pytest

from dsakit.searching import (
    aggressive_cows,
    allocate_books,
    binary_search,
    binary_search_recursive,
    integer_sqrt,
    last_occurrence,
    linear_search,
    matrix_median,
    min_test_time,
    peak_index_in_mountain,
    rotation_pivot,
    sqrt_with_precision,
)

ODD = [2, 10, 15, 17, 19]
EVEN = [2, 5, 6, 9, 21, 25]


def test_linear_search_found_and_missing():
    values = [5, 10, 2, 5, 0]
    assert linear_search(values, 2) is True
    assert linear_search(values, 7) is False


@pytest.mark.parametrize("values", [ODD, EVEN])
def test_binary_search_finds_every_element(values):
    for target in values:
        assert values[binary_search(values, target)] == target


def test_binary_search_missing_and_empty():
    assert binary_search(EVEN, 30) is None
    assert binary_search([], 1) is None


@pytest.mark.parametrize("values", [ODD, EVEN, [1, 2, 3, 4, 5]])
def test_binary_search_recursive_finds_every_element(values):
    for key in values:
        assert values[binary_search_recursive(values, key)] == key


def test_binary_search_recursive_missing():
    assert binary_search_recursive([1, 2, 3, 4, 5], 6) is None
    assert binary_search_recursive([], 3) is None


def test_last_occurrence_is_last():
    values = [5, 7, 7, 7, 7, 8, 8, 8, 8, 8, 8, 8, 8, 9, 10]
    for target in (5, 7, 8, 10):
        idx = last_occurrence(values, target)
        assert values[idx] == target
        assert idx == len(values) - 1 or values[idx + 1] != target


def test_last_occurrence_missing():
    assert last_occurrence([1, 2, 3], 4) is None


def test_rotation_pivot_points_at_minimum():
    values = [5, 7, 8, 10, 12, 1, 2]
    assert values[rotation_pivot(values)] == min(values)


def test_rotation_pivot_unrotated_gives_last_index():
    values = [1, 2, 3, 4]
    assert rotation_pivot(values) == len(values) - 1


def test_rotation_pivot_empty_raises():
    with pytest.raises(ValueError):
        rotation_pivot([])


def test_peak_index_points_at_maximum():
    values = [18, 29, 38, 59, 98, 100, 99, 98, 90]
    assert values[peak_index_in_mountain(values)] == max(values)


def test_integer_sqrt_bounds():
    for n in range(200):
        root = integer_sqrt(n)
        assert root * root <= n < (root + 1) * (root + 1)


def test_integer_sqrt_negative_raises():
    with pytest.raises(ValueError):
        integer_sqrt(-1)


@pytest.mark.parametrize("n", [2, 3, 10, 37])
def test_sqrt_with_precision_bounds(n):
    result = sqrt_with_precision(n, 3)
    assert result * result <= n + 1e-9
    assert (result + 0.001) ** 2 >= n - 1e-9


def test_sqrt_with_precision_perfect_square():
    assert sqrt_with_precision(16, 3) == 4.0


def test_matrix_median_example():
    assert matrix_median([[1, 3, 5], [2, 6, 9], [3, 6, 9]]) == 5


def test_matrix_median_single_row_matches_middle():
    row = [1, 4, 6, 8, 11]
    assert matrix_median([row]) == row[len(row) // 2]


def test_matrix_median_empty_raises():
    with pytest.raises(ValueError):
        matrix_median([])


def test_aggressive_cows_two_cows_span_ends():
    stalls = [4, 2, 1, 3, 6]
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


def test_aggressive_cows_three_cows():
    assert aggressive_cows([1, 2, 4, 8, 9], 3) == 3


@pytest.mark.parametrize("k", [0, 1, 6])
def test_aggressive_cows_bad_count_raises(k):
    with pytest.raises(ValueError):
        aggressive_cows([4, 2, 1, 3, 6], k)


def test_allocate_books_example():
    assert allocate_books([12, 34, 67, 90], 2) == 113


def test_allocate_books_single_student_takes_everything():
    pages = [12, 34, 67, 90]
    assert allocate_books(pages, 1) == sum(pages)


def test_allocate_books_many_students_largest_book():
    pages = [12, 34, 67, 90]
    assert allocate_books(pages, len(pages)) == max(pages)


def test_allocate_books_no_students_raises():
    with pytest.raises(ValueError):
        allocate_books([1, 2], 0)


def test_min_test_time_agrees_with_allocation():
    times = [2, 2, 3, 3, 4, 4, 1]
    assert min_test_time(times, 4) == allocate_books(times, 4)
    assert min_test_time(times, 1) == sum(times)