import math

import pytest

from services.rotation import window_of, rotate, visible_sets

RECIPES = ['r1', 'r2', 'r3', 'r4', 'r5']


def test_first_window():
    assert window_of(0, RECIPES, 3) == ['r1', 'r2', 'r3']


def test_second_window_wraps_around():
    assert window_of(1, RECIPES, 3) == ['r4', 'r5', 'r1']


def test_third_window_continues_from_wrap():
    # start = 6 % 5 = 1
    assert window_of(2, RECIPES, 3) == ['r2', 'r3', 'r4']


def test_empty_sequence_gives_empty_window():
    for index in (0, 1, 7, 10 ** 30):
        for size in (0, 1, 3):
            assert window_of(index, [], size) == []
    assert window_of(0, None, 3) == []


def test_window_larger_than_sequence_returns_whole_sequence_once():
    assert window_of(0, ['a', 'b'], 3) == ['a', 'b']
    assert window_of(5, ['a', 'b'], 3) == ['a', 'b']
    assert window_of(4, ['a', 'b', 'c'], 3) == ['a', 'b', 'c']


def test_non_positive_window_size_gives_empty_window():
    assert window_of(0, RECIPES, 0) == []
    assert window_of(3, RECIPES, -2) == []


def test_default_window_size_is_three():
    assert len(window_of(0, RECIPES)) == 3


def test_huge_rotation_index():
    index = 10 ** 40 + 1
    start = (index * 3) % 5
    expected = [RECIPES[(start + k) % 5] for k in range(3)]
    assert window_of(index, RECIPES, 3) == expected


def test_window_accepts_tuples_and_returns_a_new_list():
    source = ('a', 'b', 'c', 'd')
    window = window_of(0, source, 2)
    assert window == ['a', 'b']
    assert isinstance(window, list)


@pytest.mark.parametrize('length', [1, 2, 3, 4, 5, 7, 10, 11])
@pytest.mark.parametrize('size', [1, 2, 3, 4])
def test_every_element_seen_within_ceil_length_over_size_calls(length, size):
    sequence = list(range(length))
    seen = set()
    for index in range(math.ceil(length / size)):
        window = window_of(index, sequence, size)
        assert len(window) == min(size, length)
        seen.update(window)
    assert seen == set(sequence)


def test_rotate_increments_by_one():
    assert rotate(0) == 1
    assert rotate(41) == 42
    assert rotate(10 ** 50) == 10 ** 50 + 1


def test_visible_sets_wrap_each_list_on_its_own_length():
    exact = ['e1', 'e2', 'e3', 'e4']
    related = ['r1', 'r2', 'r3', 'r4', 'r5', 'r6', 'r7']

    assert visible_sets(0, exact, related, 3) == (['e1', 'e2', 'e3'], ['r1', 'r2', 'r3'])
    assert visible_sets(1, exact, related, 3) == (['e4', 'e1', 'e2'], ['r4', 'r5', 'r6'])
    assert visible_sets(2, exact, related, 3) == (['e3', 'e4', 'e1'], ['r7', 'r1', 'r2'])


def test_visible_sets_with_one_empty_list():
    assert visible_sets(3, [], ['a', 'b'], 3) == ([], ['a', 'b'])
