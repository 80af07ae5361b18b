from hypothesis import given
from hypothesis import strategies as st

from algonotes.searching import (
    Book,
    contains,
    count_sorted,
    linear_search,
    lower_bound,
    same_title,
    upper_bound,
)

ARR = [20, 30, 40, 40, 40, 40, 50, 100, 1100]


def test_linear_search_ints_and_floats():
    ints = [1, 2, 5, 10, 8, 9, 7]
    floats = [1.1, 1.2, 1.3]
    assert linear_search(ints, 10) == ints.index(10)
    assert linear_search(floats, 1.3) == floats.index(1.3)


def test_linear_search_missing_returns_none():
    assert linear_search([1, 2, 5, 3], 4) is None


def test_linear_search_works_on_iterators():
    assert linear_search(iter([1, 2, 5, 3]), 5) == 2


def test_same_title_ignores_price():
    assert same_title(Book("C++", 100), Book("C++", 120))
    assert not same_title(Book("C++", 100), Book("C", 100))


def test_linear_search_books_with_comparator():
    library = [Book("C++", 100), Book("Java", 120), Book("Python", 130)]
    assert linear_search(library, Book("Java", 999), same_title) == 1
    assert linear_search(library, Book("C", 120), same_title) is None


@given(st.lists(st.integers(-10, 10), min_size=1), st.data())
def test_linear_search_matches_list_index(items, data):
    key = data.draw(st.sampled_from(items))
    assert linear_search(items, key) == items.index(key)


def test_bounds_on_source_array():
    assert lower_bound(ARR, 40) == ARR.index(40)
    assert upper_bound(ARR, 40) == ARR.index(50)
    assert count_sorted(ARR, 40) == ARR.count(40)


def test_contains_on_source_array():
    assert contains(ARR, 1100)
    assert contains(ARR, 20)
    assert not contains(ARR, 41)
    assert not contains(ARR, 5000)
    assert not contains([], 1)


@given(st.lists(st.integers(-20, 20)).map(sorted), st.integers(-25, 25))
def test_bounds_invariants(items, key):
    lower = lower_bound(items, key)
    upper = upper_bound(items, key)
    assert lower == sum(1 for x in items if x < key)
    assert upper == sum(1 for x in items if x <= key)
    assert count_sorted(items, key) == items.count(key)
    assert contains(items, key) == (key in items)