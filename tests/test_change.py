import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.change import DEFAULT_COINS, make_change


def test_worked_example():
    assert make_change(168) == [100, 50, 10, 5, 2, 1]


@given(st.integers(min_value=0, max_value=10_000))
def test_default_coins_pay_exactly(amount):
    paid = make_change(amount)
    assert sum(paid) == amount
    assert paid == sorted(paid, reverse=True)
    assert all(coin in DEFAULT_COINS for coin in paid)


def test_zero_amount_needs_no_coins():
    assert make_change(0) == []


def test_unsorted_coins_accepted():
    paid = make_change(7, (5, 1, 2))
    assert sum(paid) == 7
    assert paid == sorted(paid, reverse=True)


def test_remainder_below_smallest_coin():
    with pytest.raises(ValueError):
        make_change(3, (5, 10))


@pytest.mark.parametrize("coins", [(), (0, 1), (-1, 5)])
def test_bad_coins_rejected(coins):
    with pytest.raises(ValueError):
        make_change(10, coins)