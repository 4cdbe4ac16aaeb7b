import pytest

from drillkit.exercises.functions import (
    bigger,
    calculate_apple_price,
    call_me,
    is_even,
    sale_price,
    square,
    times_two,
)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_bigger_equal_values():
    assert bigger(7, 7) == 7


def test_verify_apple_price():
    assert calculate_apple_price(35) == 70
    assert calculate_apple_price(65) == 65


def test_apple_price_boundary():
    assert calculate_apple_price(40) == 80
    assert calculate_apple_price(41) == 41


def test_returns_twice_of_positive_numbers():
    assert times_two(4) == 8


def test_returns_twice_of_negative_numbers():
    assert times_two(-4) == -8


def test_is_true_when_even():
    assert is_even(12) is True


def test_is_false_when_odd():
    assert is_even(5) is False


def test_call_me_counts_from_one():
    assert call_me(3) == [
        "Ring! Call number 1",
        "Ring! Call number 2",
        "Ring! Call number 3",
    ]


def test_call_me_length_and_empty():
    assert len(call_me(32)) == 32
    assert call_me(0) == []
    assert call_me(-2) == []


@pytest.mark.parametrize("price, expected", [(51, 48), (50, 40)])
def test_sale_price(price, expected):
    assert sale_price(price) == expected


def test_square():
    assert square(3) == 9
    assert square(-4) == 16