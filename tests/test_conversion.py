import pytest

from pushswap.libft.conversion import INT_MAX, INT_MIN, atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 1000000, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r123") == atoi("123")


def test_atoi_stops_at_non_digit():
    assert atoi("-42abc") == atoi("-42")


def test_atoi_plus_sign():
    assert atoi("+77") == atoi("77")


def test_atoi_no_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("+-5") == 0


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == INT_MIN


def test_atoi_result_always_in_int_range():
    for text in ["99999999999", "-99999999999", "4294967296", "-2147483649"]:
        assert INT_MIN <= atoi(text) <= INT_MAX


def test_itoa_extremes_text():
    assert itoa(INT_MIN) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_out_of_range_raises():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(OverflowError):
        itoa(INT_MIN - 1)