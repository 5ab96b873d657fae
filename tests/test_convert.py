import pytest

from ftlib.convert import atoi


def test_positive_number():
    assert atoi("12345") == 12345


def test_negative_number():
    assert atoi("-12345") == -12345


def test_with_whitespace():
    assert atoi("   \t\n\v\f\r  42") == 42


def test_with_plus_sign():
    assert atoi("+12345") == 12345


def test_with_chars_after_number():
    assert atoi("12345abc") == 12345


def test_with_chars_before_number():
    assert atoi("abc12345") == 0


def test_empty_string():
    assert atoi("") == 0


def test_multiple_signs():
    assert atoi("+-42") == 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("-0", 0),
        ("007", 7),
        ("  -9 10", -9),
        ("-", 0),
        ("- 5", 0),
        ("\u00a05", 0),
        ("\u0663", 0),
        ("12.5", 12),
    ],
)
def test_edge_cases(text, expected):
    assert atoi(text) == expected


def test_round_trip_of_formatted_integers():
    for value in (-2147483648, -1, 0, 1, 2147483647):
        assert atoi(str(value)) == value