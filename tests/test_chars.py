import pytest

from ftlib.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)


# isalpha
@pytest.mark.parametrize("c", ["B", "a", ord("B"), ord("a"), "A", "Z", "z"])
def test_isalpha_letters(c):
    assert isalpha(c) is True


@pytest.mark.parametrize("c", ["^", "@", "[", "`", "{", "5", 0, 200, -1])
def test_isalpha_non_letters(c):
    assert isalpha(c) is False


# isdigit
def test_isdigit_code_five_is_not_a_digit():
    assert isdigit(5) is False


def test_isdigit_letter_is_not_a_digit():
    assert isdigit("a") is False


@pytest.mark.parametrize("c", ["0", "5", "9", ord("7")])
def test_isdigit_digits(c):
    assert isdigit(c) is True


@pytest.mark.parametrize("c", ["/", ":", "\u0663"])
def test_isdigit_boundaries_and_non_ascii(c):
    assert isdigit(c) is False


# isalnum
def test_isalnum_code_five_is_not_alnum():
    assert isalnum(5) is False


def test_isalnum_letter():
    assert isalnum("A") is True


def test_isalnum_symbol():
    assert isalnum("+") is False


def test_isalnum_digit_character():
    assert isalnum("5") is True


# isascii
def test_isascii_letter():
    assert isascii("A") is True


def test_isascii_control_char():
    assert isascii("\n") is True


def test_isascii_extended_char():
    assert isascii(128) is False


@pytest.mark.parametrize("c, expected", [(0, True), (127, True), (-1, False), ("\u00e9", False)])
def test_isascii_bounds(c, expected):
    assert isascii(c) is expected


# isprint
def test_isprint_printable():
    assert isprint("A") is True


def test_isprint_space():
    assert isprint(" ") is True


def test_isprint_control_char():
    assert isprint("\n") is False


def test_isprint_del():
    assert isprint(127) is False


@pytest.mark.parametrize("c, expected", [(31, False), (32, True), (126, True), ("~", True)])
def test_isprint_bounds(c, expected):
    assert isprint(c) is expected


# toupper
def test_toupper_lowercase_to_uppercase():
    assert toupper("a") == "A"


def test_toupper_uppercase_unchanged():
    assert toupper("Z") == "Z"


def test_toupper_digit_unchanged():
    assert toupper("5") == "5"


def test_toupper_special_unchanged():
    assert toupper("$") == "$"


def test_toupper_int_code():
    assert toupper(ord("q")) == ord("Q")


def test_toupper_non_ascii_unchanged():
    assert toupper("\u00e9") == "\u00e9"


# tolower
def test_tolower_uppercase_to_lowercase():
    assert tolower("A") == "a"


def test_tolower_lowercase_unchanged():
    assert tolower("z") == "z"


def test_tolower_digit_unchanged():
    assert tolower("5") == "5"


def test_tolower_special_unchanged():
    assert tolower("!") == "!"


def test_tolower_int_code():
    assert tolower(ord("M")) == ord("m")


def test_case_round_trip_over_alphabet():
    for upper_code in range(ord("A"), ord("Z") + 1):
        letter = chr(upper_code)
        assert toupper(tolower(letter)) == letter


# argument validation
@pytest.mark.parametrize("func", [isalpha, isdigit, isalnum, isascii, isprint, toupper, tolower])
def test_multi_character_string_rejected(func):
    with pytest.raises(ValueError):
        func("ab")


@pytest.mark.parametrize("func", [isalpha, toupper])
def test_non_character_type_rejected(func):
    with pytest.raises(TypeError):
        func(3.5)