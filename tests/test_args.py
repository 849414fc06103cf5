import pytest

from philosim.args import (
    ArgumentError,
    Settings,
    check_args,
    is_alpha,
    parse_int,
    parse_settings,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("+7", 7),
        ("\t\n 15", 15),
        ("800ms", 800),
    ],
)
def test_parse_int_reads_leading_number(text, expected):
    assert parse_int(text) == expected


def test_parse_int_without_digits_is_zero():
    assert parse_int("abc") == 0
    assert parse_int("") == 0
    assert parse_int("--5") == 0


def test_parse_int_wraps_like_a_32_bit_int():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("2147483648") == -2147483648


def test_is_alpha():
    assert is_alpha("abcXYZ") is True
    assert is_alpha("") is False
    assert is_alpha(None) is False
    assert is_alpha("ab1") is False
    assert is_alpha("a b") is False


def test_check_args_rejects_negative():
    with pytest.raises(ArgumentError):
        check_args(["-5", "800", "200", "200"])


def test_check_args_rejects_digits():
    with pytest.raises(ArgumentError):
        check_args(["5", "800", "200", "200"])


def test_check_args_rejects_bad_meal_count():
    with pytest.raises(ArgumentError):
        check_args(["abc", "abc", "abc", "abc", "-1"])


def test_check_args_requires_four():
    with pytest.raises(ArgumentError):
        check_args(["abc", "abc", "abc"])


def test_parse_settings_without_meals():
    settings = parse_settings(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, 0)


def test_parse_settings_with_meals():
    settings = parse_settings(["4", "410", "200", "100", "7"])
    assert settings.philosophers == 4
    assert settings.time_to_die == 410
    assert settings.time_to_eat == 200
    assert settings.time_to_sleep == 100
    assert settings.meals == 7


def test_parse_settings_needs_four_values():
    with pytest.raises(ArgumentError):
        parse_settings(["5", "800", "200"])


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_settings([])