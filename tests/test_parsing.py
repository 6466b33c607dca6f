import pytest

from philosophers.parsing import (
    InputError,
    Settings,
    check_input,
    parse_int,
    parse_settings,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  \t-7", -7),
        ("+5", 5),
        ("12abc", 12),
        ("", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999999"])
def test_parse_int_out_of_range(text):
    with pytest.raises(InputError):
        parse_int(text)


@pytest.mark.parametrize(
    "args",
    [
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "1"],
        ["5", "800", "2a0", "200"],
        ["-5", "800", "200", "200"],
        ["5", "800", "200", " 200"],
    ],
)
def test_check_input_rejects(args):
    with pytest.raises(InputError, match="input error"):
        check_input(args)


def test_parse_settings_four_arguments():
    settings = parse_settings(["5", "800", "200", "300"])
    assert settings == Settings(5, 800, 200, 300, None)


def test_parse_settings_with_meal_count():
    settings = parse_settings(["4", "410", "200", "200", "7"])
    assert settings.number == 4
    assert settings.meals == 7


def test_parse_settings_rejects_zero_philosophers():
    with pytest.raises(InputError):
        parse_settings(["0", "800", "200", "200"])


def test_parse_settings_rejects_huge_duration():
    with pytest.raises(InputError):
        parse_settings(["2", "99999999999", "200", "200"])


def test_parse_settings_rejects_bad_characters():
    with pytest.raises(InputError):
        parse_settings(["2", "800", "x", "200"])