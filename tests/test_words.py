import pytest

from salesdoc.core.exceptions import ValueOutOfRange
from salesdoc.services.words import amount_to_words, split_indian_groups, two_digit_words


def test_groups_are_split_crore_lakh_thousand_hundred_units():
    assert split_indian_groups(123456789) == [12, 34, 56, 7, 89]
    assert split_indian_groups(0) == [0, 0, 0, 0, 0]
    assert split_indian_groups(1508) == [0, 0, 1, 5, 8]


def test_two_digit_words_table():
    assert two_digit_words(0) == ""
    assert two_digit_words(7) == "Seven"
    assert two_digit_words(13) == "Thirteen"
    assert two_digit_words(40) == "Forty"
    assert two_digit_words(99) == "Ninety Nine"


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "Indian Rupee Zero Only"),
        (15, "Indian Rupee Fifteen Only"),
        (100, "Indian Rupee One Hundred Only"),
        (1508, "Indian Rupee One Thousand Five Hundred and Eight Only"),
        (100000, "Indian Rupee One Lakh Only"),
        (10000000, "Indian Rupee One Crore Only"),
        (
            123456789,
            "Indian Rupee Twelve Crore Thirty Four Lakh Fifty Six Thousand "
            "Seven Hundred and Eighty Nine Only",
        ),
        (
            999999999,
            "Indian Rupee Ninety Nine Crore Ninety Nine Lakh Ninety Nine Thousand "
            "Nine Hundred and Ninety Nine Only",
        ),
    ],
)
def test_amount_to_words(amount, expected):
    assert amount_to_words(amount) == expected


def test_paise_are_ignored():
    assert amount_to_words(1900.75) == "Indian Rupee One Thousand Nine Hundred Only"


def test_currency_label_can_be_changed_or_dropped():
    assert amount_to_words(20, currency_label="Rupees") == "Rupees Twenty Only"
    assert amount_to_words(20, currency_label="") == "Twenty Only"


@pytest.mark.parametrize("amount", [1_000_000_000, 12_345_678_901, -1, float("inf"), float("nan")])
def test_out_of_range_amounts_raise(amount):
    with pytest.raises(ValueOutOfRange):
        amount_to_words(amount)
