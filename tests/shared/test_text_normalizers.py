from decimal import Decimal

import pytest

from product_page_parser.domain.products.entities import Currency
from product_page_parser.shared.utils.text import (
    currency_from_symbol,
    format_percent,
    normalize_list,
    split_title,
)


def test_normalize_list_drops_empty_items():
    assert normalize_list(" a, ,b ,") == ["a", "b"]
    assert normalize_list("") == []
    assert normalize_list(None) == []
    assert normalize_list("x | y", separator="|") == ["x", "y"]


@pytest.mark.parametrize("symbol, expected", [
    ("$", Currency.USD),
    ("€", Currency.EUR),
    ("₽", Currency.RUB),
    ("£", None),
    ("", None),
    (None, None),
])
def test_currency_from_symbol(symbol, expected):
    assert currency_from_symbol(symbol) is expected


@pytest.mark.parametrize("value, expected", [
    (Decimal("20"), "20%"),
    (Decimal("20.000"), "20%"),
    (Decimal("33.3333"), "33.33%"),
    (Decimal("12.345"), "12.35%"),
    (Decimal("-5"), "-5%"),
    (7, "7%"),
    ("2.5", "2.50%"),
])
def test_format_percent(value, expected):
    assert format_percent(value) == expected


def test_format_percent_rejects_non_finite():
    with pytest.raises(ValueError):
        format_percent(Decimal("Infinity"))
    with pytest.raises(ValueError):
        format_percent("abc")


def test_split_title():
    assert split_title("Widget — Acme Store") == "Widget"
    assert split_title("Widget") == "Widget"
    assert split_title(None) == ""
