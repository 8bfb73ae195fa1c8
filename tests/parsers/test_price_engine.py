from decimal import Decimal

import pytest
from bs4 import BeautifulSoup as BS

from product_page_parser.domain.products.entities import Currency, Discount
from product_page_parser.errors import MalformedFragmentError, MissingFragmentError, PriceFormatError
from product_page_parser.infrastructure.parsers.extractors.base import Selectors
from product_page_parser.infrastructure.parsers.extractors.price import PriceQuote
from product_page_parser.infrastructure.parsers.product_page_extractor import ProductPageExtractor


def make_extractor(price_html: str) -> ProductPageExtractor:
    html = f"<html lang='en'><body><div class='product' data-id='1'>{price_html}</div></body></html>"
    return ProductPageExtractor(BS(html, "lxml"), selectors=Selectors.default(), require_reviews=False)


def test_discounted_pair_in_dollars():
    ex = make_extractor('<div class="price">$80 $100</div>')
    assert ex.extract_discounted_price() == Decimal("80")
    assert ex.extract_base_price() == Decimal("100")
    assert ex.extract_discount() == Discount(Decimal("20"))
    assert ex.extract_discount_percent() == "20%"
    assert ex.extract_currency() is Currency.USD


def test_equal_prices_give_zero_forms():
    ex = make_extractor('<div class="price">€50 €50</div>')
    discount = ex.extract_discount()
    assert discount.is_zero
    assert discount.to_wire() == "0"
    assert ex.extract_discount_percent() == "0%"
    assert ex.extract_currency() is Currency.EUR


def test_fractional_percent_has_two_digits():
    ex = make_extractor('<div class="price">₽200 ₽300</div>')
    assert ex.extract_discount_percent() == "33.33%"
    assert ex.extract_currency() is Currency.RUB


def test_percent_rounds_half_up():
    quote = PriceQuote(discounted=Decimal("99.875"), base=Decimal("100"), currency=None)
    assert quote.discount_percent == "0.13%"


def test_unknown_symbol_gives_no_currency():
    ex = make_extractor('<div class="price">£10 £12</div>')
    assert ex.extract_currency() is None
    assert ex.extract_discounted_price() == Decimal("10")


def test_tokens_split_on_any_whitespace():
    ex = make_extractor('<div class="price">\n  $80\n  <s>$100</s>\n</div>')
    assert ex.parse_price_tokens() == ["$80", "$100"]


def test_absent_fragment_has_no_tokens_but_quote_is_fatal():
    ex = make_extractor("")
    assert ex.parse_price_tokens() == []
    with pytest.raises(MissingFragmentError) as err:
        ex.extract_price_quote()
    assert err.value.field == "product.price"
    assert err.value.selector == ".price"


def test_single_token_is_malformed():
    ex = make_extractor('<div class="price">$80</div>')
    with pytest.raises(MalformedFragmentError):
        ex.extract_price_quote()


@pytest.mark.parametrize("price_html", [
    '<div class="price">$abc $100</div>',
    '<div class="price">$80 $1,000</div>',
    '<div class="price">$ $100</div>',
    '<div class="price">$NaN $100</div>',
    '<div class="price">$80 $Infinity</div>',
    '<div class="price">$1_000 $2_000</div>',
    '<div class="price">$٣٠ $100</div>',
    '<div class="price">$80 $１００</div>',
])
def test_non_numeric_token_raises_price_format_error(price_html):
    ex = make_extractor(price_html)
    with pytest.raises(PriceFormatError) as err:
        ex.extract_price_quote()
    assert err.value.code == "price_format"
    assert err.value.token


def test_zero_base_price_is_guarded():
    ex = make_extractor('<div class="price">$5 $0</div>')
    quote = ex.extract_price_quote()
    assert quote.discount_percent == "0%"
    assert quote.discount.to_wire() == -5
    assert [issue.field for issue in ex.issues] == ["product.discountPercent"]


def test_zero_prices_are_not_an_issue():
    ex = make_extractor('<div class="price">$0 $0</div>')
    assert ex.extract_price_quote().discount_percent == "0%"
    assert ex.issues == ()


def test_plain_ascii_number_forms_are_accepted():
    ex = make_extractor('<div class="price">$.5 $1e2</div>')
    quote = ex.extract_price_quote()
    assert quote.discounted == Decimal("0.5")
    assert quote.base == Decimal("100")
    assert quote.discount_percent == "99.50%"


def test_equal_prices_use_zero_discount():
    quote = PriceQuote(discounted=Decimal("7.0"), base=Decimal("7"), currency=None)
    assert quote.discount == Discount.zero()
