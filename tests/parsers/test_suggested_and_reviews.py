import pytest
from bs4 import BeautifulSoup as BS

from product_page_parser.domain.products.entities import Currency, ReviewAuthor, SuggestedItem
from product_page_parser.errors import MissingFragmentError
from product_page_parser.infrastructure.parsers.extractors.base import Selectors
from product_page_parser.infrastructure.parsers.extractors.reviews import normalize_review_date
from product_page_parser.infrastructure.parsers.product_page_extractor import ProductPageExtractor


def make_extractor(body: str, *, require_reviews: bool = True) -> ProductPageExtractor:
    html = f"<html lang='en'><body>{body}</body></html>"
    return ProductPageExtractor(BS(html, "lxml"), selectors=Selectors.default(), require_reviews=require_reviews)


def _card(name="Bulb", description="Warm bulb", image='<img src="b.jpg">', price="$5") -> str:
    parts = [image]
    if name is not None:
        parts.append(f"<h3>{name}</h3>")
    if description is not None:
        parts.append(f"<p>{description}</p>")
    if price is not None:
        parts.append(f"<b>{price}</b>")
    return "<article>" + "".join(parts) + "</article>"


# ---------- suggested ----------

def test_complete_card_is_read():
    ex = make_extractor(f'<div class="suggested">{_card(name=" Bulb ", price="€ 7.99")}</div>')
    assert ex.extract_suggested_products() == [
        SuggestedItem(name="Bulb", description="Warm bulb", image="b.jpg", price="7.99", currency=Currency.EUR)
    ]


@pytest.mark.parametrize("broken", [
    _card(image=""),
    _card(image="<img>"),
    _card(name=None),
    _card(description="   "),
    _card(price=None),
])
def test_incomplete_cards_are_dropped_silently(broken):
    ex = make_extractor(f'<div class="suggested">{_card(name="Kept")}{broken}</div>')
    items = ex.extract_suggested_products()
    assert [item.name for item in items] == ["Kept"]
    assert ex.issues == ()


def test_unknown_currency_symbol_keeps_card():
    ex = make_extractor(f'<div class="suggested">{_card(price="£3")}</div>')
    (item,) = ex.extract_suggested_products()
    assert item.price == "3"
    assert item.currency is None


def test_missing_suggested_region_gives_empty_list():
    assert make_extractor("").extract_suggested_products() == []


# ---------- reviews ----------

REVIEW = (
    "<article>"
    '<div class="rating"><i class="filled"></i><i class="filled"></i><i class="filled"></i><i></i><i></i></div>'
    '<div class="author"><img src="ava.png"><span> Bob </span><i> 01/02/2024 </i></div>'
    '<div class="title"> Solid </div>'
    "<p> Works well. </p>"
    "</article>"
)


def test_review_fields():
    (review,) = make_extractor(f'<div class="reviews">{REVIEW}</div>').extract_review_list()
    assert review.rating == 3
    assert review.author == ReviewAuthor(avatar="ava.png", name="Bob")
    assert review.date == "01.02.2024"
    assert review.title == "Solid"
    assert review.description == "Works well."


def test_review_without_author_block():
    article = '<article><div class="rating"></div><div class="title">T</div><p>B</p></article>'
    ex = make_extractor(f'<div class="reviews">{article}</div>')
    (review,) = ex.extract_review_list()
    assert review.author is None
    assert review.date == ""
    assert review.rating == 0
    assert review.to_dict()["author"] is None
    assert [issue.field for issue in ex.issues] == ["review.author"]


def test_review_without_rating_title_and_body():
    article = '<article><div class="author"><span>Ann</span></div></article>'
    ex = make_extractor(f'<div class="reviews">{article}</div>')
    (review,) = ex.extract_review_list()
    assert review.rating == 0
    assert review.title == ""
    assert review.description == ""
    assert review.author == ReviewAuthor(avatar="", name="Ann")
    assert review.date == ""
    assert {issue.field for issue in ex.issues} == {
        "review.rating",
        "review.author.avatar",
        "review.date",
        "review.title",
        "review.description",
    }


def test_reviews_keep_document_order():
    second = REVIEW.replace("Solid", "Second")
    reviews = make_extractor(f'<div class="reviews">{REVIEW}{second}</div>').extract_review_list()
    assert [review.title for review in reviews] == ["Solid", "Second"]


def test_missing_reviews_region_is_fatal_by_default():
    with pytest.raises(MissingFragmentError) as err:
        make_extractor("").extract_review_list()
    assert err.value.field == "reviews"


def test_missing_reviews_region_can_be_optional():
    ex = make_extractor("", require_reviews=False)
    assert ex.extract_review_list() == []
    assert [issue.field for issue in ex.issues] == ["reviews"]


def test_date_normalization():
    assert normalize_review_date(" 1/2/2024 ") == "1.2.2024"
    assert normalize_review_date("2024.01.02") == "2024.01.02"
