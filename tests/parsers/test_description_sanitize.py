from bs4 import BeautifulSoup as BS
import pytest

from product_page_parser.infrastructure.parsers.extractors.base import Selectors
from product_page_parser.infrastructure.parsers.extractors.description import sanitize_fragment
from product_page_parser.infrastructure.parsers.product_page_extractor import ProductPageExtractor

DESCRIPTION = (
    '<div class="description" data-role="text">\n'
    '  <p class="lead" style="color:red">Hello <a href="/x" target="_blank">link</a></p>\n'
    '  <img src="pic.jpg" alt="pic">\n'
    "</div>"
)


def make_extractor(html: str) -> ProductPageExtractor:
    return ProductPageExtractor(BS(html, "lxml"), selectors=Selectors.default(), require_reviews=False)


def test_attributes_removed_tags_and_text_kept():
    ex = make_extractor(f"<html lang='en'><body>{DESCRIPTION}</body></html>")
    # парсер зводить пробільні вузли з переносом рядка до одного "\n"
    assert ex.extract_full_description() == "<p>Hello <a>link</a></p>\n<img>"


@pytest.mark.parametrize("html_parser", ["lxml", "html.parser"])
def test_void_elements_serialized_like_inner_html(html_parser):
    soup = BS('<div class="description"><p class="x">a<br class="y">b</p><img src="z"></div>', html_parser)
    assert sanitize_fragment(soup.select_one(".description")) == "<p>a<br>b</p><img>"


def test_text_entities_are_escaped():
    soup = BS('<div class="description"><p>Salt &amp; pepper &lt;3</p></div>', "html.parser")
    assert sanitize_fragment(soup.div) == "<p>Salt &amp; pepper &lt;3</p>"


def test_live_tree_is_not_mutated():
    soup = BS(f"<html lang='en'><body>{DESCRIPTION}</body></html>", "lxml")
    before = str(soup)
    ProductPageExtractor(soup, selectors=Selectors.default()).extract_full_description()
    assert str(soup) == before
    assert soup.select_one(".description p")["class"] == ["lead"]


def test_sanitize_is_idempotent():
    soup = BS(DESCRIPTION, "html.parser")
    once = sanitize_fragment(soup.select_one(".description"))
    again = sanitize_fragment(BS(f"<div>{once}</div>", "html.parser").div)
    assert once == again


def test_missing_region_gives_empty_string():
    ex = make_extractor("<html lang='en'><body></body></html>")
    assert ex.extract_full_description() == ""
    assert [issue.field for issue in ex.issues] == ["product.description"]
