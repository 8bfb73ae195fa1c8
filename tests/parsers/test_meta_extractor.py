import pytest
from bs4 import BeautifulSoup as BS

from product_page_parser.errors import MissingFragmentError
from product_page_parser.infrastructure.parsers.extractors.base import Selectors
from product_page_parser.infrastructure.parsers.product_page_extractor import ProductPageExtractor


def _build_html(head: str, *, html_attrs: str = 'lang="uk"') -> str:
    return f"<html {html_attrs}><head>{head}</head><body></body></html>"


def make_extractor(html: str) -> ProductPageExtractor:
    return ProductPageExtractor(BS(html, "lxml"), selectors=Selectors.default(), require_reviews=False)


def test_title_is_cut_at_em_dash():
    ex = make_extractor(_build_html('<meta property="og:title" content="Widget — Acme Store">'))
    assert ex.extract_page_title() == "Widget"


def test_title_without_separator_is_trimmed():
    ex = make_extractor(_build_html('<meta property="og:title" content="  Plain title ">'))
    assert ex.extract_page_title() == "Plain title"


def test_missing_title_meta_is_fatal():
    ex = make_extractor(_build_html(""))
    with pytest.raises(MissingFragmentError) as err:
        ex.extract_page_title()
    assert err.value.field == "meta.title"


def test_description_and_keywords_default_when_absent():
    ex = make_extractor(_build_html(""))
    assert ex.extract_page_description() == ""
    assert ex.extract_page_keywords() == []
    assert {issue.field for issue in ex.issues} == {"meta.description", "meta.keywords"}


def test_keywords_are_normalized():
    ex = make_extractor(_build_html('<meta name="keywords" content=" a, ,b ,">'))
    assert ex.extract_page_keywords() == ["a", "b"]


def test_language_comes_from_root_element():
    ex = make_extractor(_build_html(""))
    assert ex.extract_page_language() == "uk"


def test_missing_language_attribute_is_fatal():
    ex = make_extractor(_build_html("", html_attrs=""))
    with pytest.raises(MissingFragmentError) as err:
        ex.extract_page_language()
    assert err.value.selector == "html[lang]"


def test_opengraph_keys_use_last_segment():
    head = (
        '<meta property="og:title" content="Widget — Acme">'
        '<meta property="og:image" content="https://cdn/x.jpg">'
        '<meta property="og:image:width" content="640">'
        '<meta property="og:locale" content="">'
        '<meta property="og:" content="orphan">'
    )
    ex = make_extractor(_build_html(head))
    assert ex.extract_opengraph() == {
        "title": "Widget",
        "image": "https://cdn/x.jpg",
        "width": "640",
    }


def test_opengraph_later_duplicate_wins():
    head = (
        '<meta property="og:image" content="first.jpg">'
        '<meta property="og:image" content="second.jpg">'
    )
    ex = make_extractor(_build_html(head))
    assert ex.extract_opengraph() == {"image": "second.jpg"}


def test_extract_meta_builds_frozen_entity():
    head = (
        '<meta property="og:title" content="Widget — Acme">'
        '<meta name="description" content=" Nice widget ">'
        '<meta name="keywords" content="x,y">'
    )
    meta = make_extractor(_build_html(head)).extract_meta()
    assert meta.title == "Widget"
    assert meta.description == "Nice widget"
    assert meta.keywords == ("x", "y")
    with pytest.raises(TypeError):
        meta.opengraph["title"] = "changed"  # type: ignore[index]
