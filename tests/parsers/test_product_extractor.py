import pytest
from bs4 import BeautifulSoup as BS

from product_page_parser.domain.products.entities import ImageRef, TagSet
from product_page_parser.errors import MalformedFragmentError, MissingFragmentError
from product_page_parser.infrastructure.parsers.extractors.base import Selectors
from product_page_parser.infrastructure.parsers.product_page_extractor import ProductPageExtractor


def _build_html(product_body: str, *, product_attrs: str = 'data-id="p-42"', outside: str = "") -> str:
    return (
        '<html lang="en"><body>'
        f'<div class="product" {product_attrs}>{product_body}</div>{outside}'
        "</body></html>"
    )


def make_extractor(html: str, selectors: Selectors = None) -> ProductPageExtractor:
    return ProductPageExtractor(BS(html, "lxml"), selectors=selectors or Selectors.default(), require_reviews=False)


# ---------- identity / title ----------

def test_product_id_from_data_attribute():
    assert make_extractor(_build_html("")).extract_product_id() == "p-42"


def test_missing_container_is_fatal():
    ex = make_extractor("<html lang='en'><body></body></html>")
    with pytest.raises(MissingFragmentError) as err:
        ex.extract_product_id()
    assert err.value.field == "product.id"


def test_missing_id_attribute_is_fatal():
    ex = make_extractor(_build_html("", product_attrs=""))
    with pytest.raises(MissingFragmentError) as err:
        ex.extract_product_id()
    assert err.value.selector == ".product[data-id]"


def test_title_trimmed_or_empty():
    assert make_extractor(_build_html("<h1>\n  Lamp \n</h1>")).extract_product_title() == "Lamp"
    assert make_extractor(_build_html("")).extract_product_title() == ""


# ---------- images ----------

def test_images_in_document_order_with_optional_attrs():
    body = (
        "<nav>"
        '<img src="a-s.jpg" data-src="a.jpg" alt="A">'
        '<img data-src="b.jpg">'
        '<img src="a-s.jpg" data-src="a.jpg" alt="A">'
        "</nav>"
    )
    images = make_extractor(_build_html(body)).extract_product_images()
    assert images == [
        ImageRef(preview="a-s.jpg", full="a.jpg", alt="A"),
        ImageRef(preview="", full="b.jpg", alt=None),
        ImageRef(preview="a-s.jpg", full="a.jpg", alt="A"),
    ]


def test_images_outside_product_nav_are_ignored():
    html = _build_html("", outside='<nav><img src="menu.png"></nav>')
    ex = make_extractor(html)
    assert ex.extract_product_images() == []
    assert [issue.field for issue in ex.issues] == ["product.images"]


# ---------- like ----------

@pytest.mark.parametrize("markup, expected", [
    ('<figure><button class="like active"></button></figure>', True),
    ('<figure><button class="like"></button></figure>', False),
    ("<figure></figure>", False),
])
def test_like_state(markup, expected):
    assert make_extractor(_build_html(markup)).is_liked() is expected


# ---------- tags ----------

def test_tags_grouped_by_marker():
    body = (
        '<div class="tags">'
        '<span class="green">Home</span>'
        '<span class="blue"> Hit </span>'
        '<span class="red">-10%</span>'
        '<span class="green">Decor</span>'
        "<span>Orphan</span>"
        "</div>"
    )
    tags = make_extractor(_build_html(body)).extract_tags()
    assert tags == TagSet(category=("Home", "Decor"), discount=("-10%",), label=("Hit",))


def test_tag_with_several_markers_goes_to_first_group():
    body = '<div class="tags"><span class="red green">Both</span></div>'
    tags = make_extractor(_build_html(body)).extract_tags()
    assert tags == TagSet(category=("Both",))


def test_missing_tags_container_gives_empty_groups():
    tags = make_extractor(_build_html("")).extract_tags()
    assert tags.to_dict() == {"category": [], "discount": [], "label": []}


def test_custom_tag_markers():
    selectors = Selectors.default().replace(TAG_MARKERS={"sale": "discount"})
    body = '<div class="tags"><span class="sale">-5%</span><span class="green">Home</span></div>'
    tags = make_extractor(_build_html(body), selectors).extract_tags()
    assert tags == TagSet(discount=("-5%",))


# ---------- properties ----------

def test_properties_keep_order():
    body = (
        '<ul class="properties">'
        "<li><span> Color </span><span>Red</span></li>"
        "<li><span>Size</span> <span> XL </span></li>"
        "</ul>"
    )
    props = make_extractor(_build_html(body)).extract_properties()
    assert list(props.items()) == [("Color", "Red"), ("Size", "XL")]


def test_missing_properties_give_empty_mapping():
    assert make_extractor(_build_html("")).extract_properties() == {}


def test_property_item_with_one_span_is_malformed():
    body = '<ul class="properties"><li><span>Lonely</span></li></ul>'
    with pytest.raises(MalformedFragmentError) as err:
        make_extractor(_build_html(body)).extract_properties()
    assert err.value.field == "product.properties"


# ---------- assembly ----------

def test_extract_product_uses_price_quote():
    body = '<h1>Lamp</h1><div class="price">$90 $90</div>'
    product = make_extractor(_build_html(body)).extract_product()
    wire = product.to_dict()
    assert wire["price"] == 90
    assert wire["oldPrice"] == 90
    assert wire["discount"] == "0"
    assert wire["discountPercent"] == "0%"
    assert wire["currency"] == "USD"
    assert wire["images"] == []
    assert wire["description"] == ""


def test_extract_product_without_price_is_fatal():
    with pytest.raises(MissingFragmentError):
        make_extractor(_build_html("<h1>Lamp</h1>")).extract_product()
