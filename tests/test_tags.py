import pytest

from pagegen import tags
from pagegen.errors import InvalidAttributeInput, MalformedAttributeToken
from pagegen.tags import HELPERS, TAG_VARIANTS, a_link, create, div, tag, div_table, div_table_cell, head, html, i, link_stylesheet, p


def test_helper_parses_attribute_line_and_content() -> None:
    element = div("class=a b c id=foo", "hi", p(None, "para"))

    assert element.to_html() == "<div class='a b c' id='foo'>hi<p>para</p></div>"


def test_new_tab_anchor() -> None:
    element = a_link("href=/x", "X")

    assert element.to_html() == "<a href='/x' target='_blank' rel='noopener noreferrer'>X</a>"


def test_new_tab_anchor_keeps_existing_rel_values() -> None:
    element = a_link("href=/x rel=noopener")

    assert element.attributes["rel"] == "noopener noreferrer"


def test_document_root_has_doctype_and_lang() -> None:
    assert html(None, head(None)).to_html() == "<!DOCTYPE html><html lang='en'><head></head></html>"


def test_stylesheet_link() -> None:
    assert link_stylesheet("href=/s.css").to_html() == "<link href='/s.css' rel='stylesheet'></link>"


def test_table_variants_append_display_style() -> None:
    assert div_table_cell("style=color:red").to_html() == "<div style='color:red;display:table-cell'></div>"
    assert div_table("style=display:block").to_html() == "<div style='display:table'></div>"


@pytest.mark.parametrize("name", sorted(TAG_VARIANTS))
def test_every_variant_has_a_helper(name: str) -> None:
    element = HELPERS[name]()

    assert element.tag == TAG_VARIANTS[name].tag
    assert HELPERS[name].__name__ == name


def test_keyword_named_tags_are_exposed() -> None:
    assert tags.del_().tag == "del"
    assert tags.input_("type=text").to_html() == "<input type='text'></input>"


def test_content_is_attached_only_when_given() -> None:
    without = div("class=x")
    with_none = div("class=x", None)

    assert without.directives.content is None
    assert with_none.directives.content == [None]
    assert without.to_html() == with_none.to_html() == "<div class='x'></div>"


def test_icon_classes_and_style() -> None:
    element = i("class=fab fa-php style=padding-right:.5em")

    assert element.to_html() == "<i class='fab fa-php' style='padding-right:.5em'></i>"


def test_generic_tag_builds_unregistered_tags() -> None:
    assert "table" not in TAG_VARIANTS

    element = tag("table", "class=grid data-x=\"1\"", tag("tr", None, tag("td", None, "cell")), "r")

    assert element.to_html() == "<table class='grid' data-x='1'><tr><td>cell</td></tr>r</table>"
    assert tag("nav").to_html() == "<nav></nav>"
    assert "tag" in tags.__all__


def test_generic_tag_applies_no_augmentation() -> None:
    assert tag("a", "href=/x", "X").to_html() == "<a href='/x'>X</a>"


def test_unknown_variant() -> None:
    with pytest.raises(KeyError):
        create("blink")


def test_invalid_attribute_lines() -> None:
    with pytest.raises(InvalidAttributeInput):
        div(42)
    with pytest.raises(MalformedAttributeToken):
        div("hidden")
