"""Tests blocs — registry, propriétés par défaut, factory."""
import pytest

from blockhtml import (
    BLOCK_REGISTRY, Block, BlockType, UnknownBlockType,
    block_categories, create_block, get_default_content, get_default_properties, search_blocks,
)
from blockhtml.blocks import HeadingProperties, RowProperties


# ── Registry ──────────────────────────────────────────────────────────────────

def test_registry_covers_every_block_type():
    assert set(BLOCK_REGISTRY) == set(BlockType)


def test_block_type_tags():
    assert {t.value for t in BlockType} == {
        "heading", "paragraph", "list", "image", "video", "container", "section",
        "row", "input", "button", "form", "customHtml", "link",
    }


def test_categories_palette_order():
    cats = block_categories()
    assert [c["id"] for c in cats] == ["structure", "text", "media", "forms", "advanced"]
    assert [d.type for d in cats[0]["blocks"]] == [BlockType.CONTAINER, BlockType.SECTION, BlockType.ROW]


def test_search_blocks_by_name():
    assert [d.type for d in search_blocks("inp")] == [BlockType.INPUT]
    assert [d.type for d in search_blocks("HTML")] == [BlockType.CUSTOM_HTML]
    assert len(search_blocks("")) == len(BlockType)
    assert search_blocks("zzz") == []


# ── Propriétés par défaut ─────────────────────────────────────────────────────

@pytest.mark.parametrize("block_type, expected", [
    ("heading",    {"level": 2, "align": "left"}),
    ("paragraph",  {"align": "left"}),
    ("list",       {"type": "unordered"}),
    ("image",      {"src": "", "alt": "", "width": "100%", "height": "auto", "align": "center"}),
    ("video",      {"src": "", "type": "youtube", "width": "100%", "height": "315",
                    "controls": True, "autoplay": False}),
    ("container",  {"maxWidth": "100%", "padding": "1rem", "margin": "0 auto",
                    "backgroundColor": "", "textColor": ""}),
    ("section",    {"height": "auto", "padding": "2rem 1rem", "backgroundColor": "", "backgroundImage": ""}),
    ("row",        {"columns": 2, "gap": "1rem", "alignment": "stretch"}),
    ("input",      {"label": "Input Label", "name": "input-name", "type": "text",
                    "placeholder": "Enter value...", "required": False}),
    ("button",     {"text": "Submit", "type": "submit", "variant": "primary", "size": "medium"}),
    ("form",       {"action": "", "method": "post"}),
    ("customHtml", {}),
    ("link",       {"href": "#", "target": "_self", "style": "default"}),
])
def test_default_properties(block_type, expected):
    assert get_default_properties(block_type) == expected


def test_default_content():
    assert get_default_content("heading") == "Sample Heading"
    assert get_default_content("list") == ["Item 1", "Item 2", "Item 3"]
    assert get_default_content("customHtml") == "<div>Custom HTML goes here</div>"
    assert get_default_content("link") == "Click here"
    assert get_default_content("image") is None


def test_properties_accept_camel_case_and_field_names():
    from blockhtml.blocks import ContainerProperties
    assert ContainerProperties.model_validate({"maxWidth": "960px"}).max_width == "960px"
    assert ContainerProperties(max_width="960px").to_dict()["maxWidth"] == "960px"


def test_heading_level_bounds():
    with pytest.raises(ValueError):
        HeadingProperties(level=7)
    assert RowProperties(columns="3").columns == 3


# ── Factory ───────────────────────────────────────────────────────────────────

class TestCreateBlock:
    def test_heading_defaults(self):
        b = create_block("heading")
        assert isinstance(b, Block)
        assert b.type == "heading"
        assert b.content == "Sample Heading"
        assert b.properties == {"level": 2, "align": "left"}
        assert b.children == []

    def test_ids_are_unique(self):
        ids = {create_block("paragraph").id for _ in range(50)}
        assert len(ids) == 50

    def test_explicit_id(self):
        assert create_block("form", block_id="abc").id == "abc"

    def test_default_content_is_deep_copied(self):
        a, b = create_block("list"), create_block("list")
        a.content.append("Item 4")
        a.properties["type"] = "ordered"
        assert b.content == ["Item 1", "Item 2", "Item 3"]
        assert b.properties["type"] == "unordered"
        assert get_default_content("list") == ["Item 1", "Item 2", "Item 3"]

    def test_structural_block_has_no_content(self):
        b = create_block("row")
        assert b.content is None
        assert b.properties["columns"] == 2

    def test_custom_html_has_empty_properties(self):
        assert create_block("customHtml").properties == {}

    def test_accepts_enum_member(self):
        assert create_block(BlockType.VIDEO).type == "video"

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownBlockType) as exc:
            create_block("bogus")
        assert exc.value.block_type == "bogus"
        assert isinstance(exc.value, ValueError)

    def test_type_is_case_sensitive(self):
        with pytest.raises(UnknownBlockType):
            create_block("customhtml")
