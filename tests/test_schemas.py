"""Tests schémas — nœuds de contenu, blocs, reconstruction de l'arbre de blocs."""
import logging

from beacon_front.core.schemas import (
    Block, CategoryNode, CourseNode, GenericNode, PageNode, PostNode, TagNode,
    build_block_tree, parse_content_node,
)

from conftest import course_payload, page_payload, post_payload


def test_dispatch_on_typename():
    assert isinstance(parse_content_node(page_payload()), PageNode)
    assert isinstance(parse_content_node(post_payload()), PostNode)
    assert isinstance(parse_content_node(course_payload()), CourseNode)
    assert isinstance(parse_content_node({"__typename": "Category", "id": "c", "name": "News"}), CategoryNode)
    assert isinstance(parse_content_node({"__typename": "Tag", "id": "t", "name": "ethics"}), TagNode)


def test_unknown_typename_becomes_generic():
    node = parse_content_node({"__typename": "Product", "id": "p1", "title": "Book", "price": "10"})
    assert isinstance(node, GenericNode)
    assert node.typename == "Product"
    assert node.title == "Book"


def test_invalid_typed_payload_falls_back_to_generic(caplog):
    with caplog.at_level(logging.WARNING):
        node = parse_content_node(page_payload(featuredImage="not-an-object"))
    assert isinstance(node, GenericNode)
    assert node.typename == "Page"
    assert node.title == "About Us"
    assert "invalide" in caplog.text


def test_missing_id_or_non_dict_is_no_data():
    assert parse_content_node({"__typename": "Page", "title": "x"}) is None
    assert parse_content_node(None) is None
    assert parse_content_node(["Page"]) is None


def test_page_fields():
    node = parse_content_node(page_payload(
        template={"templateName": "Landing Page"},
        parent={"node": {"id": "p", "title": "Company", "uri": "/company/"}},
        children={"nodes": [{"id": "c", "title": "Team", "uri": "/about/team/"}]},
        acfPageFields={"templateType": "landing", "flexibleContent": None},
    ))
    assert node.template.template_name == "Landing Page"
    assert node.parent.node.title == "Company"
    assert node.children.nodes[0].uri == "/about/team/"
    assert node.acf_page_fields.flexible_content == []


def test_course_credits_and_materials_skip_nulls():
    node = parse_content_node(course_payload(
        courseCredits=[None, {"name": "CFP", "credits": 2.5}],
        courseMaterials=None,
        courseNumber=204,
    ))
    assert [c.credits for c in node.credits] == ["2.5"]
    assert node.materials == []
    assert node.course_number == "204"


def test_unknown_fields_are_kept():
    node = parse_content_node(page_payload(isFrontPage=True))
    assert node.model_extra["isFrontPage"] is True


def test_block_attributes_json_string_and_nulls():
    block = Block.model_validate({"name": "core/paragraph", "attributes": '{"content": "Hi"}', "innerBlocks": None})
    assert block.attributes == {"content": "Hi"}
    assert block.inner_blocks == []
    assert Block.model_validate({"name": None, "attributes": "oops"}).attributes == {}


def test_build_block_tree_from_flat_list():
    flat = [
        {"name": "core/columns", "clientId": "a", "parentClientId": None},
        {"name": "core/column", "clientId": "b", "parentClientId": "a"},
        {"name": "core/paragraph", "clientId": "c", "parentClientId": "b"},
        {"name": "core/column", "clientId": "d", "parentClientId": "a"},
        {"name": "core/heading", "clientId": "e", "parentClientId": None},
    ]
    tree = build_block_tree(flat)
    assert [b["name"] for b in tree] == ["core/columns", "core/heading"]
    columns = tree[0]["innerBlocks"]
    assert [b["clientId"] for b in columns] == ["b", "d"]
    assert columns[0]["innerBlocks"][0]["name"] == "core/paragraph"


def test_orphan_block_goes_to_root():
    tree = build_block_tree([{"name": "core/paragraph", "clientId": "x", "parentClientId": "missing"}])
    assert [b["clientId"] for b in tree] == ["x"]


def test_editor_blocks_flat_list_is_nested_on_parse():
    node = parse_content_node(page_payload(editorBlocks=[
        {"name": "core/list", "clientId": "l", "parentClientId": None, "attributes": {}},
        {"name": "core/list-item", "clientId": "i", "parentClientId": "l", "attributes": {"content": "One"}},
    ]))
    assert len(node.editor_blocks) == 1
    assert node.editor_blocks[0].inner_blocks[0].attributes["content"] == "One"
