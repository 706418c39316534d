import pytest

from intercom_articles_mcp.errors import UnknownToolError
from intercom_articles_mcp.tools import TOOLS, get_tool, list_tools


def test_catalog_order_is_stable():
    assert [spec.name for spec in list_tools()] == [
        "get_article",
        "list_articles",
        "create_article",
        "update_article",
        "list_collections",
        "get_collection",
        "update_collection",
        "delete_collection",
    ]
    assert list_tools() == list_tools()


def test_tool_names_are_unique():
    names = [spec.name for spec in TOOLS]
    assert len(names) == len(set(names))


@pytest.mark.parametrize(
    "name, required",
    [
        ("get_article", ("id",)),
        ("list_articles", ()),
        ("create_article", ("title", "body", "author_id")),
        ("update_article", ("id",)),
        ("list_collections", ()),
        ("get_collection", ("id",)),
        ("update_collection", ("id",)),
        ("delete_collection", ("id",)),
    ],
)
def test_schema_required_matches_validation(name, required):
    spec = get_tool(name)
    assert set(spec.required) == set(required)
    assert spec.input_schema["type"] == "object"
    assert spec.input_schema["additionalProperties"] is False
    assert set(required) <= set(spec.input_schema["properties"])


def test_article_state_is_an_enum_in_the_schema():
    schema = get_tool("create_article").input_schema
    state = schema["properties"]["state"]
    enums = [option.get("enum") for option in state.get("anyOf", [state])]
    assert ["draft", "published"] in enums


def test_only_delete_is_destructive():
    assert [spec.name for spec in TOOLS if spec.destructive] == ["delete_collection"]
    assert all(spec.read_only == spec.name.startswith(("get_", "list_")) for spec in TOOLS)


def test_unknown_tool_lookup():
    with pytest.raises(UnknownToolError) as exc_info:
        get_tool("delete_article")
    assert exc_info.value.tool_name == "delete_article"
    assert str(exc_info.value) == "Unknown tool: delete_article"
