"""Tests for the tool registry and tool handlers."""

import pytest

from spot.exceptions import ConfigurationError, InvalidScope, ToolError
from spot.tools import (
    ALL_TOOL_NAMES,
    TOOL_TYPES,
    MetaTool,
    ParamSpec,
    SearchTool,
    Tool,
    resolve_enabled_tools,
)
from spot.tools.base import arg_int, arg_object, arg_str
from spot.tools.search import split_scopes


class TestRegistry:
    def test_all_tools(self):
        assert ALL_TOOL_NAMES == {"search", "meta"}
        assert TOOL_TYPES["search"] is SearchTool
        assert TOOL_TYPES["meta"] is MetaTool

    def test_empty_selection_enables_all(self):
        assert resolve_enabled_tools([]) == ALL_TOOL_NAMES
        assert resolve_enabled_tools(["", " "]) == ALL_TOOL_NAMES

    def test_subset_is_lowercased(self):
        assert resolve_enabled_tools(["Search"]) == {"search"}

    def test_unknown_tool_fails_fast(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_enabled_tools(["search", "grep", "find"])
        message = str(exc_info.value)
        assert "Unknown tools: find, grep" in message
        assert "Valid: meta, search" in message


class TestSchemas:
    @pytest.mark.parametrize("tool", [SearchTool, MetaTool])
    def test_required_matches_declared_params(self, tool):
        schema = tool.input_schema()
        assert schema["type"] == "object"
        assert set(schema["properties"]) == set(tool.params)
        assert schema["required"] == [
            name for name, spec in tool.params.items() if spec.required
        ]

    def test_search_schema(self):
        schema = SearchTool.input_schema()
        assert schema["required"] == ["q"]
        assert schema["properties"]["n"]["type"] == "integer"

    def test_definition(self):
        definition = MetaTool.definition().model_dump(
            by_alias=True, exclude_none=True
        )
        assert definition == {
            "name": "meta",
            "description": "Get file metadata via Spotlight.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "path": {"type": "string", "description": "File path"}
                },
                "required": ["path"],
            },
        }

    def test_cli_schema(self):
        assert MetaTool.cli_schema() == {
            "description": "File metadata",
            "params": {
                "path": {
                    "type": "string",
                    "description": "File path",
                    "required": True,
                }
            },
            "returns": "Key: value lines",
        }


class TestArgAccessors:
    def test_type_mismatch_returns_none(self):
        args = {"s": "x", "i": 5, "b": True, "f": 2.0, "g": 2.5, "o": {}}
        assert arg_str(args, "s") == "x"
        assert arg_str(args, "i") is None
        assert arg_int(args, "i") == 5
        assert arg_int(args, "b") is None
        assert arg_int(args, "f") == 2
        assert arg_int(args, "g") is None
        assert arg_int(args, "missing") is None
        assert arg_object(args, "o") == {}
        assert arg_object(args, "s") is None
        assert arg_object(["not", "a", "dict"], "o") is None


def test_split_scopes():
    assert split_scopes(None) is None
    assert split_scopes("/a, /b,,") == ["/a", "/b"]


@pytest.mark.asyncio
class TestSearchTool:
    async def test_limit_enforced_at_gateway(self, gateway, engine):
        tool = SearchTool(gateway)
        text = await tool.execute({"q": "*.md", "n": 5})
        assert len(text.splitlines()) == 5
        call = engine.run_calls[0]
        assert call["limit"] == 5
        assert call["query"] == 'kMDItemFSName == "*.md"wc'

    async def test_defaults(self, gateway, engine):
        await SearchTool(gateway).execute({"q": "x"})
        call = engine.run_calls[0]
        assert call["limit"] == 100
        assert call["scopes"] is None
        assert call["sort_by"] is None
        assert call["descending"] is True

    async def test_scopes_and_sort(self, gateway, engine):
        await SearchTool(gateway).execute(
            {"q": "x", "in": "/a,/b", "sort": "size"}
        )
        call = engine.run_calls[0]
        assert call["scopes"] == ["/a", "/b"]
        assert call["sort_by"] == "kMDItemFSSize"
        assert call["descending"] is False

    async def test_compact_output(self, gateway):
        text = await SearchTool(gateway).execute({"q": "x", "n": 1})
        assert text == "/Users/me/notes/note1.md|100B|2024-05-01T12:30:00Z"

    async def test_paths_output(self, gateway):
        text = await SearchTool(gateway).execute(
            {"q": "x", "n": 2, "fmt": "paths"}
        )
        assert text == "/Users/me/notes/note1.md\n/Users/me/notes/note2.md"

    async def test_count_format_uses_count(self, gateway, engine):
        text = await SearchTool(gateway).execute(
            {"q": "@kind:folder", "fmt": "count", "in": "/tmp"}
        )
        assert text == "12"
        assert engine.run_calls == []
        assert engine.count_calls == [
            {"query": 'kMDItemKind == "folder"cd', "scopes": ["/tmp"]}
        ]

    async def test_non_integer_limit_uses_default(self, gateway, engine):
        await SearchTool(gateway).execute({"q": "x", "n": "5"})
        assert engine.run_calls[0]["limit"] == 100

    @pytest.mark.parametrize("args", [{}, {"q": None}, {"q": 3}])
    async def test_missing_query(self, gateway, args):
        with pytest.raises(
            ToolError, match="Missing query parameter 'q'"
        ):
            await SearchTool(gateway).execute(args)


@pytest.mark.asyncio
class TestMetaTool:
    async def test_metadata(self, gateway):
        text = await MetaTool(gateway).execute({"path": "/Users/me/report.pdf"})
        assert "FSName: report.pdf" in text.splitlines()

    async def test_missing_path(self, gateway):
        with pytest.raises(ToolError, match="Missing path parameter"):
            await MetaTool(gateway).execute({})

    async def test_unresolvable_path(self, gateway):
        with pytest.raises(InvalidScope):
            await MetaTool(gateway).execute({"path": "/nope"})


class TestToolBase:
    def test_tool_without_run_cannot_be_created(self):
        class Incomplete(Tool):
            name = "incomplete"
            description = "x"
            cli_description = "x"
            returns = "x"
            params = {}

        with pytest.raises(TypeError):
            Incomplete()

    def test_missing_message_uses_label(self):
        spec = ParamSpec("string", "d", label="query")
        assert spec.missing_message("q") == "Missing query parameter 'q'"
        assert ParamSpec("string", "d").missing_message("path") == (
            "Missing path parameter"
        )
