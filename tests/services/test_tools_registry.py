"""Tools Registry tests: catalog size, per-category counts, naming convention.

Design Decisions:
    - Counts validated per category as integration-level contract
    - Schema shape checked for every tool: the host relies on it for discovery
"""

import re

import pytest

from crm_bridge.core.domain_types import ToolCategory
from crm_bridge.services.tools_registry import (
    ALL_TOOLS, TOOL_NAMES, get_category_tools, get_tool,
)

_EXPECTED_COUNTS = {
    ToolCategory.CONTACTS: 6,
    ToolCategory.TAGS: 5,
    ToolCategory.LISTS: 5,
    ToolCategory.CAMPAIGNS: 4,
    ToolCategory.TEMPLATES: 2,
    ToolCategory.AUTOMATIONS: 2,
    ToolCategory.WEBHOOKS: 2,
    ToolCategory.SMART_LINKS: 7,
    ToolCategory.REPORTS: 2,
}


def test_all_tools_has_35_unique_names():
    assert len(ALL_TOOLS) == 35
    assert len(TOOL_NAMES) == 35


@pytest.mark.parametrize("category,count", list(_EXPECTED_COUNTS.items()))
def test_category_counts(category, count):
    assert len(get_category_tools(category)) == count


def test_categories_partition_all_tools():
    names = [t["name"] for c in ToolCategory for t in get_category_tools(c)]
    assert sorted(names) == sorted(TOOL_NAMES)


@pytest.mark.parametrize("tool", ALL_TOOLS, ids=lambda t: t["name"])
def test_tool_descriptor_shape(tool):
    assert re.fullmatch(r"crm_[a-z]+(_[a-z]+)+", tool["name"])
    assert tool["description"].strip()
    schema = tool["input_schema"]
    assert schema["type"] == "object"
    for field in schema["required"]:
        assert field in schema["properties"], f"{tool['name']}: {field}"


def test_get_tool_returns_descriptor():
    assert get_tool("crm_list_tags")["name"] == "crm_list_tags"


def test_get_tool_unknown_returns_none():
    assert get_tool("crm_launch_rocket") is None


def test_get_category_tools_returns_copy():
    tools = get_category_tools(ToolCategory.TAGS)
    tools.clear()
    assert len(get_category_tools(ToolCategory.TAGS)) == 5


def test_campaign_status_action_enum():
    tool = get_tool("crm_set_campaign_status")
    assert tool["input_schema"]["properties"]["action"]["enum"] == ["pause", "resume"]
