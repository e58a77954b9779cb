"""Tools Registry: flat catalog and per-category filtering of CRM tools.

Invariants:
    - Tool names are unique across the registry (checked at import time)
    - ALL_TOOLS order is stable: the host sees the same catalog on every list_tools
    - Registry holds data only: building it has no side effects

Design Decisions:
    - Explicit imports from each define_*_tools.py: no auto-discovery
    - Descriptors stay plain dicts (name, description, input_schema): the same
      shape the MCP layer converts to mcp.types.Tool
"""

from crm_bridge.core.domain_types import ToolCategory
from crm_bridge.services.define_campaign_tools import TOOLS_CAMPAIGNS
from crm_bridge.services.define_contact_tools import TOOLS_CONTACTS
from crm_bridge.services.define_content_tools import (
    TOOLS_AUTOMATIONS, TOOLS_TEMPLATES, TOOLS_WEBHOOKS,
)
from crm_bridge.services.define_list_tools import TOOLS_LISTS
from crm_bridge.services.define_report_tools import TOOLS_REPORTS
from crm_bridge.services.define_smart_link_tools import TOOLS_SMART_LINKS
from crm_bridge.services.define_tag_tools import TOOLS_TAGS

_CATEGORY_TOOLS: dict[ToolCategory, list[dict]] = {
    ToolCategory.CONTACTS: TOOLS_CONTACTS,
    ToolCategory.TAGS: TOOLS_TAGS,
    ToolCategory.LISTS: TOOLS_LISTS,
    ToolCategory.CAMPAIGNS: TOOLS_CAMPAIGNS,
    ToolCategory.TEMPLATES: TOOLS_TEMPLATES,
    ToolCategory.AUTOMATIONS: TOOLS_AUTOMATIONS,
    ToolCategory.WEBHOOKS: TOOLS_WEBHOOKS,
    ToolCategory.SMART_LINKS: TOOLS_SMART_LINKS,
    ToolCategory.REPORTS: TOOLS_REPORTS,
}

ALL_TOOLS: list[dict] = [
    *TOOLS_CONTACTS,        # 6 tools
    *TOOLS_TAGS,            # 5 tools
    *TOOLS_LISTS,           # 5 tools
    *TOOLS_CAMPAIGNS,       # 4 tools
    *TOOLS_TEMPLATES,       # 2 tools
    *TOOLS_AUTOMATIONS,     # 2 tools
    *TOOLS_WEBHOOKS,        # 2 tools
    *TOOLS_SMART_LINKS,     # 7 tools
    *TOOLS_REPORTS,         # 2 tools
]
# Total: 35

_TOOLS_BY_NAME: dict[str, dict] = {t["name"]: t for t in ALL_TOOLS}

if len(_TOOLS_BY_NAME) != len(ALL_TOOLS):
    raise RuntimeError("Duplicate tool names in registry")

TOOL_NAMES: frozenset[str] = frozenset(_TOOLS_BY_NAME)


def get_tool(name: str) -> dict | None:
    """Descriptor for name, or None when unregistered."""
    return _TOOLS_BY_NAME.get(name)


def get_category_tools(category: ToolCategory) -> list[dict]:
    return list(_CATEGORY_TOOLS[category])
