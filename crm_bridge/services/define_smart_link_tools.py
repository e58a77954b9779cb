"""Smart Link Tool Schemas: MCP tool format for tracked short links.

Invariants:
    - These endpoints may 404 on the CRM side; handlers return an explanatory
      payload in that case (see CrmClient), so descriptions mention the fallback
"""

_AVAILABILITY_NOTE = (
    " If the CRM does not support smart links yet, a message with a "
    "manual workaround is returned instead."
)

TOOLS_SMART_LINKS = [
    {
        "name": "crm_list_smart_links",
        "description": "Lists smart links." + _AVAILABILITY_NOTE,
        "input_schema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "crm_get_smart_link",
        "description": "Returns a smart link by id." + _AVAILABILITY_NOTE,
        "input_schema": {
            "type": "object",
            "properties": {"id": {"type": "integer", "description": "Smart link id."}},
            "required": ["id"],
        },
    },
    {
        "name": "crm_create_smart_link",
        "description": "Creates a tracked smart link." + _AVAILABILITY_NOTE,
        "input_schema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "Destination URL."},
                "name": {"type": "string"},
                "shortcode": {"type": "string", "description": "Custom short code."},
            },
            "required": ["url"],
        },
    },
    {
        "name": "crm_update_smart_link",
        "description": "Updates a smart link." + _AVAILABILITY_NOTE,
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "Smart link id."},
                "url": {"type": "string"},
                "name": {"type": "string"},
                "shortcode": {"type": "string"},
            },
            "required": ["id"],
        },
    },
    {
        "name": "crm_delete_smart_link",
        "description": "Deletes a smart link." + _AVAILABILITY_NOTE,
        "input_schema": {
            "type": "object",
            "properties": {"id": {"type": "integer", "description": "Smart link id."}},
            "required": ["id"],
        },
    },
    {
        "name": "crm_generate_smart_link_shortcode",
        "description": "Generates a free short code for a URL." + _AVAILABILITY_NOTE,
        "input_schema": {
            "type": "object",
            "properties": {"url": {"type": "string"}},
            "required": ["url"],
        },
    },
    {
        "name": "crm_validate_smart_link_url",
        "description": "Checks whether a URL can be used as a smart link target." + _AVAILABILITY_NOTE,
        "input_schema": {
            "type": "object",
            "properties": {"url": {"type": "string"}},
            "required": ["url"],
        },
    },
]
