"""List Tool Schemas: MCP tool format for mailing lists and list membership."""

TOOLS_LISTS = [
    {
        "name": "crm_list_lists",
        "description": "Lists all mailing lists.",
        "input_schema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "crm_create_list",
        "description": "Creates a mailing list.",
        "input_schema": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "List name."},
                "description": {"type": "string"},
            },
            "required": ["name"],
        },
    },
    {
        "name": "crm_update_list",
        "description": "Updates a mailing list's name or description.",
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "List id."},
                "name": {"type": "string"},
                "description": {"type": "string"},
            },
            "required": ["id"],
        },
    },
    {
        "name": "crm_delete_list",
        "description": "Deletes a mailing list.",
        "input_schema": {
            "type": "object",
            "properties": {"id": {"type": "integer", "description": "List id."}},
            "required": ["id"],
        },
    },
    {
        "name": "crm_add_contact_to_lists",
        "description": "Subscribes a contact to one or more mailing lists.",
        "input_schema": {
            "type": "object",
            "properties": {
                "subscriberId": {"type": "integer", "description": "Contact id."},
                "listIds": {
                    "type": "array",
                    "items": {"type": "integer"},
                    "description": "Ids of the lists to join.",
                },
            },
            "required": ["subscriberId", "listIds"],
        },
    },
]
