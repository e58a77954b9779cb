"""Tag Tool Schemas: MCP tool format for tags and tagging contacts."""

TOOLS_TAGS = [
    {
        "name": "crm_list_tags",
        "description": "Lists all tags.",
        "input_schema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "crm_create_tag",
        "description": "Creates a tag.",
        "input_schema": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Tag name."},
                "color": {"type": "string", "description": "Hex color, e.g. #ff0000."},
            },
            "required": ["name"],
        },
    },
    {
        "name": "crm_update_tag",
        "description": "Renames or recolors a tag.",
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "Tag id."},
                "name": {"type": "string"},
                "color": {"type": "string"},
            },
            "required": ["id"],
        },
    },
    {
        "name": "crm_delete_tag",
        "description": "Deletes a tag. Contacts keep existing, only the tag is removed.",
        "input_schema": {
            "type": "object",
            "properties": {"id": {"type": "integer", "description": "Tag id."}},
            "required": ["id"],
        },
    },
    {
        "name": "crm_add_tags_to_contact",
        "description": "Attaches one or more existing tags to a contact.",
        "input_schema": {
            "type": "object",
            "properties": {
                "subscriberId": {"type": "integer", "description": "Contact id."},
                "tagIds": {
                    "type": "array",
                    "items": {"type": "integer"},
                    "description": "Ids of the tags to attach.",
                },
            },
            "required": ["subscriberId", "tagIds"],
        },
    },
]
