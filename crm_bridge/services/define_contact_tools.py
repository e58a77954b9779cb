"""Contact Tool Schemas: MCP tool format for subscriber CRUD and search.

Invariants:
    - Identifiers are integers; email is the only field required to create a contact
    - crm_search_contacts requires a query, crm_list_contacts takes none
"""

_PAGINATION = {
    "page": {"type": "integer", "description": "Page number, starting at 1."},
    "limit": {"type": "integer", "description": "Results per page."},
}

_CONTACT_FIELDS = {
    "email": {"type": "string", "description": "Contact email address."},
    "firstName": {"type": "string"},
    "lastName": {"type": "string"},
    "phone": {"type": "string"},
    "customFields": {
        "type": "object",
        "description": "Custom field values keyed by field name.",
    },
}

TOOLS_CONTACTS = [
    {
        "name": "crm_list_contacts",
        "description": "Lists contacts (subscribers) in the CRM, paginated.",
        "input_schema": {
            "type": "object",
            "properties": {**_PAGINATION},
            "required": [],
        },
    },
    {
        "name": "crm_get_contact",
        "description": "Returns a single contact by its numeric id.",
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "Contact id."},
            },
            "required": ["id"],
        },
    },
    {
        "name": "crm_create_contact",
        "description": (
            "Creates a contact. Only email is mandatory; names, phone "
            "and custom fields are optional."
        ),
        "input_schema": {
            "type": "object",
            "properties": {**_CONTACT_FIELDS},
            "required": ["email"],
        },
    },
    {
        "name": "crm_update_contact",
        "description": "Updates fields of an existing contact. Omitted fields are left unchanged.",
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "Contact id."},
                **_CONTACT_FIELDS,
                "status": {
                    "type": "string",
                    "enum": ["active", "unsubscribed", "bounced"],
                },
            },
            "required": ["id"],
        },
    },
    {
        "name": "crm_delete_contact",
        "description": "Permanently deletes a contact.",
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "Contact id."},
            },
            "required": ["id"],
        },
    },
    {
        "name": "crm_search_contacts",
        "description": "Searches contacts by email, name or phone fragment.",
        "input_schema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Text to search for."},
                **_PAGINATION,
            },
            "required": ["query"],
        },
    },
]
