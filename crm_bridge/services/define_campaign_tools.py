"""Campaign Tool Schemas: MCP tool format for email campaigns.

Invariants:
    - crm_set_campaign_status takes an action enum (pause/resume), never a free-form status
"""

from crm_bridge.core.domain_types import CampaignAction

_CAMPAIGN_FIELDS = {
    "name": {"type": "string", "description": "Internal campaign name."},
    "subject": {"type": "string", "description": "Email subject line."},
    "content": {"type": "string", "description": "HTML body, if no template is used."},
    "templateId": {"type": "integer", "description": "Email template id."},
    "listIds": {"type": "array", "items": {"type": "integer"}},
    "tagIds": {"type": "array", "items": {"type": "integer"}},
    "scheduledAt": {
        "type": "string",
        "description": "ISO 8601 send time. Omit to keep as draft.",
    },
}

TOOLS_CAMPAIGNS = [
    {
        "name": "crm_list_campaigns",
        "description": "Lists email campaigns, optionally filtered by status.",
        "input_schema": {
            "type": "object",
            "properties": {
                "status": {
                    "type": "string",
                    "enum": ["draft", "scheduled", "active", "paused", "sent"],
                },
                "page": {"type": "integer"},
                "limit": {"type": "integer"},
            },
            "required": [],
        },
    },
    {
        "name": "crm_create_campaign",
        "description": (
            "Creates an email campaign. Provide either content or a "
            "templateId, and the lists or tags to send to."
        ),
        "input_schema": {
            "type": "object",
            "properties": {**_CAMPAIGN_FIELDS},
            "required": ["name", "subject"],
        },
    },
    {
        "name": "crm_update_campaign",
        "description": "Updates a campaign that has not been sent yet.",
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "Campaign id."},
                **_CAMPAIGN_FIELDS,
            },
            "required": ["id"],
        },
    },
    {
        "name": "crm_set_campaign_status",
        "description": "Pauses a running campaign or resumes a paused one.",
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "description": "Campaign id."},
                "action": {
                    "type": "string",
                    "enum": [a.value for a in CampaignAction],
                },
            },
            "required": ["id", "action"],
        },
    },
]
