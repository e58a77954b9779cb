"""Content Tool Schemas: email templates, automations (funnels) and webhooks."""

TOOLS_TEMPLATES = [
    {
        "name": "crm_list_templates",
        "description": "Lists email templates.",
        "input_schema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "crm_create_template",
        "description": "Creates an email template from HTML.",
        "input_schema": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "subject": {"type": "string"},
                "html": {"type": "string", "description": "HTML body."},
                "text": {"type": "string", "description": "Plain-text alternative."},
            },
            "required": ["name", "subject", "html"],
        },
    },
]

TOOLS_AUTOMATIONS = [
    {
        "name": "crm_list_automations",
        "description": "Lists automations (funnels).",
        "input_schema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "crm_create_automation",
        "description": (
            "Creates an automation (funnel) started by a trigger, "
            "e.g. a contact joining a list or receiving a tag."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "trigger": {
                    "type": "object",
                    "description": "Trigger definition, e.g. {\"type\": \"tag_added\", \"tagId\": 3}.",
                },
                "steps": {
                    "type": "array",
                    "items": {"type": "object"},
                    "description": "Ordered actions (send email, wait, add tag...).",
                },
            },
            "required": ["name", "trigger"],
        },
    },
]

TOOLS_WEBHOOKS = [
    {
        "name": "crm_list_webhooks",
        "description": "Lists registered webhooks.",
        "input_schema": {"type": "object", "properties": {}, "required": []},
    },
    {
        "name": "crm_create_webhook",
        "description": "Registers a webhook URL for the given CRM events.",
        "input_schema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "HTTPS endpoint to call."},
                "events": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Event names, e.g. subscriber.created.",
                },
            },
            "required": ["url", "events"],
        },
    },
]
