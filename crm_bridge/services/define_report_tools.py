"""Report Tool Schemas: aggregate statistics and custom-field catalog."""

TOOLS_REPORTS = [
    {
        "name": "crm_get_report_stats",
        "description": (
            "Returns sending statistics (opens, clicks, bounces, "
            "unsubscribes), optionally for one campaign or date range."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "startDate": {"type": "string", "description": "YYYY-MM-DD."},
                "endDate": {"type": "string", "description": "YYYY-MM-DD."},
                "campaignId": {"type": "integer"},
            },
            "required": [],
        },
    },
    {
        "name": "crm_list_custom_fields",
        "description": "Lists the contact custom fields defined in the CRM.",
        "input_schema": {"type": "object", "properties": {}, "required": []},
    },
]
