"""Campaign Handlers: list, create, update, pause/resume.

Invariants:
    - Pause/resume is a status update on /campaigns/{id}, no dedicated endpoint
    - Unknown actions are rejected before any HTTP call

Design Decisions:
    - PUT {"status": ...} instead of guessing /pause and /resume routes
      (ADR: the CRM documents status as a writable campaign field)
"""

from typing import Any

from crm_bridge.core.domain_types import (
    CAMPAIGN_STATUS_FOR_ACTION, CampaignAction, Entity,
)
from crm_bridge.core.errors import ToolValidationError
from crm_bridge.core.validate_arguments import pick, require_int
from crm_bridge.infrastructure.crm_client import CrmClient

_WRITABLE_FIELDS = (
    "name", "subject", "content", "templateId", "listIds", "tagIds", "scheduledAt",
)


class CampaignHandlers:
    """Email campaign tools (4 methods)."""

    def __init__(self, client: CrmClient):
        self.client = client

    async def list_campaigns(self, input_data: dict) -> Any:
        return await self.client.get(
            Entity.CAMPAIGN, params=pick(input_data, "status", "page", "limit"),
        )

    async def create_campaign(self, input_data: dict) -> Any:
        return await self.client.post(
            Entity.CAMPAIGN, body=pick(input_data, *_WRITABLE_FIELDS),
        )

    async def update_campaign(self, input_data: dict) -> Any:
        campaign_id = require_int(input_data, "id")
        return await self.client.put(
            Entity.CAMPAIGN, f"/{campaign_id}",
            body=pick(input_data, *_WRITABLE_FIELDS),
        )

    async def set_campaign_status(self, input_data: dict) -> Any:
        campaign_id = require_int(input_data, "id")
        try:
            action = CampaignAction(input_data.get("action"))
        except ValueError:
            allowed = ", ".join(a.value for a in CampaignAction)
            raise ToolValidationError(
                f"'action' must be one of: {allowed}", fields=["action"],
            ) from None
        return await self.client.put(
            Entity.CAMPAIGN, f"/{campaign_id}",
            body={"status": CAMPAIGN_STATUS_FOR_ACTION[action]},
        )
