"""Report Handlers: read-only statistics and custom-field catalog."""

from typing import Any

from crm_bridge.core.domain_types import Entity
from crm_bridge.core.validate_arguments import pick
from crm_bridge.infrastructure.crm_client import CrmClient


class ReportHandlers:
    """Reporting tools (no side effects)."""

    def __init__(self, client: CrmClient):
        self.client = client

    async def get_stats(self, input_data: dict) -> Any:
        return await self.client.get(
            Entity.REPORT, "/stats",
            params=pick(input_data, "startDate", "endDate", "campaignId"),
        )

    async def list_custom_fields(self, input_data: dict) -> Any:
        return await self.client.get(Entity.REPORT, "/custom-fields")
