"""Content Handlers: email templates, automations (funnels) and webhooks.

Each family only supports list + create on the CRM side.
"""

from typing import Any

from crm_bridge.core.domain_types import Entity
from crm_bridge.core.validate_arguments import pick
from crm_bridge.infrastructure.crm_client import CrmClient


class ContentHandlers:
    """Template, automation and webhook tools."""

    def __init__(self, client: CrmClient):
        self.client = client

    async def list_templates(self, input_data: dict) -> Any:
        return await self.client.get(Entity.TEMPLATE)

    async def create_template(self, input_data: dict) -> Any:
        return await self.client.post(
            Entity.TEMPLATE, body=pick(input_data, "name", "subject", "html", "text"),
        )

    async def list_automations(self, input_data: dict) -> Any:
        return await self.client.get(Entity.AUTOMATION)

    async def create_automation(self, input_data: dict) -> Any:
        return await self.client.post(
            Entity.AUTOMATION, body=pick(input_data, "name", "trigger", "steps"),
        )

    async def list_webhooks(self, input_data: dict) -> Any:
        return await self.client.get(Entity.WEBHOOK)

    async def create_webhook(self, input_data: dict) -> Any:
        return await self.client.post(
            Entity.WEBHOOK, body=pick(input_data, "url", "events"),
        )
