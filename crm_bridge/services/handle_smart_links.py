"""Smart Link Handlers: CRUD, shortcode generation and URL validation.

Invariants:
    - Every call goes through Entity.SMART_LINK, so a 404 yields the fallback
      payload from CrmClient instead of an error
"""

from typing import Any

from crm_bridge.core.domain_types import Entity
from crm_bridge.core.validate_arguments import pick, require_int
from crm_bridge.infrastructure.crm_client import CrmClient

_WRITABLE_FIELDS = ("url", "name", "shortcode")


class SmartLinkHandlers:
    """Smart link tools."""

    def __init__(self, client: CrmClient):
        self.client = client

    async def list_smart_links(self, input_data: dict) -> Any:
        return await self.client.get(Entity.SMART_LINK)

    async def get_smart_link(self, input_data: dict) -> Any:
        link_id = require_int(input_data, "id")
        return await self.client.get(Entity.SMART_LINK, f"/{link_id}")

    async def create_smart_link(self, input_data: dict) -> Any:
        return await self.client.post(
            Entity.SMART_LINK, body=pick(input_data, *_WRITABLE_FIELDS),
        )

    async def update_smart_link(self, input_data: dict) -> Any:
        link_id = require_int(input_data, "id")
        return await self.client.put(
            Entity.SMART_LINK, f"/{link_id}", body=pick(input_data, *_WRITABLE_FIELDS),
        )

    async def delete_smart_link(self, input_data: dict) -> Any:
        link_id = require_int(input_data, "id")
        return await self.client.delete(Entity.SMART_LINK, f"/{link_id}")

    async def generate_shortcode(self, input_data: dict) -> Any:
        return await self.client.post(
            Entity.SMART_LINK, "/shortcode", body=pick(input_data, "url"),
        )

    async def validate_url(self, input_data: dict) -> Any:
        return await self.client.post(
            Entity.SMART_LINK, "/validate", body=pick(input_data, "url"),
        )
