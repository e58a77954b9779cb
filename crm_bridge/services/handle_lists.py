"""List Handlers: mailing-list CRUD plus subscribing a contact to lists."""

from typing import Any

from crm_bridge.core.domain_types import Entity
from crm_bridge.core.validate_arguments import pick, require_int, require_list
from crm_bridge.infrastructure.crm_client import CrmClient


class ListHandlers:
    """Mailing-list CRUD and membership."""

    def __init__(self, client: CrmClient):
        self.client = client

    async def list_lists(self, input_data: dict) -> Any:
        return await self.client.get(Entity.LIST)

    async def create_list(self, input_data: dict) -> Any:
        return await self.client.post(
            Entity.LIST, body=pick(input_data, "name", "description"),
        )

    async def update_list(self, input_data: dict) -> Any:
        list_id = require_int(input_data, "id")
        return await self.client.put(
            Entity.LIST, f"/{list_id}", body=pick(input_data, "name", "description"),
        )

    async def delete_list(self, input_data: dict) -> Any:
        list_id = require_int(input_data, "id")
        return await self.client.delete(Entity.LIST, f"/{list_id}")

    async def add_contact_to_lists(self, input_data: dict) -> Any:
        subscriber_id = require_int(input_data, "subscriberId")
        list_ids = require_list(input_data, "listIds")
        return await self.client.post(
            Entity.CONTACT, f"/{subscriber_id}/lists", body={"listIds": list_ids},
        )
