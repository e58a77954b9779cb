"""Tag Handlers: tag CRUD plus attaching tags to a contact.

Invariants:
    - add_tags_to_contact posts to the contact's path (/subscribers/{id}/tags), not /tags
"""

from typing import Any

from crm_bridge.core.domain_types import Entity
from crm_bridge.core.validate_arguments import pick, require_int, require_list
from crm_bridge.infrastructure.crm_client import CrmClient


class TagHandlers:
    """Tag CRUD and contact tagging."""

    def __init__(self, client: CrmClient):
        self.client = client

    async def list_tags(self, input_data: dict) -> Any:
        return await self.client.get(Entity.TAG)

    async def create_tag(self, input_data: dict) -> Any:
        return await self.client.post(Entity.TAG, body=pick(input_data, "name", "color"))

    async def update_tag(self, input_data: dict) -> Any:
        tag_id = require_int(input_data, "id")
        return await self.client.put(
            Entity.TAG, f"/{tag_id}", body=pick(input_data, "name", "color"),
        )

    async def delete_tag(self, input_data: dict) -> Any:
        tag_id = require_int(input_data, "id")
        return await self.client.delete(Entity.TAG, f"/{tag_id}")

    async def add_tags_to_contact(self, input_data: dict) -> Any:
        subscriber_id = require_int(input_data, "subscriberId")
        tag_ids = require_list(input_data, "tagIds")
        return await self.client.post(
            Entity.CONTACT, f"/{subscriber_id}/tags", body={"tagIds": tag_ids},
        )
