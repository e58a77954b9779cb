"""Contact Handlers: list, get, create, update, delete, search subscribers.

Invariants:
    - Identifier checks happen before any HTTP call (require_int)
    - Request bodies contain only declared fields that were provided
    - Responses are returned exactly as the CRM sent them
"""

from typing import Any

from crm_bridge.core.domain_types import Entity
from crm_bridge.core.validate_arguments import pick, require_int
from crm_bridge.infrastructure.crm_client import CrmClient

_WRITABLE_FIELDS = ("email", "firstName", "lastName", "phone", "customFields")


class ContactHandlers:
    """Subscriber CRUD and search."""

    def __init__(self, client: CrmClient):
        self.client = client

    async def list_contacts(self, input_data: dict) -> Any:
        return await self.client.get(
            Entity.CONTACT, params=pick(input_data, "page", "limit"),
        )

    async def get_contact(self, input_data: dict) -> Any:
        contact_id = require_int(input_data, "id")
        return await self.client.get(Entity.CONTACT, f"/{contact_id}")

    async def create_contact(self, input_data: dict) -> Any:
        return await self.client.post(
            Entity.CONTACT, body=pick(input_data, *_WRITABLE_FIELDS),
        )

    async def update_contact(self, input_data: dict) -> Any:
        contact_id = require_int(input_data, "id")
        return await self.client.put(
            Entity.CONTACT, f"/{contact_id}",
            body=pick(input_data, *_WRITABLE_FIELDS, "status"),
        )

    async def delete_contact(self, input_data: dict) -> Any:
        contact_id = require_int(input_data, "id")
        return await self.client.delete(Entity.CONTACT, f"/{contact_id}")

    async def search_contacts(self, input_data: dict) -> Any:
        params = {"search": input_data.get("query")}
        params.update(pick(input_data, "page", "limit"))
        return await self.client.get(Entity.CONTACT, params=params)
