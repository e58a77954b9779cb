"""Tool Dispatch: explicit routing from tool_name to handler, wrapped in an envelope.

Invariants:
    - Every tool->handler mapping is visible: no getattr magic, no auto-discovery
    - Handler names and registry names are the same set (no orphan tool, no unreachable handler)
    - execute() never raises: unknown tool, bad arguments, CRM failures and
      unexpected exceptions all come back as ToolResponse(ok=False)
    - Argument validation runs before the handler, so a bad call issues zero HTTP requests
    - No state kept between calls: concurrent execute() calls only share the CrmClient

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Handlers split by entity family: each class stays small
    - Catch-all except Exception logs the traceback; it is the last boundary before the transport
"""

import logging

from crm_bridge.core.envelope import ToolResponse
from crm_bridge.core.errors import BridgeError, ErrorContext, ToolNotFoundError
from crm_bridge.core.validate_arguments import validate_arguments
from crm_bridge.infrastructure.crm_client import CrmClient
from crm_bridge.services.handle_campaigns import CampaignHandlers
from crm_bridge.services.handle_contacts import ContactHandlers
from crm_bridge.services.handle_content import ContentHandlers
from crm_bridge.services.handle_lists import ListHandlers
from crm_bridge.services.handle_reports import ReportHandlers
from crm_bridge.services.handle_smart_links import SmartLinkHandlers
from crm_bridge.services.handle_tags import TagHandlers
from crm_bridge.services.tools_registry import get_tool

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, client: CrmClient):
        contacts = ContactHandlers(client)
        tags = TagHandlers(client)
        lists = ListHandlers(client)
        campaigns = CampaignHandlers(client)
        content = ContentHandlers(client)
        smart_links = SmartLinkHandlers(client)
        reports = ReportHandlers(client)

        # ADR: every mapping explicit, adding a tool requires editing this dict
        self._handlers = {
            # Contacts (6 tools)
            "crm_list_contacts": contacts.list_contacts,
            "crm_get_contact": contacts.get_contact,
            "crm_create_contact": contacts.create_contact,
            "crm_update_contact": contacts.update_contact,
            "crm_delete_contact": contacts.delete_contact,
            "crm_search_contacts": contacts.search_contacts,

            # Tags (5 tools)
            "crm_list_tags": tags.list_tags,
            "crm_create_tag": tags.create_tag,
            "crm_update_tag": tags.update_tag,
            "crm_delete_tag": tags.delete_tag,
            "crm_add_tags_to_contact": tags.add_tags_to_contact,

            # Lists (5 tools)
            "crm_list_lists": lists.list_lists,
            "crm_create_list": lists.create_list,
            "crm_update_list": lists.update_list,
            "crm_delete_list": lists.delete_list,
            "crm_add_contact_to_lists": lists.add_contact_to_lists,

            # Campaigns (4 tools)
            "crm_list_campaigns": campaigns.list_campaigns,
            "crm_create_campaign": campaigns.create_campaign,
            "crm_update_campaign": campaigns.update_campaign,
            "crm_set_campaign_status": campaigns.set_campaign_status,

            # Templates, automations, webhooks (2 tools each)
            "crm_list_templates": content.list_templates,
            "crm_create_template": content.create_template,
            "crm_list_automations": content.list_automations,
            "crm_create_automation": content.create_automation,
            "crm_list_webhooks": content.list_webhooks,
            "crm_create_webhook": content.create_webhook,

            # Smart links (7 tools)
            "crm_list_smart_links": smart_links.list_smart_links,
            "crm_get_smart_link": smart_links.get_smart_link,
            "crm_create_smart_link": smart_links.create_smart_link,
            "crm_update_smart_link": smart_links.update_smart_link,
            "crm_delete_smart_link": smart_links.delete_smart_link,
            "crm_generate_smart_link_shortcode": smart_links.generate_shortcode,
            "crm_validate_smart_link_url": smart_links.validate_url,

            # Reports (2 tools)
            "crm_get_report_stats": reports.get_stats,
            "crm_list_custom_fields": reports.list_custom_fields,
        }

    @property
    def tool_names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    async def execute(self, tool_name: str, input_data: dict | None) -> ToolResponse:
        """Route tool_name to handler. Returns an envelope, never raises."""
        context = ErrorContext(tool_name=tool_name)
        tool = get_tool(tool_name)
        handler = self._handlers.get(tool_name)
        try:
            if tool is None or handler is None:
                raise ToolNotFoundError(tool_name, context)
            arguments = {} if input_data is None else input_data
            validate_arguments(tool_name, tool["input_schema"], arguments)
            result = await handler(arguments)
        except BridgeError as e:
            e.context.tool_name = tool_name
            logger.warning(
                f"Tool '{tool_name}' failed: {e.message}",
                extra=e.to_log_extra(),
            )
            return e.to_envelope()
        except Exception as e:
            logger.error(
                f"Unexpected error in tool '{tool_name}': {e}",
                exc_info=True,
                extra={"tool_name": tool_name, "error_code": "INTERNAL_ERROR"},
            )
            return ToolResponse.failure(
                f"Unexpected error in '{tool_name}': {e}",
            )
        logger.info(f"Tool '{tool_name}' succeeded", extra={"tool_name": tool_name})
        return ToolResponse.success(result)
