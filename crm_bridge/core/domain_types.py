"""Domain Types: entity families, their base paths, and tool categories.

Invariants:
    - Every Entity has exactly one base path in ENTITY_PATHS
    - Only entities listed in DEGRADE_ON_NOT_FOUND turn a 404 into a successful payload
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - 404 degradation is an explicit per-entity set, not a client-wide switch
      (ADR: a new entity cannot inherit the smart-link exception by accident)
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class Entity(str, Enum):
    """CRM resource kinds, each with its own base path."""
    CONTACT = "contact"
    TAG = "tag"
    LIST = "list"
    CAMPAIGN = "campaign"
    TEMPLATE = "template"
    AUTOMATION = "automation"
    WEBHOOK = "webhook"
    SMART_LINK = "smart_link"
    REPORT = "report"


class ToolCategory(str, Enum):
    """Tool groupings for registry and observability."""
    CONTACTS = "contacts"
    TAGS = "tags"
    LISTS = "lists"
    CAMPAIGNS = "campaigns"
    TEMPLATES = "templates"
    AUTOMATIONS = "automations"
    WEBHOOKS = "webhooks"
    SMART_LINKS = "smart_links"
    REPORTS = "reports"


class CampaignAction(str, Enum):
    """Status changes accepted by crm_set_campaign_status."""
    PAUSE = "pause"
    RESUME = "resume"


# ─── Constants ───────────────────────────────────────────────────

ENTITY_PATHS: dict[Entity, str] = {
    Entity.CONTACT: "/subscribers",
    Entity.TAG: "/tags",
    Entity.LIST: "/lists",
    Entity.CAMPAIGN: "/campaigns",
    Entity.TEMPLATE: "/email-templates",
    Entity.AUTOMATION: "/funnels",
    Entity.WEBHOOK: "/webhook",
    Entity.SMART_LINK: "/smart-links",
    Entity.REPORT: "/reports",
}

# Remote API has not shipped these endpoints yet
DEGRADE_ON_NOT_FOUND: frozenset[Entity] = frozenset({Entity.SMART_LINK})

CAMPAIGN_STATUS_FOR_ACTION: dict[CampaignAction, str] = {
    CampaignAction.PAUSE: "paused",
    CampaignAction.RESUME: "active",
}
