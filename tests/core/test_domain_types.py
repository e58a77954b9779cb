"""Domain Types: entity paths, 404 degradation scope, campaign actions."""

from crm_bridge.core.domain_types import (
    CAMPAIGN_STATUS_FOR_ACTION, DEGRADE_ON_NOT_FOUND, ENTITY_PATHS,
    CampaignAction, Entity, ToolCategory,
)


def test_every_entity_has_a_path():
    assert set(ENTITY_PATHS) == set(Entity)


def test_entity_paths_match_crm_routes():
    assert ENTITY_PATHS[Entity.CONTACT] == "/subscribers"
    assert ENTITY_PATHS[Entity.TEMPLATE] == "/email-templates"
    assert ENTITY_PATHS[Entity.AUTOMATION] == "/funnels"
    assert ENTITY_PATHS[Entity.WEBHOOK] == "/webhook"
    assert ENTITY_PATHS[Entity.SMART_LINK] == "/smart-links"


def test_only_smart_links_degrade_on_404():
    assert DEGRADE_ON_NOT_FOUND == frozenset({Entity.SMART_LINK})


def test_every_campaign_action_maps_to_status():
    assert set(CAMPAIGN_STATUS_FOR_ACTION) == set(CampaignAction)
    assert CAMPAIGN_STATUS_FOR_ACTION[CampaignAction.PAUSE] == "paused"
    assert CAMPAIGN_STATUS_FOR_ACTION[CampaignAction.RESUME] == "active"


def test_tool_category_has_nine_categories():
    assert len(ToolCategory) == 9
