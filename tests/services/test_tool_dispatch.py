"""Tool Dispatch: routing, validation-before-network and envelope guarantees.

Tests cover:
    - Registry names and dispatchable names are the same set
    - Every tool succeeds with minimal arguments and returns the body unmodified
    - Every missing required field yields a failure naming it, with zero HTTP calls
    - Unknown tools fail with a not-found message
    - 404 degrades to a success envelope for smart links only
    - Unexpected handler exceptions still produce an envelope
"""

import json

import httpx
import pytest

from crm_bridge.core.domain_types import ToolCategory
from crm_bridge.core.errors import CRM_ERROR_TAG
from crm_bridge.core.unavailable_endpoints import build_unavailable_payload
from crm_bridge.services.tools_registry import ALL_TOOLS, TOOL_NAMES, get_category_tools
from tests.crm_fakes import minimal_arguments

_SMART_LINK_NAMES = {t["name"] for t in get_category_tools(ToolCategory.SMART_LINKS)}
_OTHER_TOOLS = [t for t in ALL_TOOLS if t["name"] not in _SMART_LINK_NAMES]
_REQUIRED_CASES = [
    (t["name"], field)
    for t in ALL_TOOLS
    for field in t["input_schema"]["required"]
]


def _ids(tool):
    return tool["name"]


def test_handlers_match_registry(dispatch):
    assert dispatch.tool_names == TOOL_NAMES


@pytest.mark.parametrize("tool", ALL_TOOLS, ids=_ids)
async def test_minimal_arguments_succeed(dispatch, fake_crm, tool):
    body = {"data": [{"id": 1}], "tool": tool["name"]}
    fake_crm.respond_all(200, body)
    response = await dispatch.execute(tool["name"], minimal_arguments(tool))
    assert response.ok is True, response.error
    assert json.loads(response.payload) == body
    assert fake_crm.call_count == 1


@pytest.mark.parametrize("tool_name,field", _REQUIRED_CASES)
async def test_missing_required_field_fails_without_network(
    dispatch, fake_crm, tool_name, field,
):
    tool = next(t for t in ALL_TOOLS if t["name"] == tool_name)
    args = minimal_arguments(tool)
    del args[field]
    response = await dispatch.execute(tool_name, args)
    assert response.ok is False
    assert field in response.error
    assert fake_crm.call_count == 0


@pytest.mark.parametrize(
    "name", ["", "crm_list_tag", "list_tags", "CRM_LIST_TAGS", "crm_drop_database"],
)
async def test_unknown_tool_not_found(dispatch, fake_crm, name):
    response = await dispatch.execute(name, {})
    assert response.ok is False
    assert "not found" in response.error
    assert fake_crm.call_count == 0


@pytest.mark.parametrize("tool", get_category_tools(ToolCategory.SMART_LINKS), ids=_ids)
async def test_smart_link_404_is_success_envelope(dispatch, fake_crm, tool):
    fake_crm.respond_all(404, {"message": "Cannot find route"})
    response = await dispatch.execute(tool["name"], minimal_arguments(tool))
    assert response.ok is True
    assert json.loads(response.payload) == build_unavailable_payload()


@pytest.mark.parametrize("tool", _OTHER_TOOLS, ids=_ids)
async def test_other_tools_404_is_error_envelope(dispatch, fake_crm, tool):
    fake_crm.respond_all(404, {"message": "Resource missing upstream"})
    response = await dispatch.execute(tool["name"], minimal_arguments(tool))
    assert response.ok is False
    assert response.error == f"{CRM_ERROR_TAG}: Resource missing upstream"


async def test_list_twice_is_byte_identical(dispatch, fake_crm):
    fake_crm.respond("GET", "/tags", 200, {"data": [{"id": 1, "name": "vip"}]})
    first = await dispatch.execute("crm_list_tags", {})
    second = await dispatch.execute("crm_list_tags", {})
    assert first.payload == second.payload


async def test_list_tags_scenario(dispatch, fake_crm):
    fake_crm.respond("GET", "/tags", 200, {"data": [{"id": 1, "name": "vip"}]})
    response = await dispatch.execute("crm_list_tags", {})
    assert response.ok is True
    assert json.loads(response.payload) == {"data": [{"id": 1, "name": "vip"}]}
    sent = fake_crm.requests[0]
    assert (sent.method, sent.path) == ("GET", "/tags")
    assert sent.headers["authorization"].startswith("Basic ")


async def test_create_tag_without_name(dispatch, fake_crm):
    response = await dispatch.execute("crm_create_tag", {})
    assert response.ok is False
    assert "name" in response.error
    assert fake_crm.call_count == 0


async def test_attach_tags_scenario(dispatch, fake_crm):
    backend = {"success": True, "subscriber": {"id": 5, "tags": [1, 2]}}
    fake_crm.respond("POST", "/subscribers/5/tags", 200, backend)
    response = await dispatch.execute(
        "crm_add_tags_to_contact", {"subscriberId": 5, "tagIds": [1, 2]},
    )
    assert response.ok is True
    assert json.loads(response.payload) == backend
    assert fake_crm.requests[0].body == {"tagIds": [1, 2]}


async def test_wrong_type_identifier_rejected(dispatch, fake_crm):
    response = await dispatch.execute("crm_get_contact", {"id": "5"})
    assert response.ok is False
    assert "'id'" in response.error
    assert fake_crm.call_count == 0


async def test_none_arguments_treated_as_empty(dispatch, fake_crm):
    response = await dispatch.execute("crm_list_tags", None)
    assert response.ok is True


async def test_transport_failure_becomes_envelope(dispatch, fake_crm):
    fake_crm.raise_error = httpx.ConnectError("connection refused")
    response = await dispatch.execute("crm_list_tags", {})
    assert response.ok is False
    assert response.error.startswith(CRM_ERROR_TAG)
    assert "connection refused" in response.error


async def test_unexpected_exception_becomes_envelope(dispatch, fake_crm):
    fake_crm.raise_error = RuntimeError("kaboom")
    response = await dispatch.execute("crm_list_tags", {})
    assert response.ok is False
    assert "kaboom" in response.error


async def test_failure_does_not_affect_next_call(dispatch, fake_crm):
    fake_crm.respond("GET", "/lists", 500, {"message": "down"})
    failed = await dispatch.execute("crm_list_lists", {})
    ok = await dispatch.execute("crm_list_tags", {})
    assert failed.ok is False
    assert ok.ok is True
