"""Root conftest: shared test configuration and fake CRM fixtures."""

import os

import httpx
import pytest

from crm_bridge.infrastructure.crm_client import CrmClient
from crm_bridge.services.tool_dispatch import ToolDispatch
from tests.crm_fakes import BASE_URL, PASSWORD, USERNAME, FakeCrm

# Ensure tests never talk to a real CRM
os.environ.setdefault("CRM_BASE_URL", BASE_URL)
os.environ.setdefault("CRM_USERNAME", USERNAME)
os.environ.setdefault("CRM_PASSWORD", PASSWORD)


@pytest.fixture
def fake_crm():
    return FakeCrm()


@pytest.fixture
async def crm_client(fake_crm):
    client = CrmClient(
        BASE_URL, USERNAME, PASSWORD,
        transport=httpx.MockTransport(fake_crm.handle),
    )
    yield client
    await client.aclose()


@pytest.fixture
def dispatch(crm_client):
    return ToolDispatch(crm_client)
