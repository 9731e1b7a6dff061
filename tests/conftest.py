"""
Shared fixtures for the HubSpot form workflow tests.
HubSpot is never contacted: requests go through httpx.MockTransport.
"""

import logging

import httpx
import orjson
import pytest

from forms_hubspot.hubspot.contact_service import HubSpotContactService
from forms_hubspot.models.schemas import Record, RecordField


class FakeConfiguration:
    def __init__(self, values: dict | None = None):
        self.values = values or {}

    def get_setting(self, name):
        return self.values.get(name)


class FakeHubSpot:
    """Records requests and replies with a canned status and body."""

    def __init__(self, status_code: int = 200, body=None, exc: Exception | None = None):
        self.status_code = status_code
        self.body = body
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        content = orjson.dumps(self.body) if self.body is not None else b""
        return httpx.Response(self.status_code, content=content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def sent_json(self, index: int = -1):
        return orjson.loads(self.requests[index].content)


@pytest.fixture
def fake_hubspot():
    return FakeHubSpot()


@pytest.fixture
def configured():
    return FakeConfiguration({"HubSpotApiKey": "test-key"})


@pytest.fixture
def unconfigured():
    return FakeConfiguration()


@pytest.fixture
def test_logger():
    return logging.getLogger("forms-hubspot-tests")


@pytest.fixture
def make_service(fake_hubspot, configured, test_logger):
    def _make(hubspot=None, configuration=None):
        hs = hubspot or fake_hubspot
        client = hs.client()
        return HubSpotContactService(
            configuration or configured,
            logger=test_logger,
            client_factory=lambda: client,
            base_url="https://api.hubapi.com/crm/v3/",
        )
    return _make


@pytest.fixture
def record():
    return Record(
        unique_id="rec-1",
        form_id="form-1",
        fields=[
            RecordField(field_id="field-email", alias="email", caption="Email", values=["a@example.com"]),
            RecordField(field_id="field-name", alias="name", caption="Name", values=["Ada"]),
            RecordField(field_id="field-interests", alias="interests", values=["cms", None, "crm"]),
        ],
    )
