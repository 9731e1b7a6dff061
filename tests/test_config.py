"""Tests for settings, the shared HTTP client and the record model."""

import pytest

from forms_hubspot.config.settings import Settings, SettingsConfiguration
from forms_hubspot.models.schemas import Record, RecordField
from forms_hubspot.utils import http


def test_api_key_read_from_settings():
    config = SettingsConfiguration(Settings(HUBSPOT_API_KEY="abc"))
    assert config.get_setting("HubSpotApiKey") == "abc"


def test_api_key_absent():
    config = SettingsConfiguration(Settings(HUBSPOT_API_KEY=None))
    assert config.get_setting("HubSpotApiKey") is None


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("HUBSPOT_API_KEY", "from-env")
    assert SettingsConfiguration(Settings()).get_setting("HubSpotApiKey") == "from-env"


@pytest.mark.asyncio
async def test_shared_client_is_reused_until_closed():
    first = http.get_shared_client()
    assert http.get_shared_client() is first
    await http.close_shared_client()
    assert first.is_closed
    second = http.get_shared_client()
    assert second is not first
    await http.close_shared_client()


def test_record_field_lookup():
    rec = Record(fields=[RecordField(field_id="a", values=["x"])])
    assert rec.get_record_field("a").values_as_string() == "x"
    assert rec.get_record_field("b") is None


def test_sensitive_value_can_be_excluded():
    field = RecordField(field_id="a", sensitive=True, values=["secret"])
    assert field.values_as_string(exclude_sensitive=True) == ""
    assert field.values_as_string(exclude_sensitive=False) == "secret"
