import logging
from typing import Callable, List, Optional, Sequence

import httpx
import orjson
from pydantic import ValidationError

from forms_hubspot.config.hubspot_api import (
    API_KEY_PARAM,
    API_KEY_SETTING,
    CONTACT_PROPERTIES_PATH,
    CONTACTS_PATH,
)
from forms_hubspot.config.settings import settings
from forms_hubspot.hubspot.base import Configuration, ContactService
from forms_hubspot.models.schemas import (
    CommandResult,
    MappedProperty,
    PropertiesRequest,
    PropertiesResponse,
    Property,
    Record,
)
from forms_hubspot.utils.http import get_shared_client
from forms_hubspot.utils.log import get_logger

class HubSpotContactService(ContactService):
    """Pushes form submissions to HubSpot as contacts.

    Every failure is reported through the return value and the logger;
    callers never see an exception for a missing key, a rejected request
    or a transport fault.
    """

    name = "hubspot"

    def __init__(
        self,
        configuration: Configuration,
        logger: Optional[logging.Logger] = None,
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
        base_url: Optional[str] = None,
    ):
        self.configuration = configuration
        self.logger = logger or get_logger("forms-hubspot")
        self.client_factory = client_factory or get_shared_client
        self.base_url = (base_url or settings.HUBSPOT_BASE_URL).rstrip("/") + "/"

    def _api_key(self) -> Optional[str]:
        return self.configuration.get_setting(API_KEY_SETTING) or None

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def get_contact_properties(self) -> List[Property]:
        api_key = self._api_key()
        if not api_key:
            self.logger.warning(
                "Failed to fetch contact properties from HubSpot API for mapping as no API key has been configured."
            )
            return []

        try:
            resp = await self.client_factory().get(
                self._url(CONTACT_PROPERTIES_PATH), params={API_KEY_PARAM: api_key}
            )
        except httpx.HTTPError as exc:
            self.logger.error("Failed to fetch contact properties from HubSpot API for mapping: %s", exc)
            return []

        if not resp.is_success:
            self.logger.error(
                "Failed to fetch contact properties from HubSpot API for mapping. %s %s",
                resp.status_code,
                resp.reason_phrase,
            )
            return []

        try:
            parsed = PropertiesResponse.model_validate(orjson.loads(resp.content))
        except (orjson.JSONDecodeError, ValidationError) as exc:
            self.logger.error("Unexpected contact properties response from HubSpot API: %s", exc)
            return []

        return sorted(parsed.results, key=lambda p: (p.label.casefold(), p.label))

    async def post_contact(self, record: Record, field_mappings: Sequence[MappedProperty]) -> CommandResult:
        api_key = self._api_key()
        if not api_key:
            self.logger.warning(
                "Failed to post contact details via the HubSpot API as no API key has been configured."
            )
            return CommandResult.NOT_CONFIGURED

        post_data = PropertiesRequest()
        for mapping in field_mappings:
            record_field = record.get_record_field(mapping.form_field)
            if record_field is not None:
                # Values go over as plain text whatever the HubSpot property type.
                post_data.properties[mapping.hubspot_field] = record_field.values_as_string(False)
            else:
                self.logger.warning(
                    "The field mapping with id %s did not match any record fields. "
                    "This is probably caused by the record field being marked as sensitive "
                    "and the workflow being set not to include sensitive data.",
                    mapping.form_field,
                )

        try:
            resp = await self.client_factory().post(
                self._url(CONTACTS_PATH),
                params={API_KEY_PARAM: api_key},
                content=orjson.dumps(post_data.model_dump()),
                headers={"Content-Type": "application/json; charset=utf-8"},
            )
        except httpx.HTTPError as exc:
            self.logger.error("Error submitting a HubSpot contact request: %s", exc)
            return CommandResult.FAILED

        if not resp.is_success:
            self.logger.error(
                "Error submitting a HubSpot contact request. %s %s", resp.status_code, resp.reason_phrase
            )
            return CommandResult.FAILED

        return CommandResult.SUCCESS
