"""
Form workflow that saves a submission to HubSpot as a contact.

The form engine stores the workflow's field mappings as a JSON array
string, one ``{"formField": ..., "hubspotField": ...}`` object per
mapping, and calls ``execute`` once per submitted record.
"""
import logging
from typing import List, Optional

import orjson
from pydantic import TypeAdapter, ValidationError

from forms_hubspot.hubspot.base import ContactService
from forms_hubspot.models.schemas import (
    CommandResult,
    MappedProperty,
    Record,
    WorkflowExecutionStatus,
)
from forms_hubspot.utils.log import get_logger

_MAPPINGS = TypeAdapter(List[MappedProperty])

_STATUS_BY_RESULT = {
    CommandResult.SUCCESS: WorkflowExecutionStatus.COMPLETED,
    CommandResult.FAILED: WorkflowExecutionStatus.FAILED,
    CommandResult.NOT_CONFIGURED: WorkflowExecutionStatus.NOT_CONFIGURED,
}


class WorkflowSettingsError(ValueError):
    pass


def parse_field_mappings(raw: Optional[str]) -> List[MappedProperty]:
    if raw is None or not raw.strip():
        return []
    try:
        return _MAPPINGS.validate_python(orjson.loads(raw))
    except (orjson.JSONDecodeError, ValidationError) as exc:
        raise WorkflowSettingsError(f"Invalid field mappings setting: {exc}") from exc


class HubSpotWorkflow:
    name = "Save Contact to HubSpot"
    description = "Saves form information to a HubSpot contact."

    def __init__(
        self,
        contact_service: ContactService,
        field_mappings: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.contact_service = contact_service
        self.field_mappings = field_mappings
        self.logger = logger or get_logger("forms-hubspot-workflow")

    def validate_settings(self) -> List[str]:
        try:
            mappings = parse_field_mappings(self.field_mappings)
        except WorkflowSettingsError as exc:
            return [str(exc)]

        if not mappings:
            return ["Missing field mappings."]

        errors = []
        for i, m in enumerate(mappings):
            if not m.form_field:
                errors.append(f"Field mapping {i + 1} has no form field.")
            if not m.hubspot_field:
                errors.append(f"Field mapping {i + 1} has no HubSpot property.")
        return errors

    async def execute(self, record: Record) -> WorkflowExecutionStatus:
        try:
            mappings = parse_field_mappings(self.field_mappings)
        except WorkflowSettingsError as exc:
            self.logger.error("HubSpot workflow not run for record %s: %s", record.unique_id, exc)
            return WorkflowExecutionStatus.FAILED

        complete = []
        for m in mappings:
            if m.form_field and m.hubspot_field:
                complete.append(m)
            else:
                self.logger.warning(
                    "Skipping incomplete HubSpot field mapping (form field %r, HubSpot property %r).",
                    m.form_field,
                    m.hubspot_field,
                )

        result = await self.contact_service.post_contact(record, complete)
        return _STATUS_BY_RESULT[result]
