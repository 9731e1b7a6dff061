from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CommandResult(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    NOT_CONFIGURED = "not_configured"


class WorkflowExecutionStatus(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"
    NOT_CONFIGURED = "not_configured"


class Property(BaseModel):
    """HubSpot contact property, trimmed to what the mapping UI needs."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., validation_alias=AliasChoices("name", "id"))
    label: str
    description: Optional[str] = None
    type: Optional[str] = None
    field_type: Optional[str] = Field(None, validation_alias=AliasChoices("fieldType", "field_type"))
    group_name: Optional[str] = Field(None, validation_alias=AliasChoices("groupName", "group_name"))


class PropertiesResponse(BaseModel):
    results: List[Property] = Field(default_factory=list)


class PropertiesRequest(BaseModel):
    properties: Dict[str, str] = Field(default_factory=dict)


class MappedProperty(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    form_field: str = Field("", alias="formField")
    hubspot_field: str = Field("", alias="hubspotField")


class RecordField(BaseModel):
    field_id: str
    alias: Optional[str] = None
    caption: Optional[str] = None
    sensitive: bool = False
    values: List[Any] = Field(default_factory=list)

    def values_as_string(self, exclude_sensitive: bool = False) -> str:
        if exclude_sensitive and self.sensitive:
            return ""
        return ", ".join(str(v) for v in self.values if v is not None)


class Record(BaseModel):
    """A single form submission as handed over by the form engine."""

    unique_id: Optional[str] = None
    form_id: Optional[str] = None
    fields: List[RecordField] = Field(default_factory=list)

    def get_record_field(self, field_id: str) -> Optional[RecordField]:
        """Field ids are GUIDs, so matching ignores case."""
        wanted = field_id.lower()
        for f in self.fields:
            if f.field_id.lower() == wanted:
                return f
        return None
