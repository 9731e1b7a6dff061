from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI
from pydantic import BaseModel, ConfigDict, Field

from forms_hubspot.config.settings import SettingsConfiguration, settings
from forms_hubspot.hubspot.base import ContactService
from forms_hubspot.hubspot.contact_service import HubSpotContactService
from forms_hubspot.models.schemas import Property, Record, WorkflowExecutionStatus
from forms_hubspot.utils.http import close_shared_client
from forms_hubspot.utils.log import get_logger
from forms_hubspot.workflow.hubspot_workflow import HubSpotWorkflow

logger = get_logger("forms-hubspot")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_shared_client()


app = FastAPI(title="Forms HubSpot Integration", version="0.1.0", lifespan=lifespan)


class WorkflowSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    field_mappings: Optional[str] = Field(None, alias="fieldMappings")


class WorkflowRequest(WorkflowSettings):
    record: Record


def get_contact_service() -> ContactService:
    return HubSpotContactService(SettingsConfiguration(), logger=logger)


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/hubspot/contact-properties", response_model=List[Property])
async def contact_properties(service: ContactService = Depends(get_contact_service)):
    return await service.get_contact_properties()


@app.post("/workflow/hubspot/validate")
async def validate_workflow(body: WorkflowSettings, service: ContactService = Depends(get_contact_service)):
    errors = HubSpotWorkflow(service, body.field_mappings, logger=logger).validate_settings()
    return {"valid": not errors, "errors": errors}


@app.post("/workflow/hubspot/execute")
async def execute_workflow(body: WorkflowRequest, service: ContactService = Depends(get_contact_service)):
    status: WorkflowExecutionStatus = await HubSpotWorkflow(service, body.field_mappings, logger=logger).execute(
        body.record
    )
    return {"status": status.value}


def run():
    import uvicorn
    uvicorn.run("forms_hubspot.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
