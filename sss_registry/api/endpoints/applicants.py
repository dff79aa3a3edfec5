"""Intake form submission endpoint"""
from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session
import logging

from sss_registry.api.responses import (
    failure_response,
    is_json_body,
    legacy_script_response,
    read_submission,
    schema_error,
    success_response,
    wants_json_response,
)
from sss_registry.database import get_db
from sss_registry.schemas import ActionResult, ApplicantForm
from sss_registry.services.errors import RegistryError, ValidationError
from sss_registry.services.writer import ApplicantRecordWriter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/applicants")
async def submit_applicant(
    request: Request,
    action: str = Query(default="insert"),
    db: Session = Depends(get_db)
):
    """
    Save the full intake form (personal info, address, parents, spouse, children, employment)
    action=insert creates the applicant; action=update requires applicant_id
    JSON clients get {success, message, id}; a plain browser form post gets a script response
    """
    json_response = wants_json_response(request)
    writer = ApplicantRecordWriter(db)

    try:
        data = await read_submission(request)
        form = ApplicantForm.from_submission(data, html_form=not is_json_body(request))

        if action == "insert":
            applicant_id = writer.create_applicant(form)
            result = ActionResult(success=True, message="Record created successfully", id=applicant_id)
        elif action == "update":
            writer.update_applicant(data.get("applicant_id"), form)
            result = ActionResult(success=True, message="Record updated successfully")
        else:
            raise ValidationError(["Invalid action"])

    except (SchemaError, RegistryError) as e:
        error = schema_error(e) if isinstance(e, SchemaError) else e
        logger.info(f"Applicant {action} rejected: {error.message}")
        if json_response:
            return failure_response(error)
        return legacy_script_response(ActionResult(success=False, message=error.message), error)

    if json_response:
        return success_response(result)
    return legacy_script_response(result)
