"""Action-style endpoints backing the applicant table page"""
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session
from typing import Optional
import logging

from sss_registry.api.responses import (
    failure_response,
    read_submission,
    schema_error,
    status_for,
    success_response,
)
from sss_registry.database import get_db
from sss_registry.schemas import ActionResult, QuickEntryForm
from sss_registry.services.errors import RegistryError, ValidationError
from sss_registry.services.reader import ApplicantRecordReader
from sss_registry.services.writer import ApplicantRecordWriter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/crud")
def crud_read(
    action: str = Query(default="read"),
    applicant_id: Optional[str] = Query(default=None, alias="id"),
    order_by: str = Query(default="applicant_id"),
    direction: str = Query(default="DESC", alias="dir"),
    db: Session = Depends(get_db)
):
    """
    action=read returns every applicant as a summary row (newest first by default)
    action=read_single&id= returns the applicant with all dependents
    """
    reader = ApplicantRecordReader(db)

    try:
        if action == "read":
            try:
                return reader.list_applicants(order_by=order_by, direction=direction)
            except ValueError as e:
                return JSONResponse(status_code=400, content={"error": str(e)})

        if action == "read_single":
            if not applicant_id:
                return JSONResponse(status_code=400, content={"error": "ID parameter is required"})
            try:
                record_id = int(applicant_id)
            except ValueError:
                return JSONResponse(status_code=400, content={"error": f"Invalid applicant ID '{applicant_id}'"})
            return reader.read_applicant(record_id)

    except RegistryError as e:
        return JSONResponse(status_code=status_for(e), content={"error": e.message})

    return JSONResponse(status_code=400, content={"success": False, "message": "Invalid action"})


@router.post("/crud")
async def crud_write(
    request: Request,
    action: str = Query(...),
    db: Session = Depends(get_db)
):
    """action=create|update|delete with the table modal's fields (first, last, email, phone, location, hobby)"""
    writer = ApplicantRecordWriter(db)

    try:
        data = await read_submission(request)

        if action == "create":
            applicant_id = writer.create_summary(QuickEntryForm.model_validate(data))
            return success_response(ActionResult(success=True, message="Record created successfully", id=applicant_id))

        if action == "update":
            writer.update_summary(QuickEntryForm.model_validate(data))
            return success_response(ActionResult(success=True, message="Record updated successfully"))

        if action == "delete":
            writer.delete_applicant(data.get("id"))
            return success_response(ActionResult(success=True, message="Record deleted successfully"))

        raise ValidationError(["Invalid action"])

    except SchemaError as e:
        return failure_response(schema_error(e))
    except RegistryError as e:
        logger.info(f"crud {action} rejected: {e.message}")
        return failure_response(e)
