"""Request parsing and response helpers shared by the endpoints"""
from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError as SchemaError
from typing import Any, Dict
import json

from sss_registry.schemas import ActionResult
from sss_registry.services.errors import RegistryError, ValidationError, NotFoundError, StorageError


def status_for(error: RegistryError) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, StorageError):
        return 500
    return 400


def schema_error(error: SchemaError) -> ValidationError:
    """Convert pydantic parsing errors into the registry's ValidationError"""
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return ValidationError(messages)


async def read_submission(request: Request) -> Dict[str, Any]:
    """Return the posted fields from a JSON body or a url-encoded/multipart form"""
    if is_json_body(request):
        try:
            body = await request.json()
        except ValueError:
            raise ValidationError(["Request body is not valid JSON"])
        if not isinstance(body, dict):
            raise ValidationError(["Request body must be a JSON object"])
        return body

    form = await request.form()
    return dict(form)


def is_json_body(request: Request) -> bool:
    return request.headers.get("content-type", "").startswith("application/json")


def wants_json_response(request: Request) -> bool:
    """Return True unless a plain browser form post asked for HTML"""
    if is_json_body(request):
        return True
    accept = request.headers.get("accept", "")
    if "application/json" in accept or accept in ("", "*/*"):
        return True
    return "text/html" not in accept


def script_literal(value: str) -> str:
    """JSON-encode a string for use inside an inline <script> block"""
    return json.dumps(value).replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def success_response(result: ActionResult) -> JSONResponse:
    return JSONResponse(status_code=200, content=result.model_dump(exclude_none=True))


def failure_response(error: RegistryError) -> JSONResponse:
    result = ActionResult(success=False, message=error.message)
    return JSONResponse(status_code=status_for(error), content=result.model_dump(exclude_none=True))


def legacy_script_response(result: ActionResult, error: RegistryError = None, redirect_to: str = "/") -> HTMLResponse:
    """
    Response for a browser form post: on success flag the page and redirect,
    on failure alert the messages one per line and go back to the form
    """
    if result.success:
        script = f"sessionStorage.setItem('formSuccess', 'true'); window.location.href={script_literal(redirect_to)};"
        return HTMLResponse(f"<script>{script}</script>")

    message = result.message
    if isinstance(error, ValidationError):
        message = "\n".join(error.errors)
    script = f"alert({script_literal(message)}); window.history.back();"
    return HTMLResponse(f"<script>{script}</script>", status_code=status_for(error) if error else 400)
