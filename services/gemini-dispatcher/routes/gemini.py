"""Single action endpoint shared by every client call."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from policy_mail_common import ErrorEnvelope, ResultEnvelope
from policy_mail_common.logging import setup_logging
from starlette.datastructures import UploadFile

from dependencies import get_dispatcher
from domain import ActionDispatcher, ActionRequest, BinaryAttachment
from exceptions import InvalidRequestBodyError

logger = setup_logging()

router = APIRouter(tags=["gemini"])

DispatcherDep = Annotated[ActionDispatcher, Depends(get_dispatcher)]

API_PATH = "/api/gemini"
NETLIFY_PATH = "/.netlify/functions/gemini"


async def _to_attachment(upload: UploadFile | str | None) -> BinaryAttachment | None:
    """Normalizes a multipart file part into a BinaryAttachment."""
    if upload is None:
        return None
    if isinstance(upload, str):
        return BinaryAttachment(content=upload.encode("utf-8"))
    return BinaryAttachment(
        content=await upload.read(),
        content_type=upload.content_type or "application/pdf",
        filename=upload.filename or "document.pdf",
    )


async def _read_multipart(request: Request) -> ActionRequest:
    form = await request.form()
    try:
        payload = json.loads(form.get("payload") or "{}")
    except json.JSONDecodeError as e:
        raise InvalidRequestBodyError("payload field is not valid JSON", e) from e

    upload = form.get("file")
    if upload is None:
        files = form.getlist("files")
        upload = files[0] if files else None

    return ActionRequest(
        action=form.get("action"),
        payload=payload,
        file=await _to_attachment(upload),
    )


async def _read_json(request: Request) -> ActionRequest:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidRequestBodyError("body is not valid JSON", e) from e
    if not isinstance(body, dict):
        raise InvalidRequestBodyError("body must be a JSON object")
    return ActionRequest(action=body.get("action"), payload=body.get("payload"))


async def read_action_request(request: Request) -> ActionRequest:
    """
    Normalizes either transport encoding into one ActionRequest.

    Multipart bodies carry action and a JSON-encoded payload as fields plus a
    "file" part (or the first "files" part). Any other body is read as JSON.
    """
    content_type = request.headers.get("content-type", "")
    if "multipart/form-data" in content_type:
        return await _read_multipart(request)
    return await _read_json(request)


@router.options(API_PATH)
@router.options(NETLIFY_PATH)
def preflight() -> Response:
    """Answers CORS preflight requests."""
    return Response(status_code=200)


@router.post(API_PATH)
@router.post(NETLIFY_PATH)
async def dispatch_action(request: Request, dispatcher: DispatcherDep) -> JSONResponse:
    """
    Runs one named action.

    Returns {"result": ...} on success and {"error": ...} with status 500 on
    any failure.
    """
    action = None
    try:
        action_request = await read_action_request(request)
        action = action_request.action
        result = await run_in_threadpool(dispatcher.dispatch, action_request)
    except Exception as e:
        logger.exception("Action failed", extra={"action": action, "error": str(e)})
        return JSONResponse(
            status_code=500,
            content=ErrorEnvelope(error=str(e)).model_dump(),
        )

    return JSONResponse(content=ResultEnvelope(result=result).model_dump())
