"""
routes.py
---------
HTTP endpoints:
- GET  /         status check
- POST /submit   store one form submission
- GET  /users    list stored submissions, newest first
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from webloom.api.schemas import ErrorResponse, SubmissionCreate, SubmitResponse
from webloom.errors import ValidationError
from webloom.models.submission import Submission
from webloom.services.submissions import SubmissionService

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


# --- Dependencies ---

def get_service(request: Request) -> SubmissionService:
    """Service bound to the store opened at startup."""
    return SubmissionService(request.app.state.store)


async def submission_payload(request: Request) -> SubmissionCreate:
    """Reads the /submit body, either JSON or browser form encoding."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except (StarletteHTTPException, MultiPartException):
            raise ValidationError("Invalid request body")
        data = {key: value for key, value in form.items() if isinstance(value, str)}
    else:
        raw = await request.body()
        if not raw.strip():
            data = {}
        else:
            try:
                data = json.loads(raw)
            except (json.JSONDecodeError, UnicodeDecodeError):
                raise ValidationError("Invalid request body")

    if not isinstance(data, dict):
        raise ValidationError("Invalid request body")
    try:
        return SubmissionCreate.model_validate(data)
    except PydanticValidationError:
        raise ValidationError("Invalid request body")


# --- Routes ---

@router.get("/")
def read_root():
    """Status check. Has no side effects."""
    return {"message": "Webloom backend is running"}


@router.post(
    "/submit",
    response_model=SubmitResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def submit(
    payload: SubmissionCreate = Depends(submission_payload),
    service: SubmissionService = Depends(get_service),
):
    """Validates and stores a form submission."""
    user = service.handle_submit(payload)
    return SubmitResponse(message="Form submitted successfully", user=user)


@router.get(
    "/users",
    response_model=list[Submission],
    responses={500: {"model": ErrorResponse}},
)
def list_users(service: SubmissionService = Depends(get_service)):
    """Returns all stored submissions, most recent first."""
    return service.handle_list()
