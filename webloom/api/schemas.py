"""
schemas.py
----------
Request and response bodies of the HTTP API.
"""

from pydantic import BaseModel, ConfigDict

from webloom.models.submission import Submission


class SubmissionCreate(BaseModel):
    """
    Body of ``POST /submit``.

    Fields are optional here so that a missing field is reported as
    ``{"error": "Missing required fields"}`` by the service, not as a 422.
    Extra keys sent by the browser form (e.g. ``_timestamp``) are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    response: str | None = None


class SubmitResponse(BaseModel):
    message: str
    user: Submission


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
