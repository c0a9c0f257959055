"""
submissions.py
--------------
Validation and orchestration for form submissions.

The service holds no per-request state; every call is an independent
validate -> store -> result cycle. Storage failures are never retried.
"""

import logging
from typing import Any, Mapping

from webloom.database.connection import SubmissionStore
from webloom.errors import PersistenceError, StorageError, ValidationError
from webloom.models.submission import MAX_FIELD_LENGTH, Submission

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "response")
LENGTH_LIMITED_FIELDS = ("name", "email")


def _payload_value(payload: Any, field: str) -> Any:
    if isinstance(payload, Mapping):
        return payload.get(field)
    return getattr(payload, field, None)


def missing_fields(payload: Any) -> list[str]:
    """Names of required fields that are absent or empty."""
    return [field for field in REQUIRED_FIELDS if not _payload_value(payload, field)]


def oversized_fields(payload: Any) -> list[str]:
    """Names of fields longer than their database column."""
    return [
        field for field in LENGTH_LIMITED_FIELDS
        if len(_payload_value(payload, field) or "") > MAX_FIELD_LENGTH
    ]


class SubmissionService:
    def __init__(self, store: SubmissionStore):
        self.store = store

    def handle_submit(self, payload: Any) -> Submission:
        """
        Validates and stores one submission.

        ``payload`` is a ``SubmissionCreate`` or any mapping with
        ``name``, ``email`` and ``response`` keys.

        Raises:
            ValidationError: a required field is missing or empty
                or longer than its column. Nothing is stored.
            PersistenceError: the store failed; ``details`` carries the cause.
        """
        missing = missing_fields(payload)
        if missing:
            logger.info("Rejected submission, missing fields: %s", ", ".join(missing))
            raise ValidationError("Missing required fields", fields=missing)

        too_long = oversized_fields(payload)
        if too_long:
            logger.info("Rejected submission, fields too long: %s", ", ".join(too_long))
            raise ValidationError("Fields too long", fields=too_long)

        name, email, response = (_payload_value(payload, field) for field in REQUIRED_FIELDS)
        try:
            submission = self.store.insert_submission(name, email, response)
        except StorageError as e:
            logger.error("Database error while saving submission: %s", e)
            raise PersistenceError("Error saving data to database", details=str(e)) from e

        logger.info("Stored submission id=%s", submission.id)
        return submission

    def handle_list(self) -> list[Submission]:
        """Every stored submission, most recent first."""
        try:
            submissions = self.store.list_submissions()
        except StorageError as e:
            logger.error("Error fetching submissions: %s", e)
            raise PersistenceError("Error fetching users") from e

        logger.debug("Fetched %d submissions", len(submissions))
        return submissions
