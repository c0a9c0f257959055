from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlmodel import Field, SQLModel

# VARCHAR size of the name and email columns
MAX_FIELD_LENGTH = 255


class SubmissionBase(SQLModel):
    name: str = Field(sa_type=String(MAX_FIELD_LENGTH))
    email: str = Field(sa_type=String(MAX_FIELD_LENGTH))
    response: str = Field(sa_type=Text)


class SubmissionRecord(SubmissionBase, table=True):
    """One row of the ``users`` table. ``created_at`` is filled in by the database."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime | None = Field(
        default=None,
        sa_type=DateTime,
        sa_column_kwargs={"server_default": func.now()},
    )


class Submission(SubmissionBase):
    """A stored form entry, detached from any session."""

    id: int
    created_at: datetime
