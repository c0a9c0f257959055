"""
connection.py
-------------
Store client for form submissions.

``SubmissionStore`` owns one SQLAlchemy engine, whose connection pool bounds
the number of simultaneous storage operations. The store is created once at
startup, handed to the service layer and disposed at shutdown.
"""

import logging

from sqlalchemy import func, inspect
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from webloom.config import Settings
from webloom.errors import SchemaInitError, StorageError
from webloom.models.submission import Submission, SubmissionRecord

logger = logging.getLogger(__name__)


def create_db_engine(url: str, *, pool_size: int = 10, max_overflow: int = 0,
                     pool_timeout: int = 30, echo: bool = False) -> Engine:
    """Creates a pooled engine. SQLite gets thread-sharing, in-memory SQLite a single static connection."""
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    return create_engine(
        url,
        echo=echo,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
    )


class SubmissionStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "SubmissionStore":
        engine = create_db_engine(
            settings.sqlalchemy_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            echo=settings.db_echo,
        )
        return cls(engine)

    @classmethod
    def from_url(cls, url: str) -> "SubmissionStore":
        return cls(create_db_engine(url))

    # --- Schema ---

    def ensure_schema(self) -> None:
        """
        Creates the ``users`` table if it does not exist yet.

        Safe to call on every startup. Any failure raises ``SchemaInitError``;
        the caller must not start serving requests after that.
        """
        table = SubmissionRecord.__table__
        try:
            with self.engine.connect() as conn:
                logger.info("Connected to database %s", self.engine.url.render_as_string(hide_password=True))
                inspector = inspect(conn)
                if inspector.has_table(table.name):
                    columns = [(c["name"], str(c["type"])) for c in inspector.get_columns(table.name)]
                    logger.debug("Table structure of %s: %s", table.name, columns)
            SQLModel.metadata.create_all(self.engine, tables=[table])
        except SQLAlchemyError as e:
            logger.error("Database initialization failed: %s", e)
            raise SchemaInitError(f"Could not initialize table '{table.name}': {e}") from e
        logger.info("Table '%s' verified/created", table.name)

    # --- Queries ---

    def insert_submission(self, name: str, email: str, response: str) -> Submission:
        """Inserts one row and returns it with the generated id and created_at."""
        record = SubmissionRecord(name=name, email=email, response=response)
        try:
            with Session(self.engine) as session:
                session.add(record)
                session.commit()
                session.refresh(record)
                return Submission.model_validate(record)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def list_submissions(self) -> list[Submission]:
        """All rows, most recent first."""
        statement = select(SubmissionRecord).order_by(
            SubmissionRecord.created_at.desc(), SubmissionRecord.id.desc()
        )
        try:
            with Session(self.engine) as session:
                rows = session.exec(statement).all()
                return [Submission.model_validate(row) for row in rows]
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def count_submissions(self) -> int:
        try:
            with Session(self.engine) as session:
                return session.exec(select(func.count()).select_from(SubmissionRecord)).one()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def close(self) -> None:
        """Closes all pooled connections."""
        self.engine.dispose()
