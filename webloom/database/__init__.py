from webloom.database.connection import SubmissionStore, create_db_engine

__all__ = ["SubmissionStore", "create_db_engine"]
