from webloom.services.submissions import SubmissionService

__all__ = ["SubmissionService"]
