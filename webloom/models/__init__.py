from webloom.models.submission import Submission, SubmissionBase, SubmissionRecord

__all__ = ["Submission", "SubmissionBase", "SubmissionRecord"]
