"""
Domain errors raised by the services layer
Each carries the HTTP status the API layer answers with
"""
from typing import Optional


class JobBoardError(Exception):
    """Base class for every expected failure"""
    status_code: int = 400
    default_message: str = "Request could not be processed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ============== 4xx VALIDATION / ACCESS ==============

class ValidationError(JobBoardError):
    status_code = 400
    default_message = "Something is missing."


class InvalidStatus(ValidationError):
    default_message = "Invalid status"


class NotAuthenticated(JobBoardError):
    status_code = 401
    default_message = "User not authenticated"


class Forbidden(JobBoardError):
    status_code = 403
    default_message = "You are not allowed to perform this action"


class NotFound(JobBoardError):
    status_code = 404
    default_message = "Not found"


# ============== CONFLICTS ==============

class Conflict(JobBoardError):
    status_code = 409
    default_message = "Conflict"


class DuplicateApplication(Conflict):
    default_message = "You have already applied for this job"


class CapacityExceeded(Conflict):
    default_message = "No positions available for this job"


class AlreadySaved(Conflict):
    default_message = "Job already saved"


class NotSaved(Conflict):
    default_message = "Job not saved"


class AlreadyExists(Conflict):
    default_message = "Already exists"
