"""Form intake exceptions."""

from fastapi import HTTPException, status

from .constants import ERROR_MESSAGES, FAILURE_MESSAGES


class SubmissionException(HTTPException):
    """Base submission exception."""

    def __init__(self, detail: str = "Submission failed", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class SubmissionNotFound(SubmissionException):
    """Raised when a stored submission is not found."""

    def __init__(self):
        super().__init__(detail="Submission not found", status_code=status.HTTP_404_NOT_FOUND)


class EmailAlreadyExists(SubmissionException):
    """Raised when a submission with the same email is already stored."""

    def __init__(self):
        super().__init__(detail=ERROR_MESSAGES["email_exists"], status_code=status.HTTP_409_CONFLICT)


class SubmissionSaveFailed(SubmissionException):
    """Raised when a valid submission could not be persisted."""

    def __init__(self):
        super().__init__(detail=FAILURE_MESSAGES["save_failed"], status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class InvalidAjaxRequest(SubmissionException):
    """Raised when the live validation endpoint is called without the AJAX header."""

    def __init__(self):
        super().__init__(detail=FAILURE_MESSAGES["invalid_request"])
