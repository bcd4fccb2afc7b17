"""Form intake router (API endpoints)."""

import logging

from fastapi import APIRouter, Depends, Header, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session
from src.shared.activity.activity import ActivityLevel, ActivityLogger
from src.shared.activity.dependencies import get_activity_logger
from src.shared.validators.text import sanitize

from .constants import (
    ALLOWED_COUNTRIES,
    FAILURE_MESSAGES,
    MAX_AGE,
    MAX_MESSAGE_LENGTH,
    MAX_NAME_LENGTH,
    MIN_AGE,
    MIN_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    PASSWORD,
    SUCCESS_MESSAGES,
)
from .exceptions import EmailAlreadyExists, InvalidAjaxRequest, SubmissionSaveFailed
from .schemas import (
    CountryOption,
    FieldCheckRequest,
    FieldCheckResponse,
    FormOptionsResponse,
    FormRulesResponse,
    FormSubmissionRequest,
    SubmissionResponse,
)
from .service import IntakeService
from .validator import validate_submission

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/form", tags=["Form Intake"])


async def require_ajax_request(x_requested_with: str | None = Header(None)) -> None:
    """Only accept requests sent by the form's live validation script."""
    if not x_requested_with or x_requested_with.lower() != "xmlhttprequest":
        raise InvalidAjaxRequest()


@router.get("/options", response_model=FormOptionsResponse)
async def get_form_options():
    """Get the country list and field limits used to render the form."""
    return FormOptionsResponse(
        countries=[CountryOption(code=code, name=name) for code, name in ALLOWED_COUNTRIES.items()],
        rules=FormRulesResponse(
            min_name_length=MIN_NAME_LENGTH,
            max_name_length=MAX_NAME_LENGTH,
            min_password_length=MIN_PASSWORD_LENGTH,
            min_age=MIN_AGE,
            max_age=MAX_AGE,
            max_message_length=MAX_MESSAGE_LENGTH,
        ),
    )


@router.post("/validate", response_model=FieldCheckResponse, dependencies=[Depends(require_ajax_request)])
async def validate_field(data: FieldCheckRequest, session: AsyncSession = Depends(get_db_session)):
    """Validate a single field for real-time feedback.

    `allData` carries the rest of the form so cross-field rules (password
    confirmation) have context. Unknown fields return `outcome=unknown_field`.
    """
    result = await IntakeService.check_field(session, data.field, data.value, data.all_data)
    return FieldCheckResponse(
        field=result.field,
        valid=result.valid,
        outcome=result.outcome,
        message=result.message,
    )


@router.post("/submit", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
async def submit_form(
    data: FormSubmissionRequest,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db_session),
    activity: ActivityLogger = Depends(get_activity_logger),
):
    """Validate and store a full form submission.

    - 201: stored, returns the sanitized record
    - 422: validation failed, returns one message per invalid field
    - 409: email already submitted
    - 500: validation passed but the record could not be stored
    """
    form_data = data.form_data()
    outcome = validate_submission(form_data)

    if not outcome.valid:
        await activity.log("Form validation failed", sanitize(form_data["email"]) or "unknown", ActivityLevel.WARNING)
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        return SubmissionResponse(
            success=False,
            message=FAILURE_MESSAGES["validation_failed"],
            errors=outcome.errors,
        )

    email = outcome.data["email"]
    ip_address = request.client.host if request.client else None

    try:
        submission = await IntakeService.save_submission(session, outcome.data, str(form_data[PASSWORD]), ip_address)
        await session.commit()
    except EmailAlreadyExists:
        await activity.log("Form submitted with an existing email", email, ActivityLevel.WARNING)
        raise
    except SubmissionSaveFailed:
        await activity.log("Form data could not be saved", email, ActivityLevel.ERROR)
        raise
    except SQLAlchemyError as e:
        logger.error(f"Failed to commit submission for {email}: {e}")
        await activity.log("Form data could not be saved", email, ActivityLevel.ERROR)
        raise SubmissionSaveFailed() from e

    await activity.log("Form submitted successfully", email)
    return SubmissionResponse(
        success=True,
        message=SUCCESS_MESSAGES["data_saved"],
        data=outcome.data,
        submission_id=submission.id,
    )
