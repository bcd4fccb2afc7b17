"""Submission management router (admin only)."""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session
from src.features.intake.exceptions import SubmissionNotFound
from src.features.intake.schemas import SubmissionDetailResponse, SubmissionListResponse
from src.features.intake.service import IntakeService
from src.shared.pagination.pagination import PaginationParams

from .dependencies import require_admin

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/submissions", tags=["Submission Management"], dependencies=[Depends(require_admin)])


@router.get("", response_model=SubmissionListResponse)
async def list_submissions(
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db_session),
):
    """List stored submissions, newest first (admin only).

    Pagination is enabled by default:
    - `page`: Page number (1-indexed, default: 1)
    - `page_size`: Items per page (default: 50, max: 1000)
    """
    submissions, total = await IntakeService.get_submissions(session, pagination)
    return SubmissionListResponse(
        submissions=[SubmissionDetailResponse.model_validate(s) for s in submissions],
        total=total,
        page=pagination.page or 1,
        page_size=pagination.page_size or 50,
    )


@router.get("/{submission_id}", response_model=SubmissionDetailResponse)
async def get_submission(submission_id: int, session: AsyncSession = Depends(get_db_session)):
    """Get submission by ID (admin only)."""
    submission = await IntakeService.get_submission(session, submission_id)

    if not submission:
        raise SubmissionNotFound()

    return SubmissionDetailResponse.model_validate(submission)


@router.delete("/{submission_id}")
async def delete_submission(
    submission_id: int,
    session: AsyncSession = Depends(get_db_session),
    admin: dict[str, Any] = Depends(require_admin),
):
    """Delete submission (admin only)."""
    success = await IntakeService.delete_submission(session, submission_id)

    if not success:
        raise SubmissionNotFound()

    await session.commit()
    logger.info(f"Submission deleted by admin {admin.get('sub')}: {submission_id}")
    return {"message": "Submission deleted successfully"}
