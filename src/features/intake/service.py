"""Form intake service layer."""

import logging
from collections.abc import Mapping

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.pagination.pagination import PaginationParams
from src.shared.validators.text import sanitize

from .constants import EMAIL, ERROR_MESSAGES
from .exceptions import EmailAlreadyExists, SubmissionSaveFailed
from .models import Submission
from .validator import FieldCheckOutcome, FieldCheckResult, check_field

logger = logging.getLogger(__name__)


class IntakeService:
    """Service for form intake operations."""

    @staticmethod
    async def check_field(
        session: AsyncSession,
        field: str,
        value: object,
        all_data: Mapping[str, object],
    ) -> FieldCheckResult:
        """Validate one field for live feedback.

        The submitted value overrides the same key in ``all_data``. A valid
        email is additionally checked against stored submissions; if that lookup
        fails the static result stands.

        Args:
            session: Database session
            field: Field being edited
            value: Its current value
            all_data: Every other value on the form

        Returns:
            FieldCheckResult for the field

        """
        result = check_field(field, {**all_data, field: value})

        if field == EMAIL and result.valid:
            try:
                if await IntakeService.email_exists(session, sanitize(value)):
                    return FieldCheckResult(field, FieldCheckOutcome.INVALID, ERROR_MESSAGES["email_exists"])
            except SQLAlchemyError as e:
                logger.warning(f"Email uniqueness check failed, using static validation only: {e}")

        return result

    @staticmethod
    async def email_exists(session: AsyncSession, email: str) -> bool:
        """Check whether a submission with this email is already stored."""
        stmt = select(func.count()).select_from(Submission).where(Submission.email == email)
        result = await session.execute(stmt)
        return result.scalar_one() > 0

    @staticmethod
    async def save_submission(
        session: AsyncSession,
        record: Mapping[str, str],
        password: str,
        ip_address: str | None = None,
    ) -> Submission:
        """Persist a validated submission.

        Args:
            session: Database session
            record: Sanitized form record (no password fields)
            password: Raw password, stored only as an Argon2 hash
            ip_address: Client IP address

        Returns:
            Created Submission object with its id assigned

        Raises:
            EmailAlreadyExists: If the email is already stored
            SubmissionSaveFailed: If the database rejects the write

        """
        if await IntakeService.email_exists(session, record["email"]):
            raise EmailAlreadyExists()

        submission = Submission(
            name=record["name"],
            email=record["email"],
            phone=record.get("phone") or None,
            password_hash=Submission.hash_password(password),
            age=int(float(record["age"])),
            country=record["country"],
            message=record.get("message") or None,
            ip_address=ip_address,
        )

        try:
            session.add(submission)
            await session.flush()
        except IntegrityError as e:
            # Another request stored the same email after the existence check
            logger.warning(f"Duplicate email rejected on insert: {record['email']}")
            await session.rollback()
            raise EmailAlreadyExists() from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to save submission for {record['email']}: {e}")
            await session.rollback()
            raise SubmissionSaveFailed() from e

        logger.info(f"Submission saved: {submission.id} ({submission.email})")
        return submission

    @staticmethod
    async def get_submission(session: AsyncSession, submission_id: int) -> Submission | None:
        """Get submission by ID."""
        stmt = select(Submission).where(Submission.id == submission_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def count_submissions(session: AsyncSession) -> int:
        """Get total number of stored submissions."""
        result = await session.execute(select(func.count()).select_from(Submission))
        return result.scalar_one()

    @staticmethod
    async def get_submissions(
        session: AsyncSession, pagination: PaginationParams
    ) -> tuple[list[Submission], int]:
        """Get paginated submissions, newest first.

        Args:
            session: Database session
            pagination: PaginationParams with page and page_size

        Returns:
            Tuple of (submissions, total_count)

        """
        total = await IntakeService.count_submissions(session)

        stmt = select(Submission).order_by(Submission.created_at.desc(), Submission.id.desc())
        if pagination.is_paginated:
            stmt = stmt.offset(pagination.skip).limit(pagination.limit)

        result = await session.execute(stmt)
        submissions = list(result.scalars().all())

        return submissions, total

    @staticmethod
    async def delete_submission(session: AsyncSession, submission_id: int) -> bool:
        """Delete submission by ID."""
        submission = await IntakeService.get_submission(session, submission_id)

        if submission:
            await session.delete(submission)
            logger.info(f"Submission deleted: {submission_id}")
            return True
        return False
