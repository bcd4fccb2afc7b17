"""Activity logging for form submissions.

Entries are written in their own session so that a failing log write can never
affect the request's transaction. ``ActivityLogger.log`` does not raise.
"""

import logging
from contextvars import ContextVar
from datetime import UTC, datetime
from enum import StrEnum

from sqlalchemy import DateTime, Enum, Integer, String, Text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import Mapped, mapped_column

from src.database.base import Base

logger = logging.getLogger(__name__)

# ContextVars for the client of the current request
client_ip_ctx: ContextVar[str | None] = ContextVar("client_ip", default=None)
user_agent_ctx: ContextVar[str | None] = ContextVar("user_agent", default=None)


class ActivityLevel(StrEnum):
    """Activity severity levels."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ActivityLog(Base):
    """Activity log entry for monitoring form traffic."""

    __tablename__ = "activity_logs"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Entry details
    message: Mapped[str] = mapped_column(Text, nullable=False)
    identifier: Mapped[str | None] = mapped_column(String(255), nullable=True)
    level: Mapped[str] = mapped_column(
        Enum(ActivityLevel, native_enum=False, length=20),
        nullable=False,
        default=ActivityLevel.INFO.value,
        index=True,
    )

    # Client tracking
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        index=True,
    )


class ActivityLogger:
    """Appends activity entries using a dedicated session per entry."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def log(self, message: str, identifier: str = "", level: ActivityLevel = ActivityLevel.INFO) -> bool:
        """Write an activity entry.

        Args:
            message: What happened
            identifier: Who it happened to (usually the submitted email)
            level: Entry severity

        Returns:
            True if the entry was stored, False if writing failed

        """
        entry = ActivityLog(
            message=message,
            identifier=identifier,
            level=level.value,
            ip_address=client_ip_ctx.get(),
            user_agent=user_agent_ctx.get(),
        )

        try:
            async with self._session_factory() as session:
                session.add(entry)
                await session.commit()
        except Exception as e:
            logger.error(f"Failed to write activity log: {e}", exc_info=True)
            return False
        return True


def set_request_client(ip_address: str | None, user_agent: str | None) -> None:
    """Set the current client in the context for activity logging.

    Args:
        ip_address: Client IP address
        user_agent: Client User-Agent header

    """
    client_ip_ctx.set(ip_address)
    user_agent_ctx.set(user_agent)


def get_request_client() -> tuple[str | None, str | None]:
    """Get the current client (ip_address, user_agent) from context."""
    return client_ip_ctx.get(), user_agent_ctx.get()


def clear_request_client() -> None:
    """Clear the current client from context."""
    client_ip_ctx.set(None)
    user_agent_ctx.set(None)
