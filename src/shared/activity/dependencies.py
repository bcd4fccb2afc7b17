"""Activity logging dependencies."""

from src.database.client import get_session_factory

from .activity import ActivityLogger


def get_activity_logger() -> ActivityLogger:
    """Get an activity logger bound to the application session factory."""
    return ActivityLogger(get_session_factory())
