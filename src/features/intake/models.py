"""Form submission models."""

from pwdlib import PasswordHash
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.database.base import Base, TimestampMixin
from src.shared.validators.text import MAX_ESCAPED_CHAR_LENGTH

from .constants import MAX_EMAIL_LENGTH, MAX_EMAIL_LOCAL_LENGTH, MAX_NAME_LENGTH

pwd_hasher = PasswordHash.recommended()


class Submission(Base, TimestampMixin):
    """A validated, sanitized form submission.

    Text columns hold the sanitized (trimmed, HTML-escaped) values. The raw
    password is never stored, only its Argon2 hash. String columns are sized for
    the escaped form of the longest value that passes validation.
    """

    __tablename__ = "submissions"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Contact details
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH * MAX_ESCAPED_CHAR_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH + MAX_EMAIL_LOCAL_LENGTH * (MAX_ESCAPED_CHAR_LENGTH - 1)),
        nullable=False,
        unique=True,
        index=True,
    )
    # Any text around the ten digits is accepted
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Authentication
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Profile
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    country: Mapped[str] = mapped_column(String(10), nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Request metadata
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)

    def verify_password(self, plain_password: str) -> bool:
        """Verify a password against the stored Argon2 hash."""
        return pwd_hasher.verify(plain_password, self.password_hash)

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using Argon2.

        Salt is automatically generated and embedded in the returned hash.
        """
        return pwd_hasher.hash(password)
