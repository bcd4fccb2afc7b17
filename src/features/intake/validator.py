"""Form validation engine.

Each form field maps to an ordered tuple of rules. A field's rules run in order
and stop at the first failure, which records exactly one message for that field
(or for the rule's target field, as the password confirmation does).

A ``FormValidator`` is built fresh for every validation pass: errors accumulate
on the instance and are never cleared, so instances must not be reused across
requests.
"""

import dataclasses
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from email_validator import EmailNotValidError, validate_email

from src.shared.validators.password import is_strong_password
from src.shared.validators.text import sanitize

from .constants import (
    AGE,
    ALLOWED_COUNTRIES,
    CONFIRM_PASSWORD,
    COUNTRY,
    EMAIL,
    ERROR_MESSAGES,
    FAILURE_MESSAGES,
    FORM_FIELDS,
    MAX_AGE,
    MAX_MESSAGE_LENGTH,
    MAX_NAME_LENGTH,
    MESSAGE,
    MIN_AGE,
    MIN_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    NAME,
    PASSWORD,
    PHONE,
    SECRET_FIELDS,
    SUCCESS_MESSAGES,
)

_NAME_PATTERN = re.compile(r"[A-Za-z\s\-']+")
_PHONE_PATTERN = re.compile(r"\d{3}-\d{3}-\d{4}|\d{10}", re.ASCII)
_NON_DIGITS = re.compile(r"[^0-9]")
_NUMERIC_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class UnknownField(KeyError):
    """Raised when a validator is requested for a field outside the form."""


class Rule(NamedTuple):
    """A single check: predicate over (value, form data) plus its message key."""

    check: Callable[[str, Mapping[str, str]], bool]
    error: str
    target: str | None = None


class FieldRules(NamedTuple):
    """Ordered rules for one field.

    ``optional`` fields are valid when empty after trimming. ``trim`` controls
    whether the value is stripped before the rules see it.
    """

    rules: tuple[Rule, ...]
    optional: bool = False
    trim: bool = True


def _is_valid_email(value: str) -> bool:
    # ASCII only; email-validator converts internationalized domains to IDNA
    if not value.isascii():
        return False
    try:
        validate_email(value, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError:
        return False
    return True


def _is_valid_phone(value: str) -> bool:
    if _PHONE_PATTERN.fullmatch(value):
        return True
    return len(_NON_DIGITS.sub("", value)) == 10


def _is_numeric(value: str) -> bool:
    return _NUMERIC_PATTERN.fullmatch(value.strip()) is not None


def _age_in_range(value: str) -> bool:
    return MIN_AGE <= float(value.strip()) <= MAX_AGE


FIELD_RULES: Mapping[str, FieldRules] = {
    NAME: FieldRules(
        (
            Rule(lambda v, _: bool(v), "name_required"),
            Rule(lambda v, _: len(v) >= MIN_NAME_LENGTH, "name_too_short"),
            Rule(lambda v, _: len(v) <= MAX_NAME_LENGTH, "name_too_long"),
            Rule(lambda v, _: _NAME_PATTERN.fullmatch(v) is not None, "name_invalid_characters"),
        )
    ),
    EMAIL: FieldRules(
        (
            Rule(lambda v, _: bool(v), "email_required"),
            Rule(lambda v, _: _is_valid_email(v), "email_invalid"),
        )
    ),
    PHONE: FieldRules(
        (Rule(lambda v, _: _is_valid_phone(v), "phone_invalid"),),
        optional=True,
    ),
    PASSWORD: FieldRules(
        (
            Rule(lambda v, _: bool(v), "password_required"),
            Rule(lambda v, _: is_strong_password(v, MIN_PASSWORD_LENGTH), "password_weak"),
            Rule(lambda v, data: v == data[CONFIRM_PASSWORD], "password_mismatch", target=CONFIRM_PASSWORD),
        ),
        trim=False,
    ),
    CONFIRM_PASSWORD: FieldRules(
        (
            Rule(lambda v, _: bool(v), "confirm_password_required"),
            Rule(lambda v, data: v == data[PASSWORD], "password_mismatch"),
        ),
        trim=False,
    ),
    AGE: FieldRules(
        (
            Rule(lambda v, _: bool(v), "age_required"),
            # Non-numeric input shares the out-of-range message
            Rule(lambda v, _: _is_numeric(v), "age_invalid"),
            Rule(lambda v, _: _age_in_range(v), "age_invalid"),
        ),
        trim=False,
    ),
    COUNTRY: FieldRules(
        (
            Rule(lambda v, _: bool(v), "country_required"),
            Rule(lambda v, _: v in ALLOWED_COUNTRIES, "country_invalid"),
        ),
        trim=False,
    ),
    MESSAGE: FieldRules(
        (Rule(lambda v, _: len(v) <= MAX_MESSAGE_LENGTH, "message_too_long"),),
        optional=True,
    ),
}

# confirmPassword is checked through the password rules on a full pass
VALIDATION_ORDER = (NAME, EMAIL, PHONE, PASSWORD, AGE, COUNTRY, MESSAGE)


def normalize_form_data(data: Mapping[str, object]) -> dict[str, str]:
    """Project raw input onto the fixed field set.

    Missing fields and ``None`` become ``""``, other values are converted with
    ``str()`` and keys outside the form are dropped.
    """
    normalized = {}
    for name in FORM_FIELDS:
        value = data.get(name)
        normalized[name] = "" if value is None else str(value)
    return normalized


class FormValidator:
    """Runs the field rules against one set of submitted values."""

    def __init__(self, data: Mapping[str, object] | None = None):
        self._data = normalize_form_data(data or {})
        self._errors: dict[str, str] = {}

    @property
    def errors(self) -> dict[str, str]:
        """Copy of the field -> message mapping."""
        return dict(self._errors)

    def validate_field(self, name: str) -> bool:
        """Run one field's rules, recording the first failure.

        Raises:
            UnknownField: If ``name`` has no rules

        """
        try:
            field_rules = FIELD_RULES[name]
        except KeyError:
            raise UnknownField(name) from None

        value = self._data[name]
        if field_rules.trim:
            value = value.strip()

        if field_rules.optional and not value.strip():
            return True

        for rule in field_rules.rules:
            if not rule.check(value, self._data):
                self._add_error(rule.target or name, ERROR_MESSAGES[rule.error])
                return False
        return True

    def validate_all(self) -> bool:
        """Validate every field; True iff no error was recorded."""
        for name in VALIDATION_ORDER:
            self.validate_field(name)
        return not self._errors

    def validate_name(self) -> bool:
        return self.validate_field(NAME)

    def validate_email(self) -> bool:
        return self.validate_field(EMAIL)

    def validate_phone(self) -> bool:
        return self.validate_field(PHONE)

    def validate_password(self) -> bool:
        """Validate presence, strength, then match against confirmPassword.

        A mismatch is recorded under ``confirmPassword``.
        """
        return self.validate_field(PASSWORD)

    def validate_confirm_password(self) -> bool:
        return self.validate_field(CONFIRM_PASSWORD)

    def validate_age(self) -> bool:
        return self.validate_field(AGE)

    def validate_country(self) -> bool:
        return self.validate_field(COUNTRY)

    def validate_message(self) -> bool:
        return self.validate_field(MESSAGE)

    def _add_error(self, name: str, message: str) -> None:
        self._errors[name] = message

    def get_error(self, name: str) -> str | None:
        return self._errors.get(name)

    def has_error(self, name: str) -> bool:
        return name in self._errors

    def get_sanitized_data(self) -> dict[str, str]:
        """Trimmed, HTML-escaped copy of the input without password fields."""
        return {name: sanitize(value) for name, value in self._data.items() if name not in SECRET_FIELDS}

    @staticmethod
    def sanitize(value: object) -> str:
        return sanitize(value)


class FieldCheckOutcome(StrEnum):
    """Result of checking a single field."""

    VALID = "valid"
    INVALID = "invalid"
    UNKNOWN_FIELD = "unknown_field"


@dataclass(frozen=True)
class FieldCheckResult:
    field: str
    outcome: FieldCheckOutcome
    message: str

    @property
    def valid(self) -> bool:
        return self.outcome == FieldCheckOutcome.VALID


@dataclass(frozen=True)
class SubmissionValidation:
    valid: bool
    errors: dict[str, str] = dataclasses.field(default_factory=dict)
    data: dict[str, str] = dataclasses.field(default_factory=dict)


def check_field(name: str, data: Mapping[str, object]) -> FieldCheckResult:
    """Validate one field using the other submitted values as context.

    Args:
        name: Field to validate
        data: All submitted values, including ``name``'s current value

    Returns:
        FieldCheckResult; ``UNKNOWN_FIELD`` when ``name`` is not a form field

    """
    if name not in FIELD_RULES:
        return FieldCheckResult(name, FieldCheckOutcome.UNKNOWN_FIELD, FAILURE_MESSAGES["unknown_field"])

    validator = FormValidator(data)
    if validator.validate_field(name):
        return FieldCheckResult(name, FieldCheckOutcome.VALID, SUCCESS_MESSAGES["field_valid"])

    # A password mismatch is recorded under confirmPassword
    message = validator.get_error(name) or next(iter(validator.errors.values()))
    return FieldCheckResult(name, FieldCheckOutcome.INVALID, message)


def validate_submission(data: Mapping[str, object]) -> SubmissionValidation:
    """Validate a full submission.

    The sanitized record is only returned when every field passes.
    """
    validator = FormValidator(data)
    if validator.validate_all():
        return SubmissionValidation(valid=True, data=validator.get_sanitized_data())
    return SubmissionValidation(valid=False, errors=validator.errors)
