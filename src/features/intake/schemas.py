"""Form intake schemas (DTOs)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .validator import FieldCheckOutcome

# Raw form values arrive as text, but JSON clients may send numbers (e.g. age)
FormValue = str | int | float | None


# Request schemas
class FormSubmissionRequest(BaseModel):
    """Full form submission.

    Every field is optional at the schema level; presence and format are
    checked by the form validator so that all errors are reported together.
    """

    name: FormValue = ""
    email: FormValue = ""
    phone: FormValue = ""
    password: FormValue = ""
    confirm_password: FormValue = Field("", alias="confirmPassword")
    age: FormValue = ""
    country: FormValue = ""
    message: FormValue = ""

    model_config = ConfigDict(populate_by_name=True)

    def form_data(self) -> dict[str, FormValue]:
        """Values keyed by form field name."""
        return self.model_dump(by_alias=True)


class FieldCheckRequest(BaseModel):
    """Live validation request for a single field."""

    field: str = Field(..., min_length=1)
    value: FormValue
    all_data: dict[str, FormValue] = Field(default_factory=dict, alias="allData")

    model_config = ConfigDict(populate_by_name=True)


# Response schemas
class FieldCheckResponse(BaseModel):
    """Live validation result for a single field."""

    field: str
    valid: bool
    outcome: FieldCheckOutcome
    message: str


class SubmissionResponse(BaseModel):
    """Full submission result."""

    success: bool
    message: str
    errors: dict[str, str] = Field(default_factory=dict)
    data: dict[str, str] = Field(default_factory=dict)
    submission_id: int | None = None


class CountryOption(BaseModel):
    """Selectable country."""

    code: str
    name: str


class FormRulesResponse(BaseModel):
    """Limits the form enforces."""

    min_name_length: int
    max_name_length: int
    min_password_length: int
    min_age: int
    max_age: int
    max_message_length: int


class FormOptionsResponse(BaseModel):
    """Options the presentation layer needs to render the form."""

    countries: list[CountryOption]
    rules: FormRulesResponse


class SubmissionDetailResponse(BaseModel):
    """Stored submission (admin view, never includes the password hash)."""

    id: int
    name: str
    email: str
    phone: str | None = None
    age: int
    country: str
    message: str | None = None
    ip_address: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class SubmissionListResponse(BaseModel):
    """Paginated list of stored submissions."""

    submissions: list[SubmissionDetailResponse]
    total: int
    page: int
    page_size: int
