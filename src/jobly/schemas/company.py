"""Company Pydantic schemas."""

from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from jobly.schemas.job import JobSummary
from jobly.utils.slug import create_slug

HANDLE_MAX_LENGTH = 25

_http_url = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    # Validate only; the caller's string is stored as given.
    try:
        _http_url.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"not a valid URL: {value}") from exc
    return value


LogoUrl = Annotated[str, AfterValidator(_check_http_url)]


class CompanyBase(BaseModel):
    """Base company schema with common fields (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1)
    description: str
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: LogoUrl | None = None


class CompanyCreate(CompanyBase):
    """Schema for creating a new company; the handle defaults to a slug of the name."""

    model_config = ConfigDict(extra="forbid")

    handle: str | None = Field(default=None, min_length=1, max_length=HANDLE_MAX_LENGTH)

    @model_validator(mode="after")
    def default_handle(self) -> "CompanyCreate":
        if self.handle is None:
            self.handle = create_slug(self.name, max_length=HANDLE_MAX_LENGTH)
        if not self.handle:
            raise ValueError("handle could not be derived from name")
        return self


class CompanyUpdate(BaseModel):
    """Schema for a partial company update; the handle is not updatable."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: LogoUrl | None = None

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, value: str | None) -> str:
        """name and description may be omitted but not cleared."""
        if value is None:
            raise ValueError("may not be null")
        return value


class CompanyFilter(BaseModel):
    """Query-string filters for company search."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    name_like: str | None = Field(default=None, min_length=1)
    min_employees: int | None = Field(default=None, ge=0)
    max_employees: int | None = Field(default=None, ge=0)


class Company(BaseModel):
    """Complete company record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyDetail(Company):
    """Company record with its jobs."""

    jobs: list[JobSummary] = []


class CompanyResponse(BaseModel):
    company: Company


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: list[Company]
