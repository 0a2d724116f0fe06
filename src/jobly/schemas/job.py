"""Job-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class JobCreate(BaseModel):
    """Schema for creating a new job."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """Schema for a partial job update; id and company are not updatable."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may not be null")
        return value


class JobFilter(BaseModel):
    """
    Query-string filters for job search.

    ``has_equity`` is decoded from ``"true"``/``"false"`` here: ``True``
    requires equity > 0, while ``False`` and ``None`` apply no equity filter.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    min_salary: int | None = Field(default=None, ge=0)
    has_equity: bool | None = None

    @field_validator("has_equity", mode="before")
    @classmethod
    def parse_has_equity(cls, value):
        """Only the literals true and false are accepted."""
        if value is None or isinstance(value, bool):
            return value
        if value == "true":
            return True
        if value == "false":
            return False
        raise ValueError("hasEquity must be 'true' or 'false'")


class JobSummary(BaseModel):
    """Job as listed under its company."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    salary: int | None = None
    equity: float | None = None


class Job(JobSummary):
    """Complete job record."""

    company_handle: str


class JobListing(Job):
    """Job record as listed or searched, with its company name."""

    company_name: str


class JobResponse(BaseModel):
    job: Job


class JobListResponse(BaseModel):
    jobs: list[JobListing]


class JobDeletedResponse(BaseModel):
    deleted: int
