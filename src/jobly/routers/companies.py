"""Companies API router - create, list/search, detail, update and delete endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.deps import require_admin
from jobly.errors import NotFoundError
from jobly.repositories.company import CompanyRepository
from jobly.repositories.job import JobRepository
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyFilter,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)

router = APIRouter(prefix="/companies", tags=["Companies"])


def company_filters(request: Request) -> dict[str, Any]:
    """
    Validate the query string as company search filters.

    Returns:
        ``{nameLike, minEmployees, maxEmployees}`` restricted to the supplied
        keys; empty when the query string is empty

    Raises:
        RequestValidationError: On unknown keys or malformed values
    """
    try:
        filters = CompanyFilter.model_validate(dict(request.query_params))
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc
    return filters.model_dump(by_alias=True, exclude_none=True)


@router.post(
    "",
    status_code=201,
    response_model=CompanyResponse,
    dependencies=[Depends(require_admin)],
)
def create_company(payload: CompanyCreate, db: Session = Depends(get_db)) -> dict:
    """
    Create a company.

    Authorization required: admin
    """
    company = CompanyRepository(db).create(payload.model_dump(mode="json", by_alias=True))
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    filters: dict[str, Any] = Depends(company_filters),
    db: Session = Depends(get_db),
) -> dict:
    """
    List companies ordered by name, optionally filtered.

    Supported query parameters: ``minEmployees``, ``maxEmployees`` and
    ``nameLike`` (case-insensitive partial match on name).

    Raises:
        HTTPException 404: If a filter matches nothing
    """
    repo = CompanyRepository(db)
    if not filters:
        return {"companies": repo.list()}
    return {"companies": repo.filter(filters)}


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str, db: Session = Depends(get_db)) -> dict:
    """
    Get a company along with its jobs (ordered by title).

    Raises:
        HTTPException 404: If the company is not found
    """
    company = CompanyRepository(db).get(handle)
    try:
        jobs = JobRepository(db).jobs_for_company(handle)
    except NotFoundError:
        jobs = []
    return {"company": {**company, "jobs": jobs}}


@router.patch(
    "/{handle}",
    response_model=CompanyResponse,
    dependencies=[Depends(require_admin)],
)
def update_company(handle: str, payload: CompanyUpdate, db: Session = Depends(get_db)) -> dict:
    """
    Partially update a company; the handle cannot change.

    Authorization required: admin
    """
    data = payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
    company = CompanyRepository(db).update(handle, data)
    return {"company": company}


@router.delete("/{handle}", dependencies=[Depends(require_admin)])
def delete_company(handle: str, db: Session = Depends(get_db)) -> dict:
    """
    Delete a company and its jobs.

    Authorization required: admin
    """
    CompanyRepository(db).remove(handle)
    return {"deleted": handle}
