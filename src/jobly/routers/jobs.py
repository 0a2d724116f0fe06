"""Jobs API router - create, list/search, detail, update and delete endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.deps import require_admin
from jobly.repositories.job import JobRepository
from jobly.schemas.job import (
    JobCreate,
    JobDeletedResponse,
    JobFilter,
    JobListResponse,
    JobResponse,
    JobUpdate,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def job_filters(request: Request) -> dict[str, Any]:
    """
    Validate the query string as job search filters.

    ``hasEquity`` arrives as ``"true"``/``"false"`` and leaves as a bool.

    Raises:
        RequestValidationError: On unknown keys or malformed values
    """
    try:
        filters = JobFilter.model_validate(dict(request.query_params))
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc
    return filters.model_dump(by_alias=True, exclude_none=True)


@router.post(
    "",
    status_code=201,
    response_model=JobResponse,
    dependencies=[Depends(require_admin)],
)
def create_job(payload: JobCreate, db: Session = Depends(get_db)) -> dict:
    """
    Create a job for an existing company.

    Authorization required: admin
    """
    job = JobRepository(db).create(payload.model_dump(by_alias=True))
    return {"job": job}


@router.get("", response_model=JobListResponse)
def list_jobs(
    filters: dict[str, Any] = Depends(job_filters),
    db: Session = Depends(get_db),
) -> dict:
    """
    List jobs, optionally filtered.

    Supported query parameters: ``title`` (case-insensitive partial match),
    ``minSalary`` and ``hasEquity`` (``true`` keeps only jobs with equity > 0;
    ``false`` applies no equity filter).

    Raises:
        HTTPException 400: If the only filter is ``hasEquity=false``
        HTTPException 404: If a filter matches nothing
    """
    repo = JobRepository(db)
    if not filters:
        return {"jobs": repo.list()}
    return {"jobs": repo.filter(filters)}


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, db: Session = Depends(get_db)) -> dict:
    """
    Get a job by id.

    Raises:
        HTTPException 404: If the job is not found
    """
    return {"job": JobRepository(db).get(job_id)}


@router.patch(
    "/{job_id}",
    response_model=JobResponse,
    dependencies=[Depends(require_admin)],
)
def update_job(job_id: int, payload: JobUpdate, db: Session = Depends(get_db)) -> dict:
    """
    Partially update a job; its id and company cannot change.

    Authorization required: admin
    """
    data = payload.model_dump(by_alias=True, exclude_unset=True)
    return {"job": JobRepository(db).update(job_id, data)}


@router.delete(
    "/{job_id}",
    response_model=JobDeletedResponse,
    dependencies=[Depends(require_admin)],
)
def delete_job(job_id: int, db: Session = Depends(get_db)) -> dict:
    """
    Delete a job.

    Authorization required: admin
    """
    return {"deleted": JobRepository(db).remove(job_id)}
