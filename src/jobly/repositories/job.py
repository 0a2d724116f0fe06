"""Job repository: CRUD, per-company listing and filtered search over jobs."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from jobly.database import run_query
from jobly.errors import BadRequestError, DuplicateEntityError, NotFoundError
from jobly.utils.sql import sql_for_job_filter, sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'
LISTING_COLUMNS = (
    'j.id, j.title, j.salary, j.equity, j.company_handle AS "companyHandle", c.name AS "companyName"'
)


class JobRepository:
    """
    Data access for jobs.

    Records are plain dicts keyed by the API field names
    (``id, title, salary, equity, companyHandle``).
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a job and return the stored record, including its new id.

        Args:
            data: ``{title, salary, equity, companyHandle}``

        Raises:
            DuplicateEntityError: If the company already has a job with this title
        """
        company_handle = data["companyHandle"]
        title = data["title"]
        duplicate = run_query(
            self.db,
            "SELECT id FROM jobs WHERE company_handle = $1 AND title = $2",
            [company_handle, title],
        )
        if duplicate:
            raise DuplicateEntityError(f"Duplicate job: {title} at {company_handle}")

        rows = run_query(
            self.db,
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}""",
            [title, data.get("salary"), data.get("equity"), company_handle],
        )
        self.db.commit()
        job = rows[0]
        logger.info(f"Created job {job['id']}: {title} at {company_handle}")
        return job

    def list(self) -> list[dict[str, Any]]:
        """Return every job, with its company name, ordered by company handle then title."""
        return run_query(
            self.db,
            f"""SELECT {LISTING_COLUMNS}
                FROM jobs AS j
                JOIN companies AS c ON j.company_handle = c.handle
                ORDER BY j.company_handle, j.title""",
        )

    def get(self, job_id: int) -> dict[str, Any]:
        """
        Return the job with the given id.

        Raises:
            NotFoundError: If no job matches
        """
        rows = run_query(
            self.db,
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                WHERE id = $1""",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job with ID: {job_id}")
        return rows[0]

    def jobs_for_company(self, handle: str) -> list[dict[str, Any]]:
        """
        Return a company's jobs ordered by title.

        A company without jobs and a missing company look the same here.

        Raises:
            NotFoundError: If there are no jobs for ``handle``
        """
        rows = run_query(
            self.db,
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = $1
               ORDER BY title""",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No jobs at: {handle}")
        return rows

    def update(self, job_id: int, data: dict[str, Any]) -> dict[str, Any]:
        """
        Partially update a job; only the supplied fields change.

        Args:
            job_id: Job to update
            data: Any of ``{title, salary, equity}``

        Raises:
            BadRequestError: If ``data`` is empty or touches ``id``/``companyHandle``
            NotFoundError: If no job matches
        """
        if "id" in data:
            raise BadRequestError("You cannot change the ID of a job.")
        if "companyHandle" in data:
            raise BadRequestError("You cannot change the company of a job.")

        update = sql_for_partial_update(data, {})
        id_idx = len(update.values) + 1

        rows = run_query(
            self.db,
            f"""UPDATE jobs
                SET {update.set_cols}
                WHERE id = ${id_idx}
                RETURNING {JOB_COLUMNS}""",
            [*update.values, job_id],
        )
        if not rows:
            self.db.rollback()
            raise NotFoundError(f"No job with ID: {job_id}")

        self.db.commit()
        logger.info(f"Updated job {job_id}: {', '.join(data)}")
        return rows[0]

    def remove(self, job_id: int) -> int:
        """
        Delete a job and return its id.

        Raises:
            NotFoundError: If no job matches
        """
        rows = run_query(
            self.db,
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            [job_id],
        )
        if not rows:
            self.db.rollback()
            raise NotFoundError(f"No job with ID: {job_id}")

        self.db.commit()
        logger.info(f"Removed job {job_id}")
        return rows[0]["id"]

    def filter(self, search_data: dict[str, Any]) -> list[dict[str, Any]]:
        """
        Search jobs by any of ``{title, minSalary, hasEquity}``.

        Results carry ``companyName`` and are ordered by it.

        Raises:
            BadRequestError: If the filter is empty, has an unknown key or
                yields no predicate (``hasEquity`` false on its own)
            NotFoundError: If nothing matches
        """
        query = sql_for_job_filter(search_data)
        rows = run_query(
            self.db,
            f"""SELECT {LISTING_COLUMNS}
                FROM jobs AS j
                JOIN companies AS c ON j.company_handle = c.handle
                WHERE {query.where}
                ORDER BY c.name, j.title""",
            query.values,
        )
        if not rows:
            raise NotFoundError(f"No jobs found with search criteria: {search_data}")
        return rows
