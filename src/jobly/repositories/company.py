"""Company repository: CRUD and filtered search over the companies table."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from jobly.database import run_query
from jobly.errors import BadRequestError, DuplicateEntityError, NotFoundError
from jobly.utils.sql import sql_for_company_filter, sql_for_partial_update

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


class CompanyRepository:
    """
    Data access for companies.

    Records are plain dicts keyed by the API field names
    (``handle, name, description, numEmployees, logoUrl``).
    """

    # API field name -> column name, for fields whose names differ
    JS_TO_SQL = {
        "numEmployees": "num_employees",
        "logoUrl": "logo_url",
    }

    def __init__(self, db: Session) -> None:
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a company and return the stored record.

        Args:
            data: ``{handle, name, description, numEmployees, logoUrl}``

        Raises:
            DuplicateEntityError: If a company with the same handle exists
        """
        handle = data["handle"]
        duplicate = run_query(
            self.db,
            "SELECT handle FROM companies WHERE handle = $1",
            [handle],
        )
        if duplicate:
            raise DuplicateEntityError(f"Duplicate company: {handle}")

        rows = run_query(
            self.db,
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}""",
            [
                handle,
                data["name"],
                data["description"],
                data.get("numEmployees"),
                data.get("logoUrl"),
            ],
        )
        self.db.commit()
        logger.info(f"Created company {handle}")
        return rows[0]

    def list(self) -> list[dict[str, Any]]:
        """Return every company ordered by name."""
        return run_query(
            self.db,
            f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                ORDER BY name""",
        )

    def get(self, handle: str) -> dict[str, Any]:
        """
        Return the company with the given handle.

        Raises:
            NotFoundError: If no company matches
        """
        rows = run_query(
            self.db,
            f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                WHERE handle = $1""",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        return rows[0]

    def update(self, handle: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Partially update a company; only the supplied fields change.

        Args:
            handle: Company to update
            data: Any of ``{name, description, numEmployees, logoUrl}``

        Raises:
            BadRequestError: If ``data`` is empty or tries to change the handle
            NotFoundError: If no company matches
        """
        if "handle" in data:
            raise BadRequestError("Cannot change a company's handle")

        update = sql_for_partial_update(data, self.JS_TO_SQL)
        handle_idx = len(update.values) + 1

        rows = run_query(
            self.db,
            f"""UPDATE companies
                SET {update.set_cols}
                WHERE handle = ${handle_idx}
                RETURNING {COMPANY_COLUMNS}""",
            [*update.values, handle],
        )
        if not rows:
            self.db.rollback()
            raise NotFoundError(f"No company: {handle}")

        self.db.commit()
        logger.info(f"Updated company {handle}: {', '.join(data)}")
        return rows[0]

    def remove(self, handle: str) -> None:
        """
        Delete a company (its jobs cascade).

        Raises:
            NotFoundError: If no company matches
        """
        rows = run_query(
            self.db,
            "DELETE FROM companies WHERE handle = $1 RETURNING handle",
            [handle],
        )
        if not rows:
            self.db.rollback()
            raise NotFoundError(f"No company: {handle}")

        self.db.commit()
        logger.info(f"Removed company {handle}")

    def filter(self, search_data: dict[str, Any]) -> list[dict[str, Any]]:
        """
        Search companies by any of ``{minEmployees, maxEmployees, nameLike}``.

        Raises:
            BadRequestError: If the filter is empty, has an unknown key, or
                ``maxEmployees`` is below ``minEmployees``
            NotFoundError: If nothing matches
        """
        min_employees = search_data.get("minEmployees")
        max_employees = search_data.get("maxEmployees")
        if min_employees is not None and max_employees is not None:
            try:
                inverted = int(max_employees) < int(min_employees)
            except (TypeError, ValueError) as exc:
                raise BadRequestError("Employee bounds must be integers") from exc
            if inverted:
                raise BadRequestError("maxEmployees must be greater than or equal to minEmployees")

        query = sql_for_company_filter(search_data)
        rows = run_query(
            self.db,
            f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                WHERE {query.where}
                ORDER BY name""",
            query.values,
        )
        if not rows:
            raise NotFoundError(f"No companies found with search criteria: {search_data}")
        return rows
