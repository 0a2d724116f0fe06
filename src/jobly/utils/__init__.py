"""Utility functions package."""

from jobly.utils.slug import create_slug
from jobly.utils.sql import (
    FilterQuery,
    PartialUpdate,
    sql_for_company_filter,
    sql_for_job_filter,
    sql_for_partial_update,
)

__all__ = [
    "create_slug",
    "FilterQuery",
    "PartialUpdate",
    "sql_for_company_filter",
    "sql_for_job_filter",
    "sql_for_partial_update",
]
