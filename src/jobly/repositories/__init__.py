"""Repositories package."""

from jobly.repositories.company import CompanyRepository
from jobly.repositories.job import JobRepository

__all__ = ["CompanyRepository", "JobRepository"]
