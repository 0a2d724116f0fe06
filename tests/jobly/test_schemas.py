"""Tests for Pydantic schemas."""

import pytest
from pydantic import ValidationError

from jobly.schemas.company import Company, CompanyCreate, CompanyFilter, CompanyUpdate
from jobly.schemas.job import JobCreate, JobFilter, JobListing, JobUpdate


class TestCompanySchemas:
    """Tests for company schemas."""

    def test_company_create_camel_case(self):
        """Test CompanyCreate accepts camelCase keys and dumps them back."""
        company = CompanyCreate.model_validate(
            {"handle": "acme", "name": "Acme", "description": "Anvils", "numEmployees": 5}
        )
        assert company.num_employees == 5
        assert company.model_dump(by_alias=True)["numEmployees"] == 5

    def test_company_create_derives_handle(self):
        """Test a missing handle is slugged from the name."""
        company = CompanyCreate(name="Acme Corporation", description="Anvils")
        assert company.handle == "acme-corporation"

    def test_company_create_derived_handle_fits(self):
        """Test a derived handle never exceeds 25 characters."""
        company = CompanyCreate(
            name="The Extremely Long Company Name Incorporated", description="x"
        )
        assert 0 < len(company.handle) <= 25

    def test_company_create_handle_too_long(self):
        """Test an explicit handle over 25 characters is rejected."""
        with pytest.raises(ValidationError):
            CompanyCreate(handle="h" * 26, name="Acme", description="Anvils")

    def test_company_create_rejects_unknown_fields(self):
        """Test extra fields are rejected."""
        with pytest.raises(ValidationError):
            CompanyCreate(name="Acme", description="Anvils", founded=1900)

    def test_company_update_rejects_handle(self):
        """Test the handle cannot appear in an update."""
        with pytest.raises(ValidationError):
            CompanyUpdate.model_validate({"handle": "new"})

    def test_company_update_exclude_unset(self):
        """Test only supplied fields (including explicit nulls) are dumped."""
        update = CompanyUpdate.model_validate({"logoUrl": None, "name": "New"})
        assert update.model_dump(by_alias=True, exclude_unset=True) == {
            "name": "New",
            "logoUrl": None,
        }

    @pytest.mark.parametrize("field", ["name", "description"])
    def test_company_update_rejects_null_required_field(self, field):
        """Test non-nullable fields may be omitted but not cleared."""
        with pytest.raises(ValidationError):
            CompanyUpdate.model_validate({field: None})

    def test_company_update_allows_null_employees(self):
        """Test nullable columns can be cleared."""
        update = CompanyUpdate.model_validate({"numEmployees": None})
        assert update.model_dump(by_alias=True, exclude_unset=True) == {"numEmployees": None}

    def test_logo_url_kept_as_given(self):
        """Test a valid URL is stored exactly as the caller wrote it."""
        company = CompanyCreate(name="Acme", description="Anvils", logo_url="http://acme.img")
        assert company.logo_url == "http://acme.img"
        assert company.model_dump(mode="json", by_alias=True)["logoUrl"] == "http://acme.img"

    @pytest.mark.parametrize("url", ["not-a-url", "ftp://acme.img/logo.png"])
    def test_logo_url_invalid(self, url):
        """Test non-HTTP URLs are rejected."""
        with pytest.raises(ValidationError):
            CompanyUpdate.model_validate({"logoUrl": url})

    def test_company_filter_from_query_strings(self):
        """Test query-string values are coerced to integers."""
        filters = CompanyFilter.model_validate({"minEmployees": "5", "nameLike": "net"})
        assert filters.model_dump(by_alias=True, exclude_none=True) == {
            "nameLike": "net",
            "minEmployees": 5,
        }

    def test_company_filter_unknown_key(self):
        """Test filters outside the allow-list are rejected."""
        with pytest.raises(ValidationError):
            CompanyFilter.model_validate({"color": "blue"})

    def test_company_serializes_camel_case(self):
        """Test the response record serializes with camelCase keys."""
        company = Company.model_validate(
            {"handle": "c1", "name": "C1", "description": "d", "numEmployees": 1, "logoUrl": None}
        )
        assert set(company.model_dump(by_alias=True)) == {
            "handle",
            "name",
            "description",
            "numEmployees",
            "logoUrl",
        }


class TestJobSchemas:
    """Tests for job schemas."""

    def test_job_create_valid(self):
        """Test JobCreate with camelCase input."""
        job = JobCreate.model_validate({"title": "Dev", "equity": 0, "companyHandle": "c1"})
        assert job.equity == 0
        assert job.salary is None
        assert job.company_handle == "c1"

    @pytest.mark.parametrize("equity", [-0.1, 1.01])
    def test_job_create_equity_range(self, equity):
        """Test equity must lie in [0, 1]."""
        with pytest.raises(ValidationError):
            JobCreate(title="Dev", equity=equity, company_handle="c1")

    @pytest.mark.parametrize("field", ["id", "companyHandle"])
    def test_job_update_rejects_identity(self, field):
        """Test identity fields cannot appear in an update."""
        with pytest.raises(ValidationError):
            JobUpdate.model_validate({field: "x"})

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", True), ("false", False), (True, True), (False, False)],
    )
    def test_job_filter_decodes_has_equity(self, raw, expected):
        """Test hasEquity query strings decode to a bool."""
        assert JobFilter.model_validate({"hasEquity": raw}).has_equity is expected

    @pytest.mark.parametrize("raw", ["yes", "1", "on", "True", "0"])
    def test_job_filter_rejects_loose_booleans(self, raw):
        """Test only the literals true and false decode."""
        with pytest.raises(ValidationError):
            JobFilter.model_validate({"hasEquity": raw})

    def test_job_update_rejects_null_title(self):
        """Test the title may be omitted but not cleared."""
        with pytest.raises(ValidationError):
            JobUpdate.model_validate({"title": None})

    def test_job_update_allows_null_salary_and_equity(self):
        """Test nullable columns can be cleared."""
        update = JobUpdate.model_validate({"salary": None, "equity": None})
        assert update.model_dump(exclude_unset=True) == {"salary": None, "equity": None}

    def test_job_filter_has_equity_unset(self):
        """Test a missing hasEquity stays None and is dropped from the dump."""
        filters = JobFilter.model_validate({"title": "dev"})
        assert filters.has_equity is None
        assert filters.model_dump(by_alias=True, exclude_none=True) == {"title": "dev"}

    def test_job_listing_requires_company_name(self):
        """Test listings carry the company name."""
        with pytest.raises(ValidationError):
            JobListing.model_validate({"id": 1, "title": "Dev", "companyHandle": "c1"})
