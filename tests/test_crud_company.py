"""
Tests for the company crud module.
"""

import pytest

from jobly.core.exceptions import BadRequestError, NotFoundError
from jobly.crud import company as company_crud
from jobly.models.job import Job
from jobly.schemas.company import CompanyNewRequest


class TestCreate:

    def test_create(self, db_session, seeded):
        company = company_crud.create(db_session, CompanyNewRequest(
            handle="new",
            name="New",
            description="New Description",
            num_employees=1,
            logo_url="http://new.img",
        ))

        assert company.handle == "new"
        assert company.num_employees == 1
        assert company_crud.get(db_session, "new").name == "New"

    def test_duplicate_handle(self, db_session, seeded):
        with pytest.raises(BadRequestError) as exc_info:
            company_crud.create(db_session, CompanyNewRequest(
                handle="c1", name="Other", description="d",
            ))
        assert "Duplicate company" in exc_info.value.message

    def test_duplicate_name(self, db_session, seeded):
        with pytest.raises(BadRequestError):
            company_crud.create(db_session, CompanyNewRequest(
                handle="other", name="C1", description="d",
            ))


class TestFindAll:

    def test_no_filter(self, db_session, seeded):
        companies = company_crud.find_all(db_session)
        assert [c.handle for c in companies] == ["c1", "c2", "c3"]

    def test_employee_range(self, db_session, seeded):
        companies = company_crud.find_all(db_session, min_employees=2, max_employees=2)
        assert [c.handle for c in companies] == ["c2"]

    def test_name_is_case_insensitive_partial(self, db_session, seeded):
        companies = company_crud.find_all(db_session, name="c3")
        assert [c.handle for c in companies] == ["c3"]

    def test_filters_are_anded(self, db_session, seeded):
        assert company_crud.find_all(db_session, min_employees=2, name="1") == []

    def test_name_wildcards_are_literal(self, db_session, seeded):
        assert company_crud.find_all(db_session, name="%") == []

    def test_min_greater_than_max(self, db_session, seeded):
        with pytest.raises(BadRequestError):
            company_crud.find_all(db_session, min_employees=3, max_employees=1)


class TestGet:

    def test_get_with_jobs(self, db_session, seeded):
        company = company_crud.get(db_session, "c1")

        assert company.name == "C1"
        assert [j.title for j in company.jobs] == ["J1", "J2", "J3"]

    def test_not_found(self, db_session, seeded):
        with pytest.raises(NotFoundError):
            company_crud.get(db_session, "nope")


class TestUpdate:

    def test_partial_update(self, db_session, seeded):
        company = company_crud.update(db_session, "c1", {
            "name": "New",
            "numEmployees": 10,
        })

        assert company.name == "New"
        assert company.num_employees == 10
        # untouched fields keep their values
        assert company.description == "Desc1"
        assert company.logo_url == "http://c1.img"

    def test_null_fields(self, db_session, seeded):
        company = company_crud.update(db_session, "c1", {"numEmployees": None, "logoUrl": None})

        assert company.num_employees is None
        assert company.logo_url is None

    def test_not_found(self, db_session, seeded):
        with pytest.raises(NotFoundError):
            company_crud.update(db_session, "nope", {"name": "New"})

    def test_no_data(self, db_session, seeded):
        with pytest.raises(BadRequestError):
            company_crud.update(db_session, "c1", {})

    def test_duplicate_name(self, db_session, seeded):
        with pytest.raises(BadRequestError):
            company_crud.update(db_session, "c1", {"name": "C2"})
        assert company_crud.get(db_session, "c1").name == "C1"


class TestRemove:

    def test_remove_cascades_to_jobs(self, db_session, seeded):
        company_crud.remove(db_session, "c1")

        with pytest.raises(NotFoundError):
            company_crud.get(db_session, "c1")
        assert db_session.query(Job).count() == 0

    def test_not_found(self, db_session, seeded):
        with pytest.raises(NotFoundError):
            company_crud.remove(db_session, "nope")
