"""
Tests for jobs.py - posting, listing and fetching jobs.
"""

import pytest

from errors import NotFound, ValidationError
from jobs import create_job, get_job, list_jobs


class TestCreateJob:

    def test_returns_id(self, app_ctx, sample_job):
        job_id = create_job(**sample_job)
        job = get_job(job_id)
        assert job.title == "Eng"
        assert job.company == "Acme"
        assert job.posted_at is not None

    def test_optional_fields(self, app_ctx, sample_job):
        job_id = create_job(**sample_job, requirements="Python", salary="100k")
        job = get_job(job_id)
        assert job.requirements == "Python"
        assert job.salary == "100k"

    def test_blank_optional_fields_stored_as_null(self, app_ctx, sample_job):
        job = get_job(create_job(**sample_job, requirements="", salary=""))
        assert job.requirements is None
        assert job.salary is None

    @pytest.mark.parametrize("field", ["title", "company", "location", "description"])
    def test_required_fields(self, app_ctx, sample_job, field):
        sample_job[field] = ""
        with pytest.raises(ValidationError):
            create_job(**sample_job)
        assert list_jobs() == []


class TestListJobs:

    def test_empty(self, app_ctx):
        assert list_jobs() == []

    def test_newest_first(self, app_ctx, sample_job):
        """A freshly posted job moves to the front."""
        ids = []
        for title in ["First", "Second", "Third"]:
            ids.append(create_job(**dict(sample_job, title=title)))
            assert list_jobs()[0].id == ids[-1]

        jobs = list_jobs()
        assert [job.id for job in jobs] == list(reversed(ids))
        posted = [job.posted_at for job in jobs]
        assert posted == sorted(posted, reverse=True)


class TestGetJob:

    def test_missing(self, app_ctx):
        with pytest.raises(NotFound) as exc:
            get_job(999)
        assert exc.value.message == "Job not found"

    def test_to_dict(self, app_ctx, sample_job):
        job = get_job(create_job(**sample_job))
        data = job.to_dict()
        assert set(data) == {
            "id", "title", "company", "location", "description",
            "requirements", "salary", "posted_at",
        }
        assert isinstance(data["posted_at"], str)
