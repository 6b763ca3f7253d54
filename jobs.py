import logging

from errors import NotFound, ValidationError
from forms import is_blank
from models import db, Job

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "company", "location", "description")


def create_job(title, company, location, description, requirements=None, salary=None):
    """Insert a posting and return its id. posted_at is set on insert."""
    fields = dict(title=title, company=company, location=location, description=description)
    if any(is_blank(fields[name]) for name in REQUIRED_FIELDS):
        raise ValidationError("Title, company, location, and description are required")

    job = Job(
        **fields,
        requirements=None if is_blank(requirements) else requirements,
        salary=None if is_blank(salary) else salary,
    )
    db.session.add(job)
    db.session.commit()

    log.info("Posted job %s (%s at %s)", job.id, title, company)
    return job.id


def list_jobs():
    """All jobs, newest first."""
    return Job.query.order_by(Job.posted_at.desc(), Job.id.desc()).all()


def get_job(job_id):
    job = db.session.get(Job, job_id)
    if job is None:
        raise NotFound("Job not found")
    return job
