import logging

from sqlalchemy.exc import IntegrityError

from errors import AlreadyApplied
from jobs import get_job
from models import db, Application, Job

log = logging.getLogger(__name__)


def apply(user_id, job_id):
    """Record an application and return its id.

    At most one application per (user, job): the unique constraint rejects
    the second insert, which comes back as AlreadyApplied.
    """
    get_job(job_id)

    application = Application(user_id=user_id, job_id=job_id)
    db.session.add(application)
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise AlreadyApplied() from e

    log.info("User %s applied to job %s", user_id, job_id)
    return application.id


def list_for_user(user_id):
    """A user's applications with the job's title, company and location."""
    rows = (
        db.session.query(Application, Job.title, Job.company, Job.location)
        .join(Job, Application.job_id == Job.id)
        .filter(Application.user_id == user_id)
        .order_by(Application.applied_at.desc(), Application.id.desc())
        .all()
    )

    return [
        {
            "id": application.id,
            "user_id": application.user_id,
            "job_id": application.job_id,
            "applied_at": application.applied_at.isoformat(sep=" "),
            "title": title,
            "company": company,
            "location": location,
        }
        for application, title, company, location in rows
    ]
