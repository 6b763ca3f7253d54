import logging
from datetime import timedelta
from functools import wraps

from flask import Flask, current_app, g, jsonify, request, send_from_directory, session
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, NotFound as HTTPNotFound

import applications
import credentials
import jobs
from config import Config
from errors import JobBoardError, Unauthorized, ValidationError
from forms import JobForm, LoginForm, RegisterForm
from logger import configure_logging
from models import db, init_schema
from sessions import make_session_store

log = logging.getLogger(__name__)


# ================= APP =================
def create_app(overrides=None, session_store=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(hours=app.config["SESSION_TTL_HOURS"])

    configure_logging(app.config["LOG_LEVEL"], app.config["LOG_DIR"])

    # ================= DATABASE =================
    db.init_app(app)
    with app.app_context():
        try:
            init_schema()
        except SQLAlchemyError:
            log.critical("Could not initialize the database", exc_info=True)
            raise

    # ================= SESSIONS =================
    if session_store is None:
        session_store = make_session_store(
            app.config["SESSION_BACKEND"], app.config["SESSION_TTL_HOURS"]
        )
    app.extensions["session_store"] = session_store

    register_error_handlers(app)
    register_routes(app)
    return app


def session_store():
    return current_app.extensions["session_store"]


def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        identity = session_store().resolve(session.get("token"))
        if identity is None:
            raise Unauthorized()
        g.user_id, g.user_name = identity
        return view(*args, **kwargs)

    return wrapped


def validated(form_cls):
    form = form_cls()
    if not form.validate_on_submit():
        raise ValidationError(form.error_message)
    return form


# ================= ERRORS =================
def register_error_handlers(app):
    @app.errorhandler(JobBoardError)
    def handle_domain_error(e):
        if e.status_code >= 500:
            log.error("%s on %s %s", type(e).__name__, request.method, request.path, exc_info=e)
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(e):
        db.session.rollback()
        log.exception("Database error on %s %s", request.method, request.path)
        return jsonify({"error": "Database error"}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if not request.path.startswith("/api/"):
            return e
        return jsonify({"error": e.name}), e.code


# ================= ROUTES =================
def register_routes(app):

    # ================= AUTH =================
    @app.route("/api/register", methods=["POST"])
    def register():
        form = validated(RegisterForm)
        user_id = credentials.register(form.name.data, form.email.data, form.password.data)
        return jsonify({"message": "User registered successfully", "userId": user_id}), 201

    @app.route("/api/login", methods=["POST"])
    def login():
        form = validated(LoginForm)
        user = credentials.authenticate(form.email.data, form.password.data)

        # Logging in again replaces any session this cookie already held
        previous = session.pop("token", None)
        if previous:
            session_store().destroy(previous)
        session.clear()
        session["token"] = session_store().create(user.id, user.name)
        session.permanent = True

        log.info("User %s logged in", user.id)
        return jsonify({"message": "Login successful", "user": user.to_dict()})

    @app.route("/api/logout", methods=["POST"])
    def logout():
        token = session.pop("token", None)
        if token:
            session_store().destroy(token)
        session.clear()
        return jsonify({"message": "Logout successful"})

    @app.route("/api/profile")
    @login_required
    def profile():
        return jsonify(credentials.get_profile(g.user_id).to_dict())

    # ================= JOBS =================
    @app.route("/api/jobs")
    def list_jobs():
        return jsonify([job.to_dict() for job in jobs.list_jobs()])

    @app.route("/api/jobs/<int:job_id>")
    def get_job(job_id):
        return jsonify(jobs.get_job(job_id).to_dict())

    @app.route("/api/jobs", methods=["POST"])
    @login_required
    def post_job():
        form = validated(JobForm)
        job_id = jobs.create_job(
            title=form.title.data,
            company=form.company.data,
            location=form.location.data,
            description=form.description.data,
            requirements=form.requirements.data,
            salary=form.salary.data,
        )
        return jsonify({"message": "Job posted successfully", "jobId": job_id}), 201

    # ================= APPLICATIONS =================
    @app.route("/api/jobs/<int:job_id>/apply", methods=["POST"])
    @login_required
    def apply_job(job_id):
        application_id = applications.apply(g.user_id, job_id)
        return jsonify({
            "message": "Application submitted successfully",
            "applicationId": application_id,
        })

    @app.route("/api/applications")
    @login_required
    def list_applications():
        return jsonify(applications.list_for_user(g.user_id))

    # ================= FRONTEND =================
    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def frontend(path):
        if path.startswith("api/"):
            raise HTTPNotFound()
        frontend_dir = app.config["FRONTEND_DIR"]
        if path:
            try:
                return send_from_directory(frontend_dir, path)
            except HTTPNotFound:
                pass
        return send_from_directory(frontend_dir, "index.html")
