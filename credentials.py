import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from errors import DuplicateEmail, HashError, InvalidCredentials, NotFound, ValidationError
from forms import is_blank
from models import db, User

log = logging.getLogger(__name__)


def register(name, email, password):
    """Create a user and return its id.

    The email uniqueness constraint decides duplicates: the insert is tried
    and a conflict comes back as DuplicateEmail.
    """
    if is_blank(name) or is_blank(email) or is_blank(password):
        raise ValidationError("All fields are required")

    # JSON bodies can carry numbers; store and hash their text form
    name, email, password = str(name), str(email), str(password)

    try:
        password_hash = generate_password_hash(password)
    except (TypeError, ValueError) as e:
        raise HashError() from e

    user = User(name=name, email=email, password=password_hash)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise DuplicateEmail() from e

    log.info("Registered user %s", user.id)
    return user.id


def authenticate(email, password):
    """Return the user for a matching email/password pair.

    Unknown email and wrong password raise the same InvalidCredentials.
    """
    if is_blank(email) or is_blank(password):
        raise ValidationError("Email and password are required")

    email, password = str(email), str(password)

    user = User.query.filter_by(email=email).first()
    if user is None:
        log.info("Failed login attempt")
        raise InvalidCredentials()

    try:
        verified = check_password_hash(user.password, password)
    except (TypeError, ValueError) as e:
        raise HashError("Password comparison failed") from e

    if not verified:
        log.info("Failed login attempt")
        raise InvalidCredentials()

    return user


def get_profile(user_id):
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user
