from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, TextAreaField
from wtforms.validators import DataRequired, Optional

# Flask-WTF reads JSON bodies as well as form-encoded ones, so these forms
# double as the presence check for the API payloads.


def is_blank(value):
    """Same rule as DataRequired: None or whitespace-only counts as missing."""
    return value is None or not str(value).strip()


class RegisterForm(FlaskForm):
    error_message = "All fields are required"

    name = StringField('Name', validators=[DataRequired()])
    email = StringField('Email', validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])


class LoginForm(FlaskForm):
    error_message = "Email and password are required"

    email = StringField('Email', validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])


class JobForm(FlaskForm):
    error_message = "Title, company, location, and description are required"

    title = StringField('Job Title', validators=[DataRequired()])
    company = StringField('Company', validators=[DataRequired()])
    location = StringField('Location', validators=[DataRequired()])
    description = TextAreaField('Job Description', validators=[DataRequired()])
    requirements = TextAreaField('Requirements', validators=[Optional()])
    salary = StringField('Salary', validators=[Optional()])
