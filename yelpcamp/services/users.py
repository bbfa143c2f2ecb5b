# yelpcamp/services/users.py
# This file holds the logic for registering and authenticating users.

from flask import current_app
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from yelpcamp import db
from yelpcamp.errors import ValidationError
from yelpcamp.models import User


def register_user(username, email, password):
    """
    Creates a new account.

    Raises:
        ValidationError: if a field is missing or the username/email is taken
    """
    username = (username or '').strip()
    email = (email or '').strip().lower()
    if not username or not email or not password:
        raise ValidationError("Username, email and password are all required.")

    existing = db.session.execute(
        db.select(User).where(or_(User.username == username, User.email == email))
    ).scalars().first()
    if existing is not None:
        if existing.username == username:
            raise ValidationError("A user with the given username is already registered.")
        raise ValidationError("A user with the given email is already registered.")

    user = User(username=username, email=email)
    user.set_password(password)
    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Could not register user {username}: {str(e)}")
        raise

    current_app.logger.info(f"Registered user {username} (id {user.id})")
    return user

def authenticate_user(username, password):
    """Returns the matching user, or None if the credentials are wrong."""
    user = db.session.execute(
        db.select(User).where(User.username == (username or '').strip())
    ).scalars().first()
    if user is None or not user.check_password(password or ''):
        current_app.logger.info(f"Failed login attempt for {username!r}")
        return None
    return user
