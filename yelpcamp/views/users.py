# yelpcamp/views/users.py
# (Registration, login and logout.)

from flask import Blueprint, request, render_template, redirect, url_for, flash
from flask_login import login_user, logout_user, current_user
from yelpcamp.errors import ValidationError
from yelpcamp.utils import is_safe_redirect
from yelpcamp.services.users import register_user, authenticate_user

bp = Blueprint('users', __name__)


@bp.route('/register', methods=['GET'])
def register_form():
    return render_template('users/register.html')

@bp.route('/register', methods=['POST'])
def register():
    try:
        user = register_user(
            request.form.get('username'),
            request.form.get('email'),
            request.form.get('password'),
        )
    except ValidationError as e:
        flash(e.message, 'error')
        return redirect(url_for('users.register_form'))
    login_user(user)
    flash('Welcome to Yelp Camp!', 'success')
    return redirect(url_for('campgrounds.index'))

@bp.route('/login', methods=['GET'])
def login_form():
    if current_user.is_authenticated:
        return redirect(url_for('campgrounds.index'))
    return render_template('users/login.html', next=request.args.get('next', ''))

@bp.route('/login', methods=['POST'])
def login():
    user = authenticate_user(request.form.get('username'), request.form.get('password'))
    if user is None:
        flash('Invalid username or password.', 'error')
        return redirect(url_for('users.login_form'))

    login_user(user, remember=bool(request.form.get('remember')))
    flash('Welcome back!', 'success')
    # Send users back to the page that required the login, if it is local.
    target = request.form.get('next') or request.args.get('next')
    if is_safe_redirect(target):
        return redirect(target)
    return redirect(url_for('campgrounds.index'))

@bp.route('/logout', methods=['GET'])
def logout():
    logout_user()
    flash('Goodbye!', 'success')
    return redirect(url_for('campgrounds.index'))
