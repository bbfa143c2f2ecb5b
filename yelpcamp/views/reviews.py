# yelpcamp/views/reviews.py
# (Review routes, mounted under /campgrounds/<campground_id>/reviews.)

from flask import Blueprint, request, redirect, url_for, flash
from flask_login import login_required, current_user
from yelpcamp.errors import NotFoundError, PermissionDeniedError
from yelpcamp.utils import form_group
from yelpcamp.services.reviews import create_review, delete_review

bp = Blueprint('reviews', __name__)


@bp.route('', methods=['POST'])
@login_required
def create(campground_id):
    try:
        create_review(campground_id, form_group(request.form, 'review'), user_id=current_user.id)
    except NotFoundError as e:
        flash(e.message, 'error')
        return redirect(url_for('campgrounds.index'))
    flash('Created new review!', 'success')
    return redirect(url_for('campgrounds.show', campground_id=campground_id))

@bp.route('/<int:review_id>', methods=['DELETE'])
@login_required
def delete(campground_id, review_id):
    try:
        delete_review(campground_id, review_id, user_id=current_user.id)
    except (NotFoundError, PermissionDeniedError) as e:
        flash(e.message, 'error')
        return redirect(url_for('campgrounds.show', campground_id=campground_id))
    flash('Successfully deleted review', 'success')
    return redirect(url_for('campgrounds.show', campground_id=campground_id))
