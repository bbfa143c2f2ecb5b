# yelpcamp/views/campgrounds.py
# (This file is for all campground pages and form handlers.)

import posixpath
from urllib.parse import urlparse
from flask import Blueprint, request, render_template, redirect, url_for, flash
from flask_login import login_required, current_user
from yelpcamp.errors import NotFoundError, PermissionDeniedError
from yelpcamp.utils import form_group
from yelpcamp.services.campgrounds import (
    list_campgrounds,
    get_campground,
    get_campground_for_edit,
    create_campground,
    update_campground,
    delete_campground,
)

bp = Blueprint('campgrounds', __name__)

TEXT_FIELDS = ('title', 'location', 'price', 'description')


# --- Helper to turn the submitted 'campground[...]' fields into service data ---
def _campground_payload(form):
    """
    Builds the data dict for create/update from the submitted form.
    Image filenames are derived from the URL here; on update the service
    keeps the stored filename of any image already on the record.
    Only fields present in the form end up in the dict, so an update
    leaves everything else alone.
    """
    fields = form_group(form, 'campground')
    payload = {key: fields[key] for key in TEXT_FIELDS if key in fields}

    if 'images' in fields:
        payload['images'] = [
            {'url': url.strip(), 'filename': posixpath.basename(urlparse(url.strip()).path)}
            for url in fields['images'] if url.strip()
        ]

    longitude = (fields.get('longitude') or '').strip()
    latitude = (fields.get('latitude') or '').strip()
    if longitude or latitude:
        payload['geometry'] = {'type': 'Point', 'coordinates': [longitude, latitude]}

    return payload

def _not_found(err):
    flash(err.message, 'error')
    return redirect(url_for('campgrounds.index'))

def _denied(err, campground_id):
    flash(err.message, 'error')
    return redirect(url_for('campgrounds.show', campground_id=campground_id))
# ----------------------------------------------------------------------------


@bp.route('', methods=['GET'])
def index():
    campgrounds = list_campgrounds()
    return render_template('campgrounds/index.html', campgrounds=campgrounds)

@bp.route('/new', methods=['GET'])
@login_required
def new():
    return render_template('campgrounds/new.html')

@bp.route('', methods=['POST'])
@login_required
def create():
    campground = create_campground(_campground_payload(request.form), user_id=current_user.id)
    flash('Successfully made a new campground!', 'success')
    return redirect(url_for('campgrounds.show', campground_id=campground.id))

@bp.route('/<int:campground_id>', methods=['GET'])
def show(campground_id):
    try:
        campground = get_campground(campground_id, populate=True)
    except NotFoundError as e:
        return _not_found(e)
    return render_template('campgrounds/show.html', campground=campground)

@bp.route('/<int:campground_id>/edit', methods=['GET'])
@login_required
def edit(campground_id):
    try:
        campground = get_campground_for_edit(campground_id, user_id=current_user.id)
    except NotFoundError as e:
        return _not_found(e)
    except PermissionDeniedError as e:
        return _denied(e, campground_id)
    return render_template('campgrounds/edit.html', campground=campground)

@bp.route('/<int:campground_id>', methods=['PUT', 'PATCH'])
@login_required
def update(campground_id):
    try:
        campground = update_campground(campground_id, _campground_payload(request.form), user_id=current_user.id)
    except NotFoundError as e:
        return _not_found(e)
    except PermissionDeniedError as e:
        return _denied(e, campground_id)
    flash('Successfully updated campground!', 'success')
    return redirect(url_for('campgrounds.show', campground_id=campground.id))

@bp.route('/<int:campground_id>', methods=['DELETE'])
@login_required
def delete(campground_id):
    try:
        delete_campground(campground_id, user_id=current_user.id)
    except NotFoundError as e:
        return _not_found(e)
    except PermissionDeniedError as e:
        return _denied(e, campground_id)
    flash('Successfully deleted campground!', 'success')
    return redirect(url_for('campgrounds.index'))
