# yelpcamp/services/campgrounds.py
# Campground CRUD, ownership checks and the cascading delete.
#
# Every function takes the acting user's id explicitly; nothing in here reads
# the request or Flask-Login's current_user.

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload, selectinload
from yelpcamp import db
from yelpcamp.errors import NotFoundError, PermissionDeniedError
from yelpcamp.models import Campground, Review
from .reviews import delete_reviews

# Fields a create/update request may set. 'author' is deliberately absent.
EDITABLE_FIELDS = ('title', 'location', 'price', 'description', 'images', 'geometry')


# --- HELPER FUNCTIONS ---

def is_owner(record, user_id):
    """Ownership gate: only the user who created a record may mutate it."""
    return record is not None and user_id is not None and record.author_id == user_id

def _require_owner(campground, user_id, action):
    if not is_owner(campground, user_id):
        current_app.logger.warning(
            f"User {user_id} denied {action} on campground {campground.id} (owner {campground.author_id})"
        )
        raise PermissionDeniedError()

def _editable(data):
    return {key: data[key] for key in EDITABLE_FIELDS if key in data}

def _keep_stored_filenames(existing, incoming):
    """
    Images already on the record keep their stored filename (the upload id);
    only URLs that are new take the filename supplied with them.
    """
    stored = {image['url']: image.get('filename') for image in existing or []}
    merged = []
    for image in incoming or []:
        image = dict(image)
        if stored.get(image.get('url')):
            image['filename'] = stored[image['url']]
        merged.append(image)
    return merged
# ----------------------------------------------------


def list_campgrounds():
    """Returns every campground. No filtering or pagination."""
    return db.session.execute(db.select(Campground).order_by(Campground.id)).scalars().all()

def get_campground(campground_id, populate=False):
    """
    Fetches a campground by id, raising NotFoundError if it does not exist.

    With populate=True the campground's author, its reviews and each review's
    author are loaded in the same round of queries for the detail page.
    """
    options = []
    if populate:
        options = [
            joinedload(Campground.author),
            selectinload(Campground.reviews).joinedload(Review.author),
        ]
    campground = db.session.get(Campground, campground_id, options=options)
    if campground is None:
        raise NotFoundError()
    return campground

def get_campground_for_edit(campground_id, user_id):
    """Fetches a campground the given user is allowed to edit."""
    campground = get_campground(campground_id)
    _require_owner(campground, user_id, 'edit')
    return campground

def create_campground(data, user_id):
    """
    Creates a campground owned by user_id. Any 'author' or 'author_id' in
    the submitted data is ignored.
    """
    campground = Campground(**_editable(data))
    campground.author_id = user_id
    try:
        db.session.add(campground)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Could not create campground for user {user_id}: {str(e)}")
        raise

    current_app.logger.info(f"User {user_id} created campground {campground.id} ({campground.title!r})")
    return campground

def update_campground(campground_id, data, user_id):
    """
    Replaces the supplied fields of a campground the user owns.
    Fields not present in data are left untouched, and so is the author.
    """
    campground = get_campground(campground_id)
    _require_owner(campground, user_id, 'update')

    changes = _editable(data)
    if 'images' in changes:
        changes['images'] = _keep_stored_filenames(campground.images, changes['images'])
    for key, value in changes.items():
        setattr(campground, key, value)
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Could not update campground {campground_id}: {str(e)}")
        raise

    current_app.logger.info(f"User {user_id} updated campground {campground.id}")
    return campground

def delete_campground(campground_id, user_id):
    """
    Deletes a campground the user owns together with all of its reviews.

    Existence is checked before ownership. Reviews are deleted first, then the
    campground, in a single transaction; on failure nothing is removed.

    Returns:
        int: number of reviews removed
    """
    campground = get_campground(campground_id)
    _require_owner(campground, user_id, 'delete')

    review_ids = [review.id for review in campground.reviews]
    try:
        removed = delete_reviews(review_ids, commit=False)
        db.session.expire(campground, ['reviews'])
        db.session.delete(campground)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Could not delete campground {campground_id}: {str(e)}")
        raise

    current_app.logger.info(
        f"User {user_id} deleted campground {campground_id} and {removed} review(s)"
    )
    return removed
