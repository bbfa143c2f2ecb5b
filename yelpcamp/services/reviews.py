# yelpcamp/services/reviews.py
# Reviews left on campgrounds.

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from yelpcamp import db
from yelpcamp.errors import NotFoundError, PermissionDeniedError
from yelpcamp.models import Campground, Review


def delete_reviews(review_ids, commit=True):
    """
    Deletes every review whose id is in review_ids.

    Ids that no longer exist are ignored, so calling this twice with the same
    ids is harmless. An empty collection returns 0 without touching the
    database. Pass commit=False to run inside a caller's transaction.

    Returns:
        int: number of reviews actually deleted
    """
    review_ids = list(review_ids or [])
    if not review_ids:
        return 0

    result = db.session.execute(db.delete(Review).where(Review.id.in_(review_ids)))
    if commit:
        db.session.commit()
    return result.rowcount or 0

def create_review(campground_id, data, user_id):
    """Appends a review by user_id to the campground's reviews."""
    campground = db.session.get(Campground, campground_id)
    if campground is None:
        raise NotFoundError()

    review = Review(body=data.get('body'), rating=data.get('rating'))
    review.author_id = user_id
    campground.reviews.append(review)
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Could not save review on campground {campground_id}: {str(e)}")
        raise

    current_app.logger.info(f"User {user_id} reviewed campground {campground_id} (review {review.id})")
    return review

def delete_review(campground_id, review_id, user_id):
    """Deletes a review; only its author may do so."""
    review = db.session.get(Review, review_id)
    if review is None or review.campground_id != campground_id:
        raise NotFoundError("Cannot find that review!")
    if review.author_id != user_id:
        current_app.logger.warning(f"User {user_id} denied delete on review {review_id}")
        raise PermissionDeniedError()

    try:
        db.session.delete(review)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Could not delete review {review_id}: {str(e)}")
        raise

    current_app.logger.info(f"User {user_id} deleted review {review_id}")
