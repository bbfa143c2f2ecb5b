import pytest

from yelpcamp import db
from yelpcamp.errors import NotFoundError, PermissionDeniedError, ValidationError
from yelpcamp.models import Campground, Review
from yelpcamp.services.campgrounds import (
    is_owner,
    create_campground,
    update_campground,
    delete_campground,
    get_campground,
)
from yelpcamp.services.reviews import delete_reviews


def _review_count(campground_id=None):
    query = db.select(db.func.count(Review.id))
    if campground_id is not None:
        query = query.where(Review.campground_id == campground_id)
    return db.session.execute(query).scalar()


def test_create_ignores_author_in_data(app, owner_id, other_id):
    with app.app_context():
        campground = create_campground(
            {'title': 'Hidden Lake', 'price': '25', 'author_id': other_id, 'author': other_id},
            user_id=owner_id,
        )
        assert campground.author_id == owner_id
        assert campground.price == 25.0
        assert campground.geometry == {'type': 'Point', 'coordinates': [0.0, 0.0]}


def test_create_rejects_non_numeric_price(app, owner_id):
    with app.app_context():
        with pytest.raises(ValidationError):
            create_campground({'title': 'Hidden Lake', 'price': 'cheap'}, user_id=owner_id)


def test_create_rejects_bad_geometry(app, owner_id):
    with app.app_context():
        with pytest.raises(ValidationError):
            create_campground({'geometry': {'type': 'Polygon', 'coordinates': [1, 2]}}, user_id=owner_id)


def test_is_owner(app, owner_id, other_id, make_campground):
    campground_id = make_campground(owner_id)
    with app.app_context():
        campground = db.session.get(Campground, campground_id)
        assert is_owner(campground, owner_id)
        assert not is_owner(campground, other_id)
        assert not is_owner(campground, None)
        assert not is_owner(None, owner_id)


def test_update_replaces_only_supplied_fields(app, owner_id, other_id, make_campground):
    campground_id = make_campground(owner_id, description='Original')
    with app.app_context():
        update_campground(campground_id, {'title': 'Lost Lake', 'author_id': other_id}, user_id=owner_id)

    with app.app_context():
        campground = db.session.get(Campground, campground_id)
        assert campground.title == 'Lost Lake'
        assert campground.description == 'Original'
        assert campground.price == 25.0
        assert campground.author_id == owner_id


def test_update_keeps_stored_image_filenames(app, owner_id, make_campground):
    lake = {'url': 'https://res.cloudinary.com/demo/image/upload/v1/YelpCamp/abc123.jpg', 'filename': 'YelpCamp/abc123'}
    campground_id = make_campground(owner_id, images=[lake])
    new_image = {'url': 'https://res.cloudinary.com/demo/image/upload/v2/YelpCamp/def456.jpg', 'filename': 'def456.jpg'}

    with app.app_context():
        update_campground(
            campground_id,
            {'images': [{'url': lake['url'], 'filename': 'abc123.jpg'}, new_image]},
            user_id=owner_id,
        )

    with app.app_context():
        assert db.session.get(Campground, campground_id).images == [lake, new_image]


def test_update_by_non_owner_is_denied(app, owner_id, other_id, make_campground):
    campground_id = make_campground(owner_id)
    with app.app_context():
        with pytest.raises(PermissionDeniedError):
            update_campground(campground_id, {'title': 'Mine now'}, user_id=other_id)
    with app.app_context():
        assert db.session.get(Campground, campground_id).title == 'Hidden Lake'


def test_delete_removes_exactly_its_reviews(app, owner_id, other_id, make_campground):
    doomed_id = make_campground(owner_id, review_authors=[owner_id, other_id, other_id])
    kept_id = make_campground(owner_id, review_authors=[other_id, owner_id])

    with app.app_context():
        removed = delete_campground(doomed_id, user_id=owner_id)
        assert removed == 3

    with app.app_context():
        assert db.session.get(Campground, doomed_id) is None
        assert _review_count(doomed_id) == 0
        assert _review_count(kept_id) == 2
        assert _review_count() == 2


def test_delete_without_reviews_succeeds(app, owner_id, make_campground):
    campground_id = make_campground(owner_id)
    with app.app_context():
        assert delete_campground(campground_id, user_id=owner_id) == 0
        assert db.session.get(Campground, campground_id) is None


def test_delete_by_non_owner_keeps_everything(app, owner_id, other_id, make_campground):
    campground_id = make_campground(owner_id, review_authors=[other_id])
    with app.app_context():
        with pytest.raises(PermissionDeniedError):
            delete_campground(campground_id, user_id=other_id)

    with app.app_context():
        assert db.session.get(Campground, campground_id) is not None
        assert _review_count(campground_id) == 1


def test_delete_missing_campground_raises_not_found(app, owner_id):
    with app.app_context():
        with pytest.raises(NotFoundError):
            delete_campground(999, user_id=owner_id)


def test_delete_reviews_empty_set_is_noop(app):
    with app.app_context():
        assert delete_reviews([]) == 0
        assert delete_reviews(None) == 0


def test_delete_reviews_is_idempotent(app, owner_id, make_campground):
    campground_id = make_campground(owner_id, review_authors=[owner_id, owner_id])
    with app.app_context():
        ids = [review.id for review in db.session.get(Campground, campground_id).reviews]
        assert delete_reviews(ids) == 2
        assert delete_reviews(ids) == 0
        assert _review_count() == 0


def test_get_campground_populates_reviews_in_order(app, owner_id, other_id, make_campground):
    campground_id = make_campground(owner_id, review_authors=[other_id, owner_id])
    with app.app_context():
        campground = get_campground(campground_id, populate=True)
        assert campground.author.username == 'u1'
        assert [review.author.username for review in campground.reviews] == ['u2', 'u1']
