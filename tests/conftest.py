import pytest

from yelpcamp import create_app, db
from yelpcamp.config import TestingConfig
from yelpcamp.models import Campground, Review, User

PASSWORD = 'hunter22'


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_user(app, username):
    with app.app_context():
        user = User(username=username, email=f'{username}@example.com')
        user.set_password(PASSWORD)
        db.session.add(user)
        db.session.commit()
        return user.id


@pytest.fixture
def owner_id(app):
    return _make_user(app, 'u1')


@pytest.fixture
def other_id(app):
    return _make_user(app, 'u2')


@pytest.fixture
def login(client):
    """Logs the test client in as the given username."""
    def _login(username):
        response = client.post('/login', data={'username': username, 'password': PASSWORD})
        assert response.status_code == 302
        return response
    return _login


@pytest.fixture
def make_campground(app):
    def _make(author_id, review_authors=(), **fields):
        fields.setdefault('title', 'Hidden Lake')
        fields.setdefault('price', 25)
        fields.setdefault('location', 'Bishop, California')
        fields.setdefault('description', 'Quiet sites by the water.')
        with app.app_context():
            campground = Campground(**fields)
            campground.author_id = author_id
            for reviewer_id in review_authors:
                review = Review(body='Nice spot', rating=4)
                review.author_id = reviewer_id
                campground.reviews.append(review)
            db.session.add(campground)
            db.session.commit()
            return campground.id
    return _make


@pytest.fixture
def flashes(client):
    """Returns the (category, message) pairs waiting in the session."""
    def _flashes():
        with client.session_transaction() as sess:
            return list(sess.get('_flashes', []))
    return _flashes
