from yelpcamp import db
from yelpcamp.models import User


def _register(client, username='camper', email='camper@example.com', password='s3cret'):
    return client.post('/register', data={'username': username, 'email': email, 'password': password})


def test_register_creates_user_and_logs_in(app, client, flashes):
    response = _register(client)
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/campgrounds')
    assert ('success', 'Welcome to Yelp Camp!') in flashes()

    with app.app_context():
        user = db.session.execute(db.select(User).filter_by(username='camper')).scalar_one()
        assert user.email == 'camper@example.com'
        assert user.password_hash != 's3cret'
        assert user.check_password('s3cret')

    # Logged in: the new-campground form is reachable.
    assert client.get('/campgrounds/new').status_code == 200


def test_register_duplicate_username(app, client, owner_id, flashes):
    response = _register(client, username='u1', email='fresh@example.com')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/register')
    assert ('error', 'A user with the given username is already registered.') in flashes()
    with app.app_context():
        assert db.session.execute(db.select(db.func.count(User.id))).scalar() == 1


def test_register_missing_fields(client, flashes):
    response = _register(client, password='')
    assert response.status_code == 302
    assert ('error', 'Username, email and password are all required.') in flashes()


def test_login_with_wrong_password(client, owner_id, flashes):
    response = client.post('/login', data={'username': 'u1', 'password': 'nope'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')
    assert ('error', 'Invalid username or password.') in flashes()
    assert client.get('/campgrounds/new').status_code == 302


def test_login_returns_to_requested_page(client, owner_id):
    response = client.post('/login?next=/campgrounds/new', data={'username': 'u1', 'password': 'hunter22'})
    assert response.headers['Location'].endswith('/campgrounds/new')


def test_login_ignores_external_next(client, owner_id):
    response = client.post('/login', data={
        'username': 'u1', 'password': 'hunter22', 'next': 'https://evil.example.com/',
    })
    assert response.headers['Location'].endswith('/campgrounds')


def test_logout(client, owner_id, login, flashes):
    login('u1')
    response = client.get('/logout')
    assert response.status_code == 302
    assert ('success', 'Goodbye!') in flashes()
    assert client.get('/campgrounds/new').status_code == 302


def test_login_form_renders(client):
    response = client.get('/login?next=/campgrounds/new')
    assert response.status_code == 200
    assert b'value="/campgrounds/new"' in response.data
