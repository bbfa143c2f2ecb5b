# models.py

from . import db
from .errors import ValidationError
from sqlalchemy.orm import validates
from flask_login import UserMixin
from markupsafe import escape
from werkzeug.security import generate_password_hash, check_password_hash
# --------------------------------------------------

# This file defines the three tables of the application: users, campgrounds
# and the reviews left on them.

DEFAULT_GEOMETRY = {'type': 'Point', 'coordinates': [0.0, 0.0]}


# --- 1. USER MODEL ---

class User(UserMixin, db.Model):
    """
    A registered account. Inherits from UserMixin for Flask-Login functionality.
    Only the id is used for ownership checks.
    """
    __tablename__ = 'user'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), index=True, unique=True, nullable=False)
    email = db.Column(db.String(120), index=True, unique=True, nullable=False)
    password_hash = db.Column(db.String(256))

    def set_password(self, password):
        """Hashes the password and stores the hash."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Checks a plaintext password against the stored hash."""
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.username}>'


# --- 2. CAMPGROUND MODEL ---

class Campground(db.Model):
    __tablename__ = 'campground'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200))
    # Ordered list of {"url": ..., "filename": ...}; list order is display order.
    images = db.Column(db.JSON, nullable=False, default=list)
    # GeoJSON point: {"type": "Point", "coordinates": [lon, lat]}
    geometry = db.Column(db.JSON, nullable=False, default=lambda: dict(DEFAULT_GEOMETRY))
    price = db.Column(db.Float)
    description = db.Column(db.Text)
    location = db.Column(db.String(200))
    author_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)

    author = db.relationship('User', backref='campgrounds', lazy=True)
    # Reviews are removed explicitly by services.campgrounds.delete_campground,
    # so the ORM must never try to null out their foreign key.
    reviews = db.relationship(
        'Review',
        back_populates='campground',
        lazy=True,
        order_by='Review.id',
        passive_deletes='all',
    )

    @validates('price')
    def validate_price(self, key, value):
        if value is None or value == '':
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Cast to Number failed for value '{value}' at path 'price'.")

    @validates('geometry')
    def validate_geometry(self, key, value):
        if value is None:
            return dict(DEFAULT_GEOMETRY)
        if not isinstance(value, dict) or value.get('type') != 'Point':
            raise ValidationError("Geometry type must be 'Point'.")
        coordinates = value.get('coordinates')
        if not isinstance(coordinates, (list, tuple)) or len(coordinates) != 2:
            raise ValidationError("Geometry coordinates must be [longitude, latitude].")
        try:
            lon, lat = (float(c) for c in coordinates)
        except (TypeError, ValueError):
            raise ValidationError("Geometry coordinates must be numbers.")
        return {'type': 'Point', 'coordinates': [lon, lat]}

    @validates('images')
    def validate_images(self, key, value):
        images = []
        for image in value or []:
            if not isinstance(image, dict) or not image.get('url'):
                raise ValidationError("Each image needs a url.")
            images.append({'url': image['url'], 'filename': image.get('filename') or ''})
        return images

    @property
    def popup_markup(self):
        """HTML snippet shown in the map popup for this campground."""
        return f'<strong><a href="/campgrounds/{self.id}">{escape(self.title or "")}</a></strong>'

    def to_feature(self):
        """Converts the campground to a GeoJSON feature for the cluster map."""
        return {
            'type': 'Feature',
            'geometry': self.geometry,
            'properties': {
                'id': self.id,
                'title': self.title,
                'popUpMarkup': self.popup_markup,
            },
        }

    def __repr__(self):
        return f'<Campground {self.id} {self.title!r}>'


# --- 3. REVIEW MODEL ---

class Review(db.Model):
    __tablename__ = 'review'

    id = db.Column(db.Integer, primary_key=True)
    body = db.Column(db.Text)
    rating = db.Column(db.Integer)
    author_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    campground_id = db.Column(db.Integer, db.ForeignKey('campground.id'), nullable=False, index=True)

    author = db.relationship('User', backref='reviews', lazy=True)
    campground = db.relationship('Campground', back_populates='reviews')

    @validates('rating')
    def validate_rating(self, key, value):
        try:
            rating = int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Cast to Number failed for value '{value}' at path 'rating'.")
        if not 1 <= rating <= 5:
            raise ValidationError("Rating must be between 1 and 5.")
        return rating

    def __repr__(self):
        return f'<Review {self.id} on campground {self.campground_id}>'
