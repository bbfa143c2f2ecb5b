# yelpcamp/__init__.py

import logging
from flask import Flask, render_template
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect, CSRFError
from .config import Config

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
csrf = CSRFProtect()

LOG_HANDLER_NAME = 'yelpcamp'

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Configure logging to show INFO level messages.
    # app.logger is shared by every app built in this process; add our handler once.
    app.logger.setLevel(app.config['LOG_LEVEL'])
    if not any(h.get_name() == LOG_HANDLER_NAME for h in app.logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(LOG_HANDLER_NAME)
        handler.setLevel(app.config['LOG_LEVEL'])
        formatter = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s')
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)

    db.init_app(app)
    migrate.init_app(app, db)

    # Every HTML form posts a csrf_token hidden field.
    csrf.init_app(app)

    # Only the JSON map feed is meant to be fetched cross-origin.
    CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})

    # HTML forms can only POST; '?_method=PUT' / '?_method=DELETE' rewrites the verb.
    from .utils import MethodOverrideMiddleware
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    login_manager.init_app(app)
    login_manager.login_view = 'users.login_form'
    login_manager.login_message = 'You must be signed in first!'
    login_manager.login_message_category = 'error'

    # Thumbnails are computed at render time, never stored.
    from .utils import thumbnail_url, ThumbnailError
    @app.template_filter('thumbnail')
    def thumbnail_filter(url):
        try:
            return thumbnail_url(
                url,
                marker=app.config['IMAGE_UPLOAD_MARKER'],
                transformation=f"w_{app.config['THUMBNAIL_WIDTH']}",
            )
        except ThumbnailError as e:
            # Images hosted elsewhere have no upload marker; show them full size.
            app.logger.debug(str(e))
            return url

    # --- REGISTER BLUEPRINTS ---
    from .views.main import bp as main_bp
    from .views.campgrounds import bp as campgrounds_bp
    from .views.reviews import bp as reviews_bp
    from .views.users import bp as users_bp
    from .views.api import bp as api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(campgrounds_bp, url_prefix='/campgrounds')
    app.register_blueprint(reviews_bp, url_prefix='/campgrounds/<int:campground_id>/reviews')
    app.register_blueprint(users_bp)
    app.register_blueprint(api_bp, url_prefix='/api')

    # --- ERROR PAGES ---
    from .errors import YelpCampError

    @app.errorhandler(404)
    def page_not_found(err):
        return render_template('error.html', message='Page Not Found', status_code=404), 404

    @app.errorhandler(CSRFError)
    def csrf_error(err):
        app.logger.warning(f"CSRF check failed: {err.description}")
        return render_template('error.html', message=err.description, status_code=400), 400

    @app.errorhandler(YelpCampError)
    def handle_app_error(err):
        db.session.rollback()
        app.logger.warning(f"{type(err).__name__} ({err.status_code}): {err.message}")
        return render_template('error.html', message=err.message, status_code=err.status_code), err.status_code

    @app.errorhandler(500)
    def internal_error(err):
        db.session.rollback()
        original = getattr(err, 'original_exception', None) or err
        app.logger.error(f"Unhandled error: {original!r}")
        return render_template('error.html', message='Oh No, Something Went Wrong!', status_code=500), 500

    with app.app_context():
        from . import models

        @login_manager.user_loader
        def load_user(user_id):
            from .models import User
            return db.session.get(User, int(user_id))

    return app
