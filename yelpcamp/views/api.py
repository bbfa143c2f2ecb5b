# yelpcamp/views/api.py
# (JSON endpoints: the cluster map feed and the deployment health check.)

from flask import Blueprint, jsonify, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from yelpcamp import db
from yelpcamp.services.campgrounds import list_campgrounds

bp = Blueprint('api', __name__)


@bp.route('/campgrounds', methods=['GET'])
def campgrounds_feed():
    """
    Returns every campground as a GeoJSON FeatureCollection.

    Each feature carries the campground id, title and the popup HTML
    the map shows when a marker is clicked.
    """
    features = [campground.to_feature() for campground in list_campgrounds()]
    return jsonify({"type": "FeatureCollection", "features": features}), 200

@bp.route('/health', methods=['GET'])
def health():
    """Reports whether the database answers a trivial query."""
    try:
        db.session.execute(text('SELECT 1'))
        database = {"status": "connected"}
        status_code = 200
    except SQLAlchemyError as e:
        current_app.logger.error(f"Health check database error: {str(e)}")
        database = {"status": "disconnected"}
        status_code = 503
    return jsonify({"status": "ok" if status_code == 200 else "degraded", "database": database}), status_code
