"""
JSON API routes for listing timezones and managing user selections.
"""
from flask import Blueprint, current_app, jsonify, request

from flask_app.services.timezone_service import TimezoneService

timezones_bp = Blueprint('timezones', __name__)


def _service() -> TimezoneService:
    return current_app.extensions['user_timezones']


@timezones_bp.route('/timezones', methods=['GET'])
def list_timezones():
    """Return all selectable timezones in catalog order."""
    return jsonify(_service().list_timezones())


@timezones_bp.route('/users/timezone', methods=['POST'])
def save_user_timezone():
    """Save a user's timezone chosen by catalog label."""
    payload = request.get_json(force=True, silent=True)
    return jsonify(_service().save_user_timezone(payload))


@timezones_bp.route('/users/current_time', methods=['GET'])
def get_current_time():
    """Return the current time in the user's saved timezone."""
    user_id = request.args.get('user_id', '')
    return jsonify(_service().get_current_time(user_id))
