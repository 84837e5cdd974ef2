"""
Flask application factory.
"""
from datetime import datetime
from typing import Callable, Optional

from flask import Flask, jsonify

from flask_app.services.timezone_service import TimezoneService
from user_timezones.catalog import TimezoneCatalog
from user_timezones.exceptions import InvalidTimezoneData, TimezoneServiceError
from user_timezones.registry import UserTimezoneRegistry
from user_timezones.timezone_utils import resolve_timezone, utc_now

CONFIGS = {
    'development': 'flask_app.config.DevelopmentConfig',
    'production': 'flask_app.config.ProductionConfig',
    'testing': 'flask_app.config.TestingConfig',
}


def create_app(config_name='development',
               registry: Optional[UserTimezoneRegistry] = None,
               catalog: Optional[TimezoneCatalog] = None,
               clock: Callable[[], datetime] = utc_now):
    """Create and configure the Flask application.

    The catalog and registry are built once here and shared by every
    request through ``app.extensions['user_timezones']``.
    """
    app = Flask(__name__)
    app.config.from_object(CONFIGS.get(config_name, CONFIGS['development']))

    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Labels contain non-ASCII characters (e.g. "Brasília")
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    catalog = catalog if catalog is not None else TimezoneCatalog()
    registry = registry if registry is not None else UserTimezoneRegistry()
    app.extensions['user_timezones'] = TimezoneService(catalog, registry, clock=clock)

    _check_catalog(app, catalog)

    @app.errorhandler(TimezoneServiceError)
    def handle_service_error(error):
        """Render service errors as {'error': message} with their status."""
        if error.status_code >= 500:
            app.logger.error("Request failed: %s", error.message, exc_info=error.__cause__)
        return jsonify(error.to_dict()), error.status_code

    # Register blueprints
    from flask_app.routes.timezones import timezones_bp

    app.register_blueprint(timezones_bp)

    app.logger.info("Loaded %d timezones", len(catalog))
    return app


def _check_catalog(app, catalog):
    """Warn about catalog identifiers the local timezone database cannot load."""
    for identifier in catalog.identifiers():
        try:
            resolve_timezone(identifier)
        except InvalidTimezoneData:
            app.logger.warning("Timezone %s is not available in the timezone database", identifier)
