import logging
import time

from flask import Flask, jsonify, send_from_directory
from werkzeug.exceptions import HTTPException

from config import Config
from leaguestats.extensions import db, cors
from leaguestats.utils import error_response, utc_timestamp

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )

    # Initialize Flask extensions
    db.init_app(app)
    cors.init_app(app, resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}}, supports_credentials=True)

    # Register Blueprints
    from leaguestats.routes import leagues, admin
    app.register_blueprint(leagues.bp)
    app.register_blueprint(admin.bp)

    _register_error_handlers(app)
    _register_misc_routes(app)
    _register_cli(app)

    # The shipped database already has its tables; this only fills in missing ones
    if app.config.get('CREATE_TABLES'):
        with app.app_context():
            db.create_all()

    logger.info("Database: %s", app.config['SQLALCHEMY_DATABASE_URI'])
    logger.info("Static files served from: %s", app.config['DATA_DIR'])
    return app


def _register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(e):
        return error_response('Resource not found', status=404)

    @app.errorhandler(HTTPException)
    def http_error(e):
        return error_response(e.description, status=e.code)

    @app.errorhandler(Exception)
    def unhandled(e):
        logger.exception("Unhandled error")
        return error_response('Internal Server Error')


def _register_misc_routes(app):
    started = time.monotonic()

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({
            'status': 'OK',
            'timestamp': utc_timestamp(),
            'uptime': round(time.monotonic() - started, 3),
            'environment': app.config.get('APP_ENV', 'development'),
        })

    @app.route('/api/data/<path:filename>', methods=['GET'])
    def data_file(filename):
        return send_from_directory(app.config['DATA_DIR'], filename)


def _register_cli(app):
    @app.cli.command('init-db')
    def init_db_command():
        """Create all database tables."""
        db.create_all()
        print('Initialized the database.')

    @app.cli.command('seed-demo')
    def seed_demo_command():
        """Load a demo league, season and match."""
        from leaguestats.services import seed_demo_data
        season = seed_demo_data()
        print(f'Seeded demo data into season {season.season} (id {season.id}).')
