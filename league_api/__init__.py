import os

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def create_app(config_name=None):
    """Application factory pattern"""
    from config import config

    config_name = config_name or os.environ.get('FLASK_CONFIG', 'default')
    app = Flask(__name__)
    app.config.from_object(config[config_name])

    # Initialize extensions
    from league_api.extensions import limiter
    db.init_app(app)
    limiter.init_app(app)

    from league_api.errors import register_error_handlers
    from league_api.logger import register_request_logging
    register_request_logging(app)
    register_error_handlers(app)

    # Register blueprints
    from league_api.routes import api_bp, main_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix=app.config['API_PREFIX'] or None)

    # Create the documents table
    with app.app_context():
        from league_api import models  # noqa: F401
        db.create_all()

    return app
