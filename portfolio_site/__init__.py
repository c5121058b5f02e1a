import logging

from flask import Flask, current_app
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from portfolio_site.config import Config

# Initialize extensions
cors = CORS()
db = SQLAlchemy()

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def configure_logging(app):
    logger = logging.getLogger(__name__)
    logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    app.logger.setLevel(logger.level)


def get_store():
    return current_app.extensions['document_store']


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app)
    cors.init_app(app, origins=app.config['CORS_ORIGINS'])
    db.init_app(app)

    # Imported here to avoid a circular import with models.db
    from portfolio_site.defaults import seed_documents
    from portfolio_site.models import Document  # noqa: F401
    from portfolio_site.store import create_store

    store = create_store(app, db)
    app.extensions['document_store'] = store

    with app.app_context():
        if app.config['STORE_BACKEND'] == 'sql':
            db.create_all()
        store.seed(seed_documents())

    # Import and register blueprints here
    from portfolio_site.routes import api_bp, site_bp
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(site_bp)

    logging.getLogger(__name__).info(
        'Portfolio data ready (%s backend)', app.config['STORE_BACKEND'])
    return app
