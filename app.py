import os
import logging
import click
from logging.handlers import RotatingFileHandler
from flask import Flask
from flask_wtf.csrf import CSRFError
from config import config
from extensions import db, migrate, csrf, limiter


def configure_logging(app):
    """Configure application logging"""
    if not app.debug and not app.testing:
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = RotatingFileHandler(
            'logs/family_travel.log',
            maxBytes=10240000,  # 10MB
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s '
            '[in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('Family Travel Tracker startup')
    else:
        # Development logging to console
        app.logger.setLevel(logging.DEBUG)
        app.logger.info('Family Travel Tracker startup (DEBUG mode)')


def create_app(config_name=None):
    """Application factory pattern"""

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    limiter.init_app(app)

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        headers = app.config.get('SECURITY_HEADERS', {})
        for header, value in headers.items():
            response.headers[header] = value
        return response

    # Import models to ensure they're registered with SQLAlchemy
    with app.app_context():
        import models  # noqa: F401

    from blueprints.tracker import tracker_bp
    app.register_blueprint(tracker_bp)

    # SQLite needs its directory to exist before create_all()
    uri = app.config.get('SQLALCHEMY_DATABASE_URI') or ''
    if uri.startswith('sqlite:///') and ':memory:' not in uri:
        db_dir = os.path.dirname(uri[len('sqlite:///'):])
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    with app.app_context():
        db.create_all()

    register_error_handlers(app)
    register_commands(app)

    return app


def register_error_handlers(app):
    """Register global error handlers"""

    @app.errorhandler(404)
    def not_found_error(error):
        from flask import render_template
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        from flask import render_template
        db.session.rollback()
        app.logger.error(f'Internal Server Error: {error}')
        return render_template('errors/500.html'), 500

    @app.errorhandler(CSRFError)
    def handle_csrf_error(error):
        from flask import render_template
        app.logger.warning(f'CSRF validation failed: {error.description}')
        return render_template('errors/csrf.html', reason=error.description), 400


def register_commands(app):
    """Register Flask CLI commands."""

    @app.cli.group()
    def countries():
        """Manage the country catalog."""
        pass

    @countries.command('seed')
    @click.option('--csv', 'csv_path', type=click.Path(exists=True, dir_okay=False),
                  help='CSV with country_code,country_name columns (defaults to data/countries.csv).')
    def seed_countries(csv_path):
        """Load or refresh the country catalog."""
        from services.catalog_service import CatalogService
        added, updated = CatalogService.seed_from_csv(csv_path)
        click.echo(f'SUCCESS: {added} countries added, {updated} renamed '
                   f'({CatalogService.count()} in catalog).')

    @countries.command('count')
    def count_countries():
        """Print the number of countries in the catalog."""
        from services.catalog_service import CatalogService
        click.echo(str(CatalogService.count()))

    @app.cli.group()
    def family():
        """Inspect families and their members."""
        pass

    @family.command('list')
    def list_families():
        """List every family with its members."""
        from services.family_service import FamilyService
        from services.ledger_service import LedgerService
        families = FamilyService.list_families()
        if not families:
            click.echo('No families found.')
            return
        click.echo(f'{"Family":<8} {"ID":<5} {"Name":<25} {"Color":<12} {"Visited":<8}')
        click.echo('-' * 62)
        for family_id, members in families.items():
            for u in members:
                click.echo(f'{family_id:<8} {u.id:<5} {u.name:<25} {u.color:<12} '
                           f'{LedgerService.total_visited(u.id):<8}')


if __name__ == '__main__':
    app = create_app()
    # SECURITY: Only bind to localhost in development
    app.run(host='127.0.0.1', port=5000, debug=True)
