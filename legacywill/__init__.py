"""
Legacy Will

Multi-jurisdiction will generation and validation, with a JSON API.

Enhanced with:
- Rate limiting
- Security headers
- Audit logging
"""

import os
from datetime import datetime, timezone

from flask import Flask, g, jsonify, request
from flask_sqlalchemy import SQLAlchemy

# Initialize extensions
db = SQLAlchemy()


def create_app(test_config=None):
    """Application factory pattern."""
    app = Flask(__name__, instance_relative_config=True)

    # Default configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production'),
        SQLALCHEMY_DATABASE_URI=os.environ.get('DATABASE_URL', 'sqlite:///legacy_will.db'),
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        WILL_CONTENT_DIR=os.environ.get('WILL_CONTENT_DIR', os.path.join(app.instance_path, 'wills')),
        JURISDICTION_REGISTRY=None,

        # Rate limiting settings
        RATELIMIT_STORAGE_URI=os.environ.get('RATELIMIT_STORAGE_URI', 'memory://'),
        RATELIMIT_STRATEGY='fixed-window',
        RATELIMIT_HEADERS_ENABLED=True,
    )

    if test_config is None:
        # Load instance config if it exists
        app.config.from_pyfile('config.py', silent=True)
    else:
        # Load test config
        app.config.from_mapping(test_config)

    # Ensure instance and content folders exist
    os.makedirs(app.instance_path, exist_ok=True)
    os.makedirs(app.config['WILL_CONTENT_DIR'], exist_ok=True)

    # Initialize extensions with app
    db.init_app(app)

    # Import and initialize security (after db init to avoid circular imports)
    from legacywill.security import init_security
    init_security(app)

    # Jurisdiction tables and templates are built once per app
    from legacywill.jurisdictions import build_default_registry
    from legacywill.templates import TemplateLibrary
    registry = app.config['JURISDICTION_REGISTRY'] or build_default_registry()
    app.extensions['legacywill'] = {
        'registry': registry,
        'templates': TemplateLibrary(),
    }

    # Register blueprints
    from legacywill.routes import api_bp
    app.register_blueprint(api_bp)

    # Request logging
    @app.before_request
    def before_request():
        """Log request start."""
        g.request_start_time = datetime.now(timezone.utc)

    @app.after_request
    def log_request(response):
        """Log request completion."""
        if hasattr(g, 'request_start_time'):
            duration = (datetime.now(timezone.utc) - g.request_start_time).total_seconds()
            app.logger.info(
                f'{request.method} {request.path} - {response.status_code} - {duration:.3f}s'
            )
        return response

    # Create database tables
    with app.app_context():
        from legacywill import models  # noqa: F401
        db.create_all()

    app.logger.info(f'Loaded jurisdictions: {", ".join(registry.codes())}')

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'ok': False, 'error': 'Not found'}), 404

    @app.errorhandler(429)
    def rate_limited(error):
        return jsonify({'ok': False, 'error': 'Too many requests', 'code': 'rate_limited'}), 429

    @app.errorhandler(500)
    def internal_error(error):
        """Handle internal errors."""
        db.session.rollback()
        app.logger.error(f'Internal error: {str(error)}')
        return jsonify({'ok': False, 'error': 'Internal server error'}), 500

    return app
