from __future__ import annotations
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from .extensions import db, login_manager, cors
from .errors import FlashdeckError
import os


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__)

    # base config, overridable from the environment
    app.config.update(
        SECRET_KEY=os.getenv('SECRET_KEY', 'dev-secret-change-me'),
        SQLALCHEMY_DATABASE_URI=os.getenv('DATABASE_URL', 'sqlite:///flashdeck.db'),
        SQLALCHEMY_ENGINE_OPTIONS={"pool_pre_ping": True},
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        TOKEN_MAX_AGE=int(os.getenv('TOKEN_MAX_AGE', '3600')),
        AUTH_HEADER='x-auth-token',
        PASSWORD_HASH_METHOD=os.getenv('PASSWORD_HASH_METHOD', 'pbkdf2:sha256:600000'),
    )
    if test_config:
        app.config.update(test_config)

    db.init_app(app)
    login_manager.init_app(app)
    cors.init_app(app)

    from . import gateway  # noqa: F401  installs the request loader
    from .services import Services, AuthService, CardService
    from .stores import UserStore, CardStore
    app.extensions['flashdeck'] = Services(
        auth=AuthService(
            UserStore(db.session),
            app.config['SECRET_KEY'],
            max_age=app.config['TOKEN_MAX_AGE'],
            hash_method=app.config['PASSWORD_HASH_METHOD'],
        ),
        cards=CardService(CardStore(db.session)),
    )

    _register_error_handlers(app)

    from .routes.auth import bp as auth_bp
    from .routes.api import bp as api_bp
    app.register_blueprint(auth_bp)
    app.register_blueprint(api_bp)

    with app.app_context():
        db.create_all()

    return app


def _register_error_handlers(app: Flask) -> None:

    @app.errorhandler(FlashdeckError)
    def _flashdeck_error(exc: FlashdeckError):
        if exc.status_code >= 500:
            app.logger.error("%s: %s", type(exc).__name__, exc.message)
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return jsonify({"error": exc.name, "msg": exc.description}), exc.code

    @app.errorhandler(Exception)
    def _unhandled(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify({"error": "ServerError", "msg": "Server error"}), 500


__all__ = ["create_app", "db"]
