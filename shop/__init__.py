from flask import Flask, jsonify

from .config import Config
from .extensions import db, cors
from .errors import register_error_handlers
from .services import Services
from .services.schema import ensure_schema

def create_app(test_config=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)
    Config.init_app(app)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Init extensions
    db.init_app(app)
    cors.init_app(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}})

    # one set of services per app, all sharing the scoped session
    app.extensions["shop"] = Services(db.session)

    # Register blueprints
    from .auth import bp as auth_bp; app.register_blueprint(auth_bp)
    from .product import bp as product_bp; app.register_blueprint(product_bp)
    from .order import bp as order_bp; app.register_blueprint(order_bp)

    register_error_handlers(app)

    from .cli import register_cli
    register_cli(app)

    @app.get("/")
    def health():
        return jsonify(ok=True, msg="API running")

    with app.app_context():
        failed = ensure_schema(
            db.engine,
            db.session,
            fail_fast=app.config["SCHEMA_FAIL_FAST"],
            seed=app.config["SEED_CATALOG"],
        )
        if failed:
            app.logger.warning("Starting without tables: %s", ", ".join(failed))

    return app
