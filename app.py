import logging
import os

from config import config
from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_login import LoginManager
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from models import db

migrate = Migrate()
login_manager = LoginManager()


def configure_logging(app):
    """Route module loggers to stderr at the configured level"""
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(name)s %(levelname)s | %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])


def register_extensions(app):
    # The React client sends the session cookie cross-origin
    origins = app.config["ALLOWED_ORIGINS"]
    CORS(
        app,
        resources={r"/api/*": {"origins": origins}, r"/auth/*": {"origins": origins}},
        supports_credentials=True,
    )

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)


def register_blueprints(app):
    from routes.auth import bp as auth_bp
    from routes.practice import bp as practice_bp
    from routes.settings import bp as settings_bp
    from routes.vocabulary import bp as vocabulary_bp

    for blueprint in (auth_bp, vocabulary_bp, practice_bp, settings_bp):
        app.register_blueprint(blueprint)


@login_manager.user_loader
def load_user(user_id):
    from models.user import User

    return db.session.get(User, int(user_id))


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({"error": "Authentication required"}), 401


def create_app(config_name=None):
    """Build the Wordbank API for the named configuration (FLASK_ENV by default)"""
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "development")

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    configure_logging(app)
    register_extensions(app)

    # Register every table before create_all
    from models import incorrect_attempt, synonym, user, user_settings, vocabulary_item

    register_blueprints(app)

    with app.app_context():
        db.create_all()

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # API callers always get JSON, never Werkzeug's HTML pages
        if request.path.startswith(("/api/", "/auth/")):
            return jsonify({"error": error.description}), error.code
        return error

    @app.route("/")
    def home():
        return jsonify({"message": "Welcome to Wordbank!", "version": app.config["API_VERSION"]})

    @app.route("/health")
    def health_check():
        try:
            db.session.execute(db.text("SELECT 1"))
        except Exception as e:
            app.logger.error(f"Database health check failed: {e}")
            return jsonify({"status": "unhealthy", "database": "unreachable", "error": str(e)}), 500
        return jsonify({"status": "healthy", "database": "connected"}), 200

    app.logger.info(f"Wordbank started with '{config_name}' configuration")
    return app


if __name__ == "__main__":
    application = create_app()
    application.run(debug=application.config["DEBUG"], port=int(os.getenv("PORT", "5001")))
