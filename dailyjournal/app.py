from flask import Flask, request, jsonify, redirect, url_for, flash
from flask_login import current_user
from flask_wtf.csrf import generate_csrf, CSRFError
from .extensions import db, migrate, login_manager, csrf, limiter
from .config import get_config
from datetime import datetime


def create_app(config_name=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(get_config(config_name))
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    login_manager.login_view = "auth.login"
    login_manager.login_message = "Please log in to access this page."
    login_manager.login_message_category = "error"

    @login_manager.user_loader
    def load_user(user_id):
        from .models.user import User
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        # JSON clients get a status code, browsers get the login page
        if request.path.startswith("/api/"):
            return jsonify({"error": "Not Authenticated"}), 401
        flash(login_manager.login_message, login_manager.login_message_category)
        return redirect(url_for(login_manager.login_view))

    csrf.init_app(app)

    @app.before_request
    def check_csrf():
        # API callers without a session get 401 before any CSRF check
        if request.path.startswith("/api/") and not current_user.is_authenticated:
            return jsonify({"error": "Not Authenticated"}), 401
        if app.config["WTF_CSRF_ENABLED"]:
            csrf.protect()

    @app.errorhandler(CSRFError)
    def csrf_failed(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": e.description}), 400
        return e

    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": "Not found"}), 404
        return e

    limiter.init_app(app)

    # Expose csrf_token() helper in all Jinja templates
    app.jinja_env.globals["csrf_token"] = generate_csrf

    # Make 'now' available in all templates for the footer year
    @app.context_processor
    def inject_now():
        return dict(now=datetime.utcnow)

    # Ensure models are imported so Alembic sees them during 'flask db migrate'
    with app.app_context():
        from . import models  # noqa: F401

    # Blueprints
    from .blueprints.auth.routes import auth_bp
    from .blueprints.entries.routes import entries_bp
    from .blueprints.thoughts.routes import thoughts_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(entries_bp)
    app.register_blueprint(thoughts_bp)

    from .cli import seed_competencies_command
    app.cli.add_command(seed_competencies_command)

    return app

# For flask run:
# export FLASK_APP="dailyjournal.app:create_app"
# flask seed-competencies
# flask run --debug
