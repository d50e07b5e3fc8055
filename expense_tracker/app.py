from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from expense_tracker.models import db
from expense_tracker.auth.limits import limiter
from expense_tracker.auth.routes import auth_bp
from expense_tracker.transactions.routes import transactions_bp
from expense_tracker.categories.routes import categories_bp
from expense_tracker.errors import register_error_handlers
from expense_tracker.config import Config


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    if not app.config.get("JWT_SECRET_KEY"):
        raise RuntimeError("JWT_SECRET is not set; refusing to start with an empty signing key")

    CORS(app)

    db.init_app(app)
    with app.app_context():
        db.create_all()
    JWTManager(app)
    limiter.init_app(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(transactions_bp)
    if app.config["ENABLE_CATEGORY_ROUTES"]:
        app.register_blueprint(categories_bp)

    register_error_handlers(app)

    @app.route("/")
    def index():
        return "Expense tracker API is running"

    return app
