# stayintouch/__init__.py
from flask import Flask, jsonify
from flask_pymongo import PyMongo
from flask_login import LoginManager
from .config import Config
import logging

mongo = PyMongo()
login_manager = LoginManager()
contact_service = None
user_service = None

def create_app(config_class=Config, db=None):
    """
    Application factory. A database handle can be passed in directly
    (e.g. an in-memory one); otherwise MONGO_URI is used.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(level=logging.INFO)

    if db is None:
        mongo.init_app(app)
        db = mongo.db
    login_manager.init_app(app)

    # Initialize services
    global contact_service, user_service
    from .services.contact_service import ContactService
    from .services.user_service import UserService

    log_dir = app.config['LOG_DIR'] if app.config.get('LOG_TO_FILE') else None
    contact_service = ContactService(
        db=db,
        phone_region=app.config['PHONE_REGION'],
        log_dir=log_dir
    )
    user_service = UserService(db, log_dir=log_dir)

    if app.config.get('SEED_DB'):
        from .seed import seed_database
        seed_database(user_service, contact_service, log_dir=log_dir)
        app.logger.info('Database seeded on startup.')

    @login_manager.user_loader
    def load_user(user_id):
        return user_service.get_user(user_id)

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'message': 'Unauthorized'}), 401

    # Register blueprints
    from .routes.contact_routes import bp as contact_bp
    from .routes.auth_routes import bp as auth_bp
    from .routes.user_routes import bp as user_bp

    app.register_blueprint(contact_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(user_bp)

    return app
