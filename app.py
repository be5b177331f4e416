from flask import Flask, session
from flask_login import LoginManager
from flask_migrate import Migrate
from config import Config, require_secret_key
import logging
import os

logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

if Config.OAUTH_INSECURE_TRANSPORT:
    # local development over plain http
    os.environ['OAUTHLIB_INSECURE_TRANSPORT'] = '1'

# Initialize Flask app
app = Flask(__name__)
app.config.from_object(Config)
require_secret_key(app.config)

# Initialize extensions
from models.models import db
import models.analytics_event  # noqa: F401  registers the analytics_events table
db.init_app(app)
login_manager = LoginManager(app)
migrate = Migrate(app, db)

from routes.common import register_error_handlers
register_error_handlers(app, login_manager)

# Import and register blueprints
from routes.auth import auth_bp
from routes.dashboard import dashboard_bp
from routes.applications import applications_bp
from routes.messages import messages_bp
from routes.analytics import analytics_bp

app.register_blueprint(auth_bp)
app.register_blueprint(dashboard_bp)
app.register_blueprint(applications_bp)
app.register_blueprint(messages_bp)
app.register_blueprint(analytics_bp)


@login_manager.user_loader
def load_user(user_id):
    from models.admin_user import AdminUser, is_allowed_email
    # The allow-list is checked on every request so removing an address revokes access
    if not is_allowed_email(user_id, app.config['ADMIN_EMAILS']):
        return None
    return AdminUser(user_id, name=session.get('admin_name'), picture=session.get('admin_picture'))


if __name__ == "__main__":
    app.run(debug=True)
