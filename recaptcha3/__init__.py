from flask import Flask
from flask_wtf.csrf import CSRFProtect
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from recaptcha3.config import Config
from recaptcha3.utils.recaptcha_config import ReCaptchaConfig
from recaptcha3.utils.widget import ReCaptcha3

csrf = CSRFProtect()
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per day", "50 per hour"]
)
recaptcha = ReCaptchaConfig()

__all__ = ["csrf", "limiter", "recaptcha", "create_app", "ReCaptcha3", "ReCaptchaConfig"]


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize extensions
    csrf.init_app(app)
    limiter.init_app(app)
    recaptcha.init_app(app)

    # Import and register blueprints
    from recaptcha3.views import home
    app.register_blueprint(home)

    return app
