import pytest
from flask import Flask

from recaptcha3 import create_app
from recaptcha3.config import Config
from recaptcha3.utils.recaptcha_config import ReCaptchaConfig


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    RECAPTCHA_SITE_KEY_V3 = "site-key-from-config"
    RECAPTCHA_JS_API_URL = None


@pytest.fixture
def app():
    """Demo application with the shared ReCaptchaConfig set up"""
    app = create_app(TestConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def bare_app():
    """Application without any ReCaptchaConfig component"""
    return Flask(__name__)


@pytest.fixture
def configured_app():
    """Application with its own ReCaptchaConfig, independent of create_app's"""
    app = Flask(__name__)
    ReCaptchaConfig(app, site_key_v3="shared-key", js_api_url=ReCaptchaConfig.JS_API_URL_ALTERNATIVE)
    return app
