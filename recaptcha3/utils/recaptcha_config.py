# recaptcha3/utils/recaptcha_config.py
"""
Application-wide reCAPTCHA settings, shared by every widget of the app
"""


class ReCaptchaConfig:
    """Flask extension holding the reCAPTCHA v3 site key and script URL"""

    JS_API_URL_DEFAULT = "//www.google.com/recaptcha/api.js"
    # Use when www.google.com is not accessible
    JS_API_URL_ALTERNATIVE = "//www.recaptcha.net/recaptcha/api.js"

    def __init__(self, app=None, site_key_v3=None, js_api_url=None, name="recaptcha"):
        self.site_key_v3 = site_key_v3
        self.js_api_url = js_api_url
        self.name = name

        if app:
            self.init_app(app)

    def init_app(self, app):
        """Initialize with a Flask application"""
        from recaptcha3.utils.render_context import render_registered_scripts
        from recaptcha3.utils.widget import ReCaptcha3

        self.site_key_v3 = app.config.get('RECAPTCHA_SITE_KEY_V3') or self.site_key_v3
        self.js_api_url = app.config.get('RECAPTCHA_JS_API_URL') or self.js_api_url

        # Widgets look the component up by name
        app.extensions[self.name] = self

        # Add to Jinja2 globals
        app.jinja_env.globals['recaptcha3'] = ReCaptcha3.widget
        app.jinja_env.globals['recaptcha3_scripts'] = render_registered_scripts
