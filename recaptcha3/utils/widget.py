# recaptcha3/utils/widget.py
"""
reCAPTCHA v3 widget.

Renders a hidden input that receives the reCAPTCHA token, and queues the
client script that loads the reCAPTCHA library on the visitor's first
mouse or touch movement, asks it for a token and writes the token into the
hidden input. The token is refreshed every 110 seconds because reCAPTCHA
tokens expire after two minutes.

In a template (the ``recaptcha3`` global is installed by ReCaptchaConfig)::

    {{ recaptcha3(name="reCaptcha", action="homepage") }}
    ...
    {{ recaptcha3_scripts() }}

or bound to a model attribute::

    ReCaptcha3.widget(model=contact, attribute="reCaptcha", action="contact")

The site key may be omitted when a ReCaptchaConfig extension is set up.
"""
import re
import time
import uuid
from urllib.parse import quote, unquote_plus, urlencode

from flask import current_app, request
from jinja2 import Environment, PackageLoader
from markupsafe import Markup

from recaptcha3.utils.html import get_input_id, get_input_name, hidden_input, input_name_to_id
from recaptcha3.utils.recaptcha_config import ReCaptchaConfig
from recaptcha3.utils.render_context import POS_READY, get_render_context

# Milliseconds between token refreshes
REFRESH_INTERVAL = 110000

# Render-context flag set once the library bootstrap script is queued
LOADED_PARAM = "recaptcha_loaded"

_ACTION_STRIP_RE = re.compile(r"[^a-zA-Z0-9/]")
_JS_CALLBACK_RE = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$", re.ASCII)

_scripts = Environment(
    loader=PackageLoader("recaptcha3", "templates"),
    autoescape=False,
)


def action_from_url(url: str) -> str:
    """Default action label for a page: the decoded URL minus anything but letters, digits and '/'."""
    return _ACTION_STRIP_RE.sub("", unquote_plus(url))


def _request_url() -> str:
    """Raw, still percent-encoded path and query of the current request."""
    environ = request.environ
    if environ.get("REQUEST_URI"):
        return environ["REQUEST_URI"]

    # WSGI paths are already decoded (latin-1 str); encode them back
    path = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")
    url = quote(path.encode("latin-1"))
    if environ.get("QUERY_STRING"):
        url += "?" + environ["QUERY_STRING"]
    return url


def _unique_suffix() -> str:
    return f"{int(time.time())}{uuid.uuid4().hex}"


class ReCaptcha3:
    """Google reCAPTCHA v3 widget"""

    # Your site key
    site_key = None
    # Script URL; see ReCaptchaConfig.JS_API_URL_ALTERNATIVE
    js_api_url = None
    # reCAPTCHA v3 action for this page, derived from the URL when unset
    action = None
    # Dotted name of a JS function called with each new token
    js_callback = None
    # Name of the ReCaptchaConfig entry in app.extensions
    config_component_name = "recaptcha"

    # Render target: model + attribute, or a plain input name
    model = None
    attribute = None
    name = None
    # HTML attributes for the hidden input
    options = None

    # Render context; defaults to the current request's
    context = None

    CONFIG_KEYS = (
        "site_key", "js_api_url", "action", "js_callback", "config_component_name",
        "model", "attribute", "name", "options", "context",
    )

    def __init__(self, site_key=None, js_api_url=None, **config):
        # A value already set on the instance (or subclass) wins
        if site_key and not self.site_key:
            self.site_key = site_key
        if js_api_url and not self.js_api_url:
            self.js_api_url = js_api_url

        for key, value in config.items():
            if key not in self.CONFIG_KEYS:
                raise TypeError(f"{type(self).__name__} got an unexpected option {key!r}")
            setattr(self, key, value)

        self.options = dict(self.options or {})
        self.init()

    @classmethod
    def widget(cls, *args, **config) -> Markup:
        """Create a widget and render it"""
        return cls(*args, **config).run()

    def init(self):
        if not self.has_model() and self.name is None:
            raise ValueError(f"Either 'name', or 'model' and 'attribute' must be set for {type(self).__name__}.")
        self.config_component_process()

    def has_model(self) -> bool:
        return self.model is not None and self.attribute is not None

    def config_component_process(self):
        """Fill unset options from the shared ReCaptchaConfig, then from defaults"""
        recaptcha_config = current_app.extensions.get(self.config_component_name)

        if not self.site_key:
            site_key_v3 = getattr(recaptcha_config, "site_key_v3", None)
            if site_key_v3:
                self.site_key = site_key_v3

        if not self.js_api_url:
            js_api_url = getattr(recaptcha_config, "js_api_url", None)
            self.js_api_url = js_api_url or ReCaptchaConfig.JS_API_URL_DEFAULT

        if not self.action:
            self.action = action_from_url(_request_url())

        if self.js_callback and not _JS_CALLBACK_RE.match(self.js_callback):
            current_app.logger.warning(f"Ignoring invalid reCAPTCHA JS callback name: {self.js_callback!r}")
            self.js_callback = None

    def run(self) -> Markup:
        if not self.site_key:
            current_app.logger.warning(
                f"reCAPTCHA v3 site key is not configured; widget {self.get_input_name()!r} rendered nothing"
            )
            return Markup("")

        context = self.context or get_render_context()
        unique_id = _unique_suffix()

        context.register_js(
            self.render_script(
                "ready.js",
                function_name=f"setReCaptchaToken{unique_id}",
                init_function_name=f"initSetReCaptchaToken{unique_id}",
                site_key=self.site_key,
                action=self.action,
                field_id=self.get_recaptcha_id(),
                js_callback=self.js_callback,
                refresh_interval=REFRESH_INTERVAL,
            ),
            POS_READY,
        )

        if not context.params.get(LOADED_PARAM):
            context.params[LOADED_PARAM] = True
            context.register_js(self.render_script("bootstrap.js", api_url=self.get_api_url()), POS_READY)
            current_app.logger.debug(f"reCAPTCHA v3 bootstrap script registered for {self.js_api_url}")

        return self.custom_field_prepare()

    def render_script(self, template_name: str, **values) -> str:
        return _scripts.get_template(f"recaptcha3/{template_name}").render(**values)

    def get_api_url(self) -> str:
        return f"{self.js_api_url}?{urlencode({'render': self.site_key})}"

    def get_input_name(self) -> str:
        if self.has_model():
            return get_input_name(self.model, self.attribute)
        return self.name

    def custom_field_prepare(self) -> Markup:
        options = dict(self.options)
        options["id"] = self.get_recaptcha_id()
        return hidden_input(self.get_input_name(), None, options)

    def get_recaptcha_id(self) -> str:
        if self.options.get("id"):
            return self.options["id"]

        if self.has_model():
            return get_input_id(self.model, self.attribute)

        return input_name_to_id(self.name)
