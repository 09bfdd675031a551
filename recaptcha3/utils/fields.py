# recaptcha3/utils/fields.py
from wtforms.fields import HiddenField

from recaptcha3.utils.widget import ReCaptcha3

__all__ = ["ReCaptcha3Field", "ReCaptcha3Widget"]


class ReCaptcha3Widget:
    """WTForms widget rendering a field through ReCaptcha3"""

    def __call__(self, field, **kwargs):
        config = dict(getattr(field, "recaptcha_options", {}))
        options = {}
        for key, value in kwargs.items():
            if key in ReCaptcha3.CONFIG_KEYS:
                config[key] = value
            else:
                # HTML attributes; html_params turns class_ into class
                options[key] = value

        options.update(config.pop("options", None) or {})
        options.setdefault("id", field.id)
        name = config.pop("name", None) or field.name
        return ReCaptcha3.widget(name=name, options=options, **config)


class ReCaptcha3Field(HiddenField):
    """
    Hidden field carrying the reCAPTCHA v3 token.

    Widget options (``action``, ``js_callback``, ``site_key``, ...) given
    here apply every time the field renders; keyword arguments passed when
    rendering the field override them.
    """

    widget = ReCaptcha3Widget()

    def __init__(self, label=None, validators=None, action=None, js_callback=None, site_key=None, **kwargs):
        super().__init__(label, validators, **kwargs)
        self.recaptcha_options = {
            key: value
            for key, value in (("action", action), ("js_callback", js_callback), ("site_key", site_key))
            if value is not None
        }
