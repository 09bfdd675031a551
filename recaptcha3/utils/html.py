# recaptcha3/utils/html.py
"""
Form markup helpers: input name/id derivation for model-bound fields and
hidden input rendering.
"""
import re
from typing import Any, Dict, Optional

from markupsafe import Markup
from wtforms.widgets import html_params

# "[0]content[1]" -> prefix "[0]", attribute "content", suffix "[1]"
_ATTRIBUTE_RE = re.compile(r"(^|.*\])([\w\.\+]+)(\[.*|$)")

# Rendered first, in this order
_ATTRIBUTE_ORDER = ("type", "name", "id")

_ID_REPLACEMENTS = (
    ("[]", ""),
    ("][", "-"),
    ("[", "-"),
    ("]", ""),
    (" ", "-"),
    (".", "-"),
)


def input_name_to_id(name: str) -> str:
    """Turn an input name such as ``Contact[email]`` into ``contact-email``."""
    name = name.lower()
    for search, replace in _ID_REPLACEMENTS:
        name = name.replace(search, replace)
    return name


def form_name(model) -> str:
    """Form name of a model: its ``form_name()`` if it has one, else its class name."""
    getter = getattr(model, "form_name", None)
    if callable(getter):
        return getter()
    return type(model).__name__


def parse_attribute(attribute: str):
    match = _ATTRIBUTE_RE.match(attribute)
    if not match:
        raise ValueError(f"Attribute name must contain word characters only: {attribute!r}")
    return match.group(1), match.group(2), match.group(3)


def get_input_name(model, attribute: str) -> str:
    """
    Input name for a model-bound attribute.

    ``get_input_name(contact, "email")`` gives ``Contact[email]``;
    tabular attributes keep their index, so ``"[0]email"`` gives
    ``Contact[0][email]``. A model with an empty form name yields the
    attribute unchanged.
    """
    prefix, name, suffix = parse_attribute(attribute)
    model_form_name = form_name(model)
    if model_form_name == "" and prefix == "":
        return attribute
    if model_form_name != "":
        return f"{model_form_name}{prefix}[{name}]{suffix}"
    raise ValueError(f"{type(model).__name__}.form_name() cannot be empty for tabular inputs.")


def get_input_id(model, attribute: str) -> str:
    return input_name_to_id(get_input_name(model, attribute))


def render_tag_attributes(attributes: Dict[str, Any]) -> Markup:
    """
    Render HTML attributes with a leading space. ``type``, ``name`` and ``id``
    come first, the rest follow sorted as ``html_params`` orders them.
    """
    values = {}
    for key, value in attributes.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value)
        values[key] = value

    params = [html_params(**{key: values.pop(key)}) for key in _ATTRIBUTE_ORDER if key in values]
    params.append(html_params(**values))
    return Markup("".join(" " + param for param in params if param))


def hidden_input(name: str, value: Optional[str] = None, options: Optional[Dict[str, Any]] = None) -> Markup:
    """Render ``<input type="hidden">``; a ``None`` value leaves the attribute out."""
    attributes = {"type": "hidden", "name": name}
    if value is not None:
        attributes["value"] = value
    for key, option in (options or {}).items():
        attributes.setdefault(key, option)
    return Markup("<input%s>") % render_tag_attributes(attributes)
