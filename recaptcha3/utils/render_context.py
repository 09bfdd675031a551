# recaptcha3/utils/render_context.py
"""
Per-request render state shared by every widget on a page: the scripts
queued for "document ready" and a small parameter bag for one-time flags.
"""
from flask import g
from markupsafe import Markup

POS_READY = "ready"

_G_KEY = "_recaptcha3_render_context"


class RenderContext:
    """Scripts and flags collected while one response is rendered"""

    def __init__(self):
        self.scripts = {POS_READY: []}
        self.params = {}

    def register_js(self, script: str, position: str = POS_READY):
        if position not in self.scripts:
            raise ValueError(f"Unsupported script position: {position!r}")
        self.scripts[position].append(script)

    def render_scripts(self) -> Markup:
        """
        Emit the queued ready scripts as a single <script> block wrapped in
        jQuery's DOM-ready handler, then clear the queue.
        """
        ready = self.scripts[POS_READY]
        if not ready:
            return Markup("")
        body = "\n".join(ready)
        self.scripts[POS_READY] = []
        return Markup("<script>jQuery(function ($) {\n%s\n});</script>" % body)


def get_render_context() -> RenderContext:
    """Return the current request's context, creating it on first use."""
    context = g.get(_G_KEY)
    if context is None:
        context = RenderContext()
        setattr(g, _G_KEY, context)
    return context


def render_registered_scripts() -> Markup:
    return get_render_context().render_scripts()
