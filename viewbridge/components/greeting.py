"""Greeting component."""

from pydantic import BaseModel

from viewbridge.core.rendering.engine import TemplateComponent


class Greeting(TemplateComponent):
    """Renders ``<p>Hello, {who}</p>``."""

    template = "greeting.html"

    class Props(BaseModel):
        who: str
