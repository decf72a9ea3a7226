"""Widget label component."""

from typing import Optional

from pydantic import BaseModel, Field

from viewbridge.core.rendering.engine import TemplateComponent


class Widget(TemplateComponent):
    """Serial number label with its manufacture date."""

    template = "widget.html"

    class Props(BaseModel):
        serial: str = Field(..., min_length=1)
        date: Optional[str] = None
