"""
Rendering Engine
================

Template-backed view components rendered with Jinja2.
A component validates its property payload against a Pydantic model and
renders its template to a markup string.
"""

from typing import Any, ClassVar, Dict, Mapping, Optional, Protocol, Type, runtime_checkable
from pathlib import Path
import jinja2
from pydantic import BaseModel, ConfigDict, ValidationError

from viewbridge.config.logging import get_logger
from viewbridge.config.settings import get_settings
from viewbridge.core.errors import RenderError

logger = get_logger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parents[2] / "components" / "templates"


@runtime_checkable
class Renderable(Protocol):
    """Anything that turns a property payload into markup."""

    def render(self, props: Mapping[str, Any]) -> str: ...


def create_environment(template_dir: Optional[Path] = None) -> jinja2.Environment:
    """Create the Jinja2 environment used to render components."""
    template_dir = template_dir or DEFAULT_TEMPLATE_DIR
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        autoescape=jinja2.select_autoescape(["html", "xml"], default_for_string=True),
        undefined=jinja2.StrictUndefined,
    )

    def currency(value: Any) -> str:
        """Format a number as a price."""
        return f"{float(value):,.2f}"

    env.filters["currency"] = currency
    return env


# Global environment - built on first render
_environment: Optional[jinja2.Environment] = None


def get_environment() -> jinja2.Environment:
    """Get the process-wide Jinja2 environment."""
    global _environment
    if _environment is None:
        _environment = create_environment(get_settings().template_dir)
    return _environment


class NoProps(BaseModel):
    """Props model for components that accept any payload."""

    model_config = ConfigDict(extra="allow")


class TemplateComponent:
    """
    Base class for template-backed components.

    Subclasses set ``template`` (a file in the template directory) or
    ``source`` (an inline template), and may declare a ``Props`` model.
    The template is compiled when the component is constructed, so a
    broken definition fails at load time rather than on every render.
    """

    template: ClassVar[Optional[str]] = None
    source: ClassVar[Optional[str]] = None
    Props: ClassVar[Type[BaseModel]] = NoProps

    def __init__(self, environment: Optional[jinja2.Environment] = None) -> None:
        self.environment = environment or get_environment()
        self.logger: Any = logger.bind(component=self.component_name)
        self._template = self._load_template()

    @property
    def component_name(self) -> str:
        return type(self).__name__

    def _load_template(self) -> jinja2.Template:
        if self.source is not None:
            return self.environment.from_string(self.source)
        if self.template is None:
            raise TypeError(f"{self.component_name} defines neither 'template' nor 'source'")
        return self.environment.get_template(self.template)

    def context(self, props: BaseModel) -> Dict[str, Any]:
        """Build the template context from validated props."""
        return props.model_dump()

    def render(self, props: Mapping[str, Any]) -> str:
        """
        Render the component to markup.

        Args:
            props: Property payload

        Returns:
            Rendered markup

        Raises:
            RenderError: If the props are invalid or the template fails
        """
        try:
            validated = self.Props.model_validate(dict(props))
        except ValidationError as e:
            self.logger.warning("Invalid component props", errors=e.error_count())
            raise RenderError(
                f"Invalid props for component '{self.component_name}': {e}",
                name=self.component_name,
            ) from e

        try:
            return self._template.render(**self.context(validated))
        except jinja2.TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            self.logger.error("Component render failed", error=error_msg)
            raise RenderError(error_msg, name=self.component_name) from e
