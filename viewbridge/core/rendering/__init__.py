"""
Rendering Module
===============

Markup generation for view components.

Components:
- engine: Jinja2 environment, the Renderable protocol and template-backed components
"""

from .engine import Renderable, TemplateComponent, create_environment, get_environment

__all__ = ["Renderable", "TemplateComponent", "create_environment", "get_environment"]
