"""Valuesrender - YAML-driven template renderer.

Renders a single Jinja2 template with values loaded from a YAML document.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.errors import RenderError
from .rendering.renderer import Renderer, render

__all__ = ["RenderError", "Renderer", "render"]
