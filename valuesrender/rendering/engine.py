"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol, TextIO

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    Undefined,
)

from ..core.settings import RenderSettings

logger = logging.getLogger(__name__)


class TemplateEngine(Protocol):
    """Parses template files and executes them into a text sink."""

    def parse(self, path: Path) -> Any: ...

    def execute(self, template: Any, sink: TextIO, values: dict[str, Any]) -> None: ...


class JinjaEngine:
    """TemplateEngine backed by Jinja2."""

    def __init__(self, *, autoescape: bool = False, strict_undefined: bool = True) -> None:
        self.autoescape = autoescape
        self.strict_undefined = strict_undefined

    @classmethod
    def from_settings(cls, settings: RenderSettings) -> JinjaEngine:
        return cls(
            autoescape=settings.autoescape,
            strict_undefined=settings.strict_undefined,
        )

    def _environment(self, search_path: Path) -> Environment:
        # Template's parent directory is the loader search path
        return Environment(
            loader=FileSystemLoader(str(search_path)),
            undefined=StrictUndefined if self.strict_undefined else Undefined,
            autoescape=self.autoescape,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def parse(self, path: Path) -> Template:
        """Load and compile a Jinja2 template from a file path.

        Args:
            path: Path to the template file

        Returns:
            Compiled Jinja2 template

        Raises:
            FileNotFoundError: If the template file does not exist
            jinja2.TemplateSyntaxError: If the template is invalid
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Template not found: {path}")

        env = self._environment(path.parent)
        try:
            return env.get_template(path.name)
        except TemplateNotFound as e:
            raise FileNotFoundError(f"Template not found: {path}") from e

    def execute(self, template: Template, sink: TextIO, values: dict[str, Any]) -> None:
        """Render a template, streaming the output into ``sink``."""
        logger.debug(f"Executing template: {template.name}")
        template.stream(values).dump(sink)
