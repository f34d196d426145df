"""Render orchestration: template + values -> output file."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import OutputCreateError, TemplateExecError, TemplateParseError
from ..core.models import RenderJob
from .engine import JinjaEngine, TemplateEngine
from .io import FileSystem, LocalFileSystem
from .values import load_values

logger = logging.getLogger(__name__)


class Renderer:
    """Renders one template with one values file into one output file.

    File access and template handling are injected so that each step can
    be replaced independently.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        engine: TemplateEngine | None = None,
    ) -> None:
        self.fs = fs if fs is not None else LocalFileSystem()
        self.engine = engine if engine is not None else JinjaEngine()

    def render(self, template_path: Path, values_path: Path, output_path: Path) -> Path:
        """Replace placeholders in the template with values from the values file.

        Steps run in order and the first failure stops the render. A failed
        render may leave a partial output file behind.

        Args:
            template_path: Template file to parse
            values_path: YAML file providing the template context
            output_path: File to create (or overwrite) with the result

        Returns:
            Output file path

        Raises:
            TemplateParseError: Template missing, unreadable or invalid
            ValuesOpenError: Values file cannot be opened
            ValuesReadError: Values file cannot be read
            ValuesParseError: Values file is not a YAML mapping
            OutputCreateError: Output file cannot be created
            TemplateExecError: Template execution or write failed
        """
        logger.debug(f"Parsing template: {template_path}")
        try:
            template = self.engine.parse(template_path)
        except Exception as e:  # noqa: BLE001
            logger.debug(f"Template parse failed: {e}")
            raise TemplateParseError(e) from e

        values = load_values(values_path, self.fs)

        logger.debug(f"Creating output: {output_path}")
        try:
            sink = self.fs.create(output_path)
        except OSError as e:
            logger.debug(f"Output create failed: {e}")
            raise OutputCreateError(e) from e

        # Closing flushes buffered output, so close failures are write failures
        try:
            with sink:
                self.engine.execute(template, sink, values)
        except Exception as e:  # noqa: BLE001
            logger.debug(f"Template execution failed: {e}")
            raise TemplateExecError(e) from e

        logger.info(f"Rendered {template_path} → {output_path}")
        return Path(output_path)

    def render_job(self, job: RenderJob) -> Path:
        return self.render(job.template_path, job.values_path, job.output_path)


def render(template_path: Path, values_path: Path, output_path: Path) -> Path:
    """Render with the local file system and the default Jinja2 engine."""
    return Renderer().render(template_path, values_path, output_path)
