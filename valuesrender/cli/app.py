"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.errors import RenderError
from ..core.models import RenderJob
from ..core.settings import RenderSettings
from ..rendering.engine import JinjaEngine
from ..rendering.renderer import Renderer

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="valuesrender",
    help="Render a Jinja2 template with values from a YAML file.",
)


@app.command()
def render(
    template: Annotated[
        Optional[Path],
        typer.Option(
            "--template",
            help="Template file (default: template/template.yaml).",
            metavar="FILE",
        ),
    ] = None,
    values: Annotated[
        Optional[Path],
        typer.Option(
            "--values",
            help="YAML values file (default: template/values.yaml).",
            metavar="FILE",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            help="Output file, created or overwritten (default: parsed/parsed.yaml).",
            metavar="FILE",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render the template file into the output file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    settings = RenderSettings()
    job = RenderJob(
        template_path=template or settings.template_path,
        values_path=values or settings.values_path,
        output_path=output or settings.output_path,
    )
    logger.debug(f"Job: {job}")

    renderer = Renderer(engine=JinjaEngine.from_settings(settings))
    try:
        output_path = renderer.render_job(job)
    except RenderError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"file {output_path} was generated.")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
