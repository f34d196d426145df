"""Render error taxonomy.

Every error wraps the exception that caused it and prefixes its message
with the step that failed, e.g. ``opening data file: [Errno 2] ...``.
"""

from __future__ import annotations


class RenderError(Exception):
    """Base class for all render failures."""

    prefix = "rendering"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{self.prefix}: {cause}")
        self.cause = cause
        self.__cause__ = cause


class TemplateParseError(RenderError):
    """Template file missing, unreadable or syntactically invalid."""

    prefix = "parsing template file"


class ValuesOpenError(RenderError):
    """Values file missing or cannot be opened."""

    prefix = "opening data file"


class ValuesReadError(RenderError):
    """I/O failure while reading an opened values file."""

    prefix = "reading data file"


class ValuesParseError(RenderError):
    """Values content is not a well-formed YAML mapping."""

    prefix = "unmarshalling yaml file"


class OutputCreateError(RenderError):
    """Output file cannot be created."""

    prefix = "creating output file"


class TemplateExecError(RenderError):
    """Template execution or writing the output failed."""

    prefix = "executing template file"
