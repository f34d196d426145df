"""Values document loading."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ..core.errors import ValuesOpenError, ValuesParseError, ValuesReadError
from ..core.models import ValuesMap
from .io import FileSystem

logger = logging.getLogger(__name__)


def _key_to_str(key: object) -> str:
    # YAML spelling for booleans and null, str() for everything else
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def parse_values(content: bytes) -> ValuesMap:
    """Deserialize a YAML (or JSON) document into a values mapping.

    Top-level keys that are not strings (``1: a``, ``true: x``) are
    converted to their string form (``"1"``, ``"true"``). Duplicate keys
    are not rejected; the last occurrence wins.

    Args:
        content: Raw document bytes

    Returns:
        Top-level mapping; an empty document yields an empty mapping

    Raises:
        ValuesParseError: If the document is malformed, holds values the
            loader cannot construct (e.g. ``2024-02-30``), or is not a mapping
    """
    try:
        data = yaml.safe_load(content)
    except (yaml.YAMLError, ValueError, RecursionError) as e:
        raise ValuesParseError(e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValuesParseError(
            TypeError(f"expected a mapping at top level, got {type(data).__name__}")
        )
    return {_key_to_str(k): v for k, v in data.items()}


def load_values(values_path: Path, fs: FileSystem) -> ValuesMap:
    """Open, read and deserialize the values file.

    Args:
        values_path: Path to the values file
        fs: File system used to open and read it

    Returns:
        Deserialized values mapping
    """
    logger.debug(f"Loading values: {values_path}")

    try:
        stream = fs.open_read(values_path)
    except OSError as e:
        raise ValuesOpenError(e) from e

    with stream:
        try:
            content = fs.read_all(stream)
        except OSError as e:
            raise ValuesReadError(e) from e

    values = parse_values(content)
    logger.debug(f"Loaded {len(values)} top-level value(s)")
    return values
