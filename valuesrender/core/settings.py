from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class RenderSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VALUESRENDER_", case_sensitive=False)

    template_path: Path = Path("template/template.yaml")
    values_path: Path = Path("template/values.yaml")
    output_path: Path = Path("parsed/parsed.yaml")
    autoescape: bool = False
    strict_undefined: bool = True
