"""Shared fixtures for valuesrender tests."""
from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Callable

import pytest


class FakeStream(io.StringIO):
    """Text sink that keeps its content after close."""

    def close(self) -> None:
        if not self.closed:
            self.final = self.getvalue()
        super().close()


class FakeFileSystem:
    """In-memory FileSystem with per-operation failure hooks."""

    def __init__(self, content: bytes = b"") -> None:
        self.content = content
        self.open_error: Exception | None = None
        self.read_error: Exception | None = None
        self.create_error: Exception | None = None
        self.calls: list[str] = []
        self.opened: list[io.BytesIO] = []
        self.created: list[FakeStream] = []

    def open_read(self, path: Path) -> io.BytesIO:
        self.calls.append("open_read")
        if self.open_error is not None:
            raise self.open_error
        stream = io.BytesIO(self.content)
        self.opened.append(stream)
        return stream

    def read_all(self, stream: io.BytesIO) -> bytes:
        self.calls.append("read_all")
        if self.read_error is not None:
            raise self.read_error
        return stream.read()

    def create(self, path: Path) -> FakeStream:
        self.calls.append("create")
        if self.create_error is not None:
            raise self.create_error
        sink = FakeStream()
        self.created.append(sink)
        return sink


class FakeEngine:
    """TemplateEngine writing ``template`` formatted with the values."""

    def __init__(self, template: str = "") -> None:
        self.template = template
        self.parse_error: Exception | None = None
        self.execute_error: Exception | None = None
        self.calls: list[str] = []

    def parse(self, path: Path) -> str:
        self.calls.append("parse")
        if self.parse_error is not None:
            raise self.parse_error
        return self.template

    def execute(self, template: str, sink: io.StringIO, values: dict[str, Any]) -> None:
        self.calls.append("execute")
        if self.execute_error is not None:
            raise self.execute_error
        sink.write(template.format(**values))


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem(b"name: Alice\n")


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine("Name: {name}")


@pytest.fixture
def write_files(tmp_path: Path) -> Callable[[str, str], tuple[Path, Path, Path]]:
    """Write a template and a values file; return (template, values, output) paths."""

    def _write(template: str, values: str) -> tuple[Path, Path, Path]:
        template_path = tmp_path / "template.yaml"
        values_path = tmp_path / "values.yaml"
        template_path.write_text(template, encoding="utf-8")
        values_path.write_text(values, encoding="utf-8")
        return template_path, values_path, tmp_path / "parsed.yaml"

    return _write
