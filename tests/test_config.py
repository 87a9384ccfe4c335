"""Tests for mddoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from mddoc.config import ConfigError, GeneratorConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, GeneratorConfig)
    assert config.project_root == str(tmp_path.resolve())
    assert config.output_dir == Path("doc/md")
    assert config.excluded_dirs == ("packages",)
    assert config.code_language == "dart"
    assert config.source_extension == ".dart"
    assert config.doc_extension == ".md"
    assert config.root_type == "Object"
    assert config.summary_width == 80
    assert not config.simple
    assert not config.check_links


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".mddoc.yml"
    config_file.write_text(
        """
output: build/api
verbose: true
simple: "yes"
exclude_dirs:
  - packages
  - .dart_tool
code_language: kotlin
source_extension: kt
doc_extension: .markdown
root_type: Any
summary_width: 40
check_links: true
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    root = tmp_path.resolve()
    assert config.output_dir == root / "build" / "api"
    assert config.verbose is True
    assert config.simple is True
    assert config.excluded_dirs == ("packages", ".dart_tool")
    assert config.code_language == "kotlin"
    assert config.source_extension == ".kt"
    assert config.doc_extension == ".markdown"
    assert config.root_type == "Any"
    assert config.summary_width == 40
    assert config.check_links is True


def test_empty_exclude_list_disables_exclusion(tmp_path: Path) -> None:
    (tmp_path / ".mddoc.yml").write_text("exclude_dirs: []\n", encoding="utf-8")
    assert load_config(tmp_path).excluded_dirs == ()


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".mddoc.yml").write_text("\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.output_dir == tmp_path.resolve() / "doc" / "md"
    assert config.summary_width == 80


@pytest.mark.parametrize(
    "content, message",
    [
        ("- just\n- a list\n", "mapping at the root"),
        ("output: [unclosed\n", "Failed to parse"),
        ("summary_width: 2\n", "at least 4"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str, message: str) -> None:
    (tmp_path / ".mddoc.yml").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)
